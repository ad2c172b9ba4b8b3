"""Allow ``python -m ants_client``."""

import sys

from .cli import main

sys.exit(main())
