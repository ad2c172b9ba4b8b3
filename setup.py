"""
Setup script for ants-client package with Cython compilation.

This builds the internal protocol modules (_protocol/*.py) as compiled
extensions, while keeping the public API (callbacks.py, runner.py,
types.py, errors.py) as readable Python source.
"""

from setuptools import setup, find_packages, Extension
import os

# Check if Cython is available
try:
    from Cython.Build import cythonize
    USE_CYTHON = True
except ImportError:
    USE_CYTHON = False
    print("Cython not found. Building without compilation (source only).")

# Internal modules to compile with Cython
CYTHON_MODULES = [
    "src/ants_client/_protocol/lines.py",
    "src/ants_client/_protocol/config_extractor.py",
    "src/ants_client/_protocol/turn_extractor.py",
    "src/ants_client/_protocol/end_extractor.py",
    "src/ants_client/_protocol/parser.py",
    "src/ants_client/_protocol/encoder.py",
]


def get_extensions():
    """Build Extension objects for Cython compilation."""
    if not USE_CYTHON:
        return []

    extensions = []
    for module_path in CYTHON_MODULES:
        if os.path.exists(module_path):
            # Convert path to module name: src/ants_client/_protocol/lines.py -> ants_client._protocol.lines
            module_name = module_path.replace("src/", "").replace("/", ".").replace(".py", "")
            extensions.append(
                Extension(
                    name=module_name,
                    sources=[module_path],
                )
            )
    return extensions


def get_ext_modules():
    """Get extension modules, cythonized if Cython is available."""
    extensions = get_extensions()
    if not extensions:
        return []

    return cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
            "boundscheck": False,
            "wraparound": False,
        },
        nthreads=os.cpu_count() or 1,
    )


# Only add ext_modules if we have Cython
ext_modules = get_ext_modules() if USE_CYTHON else []

setup(
    name="ants-client",
    version="1.0.0",
    description="Ants client - Line protocol adapter for ants game bots",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    ext_modules=ext_modules,
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "cython>=3.0",
            "build",
            "wheel",
            "pytest>=7.0",
        ],
    },
    # Include compiled .so/.pyd files in the package
    package_data={
        "ants_client": ["*.so", "*.pyd", "_protocol/*.so", "_protocol/*.pyd"],
    },
    entry_points={
        "console_scripts": [
            "ants-client=ants_client.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Cython",
    ],
)
