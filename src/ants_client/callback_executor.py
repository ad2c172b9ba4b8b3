"""
ants_client.callback_executor — Safe callback execution
========================================================

Wraps bot callback invocation with:
1. Call/response tracing
2. Order validation (drop anything that is not an Order)
3. Error handling: decide() failures are absorbed, the others propagate
"""

from __future__ import annotations
import logging
from typing import Any, Callable, List, Optional, Tuple

from .callbacks import Bot
from .errors import InvalidOrderError
from .types import Order, TurnInfo
from ._shared import ProtocolLogger, get_protocol_logger

logger = logging.getLogger("ants_client.executor")


def execute_callback(
    callback_fn: Callable[[Any], Any],
    callback_name: str,
    arg: Any,
    protocol_logger: Optional[ProtocolLogger] = None,
) -> Any:
    """
    Execute a setup or teardown callback.

    Parameters
    ----------
    callback_fn : Callable
        The bound bot method to call.
    callback_name : str
        Name of the callback (for logs).
    arg : Any
        The single argument passed to the callback.
    protocol_logger : ProtocolLogger, optional
        Trace logger. Defaults to the global one.

    Returns
    -------
    Any
        Whatever the callback returned.

    Raises
    ------
    Exception
        Anything the callback raises propagates unchanged.
    """
    plog = protocol_logger or get_protocol_logger()
    logger.debug(f"[CALLBACK] Executing {callback_name}")
    plog.log_callback_call(callback_name)
    result = callback_fn(arg)
    plog.log_callback_response(callback_name)
    logger.debug(f"[CALLBACK] {callback_name} completed")
    return result


def validate_orders(result: Any) -> Tuple[List[Order], List[InvalidOrderError]]:
    """
    Split decide() output into valid orders and rejected entries.

    Returns
    -------
    tuple
        (orders, errors). A result that is None or not iterable yields no
        orders and a single error at index -1.
    """
    if result is None:
        return [], []
    if isinstance(result, (str, bytes, Order)):
        return [], [InvalidOrderError(-1, result)]
    try:
        entries = list(result)
    except TypeError:
        return [], [InvalidOrderError(-1, result)]

    orders: List[Order] = []
    errors: List[InvalidOrderError] = []
    for index, entry in enumerate(entries):
        if isinstance(entry, Order):
            orders.append(entry)
        else:
            errors.append(InvalidOrderError(index, entry))
    return orders, errors


def _drain(result: Any) -> Any:
    """Run a lazy decide() result (generator, map, ...) to completion.

    Lists, tuples, single values and non-iterables are returned as is.
    """
    if result is None or isinstance(result, (str, bytes, Order, list, tuple)):
        return result
    try:
        iterator = iter(result)
    except TypeError:
        return result
    return list(iterator)


def execute_decide(
    bot: Bot,
    turn_info: TurnInfo,
    protocol_logger: Optional[ProtocolLogger] = None,
) -> List[Order]:
    """
    Ask the bot for this turn's orders.

    decide() has no error channel: an exception is logged with its
    traceback and the turn gets no orders, including one raised part-way
    through a generator. Invalid entries are dropped.

    Returns
    -------
    list of Order
        The orders to send, in the order the bot returned them.
    """
    plog = protocol_logger or get_protocol_logger()
    plog.log_callback_call("decide")
    try:
        result = _drain(bot.decide(turn_info))
    except Exception as e:
        logger.error(f"[CALLBACK] decide raised {e.__class__.__name__}: {e}", exc_info=True)
        plog.log_error(f"decide raised {e.__class__.__name__}: {e}")
        return []
    plog.log_callback_response("decide")

    orders, errors = validate_orders(result)
    for error in errors:
        logger.warning(f"[CALLBACK] decide: {error.reason}")
    return orders
