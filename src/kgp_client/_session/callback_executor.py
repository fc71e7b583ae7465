# Area: Session
"""
kgp_client._session.callback_executor — Agent hook execution
============================================================

Wraps every call into user code with logging. There is no timeout:
cancellation is cooperative, the agent is expected to poll
``should_stop()``. Exceptions are logged and re-raised unchanged; the
engine turns them into a failure notice for the server.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Optional

from .._shared.protocol_logger import ProtocolLogger, get_protocol_logger

logger = logging.getLogger("kgp_client.executor")


def execute_hook(
    hook_fn: Callable[..., Any],
    hook_name: str,
    *args: Any,
    protocol_logger: Optional[ProtocolLogger] = None,
) -> Any:
    """
    Execute an agent hook.

    Parameters
    ----------
    hook_fn : Callable
        The bound agent method.
    hook_name : str
        Name of the hook (for logs).
    *args
        Arguments passed through to the hook.

    Returns
    -------
    Any
        Whatever the hook returned.

    Raises
    ------
    Exception
        Anything the hook raised, after logging it.
    """
    plog = protocol_logger or get_protocol_logger()
    logger.info(f"[AGENT] Executing {hook_name}")
    plog.log_hook_call(hook_name)
    try:
        result = hook_fn(*args)
    except Exception as e:
        logger.error(f"[AGENT] {hook_name} raised {e.__class__.__name__}: {e}", exc_info=True)
        plog.log_error(f"agent {hook_name} failed: {e.__class__.__name__}: {e}")
        raise
    plog.log_hook_return(hook_name)
    logger.info(f"[AGENT] {hook_name} returned")
    return result
