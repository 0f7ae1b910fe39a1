"""Process-level error hooks.

Errors that escape request handling are logged and the server keeps serving.
Availability is preferred over stopping to inspect state after an unexpected
failure.
"""

from __future__ import annotations

import asyncio
import logging
import sys
import threading
from typing import Any, Dict, Optional


logger = logging.getLogger("portfolio_relay.supervisor")


def _log_uncaught(exc_type, exc_value, exc_traceback) -> None:
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logger.error(
        "UNCAUGHT EXCEPTION: %s",
        exc_value,
        exc_info=(exc_type, exc_value, exc_traceback),
    )


def _log_thread_exception(args: threading.ExceptHookArgs) -> None:
    if args.exc_type is SystemExit:
        return
    logger.error(
        "UNCAUGHT EXCEPTION in thread %s: %s",
        getattr(args.thread, "name", "?"),
        args.exc_value,
        exc_info=(args.exc_type, args.exc_value, args.exc_traceback),
    )


def _log_loop_exception(loop: asyncio.AbstractEventLoop, context: Dict[str, Any]) -> None:
    exc = context.get("exception")
    message = context.get("message", "unhandled error in event loop")
    if exc is not None:
        logger.error(
            "UNHANDLED REJECTION: %s",
            message,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
    else:
        logger.error("UNHANDLED REJECTION: %s", message)


def install_error_hooks(loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
    sys.excepthook = _log_uncaught
    threading.excepthook = _log_thread_exception
    if loop is not None:
        loop.set_exception_handler(_log_loop_exception)
