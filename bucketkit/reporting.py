"""Reporting of errors and diagnostics through the global logger."""

from __future__ import annotations

from typing import Any

from . import log
from .errors import MultiError, OperationError, is_cancelation
from .messages import DebugMessage, ErrorMessage


def cleanup_error(err: Any) -> str:
    """Render ``err`` as a single trimmed line."""
    text = str(err).replace("\n", " ").replace("\t", " ").replace("  ", " ")
    return text.strip()


def print_debug(op: str, err: Any, *args: Any) -> None:
    """Log ``err`` at debug level as a job made of ``op`` and its arguments."""
    command = op + "".join(f" {url}" for url in args)
    log.debug(DebugMessage(err=cleanup_error(err), operation=op, command=command))


def _error_message(command: str, op: str, err: BaseException) -> ErrorMessage:
    if isinstance(err, OperationError):
        return ErrorMessage(
            err=cleanup_error(err.err),
            operation=err.op,
            command=err.full_command(),
        )
    return ErrorMessage(err=cleanup_error(err), operation=op, command=command)


def print_error(command: str, op: str, err: BaseException) -> None:
    """Log ``err`` at error level; cancellations are not reported."""
    if is_cancelation(err):
        return
    if isinstance(err, MultiError):
        for inner in err.errors:
            log.error(_error_message(command, op, inner))
        return
    log.error(_error_message(command, op, err))