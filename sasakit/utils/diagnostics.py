"""
Diagnostics channel

Errors and warnings are written to a configurable sink through the package
logger and returned to the caller as status codes. Nothing in here ever
terminates the process.
"""

import errno
import inspect
import logging
import os
import sys
from enum import Enum
from typing import TextIO

from ..core.data_models import Status
from .logger import LOGGER_NAME, setup_logger


class Verbosity(str, Enum):
    """How much the diagnostics channel prints"""

    NORMAL = "normal"
    NOWARNINGS = "nowarnings"
    SILENT = "silent"
    DEBUG = "debug"


_LEVELS = {
    Verbosity.NORMAL: logging.INFO,
    Verbosity.NOWARNINGS: logging.ERROR,
    Verbosity.SILENT: logging.CRITICAL + 1,
    Verbosity.DEBUG: logging.DEBUG,
}

_THREAD_ERRORS = {
    errno.EAGAIN: "insufficient resources to create another thread, "
    "or a system-imposed limit on the number of threads was encountered",
    errno.EINVAL: "invalid thread attributes or the thread is not joinable",
    errno.EPERM: "no permission to set the scheduling policy and parameters "
    "specified in the thread attributes",
    errno.EDEADLK: "a deadlock was detected, or the thread tried to join itself",
    errno.ESRCH: "no thread with the given ID could be found",
}

_err_out: TextIO | None = None
_verbosity = Verbosity.NORMAL


def _configure():
    setup_logger(LOGGER_NAME, level=_LEVELS[_verbosity], stream=_err_out or sys.stderr)


def _logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    if not logger.handlers:
        _configure()
    return logger


def set_err_out(stream: TextIO | None):
    """
    Set the sink for error and warning messages.

    Args:
        stream: Any writable text stream. None resets to sys.stderr.
    """
    global _err_out
    _err_out = stream
    _configure()


def get_err_out() -> TextIO:
    """The current diagnostics sink"""
    return _err_out or sys.stderr


def set_verbosity(verbosity: Verbosity | str) -> Status:
    """
    Set the verbosity of the diagnostics channel.

    Returns:
        Status: SUCCESS, or FAIL if the value is not a known verbosity.
    """
    global _verbosity
    try:
        _verbosity = Verbosity(verbosity)
    except ValueError:
        return fail("Invalid verbosity '%s'", verbosity)
    _configure()
    return Status.SUCCESS


def get_verbosity() -> Verbosity:
    return _verbosity


def fail(fmt: str, *args) -> Status:
    """
    Print failure message using format string and arguments.

    Returns:
        Status: always Status.FAIL
    """
    _logger().error(fmt, *args)
    return Status.FAIL


def warn(fmt: str, *args) -> Status:
    """
    Print warning message using format string and arguments.

    Returns:
        Status: always Status.WARN
    """
    _logger().warning(fmt, *args)
    return Status.WARN


def fail_wloc(func: str, file: str, line: int, msg: str) -> Status:
    """Failure message tagged with function name, file name and line number."""
    return fail("%s:%s:%d: %s", os.path.basename(file), func, line, msg)


def mem_fail() -> Status:
    """Report a memory allocation failure at the location of the caller."""
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    try:
        if caller is None:
            return fail("out of memory")
        info = inspect.getframeinfo(caller)
        return fail_wloc(info.function, info.filename, info.lineno, "out of memory")
    finally:
        del frame, caller


def thread_error(error: int | BaseException) -> str:
    """
    Describe a thread creation or join failure.

    Args:
        error: errno-style code, or the exception raised by the threading layer.

    Returns:
        str: A human readable description.
    """
    if isinstance(error, BaseException):
        code = getattr(error, "errno", None)
        if code is None:
            return f"thread error: {error}"
        error = code
    return _THREAD_ERRORS.get(error, f"unknown thread error code {error}")
