"""
Logging, diagnostics and validation utilities
"""

from .logger import get_logger, setup_logger, LogMixin
from .diagnostics import (
    Verbosity,
    fail,
    fail_wloc,
    get_err_out,
    get_verbosity,
    mem_fail,
    set_err_out,
    set_verbosity,
    thread_error,
    warn,
)

__all__ = [
    "get_logger",
    "setup_logger",
    "LogMixin",
    "Verbosity",
    "fail",
    "fail_wloc",
    "get_err_out",
    "get_verbosity",
    "mem_fail",
    "set_err_out",
    "set_verbosity",
    "thread_error",
    "warn",
]
