"""Utilities package for the vaccination planner."""
from .logging_setup import (
    TRACE,
    AllocationLogger,
    get_logger,
    log_function_call,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_function_call",
    "AllocationLogger",
    "TRACE",
]
