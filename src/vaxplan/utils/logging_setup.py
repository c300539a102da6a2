"""
Vaccination Planner Logging
===========================
All loggers live under the "vaxplan" namespace; setup_logging attaches a
console handler (stderr) and an optional rotating file.

Levels:
    TRACE (5): Registry configuration calls with arguments
    DEBUG (10): Per-interval quotas, skipped ingestion lines
    INFO (20): Progress, allocation totals
    WARNING (30): Rejected input, empty brackets
    ERROR (40): Configuration failures, aborted allocation blocks
"""
import functools
import logging
import sys
from contextlib import contextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional, TextIO


TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class ColoredFormatter(logging.Formatter):
    """Level-colored formatter, plain text unless ``stream`` is a terminal."""

    COLORS = {
        TRACE: "\033[90m",             # Gray
        logging.DEBUG: "\033[36m",     # Cyan
        logging.INFO: "\033[32m",      # Green
        logging.WARNING: "\033[33m",   # Yellow
        logging.ERROR: "\033[31m",     # Red
        logging.CRITICAL: "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str, datefmt: Optional[str] = None, stream: Optional[TextIO] = None):
        super().__init__(fmt, datefmt=datefmt)
        self.use_color = bool(stream is not None and stream.isatty())

    def format(self, record):
        message = super().format(record)
        color = self.COLORS.get(record.levelno, "")
        if color and self.use_color:
            return f"{color}{message}{self.RESET}"
        return message


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = "logs/vaxplan.log",
    console_level: Optional[str] = None,
    max_bytes: int = 5 * 1024 * 1024,  # 5 MB
    backup_count: int = 3,
) -> logging.Logger:
    """
    Configure the "vaxplan" logger; calling it again replaces the handlers.

    Args:
        level: Minimum log level for file output
        log_file: Path to log file (None = no file logging)
        console_level: Console log level (defaults to level)
        max_bytes: Max size before rotation
        backup_count: Number of backup files to keep

    Returns:
        The "vaxplan" logger
    """
    logger = logging.getLogger("vaxplan")
    logger.setLevel(TRACE)  # handlers filter
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    file_level = getattr(logging, level.upper(), logging.INFO)
    cons_level = getattr(logging, (console_level or level).upper(), logging.INFO)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(cons_level)
    console_handler.setFormatter(ColoredFormatter(
        "[%(asctime)s] %(levelname)-7s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    ))
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8"
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        logger.addHandler(file_handler)

    logger.debug(f"Logging initialized: console={cons_level}, file={file_level if log_file else 'disabled'}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module under the "vaxplan" namespace, e.g. "vaxplan.registry".
    """
    return logging.getLogger(name)


def _format_args(args, kwargs) -> str:
    parts = [repr(a)[:50] for a in args]
    parts += [f"{k}={v!r:.30}" for k, v in kwargs.items()]
    return ", ".join(parts)


def log_function_call(method: Callable) -> Callable:
    """
    Log a registry method call at TRACE, and its failure at ERROR.

    The receiver is logged by class name only:
        TRACE  → Registry.define_hub('Torino')
        ERROR  ✖ Registry.define_hub raised: DuplicateHubError: ...
    """
    logger = logging.getLogger(method.__module__)

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        call = f"{type(self).__name__}.{method.__name__}"
        logger.log(TRACE, f"→ {call}({_format_args(args, kwargs)})")
        try:
            result = method(self, *args, **kwargs)
        except Exception as e:
            logger.error(f"✖ {call} raised: {type(e).__name__}: {e}")
            raise
        if result is not None:
            logger.log(TRACE, f"← {call} returned {result!r:.100}")
        return result

    return wrapper


class AllocationLogger:
    """
    Nested log of an allocation run.

    Each (hub, day) is a block opened by ``hub_day``; quota and mop-up
    lines are indented under it at DEBUG level.
    """

    def __init__(self, name: str = "vaxplan.solver"):
        self.logger = logging.getLogger(name)
        self.indent = 0

    def _prefix(self) -> str:
        return "  " * self.indent

    def week(self, hubs: List[str], people: int, intervals: List[str]) -> None:
        self.logger.info(f"{'=' * 20} WEEKLY ALLOCATION {'=' * 20}")
        self.logger.info(f"▸ {len(hubs)} hubs, {people} people, intervals {', '.join(intervals)}")

    @contextmanager
    def hub_day(self, hub: str, day: str, total: int) -> Iterator[Dict[str, int]]:
        """
        Open the block of one (hub, day); the caller stores its count in run["allocated"].

        The indent is restored even when the block raises.
        """
        self.logger.debug(f"{self._prefix()}┌─ {hub} {day}: {total} slots")
        self.indent += 1
        run = {"allocated": 0}
        try:
            yield run
        except Exception as e:
            self.indent = max(0, self.indent - 1)
            self.logger.error(f"{self._prefix()}└─ {hub} {day} aborted: {type(e).__name__}: {e}")
            raise
        else:
            self.indent = max(0, self.indent - 1)
            self.logger.debug(f"{self._prefix()}└─ {hub} {day}: {run['allocated']}/{total} allocated")

    def quota(self, label: str, quota: int, allocated: int) -> None:
        self.logger.debug(f"{self._prefix()}{label}: quota={quota} allocated={allocated}")

    def mop_up(self, label: str, offered: int, allocated: int) -> None:
        self.logger.debug(f"{self._prefix()}mop-up {label}: offered={offered} allocated={allocated}")
