"""
shiftcheck Logging
==================
Package logger setup plus the helpers the engine logs through.

Levels used by the engine:
    TRACE (5): selector calls and their results
    DEBUG (10): run details, per-rule results without conflicts, skipped tags
    INFO (20): run phases and totals
    WARNING (30): rules with conflicts, disabled rules, unfilled slots
    ERROR (40): exceptions escaping a traced call
"""
import functools
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Callable, Optional

PACKAGE_LOGGER = "shiftcheck"

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CONSOLE_FORMAT = "[%(asctime)s] %(levelname)-7s %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s"


class LevelColorFormatter(logging.Formatter):
    """Colours the level name on a terminal; plain text otherwise."""

    LEVEL_COLORS = {
        TRACE: "90",
        logging.DEBUG: "36",
        logging.INFO: "32",
        logging.WARNING: "33",
        logging.ERROR: "31",
        logging.CRITICAL: "35",
    }

    def __init__(self, fmt: str = CONSOLE_FORMAT, stream=None):
        super().__init__(fmt, datefmt="%H:%M:%S")
        self.use_color = bool(getattr(stream or sys.stdout, "isatty", lambda: False)())

    def format(self, record):
        code = self.LEVEL_COLORS.get(record.levelno)
        if not (self.use_color and code):
            return super().format(record)
        plain = record.levelname
        record.levelname = f"\033[{code}m{plain}\033[0m"
        try:
            return super().format(record)
        finally:
            record.levelname = plain


def level_from_name(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name (TRACE included) to its number; unknown names give default."""
    if not name:
        return default
    value = logging.getLevelName(str(name).strip().upper())
    return value if isinstance(value, int) else default


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    console_level: Optional[str] = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
) -> logging.Logger:
    """
    Attach console (and optionally rotating file) handlers to the package logger.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: Level for the file handler, and the console when console_level is unset
        log_file: Rotating log file path; None keeps logging on the console only
        console_level: Console level override
        max_bytes: File size that triggers rotation
        backup_count: Rotated files kept

    Returns:
        The "shiftcheck" logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_level = level_from_name(level)
    cons_level = level_from_name(console_level) if console_level else file_level
    logger.setLevel(min(file_level, cons_level))

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(cons_level)
    console.setFormatter(LevelColorFormatter(stream=sys.stdout))
    logger.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        file_handler.setLevel(file_level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    logger.debug(
        f"Logging configured: console={logging.getLevelName(cons_level)}, "
        f"file={path if log_file else 'off'}"
    )
    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger, e.g. get_logger("shiftcheck.engine.checks")."""
    return logging.getLogger(name)


def log_function_call(func: Callable) -> Callable:
    """
    Trace entry and result of a call at TRACE level.

    Exceptions are logged at ERROR and re-raised unchanged.
    """
    logger = logging.getLogger(func.__module__)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if logger.isEnabledFor(TRACE):
            shown = [repr(a)[:50] for a in args[:3]] + [f"{k}={v!r:.30}" for k, v in kwargs.items()]
            logger.log(TRACE, f"→ {func.__name__}({', '.join(shown)})")
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            logger.error(f"✖ {func.__name__} raised {type(e).__name__}: {e}")
            raise
        logger.log(TRACE, f"← {func.__name__} = {result!r:.100}")
        return result

    return wrapper


def log_rule_result(logger: logging.Logger, rule: str, subject: str, conflicts: int):
    """One line per evaluated rule: DEBUG when clean, WARNING when it found conflicts."""
    target = f" {subject}" if subject else ""
    if conflicts:
        logger.warning(f"[✗] {rule}{target}: {conflicts} conflicts")
    else:
        logger.debug(f"[✓] {rule}{target}")


class RunLogger:
    """Logs one validation or auto-fill run: phase banner, steps, details, rule results."""

    def __init__(self, name: str = "shiftcheck.engine"):
        self.logger = logging.getLogger(name)

    def phase(self, name: str):
        self.logger.info(f"{'=' * 12} {name} {'=' * 12}")

    def step(self, description: str):
        self.logger.info(f"▸ {description}")

    def detail(self, key: str, value: Any):
        self.logger.debug(f"  {key}: {value}")

    def rule(self, kind: str, subject: str, conflicts: int):
        log_rule_result(self.logger, kind, subject, conflicts)
