"""Logging for cppsetup: Rich console output plus an optional log file."""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console()

ROOT_LOGGER = "cppsetup"
LOG_FILE = Path.home() / ".cppsetup" / "cppsetup.log"
FALLBACK_LOG_FILE = Path("/tmp/cppsetup.log")

_log_file: Optional[Path] = None


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> Path:
    """Mirror every cppsetup log record into a file.

    Args:
        log_file: Path to log file (defaults to ~/.cppsetup/cppsetup.log)
        verbose: Record debug messages as well

    Returns:
        The file actually used. Falls back to /tmp/cppsetup.log when the
        requested directory cannot be created.
    """
    global _log_file

    if _log_file is not None:
        return _log_file

    target = Path(log_file) if log_file else LOG_FILE
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        target = FALLBACK_LOG_FILE

    level = logging.DEBUG if verbose else logging.INFO
    file_handler = logging.FileHandler(target)
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.addHandler(file_handler)
    root_logger.setLevel(level)

    _log_file = target
    root_logger.debug(f"File logging enabled: {target}")
    return target


def set_verbose(verbose: bool) -> None:
    """Switch every cppsetup console logger between INFO and DEBUG."""
    level = logging.DEBUG if verbose else logging.INFO
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith(ROOT_LOGGER) and isinstance(logger, logging.Logger):
            logger.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger that prints through the shared Rich console.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger with Rich console handler
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger
