"""Logging configuration using loguru.

Sinks are installed once per process; ``get_logger`` only binds a name.
``configure_logging`` can be called again (e.g. by the app factory) to
point the sinks at a different directory or level.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger
from loguru._logger import Logger as LoguruLogger

from automata_console.config import Settings, settings

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
_FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
    "{extra[name]}:{function}:{line} - {message}"
)

_configured_for: Optional[tuple[str, str]] = None


def configure_logging(config: Optional[Settings] = None) -> Path:
    """
    Install console and file sinks for the automata console.

    Args:
        config: Settings providing ``log_dir`` and ``log_level``;
            defaults to the process-wide settings

    Returns:
        Directory the file sinks write to
    """
    global _configured_for
    config = config or settings

    logger.remove()
    logger.configure(extra={"name": "automata_console"})

    log_dir = Path(config.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    logger.add(
        sys.stderr,
        format=_CONSOLE_FORMAT,
        level=config.log_level,
        colorize=True,
    )
    # Every request line, including debug timings
    logger.add(
        log_dir / "app.log",
        format=_FILE_FORMAT,
        level="DEBUG",
        rotation="10 MB",
        retention="7 days",
        compression="zip",
    )
    logger.add(
        log_dir / "errors.log",
        format=_FILE_FORMAT,
        level="ERROR",
        rotation="10 MB",
        retention="30 days",
        compression="zip",
    )

    _configured_for = (str(log_dir), config.log_level)
    return log_dir


def reset_logging() -> None:
    """Drop all sinks so the next ``get_logger`` call reinstalls them."""
    global _configured_for
    logger.remove()
    _configured_for = None


def get_logger(name: str) -> LoguruLogger:
    """
    Get a logger bound to ``name``, installing the sinks on first use.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Configured logger instance
    """
    if _configured_for is None:
        configure_logging()
    return logger.bind(name=name)  # type: ignore[return-value]
