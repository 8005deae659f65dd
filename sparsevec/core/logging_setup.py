"""Logging configuration helper."""
import logging
from typing import Optional, Union

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: Optional[str] = None,
) -> None:
    """
    Configure root logging for applications embedding sparsevec.
    
    Library modules only create loggers; call this once from the
    application entry point.
    
    Args:
        level: Logging level name ("DEBUG", "INFO", ...) or number
        fmt: Optional log record format
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {name}")
    logging.basicConfig(level=level, format=fmt or DEFAULT_FORMAT)


def configure_from_config(config) -> None:
    """Configure logging from the `logging` section of a Config."""
    section = config.get_section("logging")
    configure_logging(
        level=section.get("level", "INFO"),
        fmt=section.get("format"),
    )
