"""Logging setup for applications embedding the scoring engine."""

from typing import List, Optional

from loguru import logger
from rich.console import Console
from rich.logging import RichHandler

from .config import settings

console = Console(stderr=True)


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> List[int]:
    """Enable package logging with a rich console sink and an optional file sink.

    Returns the loguru handler ids that were added.
    """
    level = (level or settings.logging.level).upper()
    log_file = log_file or settings.logging.file

    logger.remove()
    handler_ids = [
        logger.add(
            RichHandler(console=console, show_time=True, show_path=False),
            level=level,
            format="{message}",
        )
    ]
    if log_file:
        handler_ids.append(
            logger.add(
                log_file,
                level=level,
                format="{time:YYYY-MM-DD HH:mm:ss} - {name} - {level} - {message}",
            )
        )
    logger.enable("cricket_scoring")
    return handler_ids
