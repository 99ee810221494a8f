import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(debug: bool = False) -> logging.Logger:
    """
    Configure logging for the zfsver package.

    Log records go to stderr so stdout carries only the report.
    """
    level: int = logging.DEBUG if debug else logging.WARNING

    handler: RichHandler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_time=debug,
        show_path=debug,
    )

    logger: logging.Logger = logging.getLogger("zfsver")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False

    return logger
