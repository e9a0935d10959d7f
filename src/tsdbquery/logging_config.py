import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER_NAME = "tsdbquery"

_PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _make_handler(pretty: bool, console: Optional[Console]) -> logging.Handler:
    if pretty:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        return handler

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def setup_sdk_logging(
    level="INFO",
    pretty: bool = False,
    console: Optional[Console] = None,
    propagate: bool = False,
):
    """
    Routes the `tsdbquery` logs (e.g. rejected metric and group-by
    configurations, logged at DEBUG) to the console.

    Calling it again replaces the previous handler instead of adding one.

    Args:
        level (str): The logging threshold (e.g., "DEBUG", "INFO").
        pretty (bool): Render through a Rich console instead of a plain stream.
        console (Optional[rich.console.Console]): The Rich console used when
            `pretty` is set. Defaults to a new stderr console.
        propagate (bool): Whether records also reach the root logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(_make_handler(pretty, console))
    logger.setLevel(level)
    logger.propagate = propagate
    logger.debug(f"Logging configured (level={level}, pretty={pretty})")


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Returns the logger for `name` (usually `__name__`), or the package
    logger `tsdbquery` when no name is given.
    """
    return logging.getLogger(name or PACKAGE_LOGGER_NAME)
