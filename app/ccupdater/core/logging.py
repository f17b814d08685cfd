"""Logging setup for ccupdater entry points.

Modules log through ``logging.getLogger(__name__)``; entry points call
configure_logging() once to route records to a Rich handler on stderr.
"""

import logging
import os

from rich.logging import RichHandler

from ccupdater.utils.formatting import err_console

# Environment variable overriding the configured log level
LOG_LEVEL_ENV_VAR = "CLAUDE_CODE_UPDATER_LOG_LEVEL"

_HANDLER_NAME = "ccupdater-rich"


def resolve_log_level(configured: str | None = None, *, verbose: bool = False) -> int:
    """Resolve the effective log level.

    Priority: ``verbose`` flag, environment variable, configured value,
    then WARNING.

    Args:
        configured: Level name from configuration, if any.
        verbose: Force DEBUG level.

    Returns:
        Numeric logging level.
    """
    if verbose:
        return logging.DEBUG

    name = os.environ.get(LOG_LEVEL_ENV_VAR) or configured or "WARNING"
    level = logging.getLevelName(name.strip().upper())
    if isinstance(level, int):
        return level
    return logging.WARNING


def configure_logging(level: int = logging.WARNING) -> None:
    """Attach a Rich handler to the ``ccupdater`` logger.

    Calling this more than once only updates the level.

    Args:
        level: Numeric logging level.
    """
    root = logging.getLogger("ccupdater")
    root.setLevel(level)

    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            handler.setLevel(level)
            return

    handler = RichHandler(console=err_console, show_path=False, show_time=False)
    handler.set_name(_HANDLER_NAME)
    handler.setLevel(level)
    root.addHandler(handler)
