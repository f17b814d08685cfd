"""CLI package for ccupdater.

This package contains the Typer applications for the launcher and the
cleanup tool.
"""

from ccupdater.cli.cleanup import app as cleanup_app
from ccupdater.cli.main import app

__all__ = ["app", "cleanup_app"]
