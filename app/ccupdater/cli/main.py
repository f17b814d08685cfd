"""Launcher CLI entry point.

Defines the ``claude-code-updater`` Typer application. Every argument
except ``--skip-update`` is forwarded to the managed tool untouched,
so the command declares no options of its own (not even ``--help``).
"""

import logging

import click
import typer
from typer.core import TyperCommand

from ccupdater.core.config import ConfigError, UpdaterConfig, load_config
from ccupdater.core.logging import configure_logging, resolve_log_level
from ccupdater.updater.launcher import Launcher
from ccupdater.utils.formatting import print_error, print_warning

logger = logging.getLogger(__name__)

# Context meta key holding the unparsed argument list
RAW_ARGS_KEY = "ccupdater.raw_args"

app = typer.Typer(
    name="claude-code-updater",
    help="Keep Claude Code up to date, then run it.",
    add_completion=False,
)


class PassthroughCommand(TyperCommand):
    """Command that records its raw arguments before Click parses them.

    Click drops a leading ``--`` while collecting extra arguments; the
    managed tool must see it.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.meta[RAW_ARGS_KEY] = list(args)
        return super().parse_args(ctx, args)


def _load_config_or_defaults() -> UpdaterConfig:
    """Load configuration, falling back to defaults on any config error."""
    try:
        return load_config()
    except ConfigError as e:
        print_warning(f"{e}. Using default settings.")
        return UpdaterConfig()


@app.command(
    cls=PassthroughCommand,
    add_help_option=False,
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "allow_interspersed_args": False,
    },
)
def launch(ctx: typer.Context) -> None:
    """Update the managed tool if needed, then run it with the given arguments."""
    config = _load_config_or_defaults()
    configure_logging(resolve_log_level(config.log_level))

    try:
        result = Launcher(config).run(ctx.meta.get(RAW_ARGS_KEY, list(ctx.args)))
    except Exception as e:
        logger.debug("Launcher failed", exc_info=True)
        print_error(f"Failed to run {config.command}: {e}")
        raise typer.Exit(code=1) from e

    raise typer.Exit(code=result.exit_code)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
