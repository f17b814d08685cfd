"""Cleanup CLI entry point.

Defines the ``claude-code-updater-cleanup`` Typer application, which
removes every artifact of the shim and reports what remains.
"""

import logging
import sys
from typing import Annotated

import typer

from ccupdater.cleanup.orchestrator import CleanupOrchestrator
from ccupdater.cli.display import print_cleanup_report, print_manual_instructions
from ccupdater.core.logging import configure_logging, resolve_log_level
from ccupdater.core.paths import get_home_dir
from ccupdater.utils.formatting import console, print_error, print_info, print_success, print_warning

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="claude-code-updater-cleanup",
    help="Claude Code Updater - Complete Cleanup Tool.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command()
def cleanup(
    clean: Annotated[
        bool,
        typer.Option(
            "--clean",
            "--purge",
            help="Remove user data (~/.claude-code-updater) as well.",
        ),
    ] = False,
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Remove user data without asking for confirmation (implies --clean).",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """Completely remove claude-code-updater.

    Uninstalls the npm package, removes all binary files, cleans shell
    aliases, optionally removes user data, and verifies the removal.
    """
    configure_logging(resolve_log_level(verbose=verbose))

    console.print("[info]Starting complete claude-code-updater cleanup...[/]")
    orchestrator = CleanupOrchestrator(get_home_dir(), platform=sys.platform)

    remove_user_data = clean or force
    if clean and not force and orchestrator.user_data.exists() and sys.stdin.isatty():
        remove_user_data = typer.confirm(
            f"Delete user data directory {orchestrator.user_data.path}?",
            default=False,
        )

    try:
        report = orchestrator.run(remove_user_data=remove_user_data)
    except Exception as e:
        logger.debug("Cleanup aborted", exc_info=True)
        print_error(f"Cleanup failed: {e}")
        print_warning("Trying manual cleanup...")
        print_manual_instructions()
        raise typer.Exit(code=1) from e

    print_cleanup_report(report)

    if report.all_clean:
        print_success("\nComplete cleanup successful!")
        print_info("Please restart your terminal to complete the removal.")
        return

    print_warning("Some artifacts could not be removed automatically.")
    print_manual_instructions()
    raise typer.Exit(code=1)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
