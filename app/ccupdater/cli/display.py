"""Shared Rich display functions for cleanup results.

Provides table builders and printers for removal results, the
verification report and the manual cleanup instructions.
"""

from rich.markup import escape
from rich.table import Table

from ccupdater.cleanup.orchestrator import MANUAL_INSTRUCTIONS
from ccupdater.models.cleanup import (
    CleanupReport,
    UserDataOutcome,
    UserDataResult,
    VerificationReport,
)
from ccupdater.utils.formatting import console, print_info, print_warning


def create_removals_table(report: CleanupReport) -> Table:
    """Create a Rich table of binaries removed and profiles cleaned.

    Args:
        report: Cleanup report to display.

    Returns:
        Rich Table with one row per attempted binary or rewritten profile.
    """
    table = Table(
        title="Removed Artifacts",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Kind", width=8)
    table.add_column("Path", style="path", no_wrap=True)
    table.add_column("Message")

    for removal in report.binaries:
        if removal.removed:
            status, message = "[removed]OK[/removed]", "Removed"
        else:
            status, message = "[error]FAIL[/error]", removal.error or "Unknown error"
        table.add_row(status, "binary", escape(str(removal.path)), f"[muted]{escape(message)}[/muted]")

    for scrub in report.scrubs:
        if scrub.error:
            status, message = "[error]FAIL[/error]", scrub.error
        elif scrub.modified:
            status, message = "[removed]OK[/removed]", "Aliases cleaned"
        else:
            continue
        table.add_row(status, "profile", escape(str(scrub.path)), f"[muted]{escape(message)}[/muted]")

    return table


def print_user_data_result(result: UserDataResult) -> None:
    """Print what happened to the user data directory."""
    if result.outcome is UserDataOutcome.REMOVED:
        console.print("[success]Removed user data directory[/success]")
    elif result.outcome is UserDataOutcome.PRESERVED:
        console.print("[kept]User data preserved (use --clean to remove)[/kept]")
        console.print(f"[muted]    Directory: {escape(str(result.path))}[/muted]")
    elif result.outcome is UserDataOutcome.FAILED:
        print_warning(f"Could not remove user data: {result.error}")
    else:
        console.print("[muted]No user data directory found[/muted]")


def create_verification_table(report: VerificationReport) -> Table:
    """Create a Rich table for the verification report.

    Args:
        report: Verification report to display.

    Returns:
        Rich Table with one row per check.
    """
    table = Table(
        title="Cleanup Verification",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("", width=2, justify="center")
    table.add_column("Check", no_wrap=True)
    table.add_column("Result")

    for result in report.results:
        if result.clean:
            icon, style = "[success]✔[/success]", "success"
        else:
            icon, style = "[error]✘[/error]", "error"
        table.add_row(icon, result.name, f"[{style}]{escape(result.message)}[/{style}]")

    return table


def print_cleanup_report(report: CleanupReport) -> None:
    """Print every section of a cleanup report."""
    if not report.uninstalled:
        print_warning("npm uninstall failed, continued with manual cleanup")

    if report.files_modified or any(b.error for b in report.binaries) or any(
        s.error for s in report.scrubs
    ):
        console.print(create_removals_table(report))
    else:
        print_info("No binaries or shell aliases needed removal.")

    if report.user_data is not None:
        print_user_data_result(report.user_data)

    if report.verification is not None:
        console.print(create_verification_table(report.verification))


def print_manual_instructions() -> None:
    """Print the fixed manual cleanup instructions."""
    console.print("\n[error]Manual cleanup instructions:[/error]")
    for number, (heading, commands) in enumerate(MANUAL_INSTRUCTIONS, start=1):
        console.print(f"\n[text]{number}. {heading}[/text]")
        for command in commands:
            console.print(f"[muted]   {command}[/muted]", highlight=False)
