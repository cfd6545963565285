"""Rich display functions for cleanup results.

Builds the summary table shown at the end of ``cleanpath clean``.
"""

from rich.table import Table

from cleanpath.cleaner.models import RunResult
from cleanpath.utils.formatting import console, print_success


def create_summary_table(result: RunResult) -> Table:
    """Create a Rich table summarizing a cleanup run.

    Args:
        result: Aggregated counts of the run.

    Returns:
        Rich Table with one row per counter.
    """
    table = Table(
        title="Cleanup Summary",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Item")
    table.add_column("Count", justify="right")

    error_style = "error" if result.errors else "muted"
    table.add_row("Directories examined", str(result.directories_scanned))
    table.add_row("Files deleted", f"[deleted]{result.files_deleted}[/deleted]")
    table.add_row("Directories deleted", f"[deleted]{result.directories_deleted}[/deleted]")
    table.add_row("Batches declined", f"[warning]{result.batches_declined}[/warning]")
    table.add_row("Errors", f"[{error_style}]{result.errors}[/{error_style}]")

    return table


def print_run_summary(result: RunResult) -> None:
    """Print a one-line verdict for a cleanup run.

    Shows a success message when nothing failed, or the failure count
    otherwise.

    Args:
        result: Aggregated counts of the run.
    """
    deleted = result.files_deleted + result.directories_deleted
    if result.success:
        print_success(f"Cleanup finished: {deleted} item(s) deleted.")
    else:
        console.print(
            f"\n[success]{deleted} deleted[/success], [error]{result.errors} failed[/error]"
        )
