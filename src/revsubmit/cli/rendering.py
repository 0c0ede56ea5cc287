"""Rendering of the submission summary.

Data collection lives in revsubmit.core.submission; this module only turns a
SubmissionResult into a rich Panel.
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from revsubmit.core.submission import SubmissionResult


def summary_rows(result: SubmissionResult) -> list[tuple[str, str]]:
    """Label/value pairs shown in the submission summary."""
    rows = [
        ("Working branch", result.feature_branch),
        ("Remote", result.remote),
        ("Review target", result.review_ref),
        ("Revision branch", result.revision_branch),
    ]
    if result.previous_revision_branch is not None:
        rows.append(("Previous revision", result.previous_revision_branch))
    rows.append(("Change-Id", result.change_id))
    rows.append(("Review URL", result.review_url))
    return rows


def format_submission_summary(result: SubmissionResult) -> Panel:
    """Format the final summary box for a submitted revision."""
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="bold")
    grid.add_column()
    for label, value in summary_rows(result):
        grid.add_row(label, Text(value, no_wrap=True, overflow="ignore"))

    title = "Revision Submitted"
    if result.message_carried_forward:
        title += " (message carried forward)"
    return Panel(grid, title=title, border_style="green", expand=False, padding=(1, 2))


def print_submission_summary(result: SubmissionResult, console: Console | None = None) -> None:
    if console is None:
        console = Console()
    console.print(format_submission_summary(result))
