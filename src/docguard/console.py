"""Rich console rendering for validation reports."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from docguard.domain.models import Principle, PrincipleOutcome, ValidationReport

# Shared console instances. The report is line-oriented text: no wrapping,
# no emoji code or syntax highlighting applied to document-derived messages.
console = Console(soft_wrap=True, highlight=False, emoji=False)
error_console = Console(stderr=True, highlight=False, emoji=False)

PASS_LABEL = "✅ PASS"
FAIL_LABEL = "❌ FAIL"


def print_header(root: str, principle_count: int) -> None:
    console.print(
        f"Validating documentation in {escape(root)} "
        f"against {principle_count} principles...\n"
    )


def print_error(message: str, hint: str | None = None) -> None:
    """Print formatted error message to stderr."""
    content = Text(f"ERROR: {message}", style="bold red")
    if hint:
        content.append(f"\n\nHint: {hint}", style="yellow")
    error_console.print(Panel(content, title="Error", border_style="red"))


def print_outcome(outcome: PrincipleOutcome) -> None:
    """Print the status line and message of one principle."""
    if outcome.passed:
        status = f"[green]{PASS_LABEL}[/green]"
    else:
        status = f"[red]{FAIL_LABEL}[/red]"
    console.print(f"{status} {escape(outcome.principle.name)}")
    console.print(f"    {escape(outcome.result.message)}")
    console.print("")


def print_summary(report: ValidationReport) -> None:
    console.print(
        f"\nSummary: {report.passed_count}/{report.total} principles validated"
    )
    if report.all_passed:
        console.print("\n[bold green]🎉 All principles validated successfully![/bold green]")
    else:
        console.print("\n[bold yellow]⚠️  Some principles failed validation.[/bold yellow]")


def print_report(report: ValidationReport) -> None:
    """Print the full report: header, every outcome, summary."""
    print_header(report.root, report.total)
    for outcome in report.outcomes:
        print_outcome(outcome)
    print_summary(report)


def print_principles(principles: Sequence[Principle]) -> None:
    """Print the principle catalogue."""
    table = Table(show_header=True, box=None)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Principle", style="bold")
    table.add_column("Description")

    for principle in principles:
        table.add_row(principle.key, principle.name, principle.description)

    console.print(table)
