"""Console reporter: CheckResult → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from layercheck.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from layercheck.domain.model.check_result import CheckResult, RuleResult


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters.
        force_terminal: Emit ANSI styles even when not writing to a tty.
        show_passed: List passing rules in the rules table.
        show_locations: Add a location column to violation tables.
    """

    width: int = 120
    force_terminal: bool = True
    show_passed: bool = True
    show_locations: bool = True


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, result: CheckResult) -> str:
        """Format check result as rich formatted string.

        Args:
            result: Complete check result

        Returns:
            Formatted string with colors and tables
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        self._render_header(console, result)
        self._render_rules(console, result)

        for rule_result in result.failed_rules:
            self._render_violations(console, rule_result)

        self._render_footer(console, result)
        return output.getvalue()

    def _render_header(self, console: Console, result: CheckResult) -> None:
        """Render header with summary."""
        console.print()
        console.rule("[bold]LAYERING CHECK[/bold]")
        console.print()
        console.print(
            f"[bold]Units:[/bold] {result.unit_count}  "
            f"[bold]Rules:[/bold] {len(result.rule_results)}  "
            f"[bold]Violations:[/bold] {result.violation_count}"
        )
        console.print()

    def _render_rules(self, console: Console, result: CheckResult) -> None:
        """Render one row per rule."""
        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Status")
        table.add_column("Rule", style="cyan")
        table.add_column("Checked", justify="right")
        table.add_column("Violations", justify="right")

        for rule_result in result.rule_results:
            if rule_result.passed and not self._config.show_passed:
                continue
            colour = "green" if rule_result.passed else "red"
            status = f"[{colour}]{self.status(rule_result.passed)}[/{colour}]"
            table.add_row(
                status,
                escape(rule_result.rule_id),
                str(rule_result.checked_count),
                str(len(rule_result.violations)),
            )

        console.print(table)
        console.print()

    def _render_violations(self, console: Console, rule_result: RuleResult) -> None:
        """Render violations of one failed rule."""
        console.print(
            f"[bold red]{escape(rule_result.rule_id)}[/bold red] "
            f"({len(rule_result.violations)})"
        )
        if rule_result.description:
            console.print(f"[dim]{escape(rule_result.description)}[/dim]")

        table = Table(show_header=True, header_style="bold", box=None)
        table.add_column("Unit", style="yellow")
        table.add_column("Reason")
        if self._config.show_locations:
            table.add_column("Location", style="dim")

        for violation in rule_result.violations:
            row = [escape(violation.subject), escape(violation.reason)]
            if self._config.show_locations:
                location = violation.location
                row.append(escape(str(location)) if location is not None else "-")
            table.add_row(*row)

        console.print(table)
        console.print()

    def _render_footer(self, console: Console, result: CheckResult) -> None:
        """Render final status line."""
        if result.passed:
            console.rule("[bold green]PASSED[/bold green]")
        else:
            console.rule("[bold red]FAILED[/bold red]")
