"""Terminal output for Fuzzinator.

This module provides the RankTUI class, a Rich-based display for ranking
results, encoded vectors, distances and presets.

Example:
    from fuzzinator.ui import RankTUI

    tui = RankTUI()
    tui.display_rank_results("cat", results, candidate_count=3, threshold=None)
"""

from typing import List, Mapping, Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from fuzzinator.models import FuzzyConfig, RankedString


class RankTUI:
    """Rich-based display for Fuzzinator results.

    Args:
        console: Optional Rich Console instance for output. If None, creates
            a new Console. Pass a custom Console for testing (e.g., with
            StringIO file for output capture).

    Attributes:
        console: The Rich Console instance used for all output.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def display_rank_results(
        self,
        root: str,
        results: List[RankedString],
        candidate_count: int,
        threshold: Optional[float],
    ) -> None:
        """Display ranking results in a formatted table.

        Args:
            root: The root string candidates were ranked against.
            results: RankedString results in output order.
            candidate_count: Number of candidates before filtering.
            threshold: Threshold applied, if any.
        """
        header_text = (
            f"Root: {escape(repr(root))}\n"
            f"Candidates ranked: {candidate_count:,}\n"
            f"Results kept: {len(results):,}\n"
            f"Threshold: {threshold if threshold else 'none'}"
        )
        self.console.print(Panel(header_text, title="Rank Results", border_style="blue"))

        if not results:
            self.console.print("[yellow]No candidates within threshold.[/yellow]")
            return

        table = Table(title="Ranked Candidates")
        table.add_column("#", justify="right", style="cyan", no_wrap=True)
        table.add_column("Candidate", style="white")
        table.add_column("Distance", justify="right")
        table.add_column("Score", justify="center")

        for idx, result in enumerate(results, start=1):
            table.add_row(
                str(idx),
                escape(self._truncate_name(result.value, max_length=50)),
                f"{result.distance:.6g}",
                self._format_score(result.score),
            )

        self.console.print(table)

    def display_vector(self, text: str, vector: Sequence[float], verbose: bool = False) -> None:
        """Display the encoded vector of one string, one row per character."""
        self.console.print(
            Panel(f"Text: {escape(repr(text))}\nLength: {len(vector)}", title="Vector", border_style="blue")
        )
        if not vector:
            self.console.print("[yellow]Empty vector.[/yellow]")
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Pos", justify="right", style="cyan")
        table.add_column("Char")
        table.add_column("Value", justify="right")
        for pos, (char, value) in enumerate(zip(text, vector)):
            table.add_row(str(pos), escape(repr(char)), f"{value:.6g}" if not verbose else repr(value))
        self.console.print(table)

    def display_distance(self, first: str, second: str, distance: float, score: float) -> None:
        """Display the distance and score between two strings."""
        body = (
            f"A: {escape(repr(first))}\n"
            f"B: {escape(repr(second))}\n"
            f"Distance: {distance:.6g}\n"
            f"Score: {self._format_score(score)}"
        )
        self.console.print(Panel(body, title="Distance", border_style="blue"))

    def display_presets(self, presets: Mapping[str, FuzzyConfig]) -> None:
        """Display registered presets and their multiplier settings."""
        table = Table(title="Presets")
        table.add_column("Name", style="cyan", no_wrap=True)
        table.add_column("Formula")
        table.add_column("Reducer", justify="right")
        table.add_column("Reduction", justify="center")
        table.add_column("Reset", justify="center")
        table.add_column("Reset Reducer", justify="right")

        for name, config in presets.items():
            multiplier = config.scoring.multiplier
            table.add_row(
                name,
                config.scoring.formula,
                str(multiplier.reducer),
                self._format_delimiter(multiplier.reduction_delimiter, every="every char"),
                self._format_delimiter(multiplier.reset_delimiter, every="never"),
                str(multiplier.reset_reducer),
            )
        self.console.print(table)

    def display_error(self, message: str) -> None:
        """Display an error message in the CLI's error format."""
        self.console.print(f"[red]Error:[/red] {escape(message)}")

    def _format_score(self, score: float) -> str:
        """Format a (0, 1] score as a percentage with color coding."""
        score_pct = score * 100
        if score_pct >= 90:
            return f"[green]{score_pct:.1f}%[/green]"
        elif score_pct >= 50:
            return f"[yellow]{score_pct:.1f}%[/yellow]"
        else:
            return f"[red]{score_pct:.1f}%[/red]"

    def _format_delimiter(self, delimiter: Optional[str], every: str) -> str:
        if delimiter is None:
            return "never"
        if delimiter == "":
            return every
        return repr(delimiter)

    def _truncate_name(self, name: str, max_length: int = 60) -> str:
        """Truncate long candidate strings with ellipsis."""
        if len(name) > max_length:
            return name[: max_length - 3] + "..."
        return name
