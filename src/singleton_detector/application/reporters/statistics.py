"""Statistics reporter: DetectionStatistics → rich formatted string."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from singleton_detector.domain.model.category import Category

if TYPE_CHECKING:
    from singleton_detector.domain.model.statistics import DetectionStatistics


def summary_line(statistics: DetectionStatistics) -> str:
    """One-line summary used for the graph banner.

    Example:
        >>> summary_line(stats)
        '3 classes: 1 singleton, 0 hingletons, 0 mingletons, 0 fingletons, 2 others; '
        '3 nodes, 1 edges drawn'
    """
    parts = []
    for category in Category:
        count = statistics.count(category)
        noun = category.value if count == 1 else f"{category.value}s"
        parts.append(f"{count} {noun}")
    return (
        f"{statistics.total_classes} classes: {', '.join(parts)}; "
        f"{statistics.nodes_drawn} nodes, {statistics.edges_drawn} edges drawn"
    )


class StatisticsReporter:
    """Renders detection statistics as plain text.

    Output is str, not print(). Caller decides destination.
    No colour codes: the text is meant to be captured as well as shown.
    """

    def __init__(self, width: int = 80) -> None:
        """Initialize reporter.

        Args:
            width: Render width in columns

        Raises:
            ValueError: If width < 20
        """
        if width < 20:
            raise ValueError(f"width must be >= 20, got {width}")

        self._width = width

    def report(self, statistics: DetectionStatistics, verbose: bool = False) -> str:
        """Format statistics.

        Args:
            statistics: Counts from a detection run
            verbose: Also list every class under its category

        Returns:
            Formatted table, followed by class listings when verbose
        """
        output = StringIO()
        console = Console(
            file=output,
            width=self._width,
            force_terminal=False,
            no_color=True,
            highlight=False,
            emoji=False,
        )

        console.print(self._build_table(statistics))

        if verbose:
            self._render_classes(console, statistics)

        return output.getvalue()

    def _build_table(self, statistics: DetectionStatistics) -> Table:
        table = Table(title="Detection statistics", show_footer=True)
        table.add_column("Category", footer="Total")
        table.add_column("Classes", justify="right", footer=str(statistics.total_classes))

        for category in Category:
            table.add_row(category.value, str(statistics.count(category)))

        table.add_section()
        table.add_row("nodes drawn", str(statistics.nodes_drawn))
        table.add_row("edges drawn", str(statistics.edges_drawn))
        return table

    def _render_classes(self, console: Console, statistics: DetectionStatistics) -> None:
        for category in Category:
            names = statistics.classes.get(category)
            if not names:
                continue
            console.print()
            console.print(f"{category.value.capitalize()}s ({len(names)}):", markup=False)
            for name in sorted(names):
                console.print(f"  {name}", markup=False)
