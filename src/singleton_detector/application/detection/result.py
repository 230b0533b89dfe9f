"""Analysis result returned by the bundled detector."""

from __future__ import annotations

from dataclasses import dataclass, field

from singleton_detector.application.reporters.statistics import StatisticsReporter
from singleton_detector.domain.model.statistics import DetectionStatistics


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Graph document plus statistics.

    Satisfies AnalysisReport.

    Attributes:
        graph_output: GraphML document
        statistics: Counts behind the report
        reporter: Renders statistics for stats_report()
    """

    graph_output: str
    statistics: DetectionStatistics = field(default_factory=DetectionStatistics)
    reporter: StatisticsReporter = field(default_factory=StatisticsReporter, repr=False)

    def stats_report(self, verbose: bool) -> str:
        """Render statistics, listing classes when verbose."""
        return self.reporter.report(self.statistics, verbose=verbose)
