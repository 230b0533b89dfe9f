"""Detection statistics shown by -S and the graph banner."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from singleton_detector.domain.model.category import Category


@dataclass(frozen=True, slots=True)
class DetectionStatistics:
    """Counts collected by a detection run.

    Attributes:
        classes: Every analyzed class, by category
        nodes_drawn: Nodes left in the graph after hiding and threshold
        edges_drawn: Edges left in the graph
    """

    classes: Mapping[Category, frozenset[str]] = field(default_factory=dict)
    nodes_drawn: int = 0
    edges_drawn: int = 0

    def __post_init__(self) -> None:
        """Validate invariants and freeze the mapping. FAIL-FIRST."""
        if self.nodes_drawn < 0:
            raise ValueError(f"nodes_drawn must be >= 0, got {self.nodes_drawn}")
        if self.edges_drawn < 0:
            raise ValueError(f"edges_drawn must be >= 0, got {self.edges_drawn}")
        # frozen dataclass: bypass __setattr__ to store read-only view
        object.__setattr__(self, "classes", MappingProxyType(dict(self.classes)))

    @property
    def total_classes(self) -> int:
        """Number of analyzed classes over all categories."""
        return sum(len(names) for names in self.classes.values())

    def count(self, category: Category) -> int:
        """Number of analyzed classes in category."""
        return len(self.classes.get(category, frozenset()))
