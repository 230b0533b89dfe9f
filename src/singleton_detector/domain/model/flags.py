"""Command-line flags record.

Built once by the argument parser, read-only afterwards and passed by
reference to the driver and the detection engine.
"""

from __future__ import annotations

from dataclasses import dataclass

from singleton_detector.domain.model.category import Category


@dataclass(frozen=True, slots=True)
class Flags:
    """Toggles and threshold recognized on the command line.

    Immutable (frozen dataclass). FAIL-FIRST validation of threshold.

    Attributes:
        verbose: Echo discovered classes and phase progress (-v)
        show_stats: Print statistics after completion (-S)
        show_banner: Embed a summary banner in the graph (-b)
        ignore_singletons: Hide singletons (-s)
        ignore_hingletons: Hide hingletons (-h)
        ignore_mingletons: Hide mingletons (-m)
        ignore_fingletons: Hide fingletons (-f)
        ignore_others: Hide everything else (-o)
        threshold: Minimum edge count for a node to be drawn (-t).
            Not interpreted here; 0 means no threshold.
    """

    verbose: bool = False
    show_stats: bool = False
    show_banner: bool = False
    ignore_singletons: bool = False
    ignore_hingletons: bool = False
    ignore_mingletons: bool = False
    ignore_fingletons: bool = False
    ignore_others: bool = False
    threshold: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        # bool is an int subclass, reject it explicitly
        if isinstance(self.threshold, bool) or not isinstance(self.threshold, int):
            raise TypeError(f"threshold must be int, got {type(self.threshold).__name__}")

    def ignored_categories(self) -> frozenset[Category]:
        """Categories the engine must omit from output."""
        toggles = {
            Category.SINGLETON: self.ignore_singletons,
            Category.HINGLETON: self.ignore_hingletons,
            Category.MINGLETON: self.ignore_mingletons,
            Category.FINGLETON: self.ignore_fingletons,
            Category.OTHER: self.ignore_others,
        }
        return frozenset(category for category, hidden in toggles.items() if hidden)
