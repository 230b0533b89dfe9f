"""Reference graph detector.

Reads each discovered class file, links classes that reference each
other and renders the result as GraphML. Classification into
singleton categories is delegated to a pluggable classifier; the
default puts every class in Category.OTHER.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

import networkx as nx

from singleton_detector.application.detection.result import AnalysisResult
from singleton_detector.application.discovery.classes import NESTED_CLASS_MARKER, resource_for
from singleton_detector.application.reporters.statistics import StatisticsReporter, summary_line
from singleton_detector.domain.model.category import Category
from singleton_detector.domain.model.statistics import DetectionStatistics
from singleton_detector.infrastructure.classfile import ClassFileInfo, read_class_file

if TYPE_CHECKING:
    from collections.abc import Callable, Collection, Mapping

    from singleton_detector.domain.model.flags import Flags
    from singleton_detector.domain.ports.classpath_root import ClasspathRootPort

logger = logging.getLogger(__name__)

BANNER_NODE = "__banner__"
BANNER_CATEGORY = "banner"


def classify_as_other(info: ClassFileInfo) -> Category:  # noqa: ARG001
    """Default classifier: no singleton heuristics."""
    return Category.OTHER


def outer_class(class_name: str) -> str:
    """Fold a nested class name onto its outermost class.

    Example:
        >>> outer_class("a.b.C$Inner$1")
        'a.b.C'
    """
    return class_name.split(NESTED_CLASS_MARKER, 1)[0]


class ReferenceGraphDetector:
    """Detection engine drawing class reference graphs.

    Satisfies DetectorProtocol.

    Pipeline:
        1. Read class files through the classpath root
        2. Classify each class
        3. Add an edge for every reference between analyzed classes
        4. Hide ignored categories, then nodes below the threshold
        5. Add the banner node if requested
        6. Render GraphML
    """

    def __init__(
        self,
        classifier: Callable[[ClassFileInfo], Category] | None = None,
        reporter: StatisticsReporter | None = None,
    ) -> None:
        """Initialize detector.

        Args:
            classifier: Maps a class to its category. Default: everything is OTHER.
            reporter: Statistics renderer. Default: StatisticsReporter().
        """
        self._classify = classifier or classify_as_other
        self._reporter = reporter or StatisticsReporter()

    def analyze(
        self,
        root: ClasspathRootPort,
        prefix: str,
        flags: Flags,
        class_names: Collection[str],
    ) -> AnalysisResult:
        """Build the reference graph for class_names.

        Raises:
            ResourceAccessError: If a class file cannot be read
            ClassFileError: If a class file is malformed
        """
        started = time.perf_counter()

        infos = self._read_classes(root, class_names)
        categories = {name: self._classify(info) for name, info in infos.items()}
        graph = self._build_graph(infos, categories)
        self._prune(graph, flags)

        by_category: dict[Category, set[str]] = {}
        for name, category in categories.items():
            by_category.setdefault(category, set()).add(name)
        statistics = DetectionStatistics(
            classes={category: frozenset(names) for category, names in by_category.items()},
            nodes_drawn=graph.number_of_nodes(),
            edges_drawn=graph.number_of_edges(),
        )

        if flags.show_banner:
            graph.add_node(BANNER_NODE, label=summary_line(statistics), category=BANNER_CATEGORY)

        graph.graph["prefix"] = prefix.replace("/", ".").rstrip(".")
        graph_output = "\n".join(nx.generate_graphml(graph)) + "\n"

        logger.info(
            "Analyzed %d classes under %r in %.1f ms",
            len(infos),
            prefix,
            (time.perf_counter() - started) * 1000,
        )
        return AnalysisResult(
            graph_output=graph_output,
            statistics=statistics,
            reporter=self._reporter,
        )

    def _read_classes(
        self,
        root: ClasspathRootPort,
        class_names: Collection[str],
    ) -> dict[str, ClassFileInfo]:
        infos: dict[str, ClassFileInfo] = {}
        for name in sorted(class_names):
            resource = resource_for(name)
            infos[name] = read_class_file(root.read_resource(resource), resource)
        return infos

    def _build_graph(
        self,
        infos: Mapping[str, ClassFileInfo],
        categories: Mapping[str, Category],
    ) -> nx.DiGraph:
        graph = nx.DiGraph()
        for name in infos:
            graph.add_node(name, label=name, category=categories[name].value)

        for name, info in infos.items():
            for ref in sorted(info.referenced):
                target = outer_class(ref)
                if target != name and target in infos:
                    graph.add_edge(name, target)
        return graph

    def _prune(self, graph: nx.DiGraph, flags: Flags) -> None:
        """Hide ignored categories, then nodes with too few edges."""
        hidden = {category.value for category in flags.ignored_categories()}
        graph.remove_nodes_from(
            [node for node, category in graph.nodes(data="category") if category in hidden]
        )

        if flags.threshold > 0:
            # degrees taken before any removal: one pass, order independent
            below = [node for node, degree in graph.degree() if degree < flags.threshold]
            graph.remove_nodes_from(below)
