"""Tests for services/driver.py."""

from collections.abc import Collection
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from singleton_detector.application.services.driver import Driver
from singleton_detector.domain.exceptions import OutputWriteError, ResourceAccessError
from singleton_detector.domain.model.flags import Flags
from singleton_detector.domain.ports.classpath_root import ClasspathRootPort
from singleton_detector.infrastructure.classpath.archive import ArchiveClasspathRoot
from singleton_detector.infrastructure.classpath.directory import DirectoryClasspathRoot
from tests.factories import class_entries, make_arguments, write_jar, write_tree


@dataclass(frozen=True)
class StubReport:
    graph_output: str = "<graphml/>\n"

    def stats_report(self, verbose: bool) -> str:
        return f"STATS verbose={verbose}\n"


@dataclass
class RecordingDetector:
    """Detector double remembering what it was given."""

    calls: list[tuple[ClasspathRootPort, str, Flags, frozenset[str]]] = field(default_factory=list)

    def analyze(
        self,
        root: ClasspathRootPort,
        prefix: str,
        flags: Flags,
        class_names: Collection[str],
    ) -> StubReport:
        self.calls.append((root, prefix, flags, frozenset(class_names)))
        return StubReport()


def make_console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=200, highlight=False, soft_wrap=True), buffer


@pytest.fixture
def classes_dir(tmp_path: Path) -> Path:
    return write_tree(
        tmp_path / "classes",
        class_entries("com.example.Foo", "com.example.Foo$Inner", "com.other.Bar"),
    )


class TestDriver:
    """Tests for Driver.run()."""

    def test_none_detector_raises(self) -> None:
        with pytest.raises(TypeError, match="detector"):
            Driver(None)  # type: ignore[arg-type]

    def test_writes_graph_output(self, tmp_path: Path, classes_dir: Path) -> None:
        console, _ = make_console()
        output = tmp_path / "out.graphml"

        Driver(RecordingDetector(), console).run(make_arguments(classes_dir, output))

        assert output.read_text(encoding="utf-8") == "<graphml/>\n"

    def test_hands_classes_to_detector(self, tmp_path: Path, classes_dir: Path) -> None:
        detector = RecordingDetector()
        console, _ = make_console()
        arguments = make_arguments(
            classes_dir, tmp_path / "out.graphml", "com/example/", threshold=3
        )

        Driver(detector, console).run(arguments)

        (root, prefix, flags, classes), = detector.calls
        assert isinstance(root, DirectoryClasspathRoot)
        assert prefix == "com/example/"
        assert flags is arguments.flags
        assert classes == frozenset({"com.example.Foo"})

    def test_archive_input(self, tmp_path: Path) -> None:
        jar = write_jar(tmp_path / "app.jar", class_entries("com.example.Foo"))
        detector = RecordingDetector()
        console, _ = make_console()

        Driver(detector, console).run(make_arguments(jar, tmp_path / "out.graphml"))

        (root, _, _, classes), = detector.calls
        assert isinstance(root, ArchiveClasspathRoot)
        assert classes == frozenset({"com.example.Foo"})

    def test_quiet_by_default(self, tmp_path: Path, classes_dir: Path) -> None:
        console, buffer = make_console()

        Driver(RecordingDetector(), console).run(make_arguments(classes_dir, tmp_path / "out.xml"))

        assert buffer.getvalue() == ""

    def test_verbose_progress(self, tmp_path: Path, classes_dir: Path) -> None:
        console, buffer = make_console()

        Driver(RecordingDetector(), console).run(
            make_arguments(classes_dir, tmp_path / "out.xml", verbose=True)
        )

        lines = buffer.getvalue().splitlines()
        assert "Found: com.example.Foo" in lines
        assert "Found: com.other.Bar" in lines
        assert not any("Inner" in line for line in lines)
        assert lines[-2:] == ["Processing... done.", "Generating output graph... done."]

    def test_show_stats(self, tmp_path: Path, classes_dir: Path) -> None:
        console, buffer = make_console()

        Driver(RecordingDetector(), console).run(
            make_arguments(classes_dir, tmp_path / "out.xml", show_stats=True)
        )

        assert buffer.getvalue() == "\nSTATS verbose=True\n"

    def test_missing_input_writes_nothing(self, tmp_path: Path) -> None:
        detector = RecordingDetector()
        console, _ = make_console()
        output = tmp_path / "out.xml"

        with pytest.raises(ResourceAccessError):
            Driver(detector, console).run(make_arguments(tmp_path / "missing", output))

        assert detector.calls == []
        assert not output.exists()

    def test_missing_prefix_writes_nothing(self, tmp_path: Path, classes_dir: Path) -> None:
        detector = RecordingDetector()
        console, _ = make_console()
        output = tmp_path / "out.xml"

        with pytest.raises(ResourceAccessError):
            Driver(detector, console).run(make_arguments(classes_dir, output, "org/none/"))

        assert detector.calls == []
        assert not output.exists()

    def test_unwritable_output_after_detection(self, tmp_path: Path, classes_dir: Path) -> None:
        detector = RecordingDetector()
        console, _ = make_console()
        output = tmp_path / "no-such-dir" / "out.xml"

        with pytest.raises(OutputWriteError):
            Driver(detector, console).run(make_arguments(classes_dir, output, show_stats=True))

        assert len(detector.calls) == 1
        assert not output.exists()
