"""Tests for project-type detection."""

from collections.abc import Callable
from pathlib import Path

import pytest

from mcp_server_manager.detector import DETECTION_RULES, detect
from mcp_server_manager.errors import DirectoryNotFound, UnrecognizedProjectKind
from mcp_server_manager.models import ProjectKind


class TestSingleMarker:
    """Each marker on its own selects its kind."""

    @pytest.mark.parametrize(
        ("marker", "expected"),
        [
            ("package.json", ProjectKind.TYPESCRIPT),
            ("requirements.txt", ProjectKind.PYTHON),
            ("pyproject.toml", ProjectKind.PYTHON),
            ("server.py", ProjectKind.PYTHON),
            ("pom.xml", ProjectKind.JAVA),
            ("build.gradle", ProjectKind.JAVA),
            ("build.gradle.kts", ProjectKind.JAVA),
        ],
    )
    def test_marker_file(
        self, make_project: Callable[..., Path], marker: str, expected: ProjectKind
    ) -> None:
        project = make_project(files=[marker])
        assert detect(project) == expected

    @pytest.mark.parametrize("output_dir", ["target", "build/libs"])
    def test_jvm_output_directory(
        self, make_project: Callable[..., Path], output_dir: str
    ) -> None:
        project = make_project(dirs=[output_dir])
        assert detect(project) == ProjectKind.JAVA

    def test_build_dir_without_libs_is_not_jvm(self, make_project: Callable[..., Path]) -> None:
        project = make_project(dirs=["build"])
        with pytest.raises(UnrecognizedProjectKind):
            detect(project)

    def test_marker_as_directory_name_is_ignored_for_files(
        self, make_project: Callable[..., Path]
    ) -> None:
        # A file named "target" is not a Maven output directory.
        project = make_project(files=["target"])
        with pytest.raises(UnrecognizedProjectKind):
            detect(project)


class TestPriority:
    """The first matching rule wins."""

    def test_typescript_beats_java(self, make_project: Callable[..., Path]) -> None:
        project = make_project(files=["package.json", "pom.xml"])
        assert detect(project) == ProjectKind.TYPESCRIPT

    def test_typescript_beats_python(self, make_project: Callable[..., Path]) -> None:
        project = make_project(files=["package.json", "server.py"])
        assert detect(project) == ProjectKind.TYPESCRIPT

    def test_python_beats_java(self, make_project: Callable[..., Path]) -> None:
        project = make_project(files=["requirements.txt"], dirs=["target"])
        assert detect(project) == ProjectKind.PYTHON

    def test_rule_order(self) -> None:
        assert [rule.kind for rule in DETECTION_RULES] == [
            ProjectKind.TYPESCRIPT,
            ProjectKind.PYTHON,
            ProjectKind.JAVA,
        ]


class TestFailures:
    """Detection failures."""

    def test_empty_directory(self, make_project: Callable[..., Path]) -> None:
        project = make_project()
        with pytest.raises(UnrecognizedProjectKind, match="Unable to determine project type"):
            detect(project)

    def test_unrelated_files(self, make_project: Callable[..., Path]) -> None:
        project = make_project(files=["README.md", "main.go"])
        with pytest.raises(UnrecognizedProjectKind):
            detect(project)

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(DirectoryNotFound):
            detect(tmp_path / "nope")

    def test_file_instead_of_directory(self, tmp_path: Path) -> None:
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")
        with pytest.raises(DirectoryNotFound):
            detect(file_path)

    def test_contents_are_not_read(self, make_project: Callable[..., Path]) -> None:
        project = make_project(files=["package.json"])
        (project / "package.json").write_text("{ not json")
        assert detect(project) == ProjectKind.TYPESCRIPT
