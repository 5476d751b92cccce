"""Tests for project scaffolding."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from jinja2 import TemplateError

from mcp_server_manager.detector import detect
from mcp_server_manager.errors import ScaffoldFailed
from mcp_server_manager.models import Language, ProjectKind
from mcp_server_manager.scaffold import scaffold_project
from mcp_server_manager.template_engine import java_class_name, java_package_name


class TestTypeScriptScaffold:
    def test_creates_project_files(self, tmp_path: Path) -> None:
        project = tmp_path / "weather-server"
        project.mkdir()

        scaffold_project("weather-server", Language.TYPESCRIPT, project)

        package = json.loads((project / "package.json").read_text())
        assert package["name"] == "weather-server"
        assert package["scripts"]["build"] == "tsc"
        assert package["type"] == "module"

        tsconfig = json.loads((project / "tsconfig.json").read_text())
        assert tsconfig["compilerOptions"]["outDir"] == "./build"

        index = (project / "src" / "index.ts").read_text()
        assert 'name: "weather-server"' in index
        assert "${name}" in index

    def test_readme_shows_registry_entry(self, tmp_path: Path) -> None:
        project = tmp_path / "weather-server"
        project.mkdir()

        scaffold_project("weather-server", Language.TYPESCRIPT, project)

        readme = (project / "README.md").read_text()
        assert str(project / "build" / "index.js") in readme


class TestPythonScaffold:
    def test_creates_server_script(self, tmp_path: Path) -> None:
        project = tmp_path / "weather-server"
        project.mkdir()

        created = scaffold_project("weather-server", Language.PYTHON, project)

        assert project / "server.py" in created
        server = (project / "server.py").read_text()
        assert 'FastMCP("weather_server")' in server
        assert 'return f"Hello, {name}!"' in server
        assert (project / "requirements.txt").read_text().strip() == "mcp[cli]"


class TestJavaScaffold:
    def test_creates_maven_project(self, tmp_path: Path) -> None:
        project = tmp_path / "weather-server"
        project.mkdir()

        scaffold_project("weather-server", Language.JAVA, project)

        source = project / "src" / "main" / "java" / "weatherserver" / "WeatherServerServer.java"
        assert source.exists()
        assert source.read_text().startswith("package weatherserver;")

        pom = (project / "pom.xml").read_text()
        assert "<artifactId>weather-server</artifactId>" in pom
        assert "<mainClass>weatherserver.WeatherServerServer</mainClass>" in pom
        assert "jar-with-dependencies" in pom

    @pytest.mark.parametrize(
        ("name", "package", "class_name"),
        [
            ("my-server", "myserver", "MyServer"),
            ("Weather-API-server", "weatherapiserver", "WeatherAPIServer"),
            ("single", "single", "Single"),
        ],
    )
    def test_java_names(self, name: str, package: str, class_name: str) -> None:
        assert java_package_name(name) == package
        assert java_class_name(name) == class_name


class TestScaffoldedProjectsAreDetected:
    @pytest.mark.parametrize(
        ("language", "kind"),
        [
            (Language.TYPESCRIPT, ProjectKind.TYPESCRIPT),
            (Language.PYTHON, ProjectKind.PYTHON),
            (Language.JAVA, ProjectKind.JAVA),
        ],
    )
    def test_detects_own_output(
        self, tmp_path: Path, language: Language, kind: ProjectKind
    ) -> None:
        project = tmp_path / "demo"
        project.mkdir()

        scaffold_project("demo", language, project)

        assert detect(project) == kind


class TestScaffoldFailures:
    def test_template_error_becomes_scaffold_failed(self, tmp_path: Path) -> None:
        project = tmp_path / "demo"
        project.mkdir()

        with (
            patch(
                "mcp_server_manager.scaffold.render_template",
                side_effect=TemplateError("bad template"),
            ),
            pytest.raises(ScaffoldFailed, match="bad template"),
        ):
            scaffold_project("demo", Language.PYTHON, project)

    def test_unwritable_target_becomes_scaffold_failed(self, tmp_path: Path) -> None:
        blocker = tmp_path / "demo"
        blocker.write_text("a file, not a directory")

        with pytest.raises(ScaffoldFailed):
            scaffold_project("demo", Language.PYTHON, blocker)
