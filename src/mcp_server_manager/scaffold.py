"""Server project scaffolding - expands the per-language templates."""

import logging
from pathlib import Path

from jinja2 import TemplateError

from mcp_server_manager.errors import ScaffoldFailed
from mcp_server_manager.models import Language
from mcp_server_manager.template_engine import (
    create_jinja_environment,
    get_template_context,
    render_path,
    render_template,
)

logger = logging.getLogger(__name__)

# (output path template, template name) per language
PROJECT_FILES: dict[Language, tuple[tuple[str, str], ...]] = {
    Language.TYPESCRIPT: (
        ("package.json", "typescript/package.json.j2"),
        ("tsconfig.json", "typescript/tsconfig.json.j2"),
        ("src/index.ts", "typescript/index.ts.j2"),
        (".gitignore", "typescript/gitignore.j2"),
        ("README.md", "typescript/README.md.j2"),
    ),
    Language.PYTHON: (
        ("requirements.txt", "python/requirements.txt.j2"),
        ("server.py", "python/server.py.j2"),
        (".gitignore", "python/gitignore.j2"),
        ("README.md", "python/README.md.j2"),
    ),
    Language.JAVA: (
        ("pom.xml", "java/pom.xml.j2"),
        (
            "src/main/java/{{ java.package }}/{{ java.class_name }}Server.java",
            "java/Server.java.j2",
        ),
        (".gitignore", "java/gitignore.j2"),
        ("README.md", "java/README.md.j2"),
    ),
}


class ServerScaffolder:
    """Writes a starter MCP server project for one language."""

    def __init__(self, name: str, language: Language, project_dir: Path) -> None:
        self.name = name
        self.language = language
        self.project_dir = project_dir
        self.env = create_jinja_environment()
        self.context = get_template_context(name, language, project_dir)

    def generate(self) -> list[Path]:
        """Render every template of the language into the project directory."""
        logger.info(f"Scaffolding {self.language.value} server '{self.name}' at {self.project_dir}")
        created = [
            self._create_file(path, template) for path, template in PROJECT_FILES[self.language]
        ]
        logger.info(f"Server project '{self.name}' scaffolded ({len(created)} files)")
        return created

    def _create_file(self, path_template: str, template_name: str) -> Path:
        full_path = self.project_dir / render_path(path_template, self.context)
        full_path.parent.mkdir(parents=True, exist_ok=True)
        content = render_template(self.env, template_name, self.context)
        full_path.write_text(content, encoding="utf-8")
        logger.debug(f"Created file: {full_path}")
        return full_path


def scaffold_project(name: str, language: Language, project_dir: Path) -> list[Path]:
    """Populate ``project_dir`` with a starter server.

    Raises:
        ScaffoldFailed: If a template cannot be rendered or a file written.
    """
    try:
        return ServerScaffolder(name, language, project_dir).generate()
    except (TemplateError, OSError) as e:
        raise ScaffoldFailed(f"Failed to create {language.value} project: {e}") from e
