"""Template engine for rendering server project files."""

import logging
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from mcp_server_manager.artifacts import TYPESCRIPT_ENTRY, normalize_module_name
from mcp_server_manager.models import Language
from mcp_server_manager.paths import default_registry_path

logger = logging.getLogger(__name__)

PROJECT_VERSION = "1.0.0"


def get_templates_dir() -> Path:
    """Get the directory containing built-in templates."""
    return Path(__file__).parent / "templates"


def create_jinja_environment() -> Environment:
    """Create a Jinja2 environment with the templates directory."""
    templates_dir = get_templates_dir()
    return Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(["html", "xml"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def java_package_name(name: str) -> str:
    """``My-Server`` -> ``myserver``."""
    return name.lower().replace("-", "")


def java_class_name(name: str) -> str:
    """``my-server`` -> ``MyServer``."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("-") if part)


def get_template_context(name: str, language: Language, project_dir: Path) -> dict[str, Any]:
    """Build the template context for a new server project."""
    jar_name = f"{name}-{PROJECT_VERSION}-jar-with-dependencies.jar"

    return {
        "project": {
            "name": name,
            "version": PROJECT_VERSION,
            "language": language.value,
            "module_name": normalize_module_name(name),
            "dir": str(project_dir),
        },
        "java": {
            "package": java_package_name(name),
            "class_name": java_class_name(name),
            "jar_name": jar_name,
            "jar_path": str(project_dir / "target" / jar_name),
        },
        "typescript": {
            "entry_path": str(project_dir / TYPESCRIPT_ENTRY),
        },
        "registry_path": str(default_registry_path()),
    }


def render_template(env: Environment, template_name: str, context: dict[str, Any]) -> str:
    """Render a template with the given context."""
    template = env.get_template(template_name)
    return template.render(**context)


def render_path(path_template: str, context: dict[str, Any]) -> str:
    """Render a path template (e.g., 'src/main/java/{{ java.package }}')."""
    env = Environment(undefined=StrictUndefined)
    template = env.from_string(path_template)
    return template.render(**context)
