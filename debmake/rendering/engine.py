"""Template rendering engine."""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError

from ..core.errors import FilesystemError, TemplateRenderError
from ..core.models import RenderConfig, RenderTask, TemplateContext
from . import filters
from .io import write_text

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".j2"


def _debian_task(name: str, file_mode: int = 0o666) -> RenderTask:
    return RenderTask(
        template_name=name,
        output_path=Path("debian") / name,
        file_mode=file_mode,
    )


TEMPLATES: tuple[RenderTask, ...] = (
    _debian_task("changelog"),
    _debian_task("compat"),
    _debian_task("control"),
    _debian_task("copyright"),
    _debian_task("rules", 0o777),
    _debian_task("watch"),
)


@lru_cache(maxsize=1)
def create_environment() -> Environment:
    """Create the Jinja2 environment serving the bundled templates.

    Returns:
        Environment with the debmake filters and tests registered
    """
    env = Environment(
        loader=PackageLoader("debmake", "templates"),
        undefined=StrictUndefined,
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    return filters.register(env)


def default_config(dest_root: Path) -> RenderConfig:
    """Return a config rendering every bundled template under ``dest_root``."""
    return RenderConfig(tasks=list(TEMPLATES), dest_root=dest_root)


def render_template(name: str, context: Mapping[str, Any]) -> str:
    """Render a bundled template to text.

    Args:
        name: Template name (e.g. ``control``)
        context: Template context data

    Returns:
        Rendered text, possibly empty
    """
    env = create_environment()
    try:
        template = env.get_template(f"{name}{TEMPLATE_SUFFIX}")
        return template.render(**context)
    except TemplateError as exc:
        raise TemplateRenderError(name, str(exc)) from exc


def render_task(task: RenderTask, context: Mapping[str, Any], dest_root: Path) -> Path:
    """Render a single template task.

    Output is written even when the template renders to an empty string.

    Args:
        task: Render task to execute
        context: Template context data
        dest_root: Base directory for relative paths

    Returns:
        Output file path
    """
    logger.info(f"Generating {task.output_path.as_posix()}")

    rendered_text = render_template(task.template_name, context)

    output_path = dest_root / task.output_path
    try:
        write_text(output_path, rendered_text, mode=task.file_mode)
    except OSError as exc:
        raise FilesystemError(output_path, exc.strerror or str(exc)) from exc

    logger.debug(f"Rendered {task.template_name} → {output_path}")
    return output_path


def render_all(config: RenderConfig, context: TemplateContext) -> list[Path]:
    """Render all configured templates.

    Args:
        config: Render configuration
        context: Template context

    Returns:
        List of output file paths
    """
    logger.debug(f"Rendering {len(config.tasks)} template(s)")

    values = context.as_mapping()
    outputs = [render_task(task, values, config.dest_root) for task in config.tasks]

    logger.debug(f"Successfully rendered {len(outputs)} file(s)")
    return outputs
