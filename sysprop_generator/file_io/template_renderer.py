"""Template rendering utilities for consistent Jinja2 rendering across the generators."""

from __future__ import annotations

import os

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ..config import generator_config
from ..exceptions import GenerationError


def _get_template_directories() -> list[str]:
    """Resolve template search paths.

    A configured override directory is searched before the bundled templates.
    """

    # Base dir is .../sysprop_generator/file_io
    base_dir = os.path.dirname(os.path.abspath(__file__))
    core_template_dir = os.path.abspath(os.path.join(base_dir, "../templates"))

    template_dirs: list[str] = []

    if generator_config.template_dir and os.path.isdir(generator_config.template_dir):
        template_dirs.append(generator_config.template_dir)

    if os.path.exists(core_template_dir):
        template_dirs.append(core_template_dir)

    return template_dirs


def c_string_filter(value) -> str:
    """Jinja2 filter to escape a value for a C/C++/Java/Rust string literal."""

    return str(value).replace("\\", "\\\\").replace('"', '\\"')


class TemplateRenderer:
    """Unified template rendering utility."""

    def __init__(self, template_dir: str | list[str] | None = None):
        if template_dir is None:
            template_dirs = _get_template_directories()
        elif isinstance(template_dir, str):
            template_dirs = [template_dir]
        else:
            template_dirs = list(template_dir)

        self.template_dirs = template_dirs
        self.env = Environment(
            loader=FileSystemLoader(self.template_dirs),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            newline_sequence="\n",
            autoescape=False,
            undefined=StrictUndefined,
        )
        self.env.filters["c_string"] = c_string_filter

    def render_template(self, template_name: str, **kwargs) -> str:
        """Render a template by name.

        Raises:
            GenerationError: If the template is missing or references an undefined field
        """
        try:
            template = self.env.get_template(template_name)
            return template.render(**kwargs)
        except TemplateError as exc:
            raise GenerationError(f"Rendering template {template_name} failed: {exc}") from exc
