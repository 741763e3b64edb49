"""
Template Rendering Engine.

This module provides template-based text generation using Jinja2 templates.
Rendering is strict: a template that refers to a missing variable fails
instead of silently producing an empty string.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError

from ...utils.exceptions import RosalinaError


class TemplateRenderer:
    """Jinja2-based template renderer for C# generation."""

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize the template renderer."""
        if template_dir is None:
            template_dir = os.path.join(os.path.dirname(__file__), "csharp")

        self._template_dir = Path(template_dir)
        self._env = Environment(
            loader=FileSystemLoader(str(self._template_dir)),
            undefined=StrictUndefined,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

        self._setup_custom_filters()

    @property
    def template_dir(self) -> Path:
        return self._template_dir

    def _setup_custom_filters(self) -> None:
        """Set up custom Jinja2 filters for C# generation."""

        def comment_filter(text: str, prefix: str = "// ") -> str:
            """Turn each line of text into a line comment."""
            return "\n".join(
                (prefix + line).rstrip() for line in text.splitlines()
            )

        self._env.filters["line_comment"] = comment_filter

    def render(self, template: str, context: Dict[str, Any]) -> str:
        """Render a template string with the given context."""
        try:
            template_obj = self._env.from_string(template)
            return template_obj.render(**context)
        except TemplateError as e:
            raise RosalinaError(f"Template rendering failed: {e}") from e

    def render_file(self, template_path: str, context: Dict[str, Any]) -> str:
        """Render a template file with the given context."""
        try:
            template = self._env.get_template(template_path)
            return template.render(**context)
        except TemplateError as e:
            raise RosalinaError(
                f"Template file rendering failed: {e}", {"template": template_path}
            ) from e

    def validate_template(self, template: str) -> List[str]:
        """Return the syntax errors of a template string (empty when valid)."""
        try:
            Template(template)
        except TemplateError as e:
            return [str(e)]
        return []

    def list_templates(self) -> List[str]:
        """List available template files."""
        return sorted(self._env.list_templates())


def create_template_renderer(template_dir: Optional[str] = None) -> TemplateRenderer:
    """Create a template renderer."""
    return TemplateRenderer(template_dir)
