"""
Template Rendering System.

This module provides template-based text generation using Jinja2 templates.
It includes:
- TemplateRenderer: Main template rendering engine
- csharp/: templates for generated C# files (the auto-generated banner)
"""

from .renderer import (
    TemplateRenderer,
    create_template_renderer,
)

__all__ = [
    "TemplateRenderer",
    "create_template_renderer",
]
