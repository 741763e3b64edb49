"""
Codegen module for UI document code-behind generation.

This module provides the two-stage pipeline that turns a document identity
into C# source:
- builder.py: fixed code-shape policy producing a syntax tree
- nodes.py: immutable tagged-variant syntax tree and validation
- renderer.py: deterministic C# serializer with the auto-generated banner
- formatting.py: canonical whitespace normalization
- templates/: Jinja2 templates (banner)
"""

from .nodes import (
    Attribute,
    Block,
    CompilationUnit,
    FieldDeclaration,
    Member,
    MemberAccess,
    MemberKind,
    MethodDeclaration,
    PropertyDeclaration,
    ReturnStatement,
    TypeDeclaration,
    Visibility,
    validate_compilation_unit,
)
from .builder import DeclarationBuilder, build_declarations, collect_imports
from .renderer import BannerMeta, CSharpWriter, SourceRenderer, render_source
from .formatting import normalize_whitespace

__all__ = [
    # Syntax tree
    "Attribute",
    "Block",
    "CompilationUnit",
    "FieldDeclaration",
    "Member",
    "MemberAccess",
    "MemberKind",
    "MethodDeclaration",
    "PropertyDeclaration",
    "ReturnStatement",
    "TypeDeclaration",
    "Visibility",
    "validate_compilation_unit",
    # Builder
    "DeclarationBuilder",
    "build_declarations",
    "collect_imports",
    # Renderer
    "BannerMeta",
    "CSharpWriter",
    "SourceRenderer",
    "render_source",
    "normalize_whitespace",
]
