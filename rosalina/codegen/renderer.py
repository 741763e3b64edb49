"""
Source Renderer for C# Code-Behind Files.

This module serializes a CompilationUnit into C# text. The writer emits
Allman-style braces with one member per paragraph; the result then goes
through the canonical whitespace pass and gets the auto-generated banner
prepended. Same tree and same banner always give byte-identical text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .constants import DEFAULT_TOOL_NAME, INDENT
from .formatting import normalize_whitespace
from .nodes import (
    Block,
    CompilationUnit,
    Expression,
    FieldDeclaration,
    Member,
    MemberAccess,
    MemberKind,
    MethodDeclaration,
    PropertyDeclaration,
    ReturnStatement,
    TypeDeclaration,
    validate_compilation_unit,
)
from .templates import TemplateRenderer, create_template_renderer

BANNER_TEMPLATE = "banner.cs.j2"


@dataclass(frozen=True)
class BannerMeta:
    """Tool identity written into the auto-generated banner."""
    tool_name: str
    version: str

    def __post_init__(self):
        """Validate the banner metadata."""
        if not self.tool_name or not self.tool_name.strip():
            raise ValueError("Banner tool name cannot be empty")
        if not self.version or not self.version.strip():
            raise ValueError("Banner version cannot be empty")

    @classmethod
    def default(cls) -> "BannerMeta":
        """Banner for this installation of Rosalina."""
        from .. import __version__

        return cls(tool_name=DEFAULT_TOOL_NAME, version=__version__)


class CSharpWriter:
    """
    Line-oriented C# writer.

    Tracks the indentation level and collects lines; blank lines are
    recorded as empty strings and tidied up by the whitespace pass.
    """

    def __init__(self, indent_str: str = INDENT):
        self._indent_str = indent_str
        self._lines: List[str] = []
        self._indent_level = 0

    def line(self, text: str = "") -> "CSharpWriter":
        """Add a line at the current indentation."""
        if text:
            self._lines.append(self._indent_str * self._indent_level + text)
        else:
            self._lines.append("")
        return self

    def open_block(self) -> "CSharpWriter":
        self.line("{")
        self._indent_level += 1
        return self

    def close_block(self) -> "CSharpWriter":
        self._indent_level -= 1
        self.line("}")
        return self

    def get_code(self) -> str:
        return "\n".join(self._lines)


def render_expression(expression: Expression) -> str:
    """Render an expression node."""
    if isinstance(expression, MemberAccess):
        operator = "?." if expression.null_conditional else "."
        return f"{expression.target}{operator}{expression.member}"
    raise TypeError(f"Unsupported expression node: {type(expression).__name__}")


class SourceRenderer:
    """Renders compilation units to canonical C# text."""

    def __init__(self, template_renderer: Optional[TemplateRenderer] = None):
        """Initialize the renderer with a template renderer for the banner."""
        self._template_renderer = template_renderer or create_template_renderer()
        self._member_writers: Dict[MemberKind, Callable[[CSharpWriter, Member], None]] = {
            MemberKind.FIELD: self._write_field,
            MemberKind.PROPERTY: self._write_property,
            MemberKind.METHOD: self._write_method,
        }

    def render(self, unit: CompilationUnit, banner: Optional[BannerMeta] = None) -> str:
        """
        Render ``unit`` to source text with the banner on top.

        Raises:
            MalformedTreeError: If the tree fails structural validation
        """
        validate_compilation_unit(unit)
        body = self.render_body(unit)
        return self.render_banner(banner or BannerMeta.default()) + "\n" + body

    def render_banner(self, banner: BannerMeta) -> str:
        """Render the auto-generated banner block."""
        text = self._template_renderer.render_file(
            BANNER_TEMPLATE,
            {"tool_name": banner.tool_name, "version": banner.version},
        )
        return normalize_whitespace(text)

    def render_body(self, unit: CompilationUnit) -> str:
        """Render using directives and type declarations, normalized."""
        writer = CSharpWriter()

        for name in unit.imports:
            writer.line(f"using {name};")
        writer.line()

        for type_decl in unit.types:
            self._write_type(writer, type_decl)
            writer.line()

        return normalize_whitespace(writer.get_code())

    def _write_type(self, writer: CSharpWriter, type_decl: TypeDeclaration) -> None:
        modifiers = [type_decl.visibility.value]
        if type_decl.is_partial:
            modifiers.append("partial")
        header = f"{' '.join(modifiers)} class {type_decl.name}"
        if type_decl.base_type:
            header += f" : {type_decl.base_type}"

        writer.line(header)
        writer.open_block()
        for member in type_decl.members:
            self._member_writers[member.kind](writer, member)
            writer.line()
        writer.close_block()

    def _write_field(self, writer: CSharpWriter, field: FieldDeclaration) -> None:
        for attribute in field.attributes:
            writer.line(f"[{attribute.name}]")
        writer.line(f"{field.visibility.value} {field.type_name} {field.name};")

    def _write_property(self, writer: CSharpWriter, prop: PropertyDeclaration) -> None:
        writer.line(f"{prop.visibility.value} {prop.type_name} {prop.name}")
        writer.open_block()
        writer.line("get")
        self._write_block(writer, Block((ReturnStatement(prop.getter),)))
        writer.close_block()

    def _write_method(self, writer: CSharpWriter, method: MethodDeclaration) -> None:
        params = ", ".join(method.parameters)
        writer.line(f"{method.visibility.value} {method.return_type} {method.name}({params})")
        self._write_block(writer, method.body)

    def _write_block(self, writer: CSharpWriter, block: Block) -> None:
        writer.open_block()
        for statement in block.statements:
            if isinstance(statement, ReturnStatement):
                writer.line(f"return {render_expression(statement.expression)};")
            else:
                raise TypeError(f"Unsupported statement node: {type(statement).__name__}")
        writer.close_block()


_default_renderer: Optional[SourceRenderer] = None


def render_source(unit: CompilationUnit, banner: Optional[BannerMeta] = None) -> str:
    """Render ``unit`` with a shared SourceRenderer."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = SourceRenderer()
    return _default_renderer.render(unit, banner)
