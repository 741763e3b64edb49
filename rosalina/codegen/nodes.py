"""
Syntax Tree Nodes for Generated C# Source.

This module defines the immutable tree that sits between the declaration
builder and the source renderer. Members form a tagged union (field,
property, method) so the renderer can dispatch on ``kind`` without knowing
how the tree was built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from ..utils.exceptions import MalformedTreeError


class Visibility(Enum):
    """Access modifier of a declaration."""
    PUBLIC = "public"
    PRIVATE = "private"


class MemberKind(Enum):
    """Variant tag of a type member."""
    FIELD = "field"
    PROPERTY = "property"
    METHOD = "method"


@dataclass(frozen=True)
class Attribute:
    """An attribute applied to a declaration, e.g. ``[SerializeField]``."""
    name: str


@dataclass(frozen=True)
class MemberAccess:
    """Member access expression; ``target?.member`` when null-conditional."""
    target: str
    member: str
    null_conditional: bool = False


Expression = MemberAccess


@dataclass(frozen=True)
class ReturnStatement:
    """``return <expression>;``"""
    expression: Expression


Statement = ReturnStatement


@dataclass(frozen=True)
class Block:
    """A braced statement list."""
    statements: Tuple[Statement, ...] = ()


@dataclass(frozen=True)
class FieldDeclaration:
    """A single-variable field declaration."""
    name: str
    type_name: str
    visibility: Visibility = Visibility.PRIVATE
    attributes: Tuple[Attribute, ...] = ()

    @property
    def kind(self) -> MemberKind:
        return MemberKind.FIELD


@dataclass(frozen=True)
class PropertyDeclaration:
    """A read-only property whose getter returns ``getter``."""
    name: str
    type_name: str
    getter: Expression
    visibility: Visibility = Visibility.PUBLIC

    @property
    def kind(self) -> MemberKind:
        return MemberKind.PROPERTY


@dataclass(frozen=True)
class MethodDeclaration:
    """A parameterless method with a block body."""
    name: str
    return_type: str = "void"
    visibility: Visibility = Visibility.PUBLIC
    parameters: Tuple[str, ...] = ()
    body: Block = Block()

    @property
    def kind(self) -> MemberKind:
        return MemberKind.METHOD


Member = Union[FieldDeclaration, PropertyDeclaration, MethodDeclaration]


@dataclass(frozen=True)
class TypeDeclaration:
    """A class declaration and its ordered members."""
    name: str
    base_type: str
    members: Tuple[Member, ...]
    visibility: Visibility = Visibility.PUBLIC
    is_partial: bool = True


@dataclass(frozen=True)
class CompilationUnit:
    """Root of the tree: using directives followed by type declarations."""
    imports: Tuple[str, ...]
    types: Tuple[TypeDeclaration, ...]


# Structural validation

def _member_type_name(member: Member) -> str:
    if member.kind is MemberKind.METHOD:
        return member.return_type
    return member.type_name


def validate_member(member: Member, owner: str) -> None:
    """Validate a member of type ``owner``."""
    if not member.name:
        raise MalformedTreeError(f"Member of type '{owner}' has no name", node=owner)
    if not _member_type_name(member):
        raise MalformedTreeError(
            f"Member '{member.name}' of type '{owner}' has no type", node=member.name
        )
    if member.kind is MemberKind.FIELD:
        for attribute in member.attributes:
            if not attribute.name:
                raise MalformedTreeError(
                    f"Field '{member.name}' has an unnamed attribute", node=member.name
                )


def validate_type_declaration(type_decl: TypeDeclaration) -> None:
    """Validate a TypeDeclaration object."""
    if not type_decl.name or not type_decl.name.strip():
        raise MalformedTreeError("Type declaration name cannot be empty")

    seen = set()
    for member in type_decl.members:
        validate_member(member, type_decl.name)
        if member.name in seen:
            raise MalformedTreeError(
                f"Duplicate member '{member.name}' in type '{type_decl.name}'",
                node=type_decl.name,
            )
        seen.add(member.name)


def validate_compilation_unit(unit: CompilationUnit) -> None:
    """Validate a CompilationUnit before rendering."""
    if not unit.types:
        raise MalformedTreeError("Compilation unit must declare at least one type")

    if any(not name for name in unit.imports):
        raise MalformedTreeError("Import names cannot be empty")
    if len(set(unit.imports)) != len(unit.imports):
        raise MalformedTreeError(f"Duplicate imports: {list(unit.imports)}")

    for type_decl in unit.types:
        validate_type_declaration(type_decl)
