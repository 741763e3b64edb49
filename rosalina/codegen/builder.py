"""
Declaration Builder for UI Document Code-Behind.

This module turns a synthesis request into a CompilationUnit. The shape of
the generated class is fixed: a serialized document field, a ``Root``
property and an empty ``InitializeDocument`` hook, in that order. Building
is pure: no I/O and no logging.
"""

from __future__ import annotations

from typing import Iterable, List, Tuple, TYPE_CHECKING

from .constants import (
    CANONICAL_IMPORT_ORDER,
    DOCUMENT_FIELD_NAME,
    DOCUMENT_HOST_BASE_TYPE,
    DOCUMENT_TYPE,
    INITIALIZE_METHOD_NAME,
    ROOT_PROPERTY_NAME,
    ROOT_VISUAL_ELEMENT_MEMBER,
    SERIALIZE_FIELD_ATTRIBUTE,
    TYPE_NAMESPACES,
    VISUAL_ELEMENT_TYPE,
    VOID_TYPE,
)
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
    TypeDeclaration,
    Visibility,
)

if TYPE_CHECKING:
    from ..synthesis import SynthesisRequest


class DeclarationBuilder:
    """
    Builds the code-behind declaration tree for a UI document.

    The builder holds no state between calls, so one instance can serve any
    number of requests, concurrently or not.
    """

    def build(self, request: "SynthesisRequest") -> CompilationUnit:
        """Build the compilation unit for ``request``."""
        type_decl = TypeDeclaration(
            name=request.type_name,
            base_type=DOCUMENT_HOST_BASE_TYPE,
            members=(
                self.create_document_field(),
                self.create_root_property(),
                self.create_initialize_method(),
            ),
            visibility=Visibility.PUBLIC,
            is_partial=True,
        )
        return CompilationUnit(
            imports=collect_imports([type_decl.base_type, *referenced_types(type_decl.members)]),
            types=(type_decl,),
        )

    def create_document_field(self) -> FieldDeclaration:
        """``[SerializeField] private UIDocument _document;``"""
        return FieldDeclaration(
            name=DOCUMENT_FIELD_NAME,
            type_name=DOCUMENT_TYPE,
            visibility=Visibility.PRIVATE,
            attributes=(Attribute(SERIALIZE_FIELD_ATTRIBUTE),),
        )

    def create_root_property(self) -> PropertyDeclaration:
        """``public VisualElement Root`` returning ``_document?.rootVisualElement``."""
        return PropertyDeclaration(
            name=ROOT_PROPERTY_NAME,
            type_name=VISUAL_ELEMENT_TYPE,
            getter=MemberAccess(
                target=DOCUMENT_FIELD_NAME,
                member=ROOT_VISUAL_ELEMENT_MEMBER,
                null_conditional=True,
            ),
            visibility=Visibility.PUBLIC,
        )

    def create_initialize_method(self) -> MethodDeclaration:
        """``public void InitializeDocument() { }``"""
        return MethodDeclaration(
            name=INITIALIZE_METHOD_NAME,
            return_type=VOID_TYPE,
            visibility=Visibility.PUBLIC,
            body=Block(),
        )


def referenced_types(members: Iterable[Member]) -> List[str]:
    """Type and attribute names referenced by ``members``, in member order."""
    names: List[str] = []
    for member in members:
        if member.kind is MemberKind.FIELD:
            names.extend(attribute.name for attribute in member.attributes)
            names.append(member.type_name)
        elif member.kind is MemberKind.PROPERTY:
            names.append(member.type_name)
        else:
            names.append(member.return_type)
    return names


def collect_imports(type_names: Iterable[str]) -> Tuple[str, ...]:
    """
    Map type names to the namespaces they need.

    Unknown names (``void``, the generated type itself) need no import. The
    result is deduplicated and sorted by CANONICAL_IMPORT_ORDER, so it does
    not depend on the order the names were seen in.
    """
    namespaces = {TYPE_NAMESPACES[name] for name in type_names if name in TYPE_NAMESPACES}
    return tuple(ns for ns in CANONICAL_IMPORT_ORDER if ns in namespaces)


_default_builder = DeclarationBuilder()


def build_declarations(request: "SynthesisRequest") -> CompilationUnit:
    """Build the declaration tree for ``request`` with the default builder."""
    return _default_builder.build(request)
