"""
Code-behind synthesis entry point.

This module exposes the one operation the core offers its host:
``synthesize(document_path) -> RenderedFile``. It derives the type name and
output path from the document path, builds the declaration tree and renders
it. Nothing here touches the filesystem; writing the result is up to the
caller.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from .codegen.builder import build_declarations
from .codegen.constants import GENERATED_FILE_SUFFIX, SOURCE_FILE_EXTENSION
from .codegen.renderer import BannerMeta, render_source
from .utils.exceptions import InvalidRequestError

PathLike = Union[str, "os.PathLike[str]"]


def document_type_name(document_path: str) -> str:
    """
    File name of ``document_path`` without its last extension.

    A path ending in a separator has no file name, and a file name made of
    an extension only (``.uxml``) has an empty stem.
    """
    file_name = os.path.basename(document_path)
    stem, dot, _ = file_name.rpartition(".")
    return stem if dot else file_name


@dataclass(frozen=True)
class SynthesisRequest:
    """Identity of the UI document a code-behind is generated for."""
    document_path: str

    @classmethod
    def from_path(cls, document_path: PathLike) -> "SynthesisRequest":
        """
        Create a request, rejecting paths that yield no type name.

        Raises:
            InvalidRequestError: If the document file name is empty
        """
        path = os.fspath(document_path)
        if not document_type_name(path).strip():
            raise InvalidRequestError(path, "document file name is empty")
        return cls(path)

    @property
    def type_name(self) -> str:
        return document_type_name(self.document_path)

    @property
    def output_path(self) -> str:
        file_name = f"{self.type_name}{GENERATED_FILE_SUFFIX}{SOURCE_FILE_EXTENSION}"
        return os.path.join(os.path.dirname(self.document_path), file_name)


@dataclass(frozen=True)
class RenderedFile:
    """Generated source text and the path it belongs at."""
    path: str
    text: str


def synthesize(document_path: PathLike, banner: Optional[BannerMeta] = None) -> RenderedFile:
    """
    Generate the code-behind for a UI document.

    Args:
        document_path: Path of the ``.uxml`` document
        banner: Tool name and version for the banner; defaults to Rosalina's own

    Returns:
        RenderedFile with the sibling ``<TypeName>.g.cs`` path and its text

    Raises:
        InvalidRequestError: If no type name can be derived from the path
    """
    return synthesize_request(SynthesisRequest.from_path(document_path), banner)


def synthesize_request(request: SynthesisRequest, banner: Optional[BannerMeta] = None) -> RenderedFile:
    """Build and render the code-behind for an already validated request."""
    unit = build_declarations(request)
    return RenderedFile(path=request.output_path, text=render_source(unit, banner))
