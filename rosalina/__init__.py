"""
Rosalina: UI document code-behind generator for Unity.

Rosalina reads the identity of a UI Toolkit document (a ``.uxml`` file) and
produces a partial C# class that exposes the document, its root visual
element and an initialization hook.

Key Features:
- Explicit syntax tree built from a fixed code-shape policy
- Deterministic, whitespace-normalized C# rendering
- Immutable auto-generated banner carrying the tool version
- Thin host layer for logging, progress and atomic file writes

Usage:
    import rosalina

    rendered = rosalina.synthesize("Assets/UI/MainMenu.uxml")
    print(rendered.path)   # Assets/UI/MainMenu.g.cs
    print(rendered.text)
"""

__version__ = "1.0.0"
__author__ = "Rosalina Team"
__email__ = "rosalina@example.com"

# Public API exports
from .synthesis import (
    SynthesisRequest,
    RenderedFile,
    synthesize,
    synthesize_request,
)

from .codegen import (
    BannerMeta,
    DeclarationBuilder,
    SourceRenderer,
)

from .generator import CodeBehindGenerator

__all__ = [
    "SynthesisRequest",
    "RenderedFile",
    "synthesize",
    "synthesize_request",
    "BannerMeta",
    "DeclarationBuilder",
    "SourceRenderer",
    "CodeBehindGenerator",
]
