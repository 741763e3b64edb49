"""
Code-Shape Constants for Rosalina Code Generation.

This module defines every name the generated code-behind refers to. The
generation policy is fixed: names come from these constants rather than from
a live type system, so a generator run needs nothing but a document path.
"""

from __future__ import annotations

from typing import Dict, Tuple


# =============================================================================
# Namespaces
# =============================================================================

UNITY_ENGINE_NAMESPACE = "UnityEngine"
UI_ELEMENTS_NAMESPACE = "UnityEngine.UIElements"

# Order in which using directives are written, independent of member order
CANONICAL_IMPORT_ORDER: Tuple[str, ...] = (
    UNITY_ENGINE_NAMESPACE,
    UI_ELEMENTS_NAMESPACE,
)


# =============================================================================
# Type Names
# =============================================================================

DOCUMENT_HOST_BASE_TYPE = "MonoBehaviour"
DOCUMENT_TYPE = "UIDocument"
VISUAL_ELEMENT_TYPE = "VisualElement"
SERIALIZE_FIELD_ATTRIBUTE = "SerializeField"
VOID_TYPE = "void"

# Namespace that must be imported for each referenced type name
TYPE_NAMESPACES: Dict[str, str] = {
    DOCUMENT_HOST_BASE_TYPE: UNITY_ENGINE_NAMESPACE,
    SERIALIZE_FIELD_ATTRIBUTE: UNITY_ENGINE_NAMESPACE,
    DOCUMENT_TYPE: UI_ELEMENTS_NAMESPACE,
    VISUAL_ELEMENT_TYPE: UI_ELEMENTS_NAMESPACE,
}


# =============================================================================
# Member Names
# =============================================================================

DOCUMENT_FIELD_NAME = "_document"
ROOT_PROPERTY_NAME = "Root"
ROOT_VISUAL_ELEMENT_MEMBER = "rootVisualElement"
INITIALIZE_METHOD_NAME = "InitializeDocument"


# =============================================================================
# Files and Formatting
# =============================================================================

UI_DOCUMENT_EXTENSION = ".uxml"
GENERATED_FILE_SUFFIX = ".g"
SOURCE_FILE_EXTENSION = ".cs"

INDENT = "    "
TAB_WIDTH = 4
LINE_ENDING = "\n"

DEFAULT_TOOL_NAME = "Rosalina Code Generator"
