"""
Whitespace Normalization for Generated Source.

This module provides the canonical formatting pass applied to every
rendered file. Running it twice gives the same text as running it once.
"""

from __future__ import annotations

from typing import List

from .constants import INDENT, LINE_ENDING, TAB_WIDTH


def indent_text(text: str, level: int = 1, indent_str: str = INDENT) -> str:
    """
    Indent text by the specified level.

    Args:
        text: Text to indent
        level: Indentation level (number of indent_str to prepend)
        indent_str: String to use for each indentation level

    Returns:
        Indented text; blank lines stay empty
    """
    if not text:
        return text

    indent = indent_str * level
    lines = text.split("\n")
    return "\n".join(f"{indent}{line}" if line.strip() else line for line in lines)


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def normalize_whitespace(text: str) -> str:
    """
    Bring source text into canonical form.

    - LF line endings and no tabs
    - no trailing whitespace
    - at most one consecutive blank line
    - no blank line directly after ``{`` or directly before ``}``
    - no leading or trailing blank lines, one final newline

    Args:
        text: Source text

    Returns:
        Normalized text, or an empty string when ``text`` has no content
    """
    lines = [
        line.expandtabs(TAB_WIDTH).rstrip()
        for line in normalize_line_endings(text).split("\n")
    ]

    result: List[str] = []
    pending_blank = False
    for line in lines:
        if not line:
            pending_blank = True
            continue
        if pending_blank and result:
            opens_block = result[-1].endswith("{")
            closes_block = line.strip().startswith("}")
            if not (opens_block or closes_block):
                result.append("")
        pending_blank = False
        result.append(line)

    if not result:
        return ""
    return LINE_ENDING.join(result) + LINE_ENDING
