from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from ..errors import XpmUnsupportedError

# language -> (opening line, closing line)
SNIPPET_WRAPPERS: Dict[str, Tuple[str, str]] = {
    "c": ("static char *xpm[] = {", "};"),
    "csharp": ("private static readonly string[] xpm = new string[] {", "};"),
    "vb": ("Private Shared ReadOnly xpm As String() = {", "}"),
}


def format_snippet(lines: Sequence[str], language: str) -> str:
    """Wrap XPM lines in a string array literal for the given source language."""
    wrapper = SNIPPET_WRAPPERS.get(language.lower())
    if wrapper is None:
        raise XpmUnsupportedError(f"Source language '{language}' is not supported.")
    opening, closing = wrapper
    out: List[str] = [opening]
    for index, line in enumerate(lines):
        separator = "," if index + 1 < len(lines) else ""
        out.append(f'\t"{line}"{separator}')
    out.append(closing)
    return "\n".join(out) + "\n"
