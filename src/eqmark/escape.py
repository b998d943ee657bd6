"""Escaping for each target format, with inline ``$...$`` math kept apart."""

from __future__ import annotations

import html
import re
from collections.abc import Callable

_LATEX_SPECIALS = {
    "\\": "\\textbackslash{}",
    "{": "\\{",
    "}": "\\}",
    "$": "\\$",
    "&": "\\&",
    "%": "\\%",
    "#": "\\#",
    "_": "\\_",
    "~": "\\textasciitilde{}",
    "^": "\\textasciicircum{}",
}

# A source ``\$`` is already an escaped dollar and stays one.
_ESCAPED_DOLLAR = "\\$"
_LATEX_RE = re.compile(r"\\\$|[\\{}$&%#_~^]")
_TYPST_RE = re.compile(r"\\\$|[\\#*_\[\]`$]")


def escape_html(text: str) -> str:
    return html.escape(text, quote=True)


def escape_latex(text: str) -> str:
    def replace(match: re.Match[str]) -> str:
        special = match.group()
        return special if special == _ESCAPED_DOLLAR else _LATEX_SPECIALS[special]

    return _LATEX_RE.sub(replace, text)


def escape_typst(text: str) -> str:
    def replace(match: re.Match[str]) -> str:
        special = match.group()
        return special if special == _ESCAPED_DOLLAR else "\\" + special

    return _TYPST_RE.sub(replace, text)


def escape_preserving_math(
    text: str,
    escaper: Callable[[str], str],
    math_formatter: Callable[[str], str] | None = None,
) -> str:
    """Escape ``text`` outside inline math spans.

    A ``$`` not preceded by a backslash opens or closes a math span. Math content
    goes to ``math_formatter``, which produces the full output for the span,
    delimiters included; without one the span is kept byte for byte. An unclosed
    ``$`` is escaped as ordinary text.
    """
    parts: list[str] = []
    text_start = 0
    math_start = -1
    for i, char in enumerate(text):
        if char != "$" or (i > 0 and text[i - 1] == "\\"):
            continue
        if math_start == -1:
            parts.append(escaper(text[text_start:i]))
            math_start = i
        else:
            math = text[math_start + 1:i]
            parts.append(math_formatter(math) if math_formatter else f"${math}$")
            math_start = -1
            text_start = i + 1

    if math_start != -1:
        parts.append(escaper(text[math_start:]))
    else:
        parts.append(escaper(text[text_start:]))
    return "".join(parts)
