"""Render ParsedContent into a Typst document.

Colors are bound once as ``#let termX = rgb("...")`` and referenced by name. The
math converter knows nothing about those names, so its output is post-processed to
swap color literals for the variables.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from eqmark.colors import ColorScheme, color_for, term_colors
from eqmark.errors import UnknownTermError
from eqmark.escape import escape_preserving_math, escape_typst
from eqmark.math.typst_converter import MathConverter, convert_math_notation
from eqmark.parser.base import ParsedContent, TaggedSpan
from eqmark.parser.spans import transform_description_spans, transform_tagged_spans

from .base import TEMPLATE_DIR, document_title, exported_definitions, make_environment

logger = logging.getLogger(__name__)


def typst_variable(term: str) -> str:
    return f"term{term}"


def replace_color_literals(text: str, colors: dict[str, str], *, bare_hex: bool = False) -> str:
    """Swap ``rgb("#hex")`` (and optionally bare ``#hex``) literals for term variables.

    Terms sharing a color all resolve to the first such term's variable.
    """
    for term, color in colors.items():
        digits = re.escape(color.lstrip("#"))
        variable = typst_variable(term)
        text = re.sub(rf'rgb\("#{digits}"\)', variable, text, flags=re.IGNORECASE)
        if bare_hex:
            text = re.sub(rf"#{digits}(?![0-9a-fA-F])", variable, text, flags=re.IGNORECASE)
    return text


class TypstRenderer:
    template_name = "document.typ"

    def __init__(self, template_dir: Path | None = None, math_converter: MathConverter | None = None) -> None:
        self._env = make_environment(template_dir or TEMPLATE_DIR)
        self.convert_math = math_converter or convert_math_notation

    def render(self, content: ParsedContent, scheme: ColorScheme) -> str:
        logger.debug("Rendering Typst for %r with scheme %r", content.title, scheme.name)
        colors = term_colors(content.term_order, scheme)

        definitions = [
            {
                "variable": typst_variable(term),
                "name": escape_typst(term),
                "body": self._escape_text(body),
            }
            for term, body in exported_definitions(content, "typst")
        ]

        template = self._env.get_template(self.template_name)
        return template.render(
            title=escape_typst(document_title(content)),
            color_definitions=[(typst_variable(term), color) for term, color in colors.items()],
            equation=self._convert_equation(content, scheme, colors),
            description=self._convert_description(content, scheme, colors),
            definitions=definitions,
        )

    def _escape_text(self, text: str) -> str:
        return escape_preserving_math(text, escape_typst, lambda math: f"${self.convert_math(math)}$")

    def _convert_equation(self, content: ParsedContent, scheme: ColorScheme, colors: dict[str, str]) -> str:
        def rewrite(span: TaggedSpan) -> str:
            inner = transform_tagged_spans(span.content, rewrite)
            try:
                color = color_for(span.term, content.term_order, scheme)
            except UnknownTermError:
                # Best effort: the conversion keeps going with the span uncolored.
                logger.debug("Leaving unknown term %r uncolored in Typst equation", span.term)
                return inner
            return f"\\textcolor{{{color}}}{{{inner}}}"

        converted = self.convert_math(transform_tagged_spans(content.equation, rewrite))
        return replace_color_literals(converted, colors, bare_hex=True)

    def _convert_description(self, content: ParsedContent, scheme: ColorScheme, colors: dict[str, str]) -> str:
        def render_span(term: str, text: str) -> str:
            color = color_for(term, content.term_order, scheme)
            return f'#text(fill: rgb("{color}"))[{self._escape_text(text)}]'

        converted = transform_description_spans(content.description, self._escape_text, render_span).strip()
        return replace_color_literals(converted, colors)
