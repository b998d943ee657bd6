"""Render ParsedContent into a self-contained interactive HTML page."""

from __future__ import annotations

import logging
from pathlib import Path

from eqmark.colors import ColorScheme, color_for, term_colors
from eqmark.escape import escape_html, escape_preserving_math
from eqmark.math.renderer import KaTeXMarkupRenderer, MathRenderer
from eqmark.parser.base import ParsedContent, TaggedSpan, equation_span
from eqmark.parser.spans import transform_description_spans, transform_tagged_spans

from .base import TEMPLATE_DIR, document_title, exported_definitions, make_environment

logger = logging.getLogger(__name__)


class HTMLRenderer:
    """Render parsed content into the interactive HTML template.

    Term colors live in CSS custom properties (``--term-X``); every element of a
    term carries the ``term-X`` class so the page script can highlight them together.
    """

    def __init__(self, template_path: Path | None = None, math_renderer: MathRenderer | None = None) -> None:
        if template_path is None:
            template_path = TEMPLATE_DIR / "document.html"

        self._env = make_environment(template_path.parent)
        self._template_name = template_path.name
        self.math_renderer = math_renderer or KaTeXMarkupRenderer()

    def render(self, content: ParsedContent, scheme: ColorScheme) -> str:
        colors = term_colors(content.term_order, scheme)
        logger.debug("Rendering HTML for %r with scheme %r", content.title, scheme.name)

        def colorize(span: TaggedSpan) -> str:
            color = color_for(span.term, content.term_order, scheme)
            inner = transform_tagged_spans(span.content, colorize)
            return equation_span(span.term, f"\\textcolor{{{color}}}{{{inner}}}")

        equation_latex = transform_tagged_spans(content.equation, colorize)
        equation_html = self.math_renderer.render(equation_latex, display=True)

        def render_span(term: str, text: str) -> str:
            color_for(term, content.term_order, scheme)
            return f'<span class="term-{escape_html(term)}">{self._render_inline(text)}</span>'

        description_html = transform_description_spans(content.description, self._render_inline, render_span)

        definitions = [
            {"term": term, "html": self._render_inline(body)}
            for term, body in exported_definitions(content, "html")
        ]

        template = self._env.get_template(self._template_name)
        return template.render(
            page_title=document_title(content),
            equation_html=equation_html,
            description_html=description_html,
            definitions=definitions,
            definitions_map={item["term"]: item["html"] for item in definitions},
            term_colors=list(colors.items()),
        )

    def _render_inline(self, text: str) -> str:
        return escape_preserving_math(
            text,
            escape_html,
            lambda math: self.math_renderer.render(math, display=False),
        )
