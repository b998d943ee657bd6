"""Render ParsedContent into a compilable LaTeX article."""

from __future__ import annotations

import logging
from pathlib import Path

from eqmark.colors import ColorScheme, color_for, hex_digits, term_colors
from eqmark.escape import escape_latex, escape_preserving_math
from eqmark.parser.base import ParsedContent, TaggedSpan
from eqmark.parser.spans import transform_description_spans, transform_tagged_spans

from .base import TEMPLATE_DIR, document_title, exported_definitions, make_environment

logger = logging.getLogger(__name__)


def latex_color_name(term: str) -> str:
    return f"term{term}"


def color_definitions(content: ParsedContent, scheme: ColorScheme) -> list[str]:
    """One ``\\definecolor`` line per term, in term order."""
    return [
        f"\\definecolor{{{latex_color_name(term)}}}{{HTML}}{{{hex_digits(color)}}}"
        for term, color in term_colors(content.term_order, scheme).items()
    ]


def escape_text(text: str) -> str:
    """Escape LaTeX specials outside ``$...$``; math spans pass through untouched."""
    return escape_preserving_math(text, escape_latex)


def colorize_equation(content: ParsedContent, scheme: ColorScheme) -> str:
    """Replace every tagged span with ``\\textcolor{termX}{...}``, nested spans included."""

    def rewrite(span: TaggedSpan) -> str:
        color_for(span.term, content.term_order, scheme)
        inner = transform_tagged_spans(span.content, rewrite)
        return f"\\textcolor{{{latex_color_name(span.term)}}}{{{inner}}}"

    return transform_tagged_spans(content.equation, rewrite)


def description_to_latex(content: ParsedContent, scheme: ColorScheme) -> str:
    def render_span(term: str, text: str) -> str:
        color_for(term, content.term_order, scheme)
        return f"\\textcolor{{{latex_color_name(term)}}}{{{escape_text(text)}}}"

    return transform_description_spans(content.description, escape_text, render_span).strip()


class LaTeXRenderer:
    """Render an article with xcolor-defined term colors; no interactivity survives."""

    template_name = "document.tex"

    def __init__(self, template_dir: Path | None = None) -> None:
        self._env = make_environment(template_dir or TEMPLATE_DIR, latex=True)

    def render(self, content: ParsedContent, scheme: ColorScheme) -> str:
        logger.debug("Rendering LaTeX for %r with scheme %r", content.title, scheme.name)
        definitions = [
            {
                "color": latex_color_name(term),
                "name": escape_latex(term),
                "body": escape_text(body),
            }
            for term, body in exported_definitions(content, "latex")
        ]

        template = self._env.get_template(self.template_name)
        return template.render(
            title=escape_latex(document_title(content)),
            color_definitions=color_definitions(content, scheme),
            equation=colorize_equation(content, scheme),
            description=description_to_latex(content, scheme),
            definitions=definitions,
        )
