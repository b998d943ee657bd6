"""Render ParsedContent into Beamer slides with TikZ connectors.

The equation pass drops a TikZ coordinate ``n<i>`` after every tagged span, ``i``
being the span's occurrence index. Definition slides draw their arrow from the
coordinate of the term's first occurrence, so both passes must share that index.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from eqmark.colors import ColorScheme, color_for
from eqmark.escape import escape_latex
from eqmark.parser.base import ParsedContent, TaggedSpan
from eqmark.parser.spans import transform_tagged_spans

from .base import TEMPLATE_DIR, document_title, exported_definitions, make_environment
from .latex_renderer import color_definitions, description_to_latex, escape_text, latex_color_name

logger = logging.getLogger(__name__)


def anchor_name(index: int) -> str:
    return f"n{index}"


def definition_anchor_name(index: int) -> str:
    return f"def{index}"


@dataclass(slots=True)
class AnchoredEquation:
    latex: str
    anchors: dict[str, list[int]] = field(default_factory=dict)

    def first_anchor(self, term: str) -> int | None:
        indices = self.anchors.get(term)
        return indices[0] if indices else None


def anchor_equation(content: ParsedContent, scheme: ColorScheme) -> AnchoredEquation:
    """Color every tagged span and append a coordinate named by its occurrence index.

    Nested spans are indexed after their parent, in the order they are met.
    """
    result = AnchoredEquation(latex="")
    counter = 0

    def rewrite(span: TaggedSpan) -> str:
        nonlocal counter
        color_for(span.term, content.term_order, scheme)
        index = counter
        counter += 1
        result.anchors.setdefault(span.term, []).append(index)
        inner = transform_tagged_spans(span.content, rewrite)
        return (
            f"\\textcolor{{{latex_color_name(span.term)}}}{{{inner}}}"
            f"\\tikz[baseline,remember picture,overlay] \\coordinate ({anchor_name(index)});"
        )

    result.latex = transform_tagged_spans(content.equation, rewrite)
    return result


class BeamerRenderer:
    """Title slide, overview slide, then one slide per definition in document order."""

    template_name = "beamer.tex"

    def __init__(self, template_dir: Path | None = None) -> None:
        self._env = make_environment(template_dir or TEMPLATE_DIR, latex=True)

    def render(self, content: ParsedContent, scheme: ColorScheme) -> str:
        logger.debug("Rendering Beamer for %r with scheme %r", content.title, scheme.name)
        equation = anchor_equation(content, scheme)

        frames = []
        for index, (term, body) in enumerate(exported_definitions(content, "beamer")):
            source = equation.first_anchor(term)
            frames.append(
                {
                    "index": index,
                    "color": latex_color_name(term),
                    "name": escape_latex(term),
                    "body": escape_text(body),
                    "definition_anchor": definition_anchor_name(index),
                    "equation_anchor": anchor_name(source) if source is not None else None,
                }
            )

        template = self._env.get_template(self.template_name)
        return template.render(
            title=escape_latex(document_title(content)),
            color_definitions=color_definitions(content, scheme),
            equation=equation.latex,
            description=description_to_latex(content, scheme),
            frames=frames,
        )
