"""Tests for the LaTeX article renderer."""

from __future__ import annotations

import pytest

from eqmark.colors import ColorScheme
from eqmark.errors import PaletteTooShortError, UnknownTermError
from eqmark.parser.annotation_parser import parse_content
from eqmark.parser.base import ParsedContent, description_span, equation_span
from eqmark.renderer.latex_renderer import LaTeXRenderer


def test_preamble_color_definitions(energy: ParsedContent, scheme: ColorScheme) -> None:
    tex = LaTeXRenderer().render(energy, scheme)

    assert tex.startswith("\\documentclass{article}")
    assert "\\definecolor{terma}{HTML}{8B5CF6}" in tex
    assert "\\definecolor{termb}{HTML}{10B981}" in tex
    assert "\\definecolor{termc}{HTML}{EC4899}" in tex
    assert tex.count("\\definecolor{term") == 3
    assert tex.rstrip().endswith("\\end{document}")


def test_equation_uses_textcolor_and_drops_wrappers(energy: ParsedContent, scheme: ColorScheme) -> None:
    tex = LaTeXRenderer().render(energy, scheme)

    assert (
        "\\begin{equation}\n"
        "\\textcolor{terma}{E} = \\textcolor{termb}{m}\\textcolor{termc}{c}^2\n"
        "\\end{equation}"
    ) in tex
    assert "\\htmlClass" not in tex


def test_description_is_colored_and_escaped(energy: ParsedContent, scheme: ColorScheme) -> None:
    tex = LaTeXRenderer().render(energy, scheme)

    assert "\\textcolor{terma}{Energy} equals \\textcolor{termb}{mass} times \\textcolor{termc}{speed} squared." in tex
    assert "<span" not in tex


def test_definition_escaping_preserves_math(schrodinger: ParsedContent, scheme: ColorScheme) -> None:
    tex = LaTeXRenderer().render(schrodinger, scheme)

    assert "\\subsection*{\\textcolor{termplanck}{planck}}" in tex
    assert "Reduced Planck constant, about 50\\% of nothing \\& $\\hbar = h / 2\\pi$." in tex


def test_nested_spans_colored(scheme: ColorScheme) -> None:
    content = parse_content("$$\n\\mark[outer]{1 + \\mark[inner]{x}}\n$$\n")
    tex = LaTeXRenderer().render(content, scheme)
    assert "\\textcolor{termouter}{1 + \\textcolor{terminner}{x}}" in tex


def test_title_is_escaped(scheme: ColorScheme) -> None:
    tex = LaTeXRenderer().render(parse_content("# Rates & 100%\n"), scheme)
    assert "\\title{Rates \\& 100\\%}" in tex


def test_palette_too_short_fails(energy: ParsedContent, short_scheme: ColorScheme) -> None:
    with pytest.raises(PaletteTooShortError):
        LaTeXRenderer().render(energy, short_scheme)


def test_malformed_term_name_leaves_no_wrapper(scheme: ColorScheme) -> None:
    content = parse_content("# T\n$$\n\\mark[a}b]{x} + \\mark[c]{y}\n$$\n")
    tex = LaTeXRenderer().render(content, scheme)

    assert "\\htmlClass" not in tex
    assert tex.count("\\definecolor{term") == 1
    assert "\\mark[a}b]{x} + \\textcolor{termc}{y}" in tex


def test_unknown_description_term_fails(scheme: ColorScheme) -> None:
    content = ParsedContent(
        equation=equation_span("a", "y"),
        description=description_span("zz", "ghost"),
        term_order=("a",),
    )
    with pytest.raises(UnknownTermError, match="zz"):
        LaTeXRenderer().render(content, scheme)


def test_escaped_dollar_in_prose(scheme: ColorScheme) -> None:
    content = parse_content("$$\n\\mark[a]{x}\n$$\n## .a\nCosts \\$5 today.\n")
    assert "Costs \\$5 today." in LaTeXRenderer().render(content, scheme)
