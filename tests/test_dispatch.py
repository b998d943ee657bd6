from __future__ import annotations

import pytest

from eqmark.colors import ColorScheme
from eqmark.errors import EqmarkError, UnknownFormatError
from eqmark.parser.base import ParsedContent
from eqmark.renderer import FORMATS, BeamerRenderer, TypstRenderer, export, file_extension, get_renderer


def test_formats_and_extensions() -> None:
    assert dict(FORMATS) == {"html": ".html", "latex": ".tex", "beamer": ".tex", "typst": ".typ"}
    assert file_extension("typst") == ".typ"
    assert file_extension("beamer") == ".tex"


def test_get_renderer_builds_matching_renderer() -> None:
    assert isinstance(get_renderer("beamer"), BeamerRenderer)
    assert isinstance(get_renderer("typst", math_converter=str.upper), TypstRenderer)


@pytest.mark.parametrize("format_name", ["html", "latex", "beamer", "typst"])
def test_export_every_format(format_name: str, energy: ParsedContent, scheme: ColorScheme) -> None:
    document = export(format_name, energy, scheme)
    assert "Test" in document


@pytest.mark.parametrize("format_name", ["pdf", "", "HTML"])
def test_unknown_format_fails(format_name: str, energy: ParsedContent, scheme: ColorScheme) -> None:
    with pytest.raises(UnknownFormatError, match="Unknown export format"):
        export(format_name, energy, scheme)
    with pytest.raises(UnknownFormatError):
        file_extension(format_name)


def test_unknown_format_is_value_error() -> None:
    with pytest.raises(ValueError):
        get_renderer("docx")
    assert issubclass(UnknownFormatError, EqmarkError)
