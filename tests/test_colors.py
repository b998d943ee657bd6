"""Tests for palettes and term color resolution."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from eqmark.colors import (
    BUILTIN_SCHEMES,
    ColorScheme,
    color_for,
    get_scheme,
    hex_digits,
    load_scheme,
    term_colors,
)
from eqmark.errors import (
    ColorResolutionError,
    InvalidColorSchemeError,
    PaletteTooShortError,
    UnknownSchemeError,
    UnknownTermError,
)


def test_color_is_positional(scheme: ColorScheme) -> None:
    order = ["x", "y", "z"]
    for term in order:
        assert color_for(term, order, scheme) == scheme.colors[order.index(term)]
    assert color_for("y", order, scheme) == color_for("y", order, scheme)


def test_unknown_term(scheme: ColorScheme) -> None:
    with pytest.raises(UnknownTermError) as excinfo:
        color_for("ghost", ["a"], scheme)
    assert "ghost" in str(excinfo.value)
    assert isinstance(excinfo.value, ColorResolutionError)


def test_palette_too_short(short_scheme: ColorScheme) -> None:
    with pytest.raises(PaletteTooShortError) as excinfo:
        color_for("c", ["a", "b", "c"], short_scheme)
    assert excinfo.value.index == 2
    assert "Tiny" in str(excinfo.value)


def test_term_colors_keeps_order(scheme: ColorScheme) -> None:
    colors = term_colors(("b", "a"), scheme)
    assert list(colors) == ["b", "a"]
    assert colors["a"] == scheme.colors[1]


def test_builtin_schemes() -> None:
    assert set(BUILTIN_SCHEMES) == {"vibrant", "accessible", "contrast", "nocolor", "viridis"}
    assert len(get_scheme("vibrant")) == 12
    assert get_scheme("nocolor").colors == ("#000000",) * 12
    with pytest.raises(UnknownSchemeError):
        get_scheme("rainbow")


def test_invalid_colors_rejected() -> None:
    with pytest.raises(InvalidColorSchemeError):
        ColorScheme("Bad", ("#12345", "red"))


def test_hex_digits() -> None:
    assert hex_digits("#8b5cf6") == "8B5CF6"
    assert hex_digits("#abc") == "AABBCC"


def test_load_scheme(tmp_path: Path) -> None:
    path = tmp_path / "brand.json"
    path.write_text(json.dumps({"name": "Brand", "colors": ["#112233", "#445566"]}), encoding="utf-8")
    scheme = load_scheme(path)
    assert scheme == ColorScheme("Brand", ("#112233", "#445566"))


def test_load_scheme_rejects_bad_shape(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text('{"colors": "#112233"}', encoding="utf-8")
    with pytest.raises(InvalidColorSchemeError):
        load_scheme(path)

    path.write_text("not json", encoding="utf-8")
    with pytest.raises(InvalidColorSchemeError):
        load_scheme(path)
