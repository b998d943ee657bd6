from __future__ import annotations

from pathlib import Path

import pytest

from eqmark.colors import ColorScheme, get_scheme
from eqmark.parser.annotation_parser import parse_content
from eqmark.parser.base import ParsedContent

ENERGY_MD = """\
# Test
$$
\\mark[a]{E} = \\mark[b]{m}\\mark[c]{c}^2
$$
## Description
[Energy]{.a} equals [mass]{.b} times [speed]{.c} squared.
## .a
Energy.
## .b
Mass.
## .c
Speed of light.
"""

SCHRODINGER_MD = """\
# Schrödinger equation
$$
\\mark[imaginary]{i}\\mark[planck]{\\hbar}\\mark[time]{\\frac{\\partial}{\\partial t}}\\mark[state]{\\Psi(x,t)} = \\mark[hamiltonian]{\\hat{H}}\\mark[state]{\\Psi(x,t)}
$$

## Description

The [imaginary unit]{.imaginary} times [reduced Planck constant]{.planck}
times the [time derivative]{.time} of the [wave function]{.state}
equals the [Hamiltonian]{.hamiltonian} applied to it.

## .imaginary
The imaginary unit, $i^2 = -1$.

## .planck
Reduced Planck constant, about 50% of nothing & $\\hbar = h / 2\\pi$.

## .time
Rate of change with respect to time.

## .state
The wave function $\\Psi$ of the system.

## .hamiltonian
Total energy operator.
"""


@pytest.fixture
def energy() -> ParsedContent:
    return parse_content(ENERGY_MD)


@pytest.fixture
def schrodinger() -> ParsedContent:
    return parse_content(SCHRODINGER_MD)


@pytest.fixture
def scheme() -> ColorScheme:
    return get_scheme("vibrant")


@pytest.fixture
def short_scheme() -> ColorScheme:
    return ColorScheme("Tiny", ("#ff0000", "#00ff00"))


@pytest.fixture
def energy_md(tmp_path: Path) -> Path:
    path = tmp_path / "energy.md"
    path.write_text(ENERGY_MD, encoding="utf-8")
    return path
