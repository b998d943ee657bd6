from __future__ import annotations

import eqmark
from eqmark.interaction import IDLE, InteractionState, Kind, clear, click, hover, unhover


def test_idle_has_no_active_term() -> None:
    assert IDLE.kind is Kind.NONE
    assert IDLE.active_term is None


def test_hover_and_unhover() -> None:
    state = hover(IDLE, "a")
    assert state == InteractionState(Kind.HOVERED, "a", None)
    assert state.active_term == "a"

    state = hover(state, "b")
    assert state.active_term == "b"
    assert unhover(state) is IDLE


def test_click_pins_and_toggles() -> None:
    state = click(IDLE, "a")
    assert state == InteractionState(Kind.CLICKED, "a", "a")

    state = click(state, "b")
    assert state.pinned == "b"
    assert state.active_term == "b"

    assert click(state, "b") is IDLE


def test_pinned_term_wins_over_hover() -> None:
    pinned = click(IDLE, "a")

    assert hover(pinned, "b") is pinned
    assert unhover(pinned) == pinned
    assert hover(pinned, "b").active_term == "a"


def test_click_while_hovering() -> None:
    state = click(hover(IDLE, "b"), "b")
    assert state.kind is Kind.CLICKED
    assert state.active_term == "b"


def test_clear() -> None:
    assert clear() is IDLE
    assert clear().pinned is None


def test_exported_from_package() -> None:
    assert eqmark.hover(eqmark.IDLE, "a").active_term == "a"
    assert eqmark.click is click
