"""Hover and click state for interactive viewers.

Viewers embedding eqmark output keep one ``InteractionState`` value and replace it
on every input event; a clicked (pinned) term takes precedence over a hovered one.
The script in ``template/document.html`` follows the same transitions.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Kind(enum.Enum):
    NONE = "none"
    HOVERED = "hovered"
    CLICKED = "clicked"


@dataclass(frozen=True, slots=True)
class InteractionState:
    kind: Kind = Kind.NONE
    term: str | None = None
    pinned: str | None = None

    @property
    def active_term(self) -> str | None:
        return self.term if self.kind is not Kind.NONE else None


IDLE = InteractionState()


def _settled(pinned: str | None) -> InteractionState:
    if pinned is None:
        return IDLE
    return InteractionState(Kind.CLICKED, pinned, pinned)


def hover(state: InteractionState, term: str) -> InteractionState:
    if state.pinned is not None:
        return state
    return InteractionState(Kind.HOVERED, term, None)


def unhover(state: InteractionState) -> InteractionState:
    return _settled(state.pinned)


def click(state: InteractionState, term: str) -> InteractionState:
    """Pin ``term``; clicking the pinned term again releases it."""
    if state.pinned == term:
        return IDLE
    return _settled(term)


def clear() -> InteractionState:
    return IDLE
