"""Deck creation utilities for UNO."""

from __future__ import annotations

from typing import List

from .cards import COLOR_ORDER, Card, CardKind

DECK_SIZE = 108
WILD_COPIES = 4
ACTION_KINDS = (CardKind.REVERSE, CardKind.SKIP, CardKind.DRAW_TWO)


def build_deck() -> List[Card]:
    """Return the ordered 108-card deck with sequential indices."""
    cards: List[Card] = []

    def add(color, kind: CardKind, value: int = 0) -> None:
        cards.append(Card(index=len(cards), color=color, kind=kind, value=value))

    for color in COLOR_ORDER:
        add(color, CardKind.NUMBER, 0)
        for value in range(1, 10):
            add(color, CardKind.NUMBER, value)
            add(color, CardKind.NUMBER, value)
        for kind in ACTION_KINDS:
            add(color, kind)
            add(color, kind)

    for kind in (CardKind.WILD, CardKind.WILD_DRAW_FOUR):
        for copy in range(WILD_COPIES):
            add(None, kind, copy)

    return cards
