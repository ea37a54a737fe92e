"""Play legality and card effects for UNO."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cards import Card, CardKind


@dataclass(frozen=True)
class CardEffect:
    draw_penalty: int = 0
    reverse: bool = False
    skip: bool = False


NO_EFFECT = CardEffect()

EFFECTS: dict[CardKind, CardEffect] = {
    CardKind.NUMBER: NO_EFFECT,
    CardKind.WILD: NO_EFFECT,
    CardKind.WILD_DRAW_FOUR: CardEffect(draw_penalty=4),
    CardKind.DRAW_TWO: CardEffect(draw_penalty=2),
    CardKind.REVERSE: CardEffect(reverse=True),
    CardKind.SKIP: CardEffect(skip=True),
}


def is_legal_play(card: Card, last_card: Optional[Card]) -> bool:
    """Return True if ``card`` may be played on top of ``last_card``."""
    if last_card is None:
        return True
    if card.is_wild():
        return True
    return (
        (card.color is not None and card.color is last_card.color)
        or card.kind is last_card.kind
        or card.value == last_card.value
    )


def effect_of(card: Card) -> CardEffect:
    return EFFECTS[card.kind]
