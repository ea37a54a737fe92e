"""Card-related data structures and helpers for UNO."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Mapping, Optional


class Color(Enum):
    RED = auto()
    YELLOW = auto()
    GREEN = auto()
    BLUE = auto()

    def __str__(self) -> str:
        return self.name.lower()


class CardKind(Enum):
    NUMBER = auto()
    REVERSE = auto()
    SKIP = auto()
    DRAW_TWO = auto()
    WILD = auto()
    WILD_DRAW_FOUR = auto()

    def __str__(self) -> str:
        return self.name.lower()


WILD_KINDS = frozenset({CardKind.WILD, CardKind.WILD_DRAW_FOUR})

# Colors in catalog order.
COLOR_ORDER: list[Color] = [Color.RED, Color.YELLOW, Color.GREEN, Color.BLUE]


@dataclass(frozen=True)
class Card:
    """Immutable representation of a single card.

    ``index`` is unique within one deck. Wild cards carry no color and use
    ``value`` to tell their four copies apart.
    """

    index: int
    color: Optional[Color]
    kind: CardKind
    value: int = 0

    def is_wild(self) -> bool:
        return self.kind in WILD_KINDS

    def same_face(self, other: Card) -> bool:
        """Return True if both cards share index, color, kind and value."""
        return (
            self.index == other.index
            and self.color is other.color
            and self.kind is other.kind
            and self.value == other.value
        )


def serialize_card(card: Card) -> dict[str, object]:
    return {
        "index": card.index,
        "color": card.color.name.lower() if card.color is not None else None,
        "kind": card.kind.name.lower(),
        "value": card.value,
    }


def deserialize_card(payload: Mapping[str, object]) -> Card:
    color_name = payload.get("color")
    kind_name = str(payload["kind"]).upper()
    try:
        color = Color[str(color_name).upper()] if color_name is not None else None
        kind = CardKind[kind_name]
    except KeyError as exc:
        raise ValueError(f"Unknown card attribute: {exc.args[0]!r}") from exc
    return Card(index=int(payload["index"]), color=color, kind=kind, value=int(payload.get("value", 0)))


def card_label(card: Card) -> str:
    kind = card.kind.name.replace("_", " ").title()
    if card.color is None:
        return kind
    if card.kind is CardKind.NUMBER:
        return f"{card.color.name.title()} {card.value}"
    return f"{card.color.name.title()} {kind}"
