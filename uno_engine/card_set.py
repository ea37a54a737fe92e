"""Keyed bag of cards used for the draw pile, the discard pile and hands."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .cards import Card


class CardSet:
    """Mapping from card index to card. Each index is held at most once."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: Dict[int, Card] = {}
        for card in cards:
            self.add(card)

    def add(self, card: Card) -> bool:
        """Store the card. Returns False, leaving the set untouched, if its index is taken."""
        if card.index in self._cards:
            return False
        self._cards[card.index] = card
        return True

    def remove(self, index: int) -> Optional[Card]:
        return self._cards.pop(index, None)

    def contains(self, card: Card) -> bool:
        """Return True only if the stored copy at ``card.index`` matches the given card exactly."""
        stored = self._cards.get(card.index)
        return stored is not None and stored.same_face(card)

    def get(self, index: int) -> Optional[Card]:
        return self._cards.get(index)

    def indices(self) -> List[int]:
        return sorted(self._cards)

    def cards(self) -> Tuple[Card, ...]:
        """Read-only snapshot ordered by index."""
        return tuple(self._cards[index] for index in sorted(self._cards))

    def clear(self) -> None:
        self._cards.clear()

    def __contains__(self, index: object) -> bool:
        return index in self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards())
