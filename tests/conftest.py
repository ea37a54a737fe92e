from random import Random
from typing import Dict, List

import pytest

from uno_engine.cards import Card, CardKind
from uno_engine.deck import build_deck
from uno_engine.game import UnoGame


def find_card(color, kind: CardKind, value: int = 0, copy: int = 0) -> Card:
    matches = [c for c in build_deck() if c.color is color and c.kind is kind and c.value == value]
    return matches[copy]


def rig_game(hands: Dict[int, List[Card]], seed: int = 0) -> UnoGame:
    """Seat one player per key and hand them exactly the given cards."""
    game = UnoGame(rng=Random(seed))
    game.reset()
    for uid, cards in hands.items():
        player = game.add_player(f"P{uid}", uid)
        for card in cards:
            player.hand.add(game.draw_pile.remove(card.index))
    game.active = True
    return game


@pytest.fixture
def fresh_game():
    game = UnoGame(rng=Random(1234))
    game.reset()
    return game


@pytest.fixture
def card():
    return find_card


@pytest.fixture
def rigged():
    return rig_game
