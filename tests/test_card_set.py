from dataclasses import replace

from uno_engine.card_set import CardSet
from uno_engine.cards import CardKind, Color
from uno_engine.deck import build_deck


def test_add_rejects_duplicate_index():
    deck = build_deck()
    cards = CardSet()
    assert cards.add(deck[5])
    assert not cards.add(deck[5])
    assert len(cards) == 1


def test_remove_returns_card_then_none():
    deck = build_deck()
    cards = CardSet(deck[:3])
    assert cards.remove(1) == deck[1]
    assert cards.remove(1) is None
    assert cards.indices() == [0, 2]


def test_contains_checks_stored_face():
    deck = build_deck()
    cards = CardSet(deck[:10])
    genuine = deck[4]
    assert cards.contains(genuine)
    assert not cards.contains(replace(genuine, color=Color.BLUE))
    assert not cards.contains(replace(genuine, kind=CardKind.WILD))
    assert not cards.contains(replace(genuine, value=genuine.value + 1))
    assert not cards.contains(deck[50])


def test_cards_snapshot_is_sorted_and_detached():
    deck = build_deck()
    cards = CardSet([deck[7], deck[2], deck[9]])
    snapshot = cards.cards()
    assert [c.index for c in snapshot] == [2, 7, 9]
    cards.remove(2)
    assert len(snapshot) == 3
