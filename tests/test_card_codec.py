import pytest

from uno_engine.cards import card_label, deserialize_card, serialize_card
from uno_engine.deck import build_deck


def test_deserialize_matches_catalog_entries():
    deck = build_deck()
    for card in (deck[0], deck[23], deck[104]):
        assert deserialize_card(serialize_card(card)) == card


def test_deserialize_rejects_unknown_names():
    with pytest.raises(ValueError):
        deserialize_card({"index": 0, "color": "purple", "kind": "number", "value": 0})
    with pytest.raises(ValueError):
        deserialize_card({"index": 0, "color": "red", "kind": "draw_six", "value": 0})


def test_card_labels():
    deck = build_deck()
    assert card_label(deck[0]) == "Red 0"
    assert card_label(deck[23]) == "Red Draw Two"
    assert card_label(deck[104]) == "Wild Draw Four"
