from uno_engine.cards import CardKind, Color
from uno_engine.mechanics import effect_of, is_legal_play


def test_anything_goes_on_first_play(card):
    assert is_legal_play(card(Color.RED, CardKind.NUMBER, 5), None)
    assert is_legal_play(card(None, CardKind.WILD_DRAW_FOUR), None)


def test_wild_cards_always_legal(card):
    last = card(Color.BLUE, CardKind.NUMBER, 7)
    assert is_legal_play(card(None, CardKind.WILD), last)
    assert is_legal_play(card(None, CardKind.WILD_DRAW_FOUR, 3), last)
    assert is_legal_play(card(None, CardKind.WILD, 1), card(Color.RED, CardKind.SKIP))


def test_match_on_color_kind_or_value(card):
    last = card(Color.RED, CardKind.NUMBER, 9)
    assert is_legal_play(card(Color.RED, CardKind.NUMBER, 2), last)
    assert is_legal_play(card(Color.BLUE, CardKind.NUMBER, 9), last)
    assert is_legal_play(card(Color.GREEN, CardKind.REVERSE), card(Color.YELLOW, CardKind.REVERSE))


def test_mismatch_is_illegal(card):
    last = card(Color.BLUE, CardKind.NUMBER, 3)
    assert not is_legal_play(card(Color.RED, CardKind.SKIP), last)
    assert not is_legal_play(card(Color.GREEN, CardKind.DRAW_TWO), last)
    assert not is_legal_play(card(Color.YELLOW, CardKind.NUMBER, 4), card(Color.RED, CardKind.REVERSE))


def test_number_cards_share_a_kind(card):
    assert is_legal_play(card(Color.RED, CardKind.NUMBER, 5), card(Color.BLUE, CardKind.NUMBER, 3))


def test_colored_card_on_wild_needs_value_match(card):
    wild = card(None, CardKind.WILD, 2)
    assert not is_legal_play(card(Color.RED, CardKind.NUMBER, 5), wild)
    assert is_legal_play(card(Color.RED, CardKind.NUMBER, 2), wild)


def test_effect_table(card):
    assert effect_of(card(None, CardKind.WILD_DRAW_FOUR)).draw_penalty == 4
    assert effect_of(card(Color.RED, CardKind.DRAW_TWO)).draw_penalty == 2
    assert effect_of(card(Color.RED, CardKind.NUMBER, 8)).draw_penalty == 0
    assert effect_of(card(None, CardKind.WILD)).draw_penalty == 0
    assert effect_of(card(Color.RED, CardKind.REVERSE)).reverse
    assert effect_of(card(Color.RED, CardKind.SKIP)).skip
