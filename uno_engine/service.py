"""Convenience service layer for transport consumers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from .cards import Card, card_label, deserialize_card, serialize_card
from .game import UnoGame


@dataclass
class PlayerView:
    uid: int
    name: str
    seat: int
    card_count: int


@dataclass
class GameInfoView:
    active: bool
    forward: bool
    current_seat: int
    pending_draw_count: int
    last_card: Optional[dict]
    draw_pile_count: int
    discard_pile_count: int
    winner: Optional[int]
    players: list[PlayerView]


@dataclass
class HandView:
    uid: int
    cards: list[dict]
    labels: list[str]


class GameService:
    """Facade around UnoGame returning serializable views."""

    def __init__(self, game: Optional[UnoGame] = None) -> None:
        if game is None:
            game = UnoGame()
            game.reset()
        self.game = game

    # Lifecycle ---------------------------------------------------------

    def reset(self) -> GameInfoView:
        self.game.reset()
        return self.get_info()

    def join(self, uid: int, name: str) -> GameInfoView:
        self.game.add_player(name, uid)
        return self.get_info()

    def start(self) -> GameInfoView:
        self.game.start()
        return self.get_info()

    # Actions -----------------------------------------------------------

    def play_card(self, uid: int, card_index: int, claimed: Optional[Mapping[str, object]] = None) -> GameInfoView:
        card = deserialize_card(claimed) if claimed is not None else None
        self.game.play_card(uid, card_index, claimed=card)
        return self.get_info()

    def resolve_penalty(self, uid: int) -> HandView:
        drawn = self.game.resolve_penalty(uid)
        return self._hand_view(uid, drawn)

    # Views -------------------------------------------------------------

    def get_hand(self, uid: int) -> HandView:
        return self._hand_view(uid, self.game.get_hand(uid))

    def get_info(self) -> GameInfoView:
        game = self.game
        return GameInfoView(
            active=game.active,
            forward=game.forward,
            current_seat=game.current_seat,
            pending_draw_count=game.pending_draw,
            last_card=serialize_card(game.last_card) if game.last_card is not None else None,
            draw_pile_count=len(game.draw_pile),
            discard_pile_count=len(game.discard_pile),
            winner=game.winner,
            players=[
                PlayerView(uid=p.id, name=p.name, seat=p.seat, card_count=len(p.hand))
                for p in game.players
            ],
        )

    # Helpers -----------------------------------------------------------

    def _hand_view(self, uid: int, cards: Sequence[Card]) -> HandView:
        return HandView(
            uid=uid,
            cards=[serialize_card(card) for card in cards],
            labels=[card_label(card) for card in cards],
        )
