"""Game state machine for a single UNO session."""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random
from typing import Dict, List, Optional, Tuple

from .card_set import CardSet
from .cards import Card
from .deck import build_deck
from .mechanics import effect_of, is_legal_play

HAND_SIZE = 7


class GameError(RuntimeError):
    """Base class for rejected game actions."""


class AlreadyStarted(GameError):
    """Raised when a player tries to join an active game."""


class DuplicatePlayer(GameError):
    """Raised when a player id already holds a seat."""


class NotYourTurn(GameError):
    """Raised when someone other than the current seat acts."""


class CardNotFound(GameError):
    """Raised when the referenced card is missing from, or differs from, the acting hand."""


class IllegalCard(GameError):
    """Raised when a card does not match the last played card."""


class InsufficientCards(GameError):
    """Raised when the draw pile cannot cover a deal or draw."""


class GameNotActive(GameError):
    """Raised when a turn action is attempted outside of an active game."""


@dataclass
class Player:
    id: int
    name: str
    seat: int
    hand: CardSet = field(default_factory=CardSet)


class UnoGame:
    """One isolated game. Not thread-safe: callers serialize access per instance."""

    def __init__(self, rng: Optional[Random] = None) -> None:
        self.rng = rng if rng is not None else Random()
        self.active = False
        self.players: List[Player] = []
        self._by_id: Dict[int, Player] = {}
        self.current_seat = 0
        self.forward = True
        self.draw_pile = CardSet()
        self.discard_pile = CardSet()
        self.last_card: Optional[Card] = None
        self.pending_draw = 0
        self.winner: Optional[int] = None

    # Lifecycle ---------------------------------------------------------

    def reset(self) -> None:
        self.active = False
        self.players = []
        self._by_id = {}
        self.current_seat = 0
        self.forward = True
        self.discard_pile.clear()
        self.last_card = None
        self.pending_draw = 0
        self.winner = None
        self.draw_pile = CardSet(build_deck())

    def add_player(self, name: str, player_id: int) -> Player:
        if self.active:
            raise AlreadyStarted("Game already started.")
        if player_id in self._by_id:
            raise DuplicatePlayer(f"Player {player_id} already joined.")
        player = Player(id=player_id, name=name, seat=len(self.players))
        self.players.append(player)
        self._by_id[player_id] = player
        return player

    def start(self) -> None:
        if self.active:
            raise AlreadyStarted("Game already started.")
        if self.winner is not None:
            raise GameNotActive("Game is finished; reset before starting again.")
        needed = HAND_SIZE * len(self.players)
        if needed > len(self.draw_pile):
            raise InsufficientCards(f"Dealing needs {needed} cards, {len(self.draw_pile)} left.")
        self.active = True
        for _ in range(HAND_SIZE):
            for player in self.players:
                player.hand.add(self._draw())

    # Queries -----------------------------------------------------------

    def player(self, player_id: int) -> Optional[Player]:
        return self._by_id.get(player_id)

    def current_player(self) -> Optional[Player]:
        if not self.players:
            return None
        return self.players[self.current_seat]

    def get_hand(self, player_id: int) -> Tuple[Card, ...]:
        player = self._require_turn(player_id)
        return player.hand.cards()

    def card_count(self) -> int:
        """Total cards across the piles and every hand."""
        return len(self.draw_pile) + len(self.discard_pile) + sum(len(p.hand) for p in self.players)

    # Turn handling -----------------------------------------------------

    def next_player(self) -> None:
        if not self.players:
            return
        step = 1 if self.forward else -1
        self.current_seat = (self.current_seat + step) % len(self.players)

    def apply_effect(self, card: Card) -> None:
        effect = effect_of(card)
        self.pending_draw += effect.draw_penalty
        if effect.reverse:
            self.forward = not self.forward
        if effect.skip:
            self.next_player()
        self.next_player()

    # Actions -----------------------------------------------------------

    def play_card(self, player_id: int, card_index: int, claimed: Optional[Card] = None) -> Card:
        """Play a card from the acting hand.

        ``claimed`` is the caller's copy of the card; when given it must match the
        stored card exactly, otherwise only the index is looked up.
        """
        player = self._require_turn(player_id)
        self._require_active()
        card = claimed if claimed is not None else player.hand.get(card_index)
        if card is None or card.index != card_index or not player.hand.contains(card):
            raise CardNotFound(f"Card {card_index} is not in the hand of player {player_id}.")
        if not is_legal_play(card, self.last_card):
            raise IllegalCard(f"Card {card_index} cannot be played on the last card.")

        player.hand.remove(card_index)
        self.last_card = card
        self.discard_pile.add(card)
        self.apply_effect(card)
        if len(player.hand) == 0:
            self.winner = player.id
            self.active = False
        return card

    def resolve_penalty(self, player_id: int) -> List[Card]:
        """Draw one card plus the pending penalty, then pass the turn."""
        player = self._require_turn(player_id)
        self._require_active()
        count = 1 + self.pending_draw
        if count > len(self.draw_pile):
            raise InsufficientCards(f"Penalty needs {count} cards, {len(self.draw_pile)} left.")
        drawn = [self._draw() for _ in range(count)]
        for card in drawn:
            player.hand.add(card)
        self.pending_draw = 0
        self.next_player()
        return drawn

    # Helpers -----------------------------------------------------------

    def _draw(self) -> Card:
        indices = self.draw_pile.indices()
        if not indices:
            raise InsufficientCards("Draw pile is empty.")
        card = self.draw_pile.remove(self.rng.choice(indices))
        assert card is not None
        return card

    def _require_active(self) -> None:
        if not self.active:
            raise GameNotActive("Game is not active.")

    def _require_turn(self, player_id: int) -> Player:
        current = self.current_player()
        if current is None or current.id != player_id:
            raise NotYourTurn(f"It is not player {player_id}'s turn.")
        return current
