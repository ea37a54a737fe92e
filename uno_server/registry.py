"""In-memory table of live games keyed by game id."""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from random import Random
from typing import Dict, Iterator, List, Optional

from uno_engine.config import ServiceConfig
from uno_engine.game import UnoGame
from uno_engine.service import GameService

logger = logging.getLogger(__name__)


class RegistryError(RuntimeError):
    """Base class for registry lookups and allocation failures."""


class GameNotFound(RegistryError):
    """Raised when no game is registered under an id."""


class RegistryFull(RegistryError):
    """Raised when every game id is already taken."""


@dataclass
class GameSlot:
    service: GameService
    lock: threading.Lock = field(default_factory=threading.Lock)


class GameRegistry:
    """Owns one game per id and serializes access to each game."""

    def __init__(self, config: Optional[ServiceConfig] = None) -> None:
        self.config = config or ServiceConfig()
        self._rng = Random(self.config.seed)
        self._slots: Dict[int, GameSlot] = {}
        self._lock = threading.Lock()

    def create(self) -> int:
        with self._lock:
            free = [gid for gid in range(self.config.max_games) if gid not in self._slots]
            if not free:
                raise RegistryFull(f"All {self.config.max_games} game ids are in use.")
            game_id = self._rng.choice(free)
            game = UnoGame(rng=Random(self._rng.getrandbits(64)))
            game.reset()
            self._slots[game_id] = GameSlot(service=GameService(game))
        logger.info("Created game %d", game_id)
        return game_id

    def get(self, game_id: int) -> GameSlot:
        with self._lock:
            slot = self._slots.get(game_id)
        if slot is None:
            raise GameNotFound(f"Game {game_id} not found.")
        return slot

    @contextmanager
    def session(self, game_id: int) -> Iterator[GameService]:
        """Yield the game's service while holding that game's lock."""
        slot = self.get(game_id)
        with slot.lock:
            yield slot.service

    def clear(self) -> None:
        with self._lock:
            count = len(self._slots)
            self._slots = {}
        logger.info("Cleared %d game(s)", count)

    def ids(self) -> List[int]:
        with self._lock:
            return sorted(self._slots)
