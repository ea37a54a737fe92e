"""Core engine package for the UNO game server."""

__all__ = [
    "cards",
    "deck",
    "card_set",
    "mechanics",
    "game",
    "service",
    "config",
]
