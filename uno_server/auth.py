"""Resolve an Authorization cookie to a caller uid."""

from __future__ import annotations

from typing import Mapping, Optional


class InvalidCredentials(RuntimeError):
    """Raised when a token is missing or unknown."""


def resolve_uid(token: Optional[str], tokens: Mapping[str, int]) -> int:
    if not token:
        raise InvalidCredentials("Missing Authorization token.")
    uid = tokens.get(token)
    if uid is None:
        raise InvalidCredentials("Unknown Authorization token.")
    return uid
