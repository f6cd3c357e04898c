"""Error taxonomy for the freshness engine."""

from __future__ import annotations

from typing import Iterable


class FreshsenseError(Exception):
    """Base class for all engine errors."""


class UnknownProfile(FreshsenseError, ValueError):
    """Raised when a food category key is not part of the registry."""

    def __init__(self, key: str, known: Iterable[str] = ()) -> None:
        self.key = key
        self.known = tuple(known)
        message = f"unknown food profile: {key!r}"
        if self.known:
            message += f" (expected one of: {', '.join(self.known)})"
        super().__init__(message)


class InvalidThreshold(FreshsenseError, ValueError):
    """Raised when a threshold rule cannot be evaluated."""


class UnknownChannel(FreshsenseError, ValueError):
    """Raised when a channel id is not declared where it is used."""


class ReadingInProgress(FreshsenseError, RuntimeError):
    """Raised when a command arrives while a sensor reading is in flight."""
