"""Exception hierarchy for deck generation and round judging."""

from __future__ import annotations

from typing import Sequence, Tuple

from .cards import Card


class SpotItError(ValueError):
    """Base exception for all Spot It rule errors."""


class InvalidOrder(SpotItError):
    """Raised when no projective-plane deck exists for the requested order."""

    def __init__(self, order: object) -> None:
        self.order = order
        super().__init__(f"Invalid deck order {order!r}: must be a positive prime power")


class NoCommonSymbol(SpotItError):
    """Raised when the cards shown in a round share no symbol."""

    def __init__(self, cards: Sequence[Card]) -> None:
        self.cards: Tuple[Card, ...] = tuple(cards)
        super().__init__(f"No symbol is common to all {len(self.cards)} cards in play")
