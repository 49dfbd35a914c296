"""Spot It deck generator and round judge."""

from .cards import FRUITS, Card, Deck, deal, symbol_label
from .errors import InvalidOrder, NoCommonSymbol, SpotItError
from .field import GaloisField, is_prime_power, valid_orders
from .generator import audit_deck, generate
from .judge import RoundJudge, common_symbols
from .models import GameConfig, Guess, Player, RoundResult
from .table import RoundContext, Table

__all__ = [
    "FRUITS",
    "Card",
    "Deck",
    "deal",
    "symbol_label",
    "InvalidOrder",
    "NoCommonSymbol",
    "SpotItError",
    "GaloisField",
    "is_prime_power",
    "valid_orders",
    "audit_deck",
    "generate",
    "RoundJudge",
    "common_symbols",
    "GameConfig",
    "Guess",
    "Player",
    "RoundResult",
    "RoundContext",
    "Table",
]
