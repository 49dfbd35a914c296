from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional, Tuple, Union

from .cards import Card, symbol_label


@dataclass
class GameConfig:
    order: int = 7
    cards_per_round: int = 2
    seed: Optional[int] = None
    verify_deck: bool = False


@dataclass
class Player:
    player_id: str
    name: str
    score: int = 0
    hand: List[Card] = field(default_factory=list)

    def clear_hand(self) -> None:
        self.hand.clear()


class Guess(NamedTuple):
    player_id: str
    symbol: int
    order: Union[int, float]


@dataclass(frozen=True)
class RoundResult:
    round_id: str
    winner: Optional[str]
    symbol: Optional[int]
    common_symbols: Tuple[int, ...]
    scores: Dict[str, int]
    guesses_evaluated: int = 0

    @property
    def has_winner(self) -> bool:
        return self.winner is not None

    def payload(self) -> Dict[str, object]:
        return {
            "round_id": self.round_id,
            "winner": self.winner,
            "symbol": self.symbol,
            "symbol_label": symbol_label(self.symbol) if self.symbol is not None else None,
            "common_symbols": list(self.common_symbols),
            "scores": dict(self.scores),
            "guesses_evaluated": self.guesses_evaluated,
        }
