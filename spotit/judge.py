from __future__ import annotations

import logging
from typing import Dict, FrozenSet, Iterable, List, Optional, Sequence, Tuple, Union

from .cards import Card
from .errors import NoCommonSymbol
from .models import Guess, Player, RoundResult

LOGGER = logging.getLogger("spotit_judge")

GuessLike = Union[Guess, Tuple[str, int, Union[int, float]]]

# The judge owns every Player record it hands out and is the only code that
# writes Player.score. Everything else reads scores through snapshots.


def common_symbols(cards: Sequence[Card]) -> FrozenSet[int]:
    """Symbols present on every card in play.

    Raises ValueError for malformed rounds and NoCommonSymbol when the cards
    (possible only with three or more) have nothing in common.
    """
    if len(cards) < 2:
        raise ValueError("A round needs at least two cards")
    if len(set(cards)) != len(cards):
        raise ValueError("Cards in a round must be distinct")
    if len({len(card) for card in cards}) != 1:
        raise ValueError("Cards in a round must come from the same deck")

    shared = cards[0].symbol_set
    for card in cards[1:]:
        shared = shared & card.symbol_set
    if not shared:
        raise NoCommonSymbol(cards)
    return shared


def order_guesses(guesses: Iterable[GuessLike]) -> List[Guess]:
    """Earliest submission first; equal submission orders keep input order."""
    normalized = [guess if isinstance(guess, Guess) else Guess(*guess) for guess in guesses]
    return sorted(normalized, key=lambda guess: guess.order)


class RoundJudge:
    """Resolves rounds and keeps the score of every player it has seen."""

    def __init__(self) -> None:
        self.players: Dict[str, Player] = {}
        self.round_counter = 0

    def register_player(self, player_id: str, name: Optional[str] = None) -> Player:
        existing = self.players.get(player_id)
        if existing:
            return existing
        player = Player(player_id=player_id, name=name or player_id)
        self.players[player_id] = player
        return player

    def scores(self) -> Dict[str, int]:
        return {player_id: player.score for player_id, player in self.players.items()}

    def reset_scores(self) -> None:
        for player in self.players.values():
            player.score = 0

    def resolve_round(self, cards: Sequence[Card], guesses: Iterable[GuessLike]) -> RoundResult:
        valid = common_symbols(cards)
        ordered = order_guesses(guesses)

        self.round_counter += 1
        round_id = f"R-{self.round_counter:05d}"
        common = tuple(sorted(valid))

        for evaluated, guess in enumerate(ordered, start=1):
            # Guesses after the winning one never reach the registry.
            player = self.register_player(guess.player_id)
            if guess.symbol not in valid:
                continue
            player.score += 1
            LOGGER.debug("%s won by %s with symbol %s", round_id, player.player_id, guess.symbol)
            return RoundResult(
                round_id=round_id,
                winner=player.player_id,
                symbol=guess.symbol,
                common_symbols=common,
                scores=self.scores(),
                guesses_evaluated=evaluated,
            )

        LOGGER.debug("%s closed with no winner after %d guesses", round_id, len(ordered))
        return RoundResult(
            round_id=round_id,
            winner=None,
            symbol=None,
            common_symbols=common,
            scores=self.scores(),
            guesses_evaluated=len(ordered),
        )
