from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from .cards import Card, cards_to_labels, deal
from .generator import generate
from .judge import GuessLike, RoundJudge, common_symbols
from .models import GameConfig, Player, RoundResult

LOGGER = logging.getLogger("spotit_table")

# Table is the local-play session around the core: it deals from a shuffled
# pile, seats players and hands rounds to the judge. Rendering and input
# collection stay with the caller.


@dataclass
class RoundContext:
    number: int
    cards: List[Card]
    common: Tuple[int, ...] = field(default_factory=tuple)


class Table:
    def __init__(self, config: GameConfig) -> None:
        self.config = config
        if config.cards_per_round < 2:
            raise ValueError("A round needs at least two cards")
        self.deck = generate(config.order, verify=config.verify_deck)
        self.judge = RoundJudge()
        self.seats: List[Player] = []
        self.seed = config.seed if config.seed is not None else int(time.time() * 1000) & 0xFFFFFFFF
        self.pile: List[Card] = self.deck.draw_pile(self.seed)
        self.discard: List[Card] = []
        self.round: Optional[RoundContext] = None
        self.round_counter = 0
        self.history: List[RoundResult] = []
        LOGGER.info("Table ready: order %d, %d cards, seed %d", self.deck.order, len(self.deck), self.seed)

    # Seat management -------------------------------------------------

    def seat_player(self, name: str) -> Player:
        display = name.strip()
        if not display:
            raise ValueError("PLAYER_REQUIRED")
        player_id = display.casefold()
        existing = self.judge.players.get(player_id)
        if existing:
            existing.name = display
            return existing
        player = self.judge.register_player(player_id, display)
        self.seats.append(player)
        return player

    def _find_player(self, player_id: str) -> Optional[Player]:
        for player in self.seats:
            if player.player_id == player_id:
                return player
        return None

    # Round lifecycle -------------------------------------------------

    def can_start_round(self) -> bool:
        return len(self.seats) >= 2 and len(self.pile) >= self.config.cards_per_round

    def is_game_over(self) -> bool:
        return self.round is None and len(self.pile) < self.config.cards_per_round

    def start_round(self) -> RoundContext:
        if self.round is not None:
            raise RuntimeError("Round already in progress")
        if len(self.seats) < 2:
            raise RuntimeError("Not enough players to start a round")

        cards = deal(self.pile, self.config.cards_per_round)
        self.round_counter += 1
        try:
            common = common_symbols(cards)
        except ValueError:
            # Misdeal: the shown cards go out of play with the round.
            self.discard.extend(cards)
            raise

        ctx = RoundContext(number=self.round_counter, cards=cards, common=tuple(sorted(common)))
        self.round = ctx
        LOGGER.debug("Round %d shows %s", ctx.number, cards_to_labels(cards))
        return ctx

    def submit_guesses(self, guesses: Iterable[GuessLike]) -> RoundResult:
        if self.round is None:
            raise RuntimeError("Round not in progress")
        ctx = self.round
        guesses = list(guesses)
        for guess in guesses:
            if self._find_player(guess[0]) is None:
                raise ValueError(f"Unknown player: {guess[0]}")

        result = self.judge.resolve_round(ctx.cards, guesses)
        if result.winner is not None:
            winner = self._find_player(result.winner)
            assert winner is not None
            winner.hand.extend(ctx.cards)
            LOGGER.info("Round %d: %s spotted %s", ctx.number, winner.name, result.symbol)
        else:
            self.discard.extend(ctx.cards)
            LOGGER.info("Round %d: no winner", ctx.number)

        self.history.append(result)
        self.round = None
        return result

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.seed = seed
        self.pile = self.deck.draw_pile(self.seed)
        self.discard = []
        self.round = None
        self.round_counter = 0
        self.history = []
        self.judge.reset_scores()
        for player in self.seats:
            player.clear_hand()

    # Payload helpers -------------------------------------------------

    def lobby_state(self) -> Dict[str, object]:
        return {
            "order": self.deck.order,
            "players": [
                {"player_id": player.player_id, "name": player.name, "score": player.score}
                for player in self.seats
            ],
        }

    def round_payload(self) -> Dict[str, object]:
        if self.round is None:
            raise RuntimeError("Round not in progress")
        ctx = self.round
        return {
            "round": ctx.number,
            "cards": [list(card.symbols()) for card in ctx.cards],
            "labels": [card.labels() for card in ctx.cards],
            "remaining": len(self.pile),
        }

    def match_result_payload(self) -> Dict[str, object]:
        ranked = sorted(self.seats, key=lambda player: (-player.score, player.player_id))
        best = ranked[0].score if ranked else 0
        leaders = [player.player_id for player in ranked if player.score == best and best > 0]
        return {
            "winners": leaders,
            "rounds_played": len(self.history),
            "final_scores": [
                {"player_id": player.player_id, "name": player.name, "score": player.score, "cards_won": len(player.hand)}
                for player in ranked
            ],
        }
