from __future__ import annotations

import itertools
from typing import Iterable, Optional, Tuple

from spotit.cards import Card, Deck
from spotit.generator import generate
from spotit.judge import RoundJudge
from spotit.models import GameConfig
from spotit.table import Table


def create_table(
    *,
    order: int = 3,
    players: int = 2,
    cards_per_round: int = 2,
    seed: int = 42,
) -> Table:
    """Instantiate a table with seated players."""
    table = Table(GameConfig(order=order, cards_per_round=cards_per_round, seed=seed))
    for idx in range(players):
        table.seat_player(f"Player{idx}")
    return table


def create_judge(*player_ids: str) -> RoundJudge:
    judge = RoundJudge()
    for player_id in player_ids:
        judge.register_player(player_id)
    return judge


def pair_sharing(deck: Deck, symbol: int) -> Tuple[Card, Card]:
    """First two cards of ``deck`` that both carry ``symbol``."""
    holders = [card for card in deck if symbol in card]
    return holders[0], holders[1]


def non_concurrent_triple(deck: Deck) -> Tuple[Card, Card, Card]:
    for a, b, c in itertools.combinations(deck, 3):
        if not (a.symbol_set & b.symbol_set & c.symbol_set):
            return a, b, c
    raise AssertionError("deck has no triangle of cards")


def pairs(deck: Deck) -> Iterable[Tuple[Card, Card]]:
    return itertools.combinations(deck, 2)


def deck_for(order: int, verify: Optional[bool] = None) -> Deck:
    return generate(order, verify=bool(verify))
