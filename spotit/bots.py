from __future__ import annotations

import random
from typing import List, Optional, Sequence

from .cards import Card
from .judge import common_symbols
from .models import Guess, Player


_RNG = random.Random()


def spot_symbol(cards: Sequence[Card], rng: Optional[random.Random] = None, accuracy: float = 0.8) -> int:
    """Simulated player's claim: the shared symbol with probability ``accuracy``, else a miss."""
    rng = rng or _RNG
    valid = sorted(common_symbols(cards))
    if rng.random() < accuracy:
        return rng.choice(valid)

    misses = sorted(cards[0].symbol_set.difference(valid))
    if not misses:
        return rng.choice(valid)
    return rng.choice(misses)


def simulate_guesses(
    players: Sequence[Player],
    cards: Sequence[Card],
    rng: Optional[random.Random] = None,
    accuracy: float = 0.8,
) -> List[Guess]:
    """One guess per player, each stamped with a reaction time in milliseconds."""
    rng = rng or _RNG
    guesses = []
    for player in players:
        reaction_ms = rng.randint(300, 3_000)
        guesses.append(Guess(player.player_id, spot_symbol(cards, rng, accuracy), reaction_ms))
    return guesses
