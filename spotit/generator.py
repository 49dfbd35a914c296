from __future__ import annotations

import itertools
from collections import Counter
from typing import List

from .cards import Card, Deck
from .errors import InvalidOrder
from .field import GaloisField, is_prime_power

# Symbol layout for order n (the projective plane over GF(n)):
#   0                     point at infinity shared by the vertical lines
#   1 .. n                slope points, one per slope m (symbol 1 + m)
#   1 + n + x*n + y       affine point (x, y), one block of n per column x
# Cards are the lines: the line at infinity, the n verticals x = c, and the
# n*n lines y = m*x + c.


def generate(order: int, *, verify: bool = False) -> Deck:
    """Build the deck of order ``order`` (n*n + n + 1 cards of n + 1 symbols)."""
    if isinstance(order, bool) or not isinstance(order, int) or order <= 0:
        raise InvalidOrder(order)
    if not is_prime_power(order):
        raise InvalidOrder(order)

    n = order
    gf = GaloisField(n)

    def point(x: int, y: int) -> int:
        return 1 + n + x * n + y

    cards: List[Card] = [Card(frozenset(range(0, n + 1)))]
    for x in gf.elements():
        cards.append(Card(frozenset([0] + [point(x, y) for y in gf.elements()])))

    for m in gf.elements():
        for c in gf.elements():
            line = [1 + m] + [point(x, gf.add(gf.mul(m, x), c)) for x in gf.elements()]
            cards.append(Card(frozenset(line)))

    deck = Deck(order=n, cards=tuple(cards))
    if verify:
        problems = audit_deck(deck)
        if problems:
            raise RuntimeError(f"order {n} deck failed audit: {problems[:3]}")
    return deck


def audit_deck(deck: Deck) -> List[str]:
    """Return every structural violation in ``deck``; an empty list means it is valid."""
    problems: List[str] = []
    expected_cards = deck.symbol_count
    if len(deck) != expected_cards:
        problems.append(f"expected {expected_cards} cards, found {len(deck)}")

    for idx, card in enumerate(deck):
        if len(card) != deck.symbols_per_card:
            problems.append(f"card {idx} has {len(card)} symbols, expected {deck.symbols_per_card}")
        stray = [s for s in card.symbol_set if s >= deck.symbol_count]
        if stray:
            problems.append(f"card {idx} uses symbols outside the deck: {sorted(stray)}")

    for (i, a), (j, b) in itertools.combinations(enumerate(deck), 2):
        shared = len(a.shared_symbols(b))
        if shared != 1:
            problems.append(f"cards {i} and {j} share {shared} symbols")

    usage = Counter(symbol for card in deck for symbol in card.symbol_set)
    for symbol in range(deck.symbol_count):
        if usage[symbol] != deck.symbols_per_card:
            problems.append(f"symbol {symbol} appears on {usage[symbol]} cards")
    return problems
