from __future__ import annotations

import random
from dataclasses import dataclass
from typing import FrozenSet, Iterator, List, Optional, Tuple

# Display names for symbol ids. Enough for a deck of order 9 (91 symbols);
# larger decks fall back to numbered labels.
FRUITS = (
    "Apple", "Apricot", "Avocado", "Banana", "Bilberry", "Blackberry",
    "Blackcurrant", "Blueberry", "Boysenberry", "Currant", "Cherry",
    "Cherimoya", "ChicoFruit", "Cloudberry", "Coconut", "Cranberry",
    "Cucumber", "CustardApple", "Damson", "Date", "Dragonfruit", "Durian",
    "Elderberry", "Feijoa", "Fig", "GojiBerry", "Gooseberry", "Grape",
    "Raisin", "Grapefruit", "Guava", "Honeyberry", "Huckleberry",
    "Jabuticaba", "Jackfruit", "Jambul", "Jujube", "JuniperBerry", "Kiwano",
    "Kiwifruit", "Kumquat", "Lemon", "Lime", "Loquat", "Longan", "Lychee",
    "Mango", "Mangosteen", "Marionberry", "Melon", "Cantaloupe", "Honeydew",
    "Watermelon", "MiracleFruit", "Mulberry", "Nectarine", "Nance", "Olive",
    "Orange", "BloodOrange", "Clementine", "Mandarine", "Tangerine",
    "Papaya", "Passionfruit", "Peach", "Pear", "Persimmon", "Physalis",
    "Plantain", "Plum", "Prune", "Pineapple", "Plumcot", "Pomegranate",
    "Pomelo", "PurpleMangosteen", "Quince", "Raspberry", "Salmonberry",
    "Rambutan", "Redcurrant", "SalalBerry", "Salak", "Satsuma", "Soursop",
    "StarFruit", "SolanumQuitoense", "Strawberry", "Tamarillo", "Tamarind",
    "UgliFruit", "Yuzu",
)


def symbol_label(symbol: int) -> str:
    if 0 <= symbol < len(FRUITS):
        return FRUITS[symbol]
    return f"S{symbol}"


@dataclass(frozen=True)
class Card:
    symbol_set: FrozenSet[int]

    def __post_init__(self) -> None:
        if not isinstance(self.symbol_set, frozenset):
            symbols = list(self.symbol_set)
            if len(set(symbols)) != len(symbols):
                raise ValueError("Card symbols must be distinct")
            object.__setattr__(self, "symbol_set", frozenset(symbols))
        if not self.symbol_set:
            raise ValueError("Card needs at least one symbol")
        for symbol in self.symbol_set:
            if isinstance(symbol, bool) or not isinstance(symbol, int) or symbol < 0:
                raise ValueError(f"Invalid symbol: {symbol!r}")

    @classmethod
    def of(cls, *symbols: int) -> "Card":
        if len(set(symbols)) != len(symbols):
            raise ValueError("Card symbols must be distinct")
        return cls(frozenset(symbols))

    def __len__(self) -> int:
        return len(self.symbol_set)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.symbol_set

    def symbols(self) -> Tuple[int, ...]:
        return tuple(sorted(self.symbol_set))

    def labels(self) -> List[str]:
        return [symbol_label(symbol) for symbol in self.symbols()]

    @property
    def label(self) -> str:
        return " ".join(self.labels())

    def shared_symbols(self, other: "Card") -> FrozenSet[int]:
        return self.symbol_set & other.symbol_set

    def matches_exactly_one(self, other: "Card") -> bool:
        """True when the two cards share exactly one symbol, the key rule of the game."""
        return len(self.shared_symbols(other)) == 1


@dataclass(frozen=True)
class Deck:
    order: int
    cards: Tuple[Card, ...]

    @property
    def symbols_per_card(self) -> int:
        return self.order + 1

    @property
    def symbol_count(self) -> int:
        return self.order * self.order + self.order + 1

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, index: int) -> Card:
        return self.cards[index]

    def draw_pile(self, seed: Optional[int] = None) -> List[Card]:
        """Shuffled copy of the cards; the deck keeps its own order."""
        rng = random.Random(seed)
        pile = list(self.cards)
        rng.shuffle(pile)
        return pile


def deal(pile: List[Card], count: int) -> List[Card]:
    if len(pile) < count:
        raise ValueError("Not enough cards left in deck")
    cards = pile[:count]
    del pile[:count]
    return cards


def cards_to_labels(cards: List[Card]) -> List[str]:
    return [card.label for card in cards]
