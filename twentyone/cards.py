"""Playing cards and a reshuffling 52-card deck."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Iterator

_RANK_SYMBOLS = {1: "A", 11: "J", 12: "Q", 13: "K"}
_IMAGE_TEMPLATE = ":/game/cards/resources/cards/{rank}{suit}.png"


class Suit(Enum):
    """Card suits, in deck order."""

    HEARTS = ("♥", "H")
    DIAMONDS = ("♦", "D")
    CLUBS = ("♣", "C")
    SPADES = ("♠", "S")

    @property
    def symbol(self) -> str:
        return self.value[0]

    @property
    def letter(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class Card:
    """A card; rank 1 is the ace, 11 to 13 are jack, queen and king."""

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        if not 1 <= self.rank <= 13:
            raise ValueError(f"rank must be between 1 and 13, got {self.rank}")

    @property
    def rank_symbol(self) -> str:
        return _RANK_SYMBOLS.get(self.rank, str(self.rank))

    def value(self) -> int:
        """Points the card is worth, counting an ace as one."""
        return min(self.rank, 10)

    def image_path(self) -> str:
        """Resource path of the card's face image."""
        return _IMAGE_TEMPLATE.format(rank=self.rank_symbol, suit=self.suit.letter)

    def __str__(self) -> str:
        return f"{self.rank_symbol}{self.suit.symbol}"


class Deck:
    """A 52-card deck that reshuffles itself once every card has been drawn."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cards = [Card(suit, rank) for suit in Suit for rank in range(1, 14)]
        self._position = 0
        self.shuffle()

    def shuffle(self) -> None:
        """Shuffle all 52 cards back into the deck."""
        self._rng.shuffle(self._cards)
        self._position = 0

    def draw(self) -> Card:
        """Take the next card, reshuffling first if the deck is exhausted."""
        if self._position >= len(self._cards):
            self.shuffle()
        card = self._cards[self._position]
        self._position += 1
        return card

    @property
    def remaining(self) -> int:
        return len(self._cards) - self._position

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards[self._position:])