"""Hands of cards and the dealer-style bot."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from twentyone.cards import Card

BLACKJACK = 21
BOT_STAND_THRESHOLD = 17


@dataclass
class Hand:
    """Cards held by one side of the table."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def value(self) -> int:
        """Best score, counting aces as eleven where that does not bust."""
        total = sum(card.value() for card in self.cards)
        aces = sum(1 for card in self.cards if card.rank == 1)
        while aces and total + 10 <= BLACKJACK:
            total += 10
            aces -= 1
        return total

    def clear(self) -> None:
        self.cards.clear()

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)


@dataclass
class BotPlayer:
    """An opponent that keeps drawing while its score is below 17."""

    hand: Hand = field(default_factory=Hand)

    def add_card(self, card: Card) -> None:
        self.hand.add_card(card)

    def value(self) -> int:
        return self.hand.value()

    def should_hit(self) -> bool:
        return self.value() < BOT_STAND_THRESHOLD

    @property
    def cards(self) -> list[Card]:
        return list(self.hand.cards)