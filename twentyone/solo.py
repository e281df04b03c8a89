"""A round of twenty-one against the bot, with a coin balance and bets."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from twentyone.cards import Card, Deck
from twentyone.hand import BLACKJACK, BotPlayer, Hand

STARTING_BALANCE = 100


class Outcome(Enum):
    """How a round ended, with the message shown to the player."""

    WIN = "Вы выиграли!"
    DRAW = "Ничья!"
    LOSE = "Вы проиграли!"
    BUST = "Перебор! Вы проиграли"

    @property
    def message(self) -> str:
        return self.value


class BetError(ValueError):
    """Raised when a bet is refused."""


class _CardSource(Protocol):
    def shuffle(self) -> None: ...

    def draw(self) -> Card: ...


class SoloGame:
    """One player against the bot; the bot draws while below 17."""

    def __init__(
        self, deck: _CardSource | None = None, balance: int = STARTING_BALANCE
    ) -> None:
        self.deck: _CardSource = deck if deck is not None else Deck()
        self.balance = balance
        self.bet = 0
        self.player_hand = Hand()
        self.bot = BotPlayer()
        self.player_turn = True
        self.outcome: Outcome | None = None
        self._bet_open = True
        self.start_new_game()

    @property
    def bet_open(self) -> bool:
        """Whether a bet may still be placed in this round."""
        return self._bet_open

    def start_new_game(self) -> None:
        """Reshuffle and deal two cards each to the player and the bot."""
        self.deck.shuffle()
        self.player_hand = Hand()
        self.bot = BotPlayer()
        self.player_turn = True
        self.outcome = None
        for _ in range(2):
            self.player_hand.add_card(self.deck.draw())
        for _ in range(2):
            self.bot.add_card(self.deck.draw())
        self.bet = 0
        self._bet_open = True

    def place_bet(self, amount: int) -> None:
        """Take the bet out of the balance; one bet per round."""
        if not self._bet_open:
            raise BetError("a bet has already been placed in this round")
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise BetError(f"bet must be a whole number, got {amount!r}")
        if amount <= 0 or amount > self.balance:
            raise BetError("Ставка некорректна или превышает ваш баланс.")
        self.bet = amount
        self.balance -= amount
        self._bet_open = False

    def hit(self) -> Outcome | None:
        """Draw a card for the player; returns BUST if it takes them over 21."""
        if not self.player_turn:
            return None
        self.player_hand.add_card(self.deck.draw())
        if self.player_hand.value() > BLACKJACK:
            self.player_turn = False
            self.outcome = Outcome.BUST
            return self.outcome
        return None

    def stand(self) -> Outcome | None:
        """End the player's turn, play the bot out and settle the bet."""
        if not self.player_turn:
            return None
        self.player_turn = False
        while self.bot.should_hit():
            self.bot.add_card(self.deck.draw())

        player_score = self.player_hand.value()
        bot_score = self.bot.value()
        if bot_score > BLACKJACK or player_score > bot_score:
            if player_score == BLACKJACK:
                self.balance += self.bet * 2
            else:
                self.balance += self.bet * 3 // 2
            self.outcome = Outcome.WIN
        elif player_score == bot_score:
            self.balance += self.bet
            self.outcome = Outcome.DRAW
        else:
            self.outcome = Outcome.LOSE
        return self.outcome

    def add_reward(self, reward: int) -> None:
        """Add coins won elsewhere to the balance."""
        self.balance += reward