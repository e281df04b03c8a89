"""Two players taking turns at the same table."""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from twentyone.cards import Card, Deck
from twentyone.hand import BLACKJACK, Hand

BOT_RULES_TITLE = "Правила игры против бота"
BOT_RULES = (
    "1. В игре участвует игрок и бот.\n"
    "2. Каждый получает по две карты, открытые для игрока и закрытые для бота.\n"
    "3. Игрок может выбрать: взять карту (Hit) или пропустить ход (Stand).\n"
    "4. Бот берет карты, пока не наберет определенное количество очков.\n"
    "5. Побеждает тот, кто ближе к 21 очкам, но не переберет.\n"
    "6. Если у игрока больше 21 очков, он проигрывает.\n"
)
DUEL_RULES_TITLE = "Правила игры против другого игрока"
DUEL_RULES = (
    "1. В игре участвуют два игрока.\n"
    "2. Каждый игрок получает по две карты, открытые для обоих игроков.\n"
    "3. Игроки по очереди могут взять карту (Hit) или пропустить ход (Stand).\n"
    "4. Побеждает тот, кто набрал больше очков, но не перебрал 21.\n"
    "5. Если у одного из игроков больше 21 очков, он проигрывает.\n"
    "6. Если у обоих игроков очки равны, это ничья."
)


class DuelResult(Enum):
    """How a two-player round ended, with the message shown."""

    PLAYER1_WINS = "Игрок 1 выиграл!"
    PLAYER2_WINS = "Игрок 2 выиграл!"
    DRAW = "Ничья! У обоих игроков 21!"

    @property
    def message(self) -> str:
        return self.value


class _CardSource(Protocol):
    def shuffle(self) -> None: ...

    def draw(self) -> Card: ...


class DuelGame:
    """Two hands; after every action the turn passes to the other player."""

    def __init__(self, deck: _CardSource | None = None) -> None:
        self.deck: _CardSource = deck if deck is not None else Deck()
        self.player1_hand = Hand()
        self.player2_hand = Hand()
        self.player1_turn = True
        self.last_result: DuelResult | None = None
        self.start_new_game()

    @property
    def current_player(self) -> int:
        return 1 if self.player1_turn else 2

    @property
    def current_hand(self) -> Hand:
        return self.player1_hand if self.player1_turn else self.player2_hand

    def start_new_game(self) -> None:
        """Reshuffle and deal two cards to each player; the turn is kept."""
        self.deck.shuffle()
        self.player1_hand.clear()
        self.player2_hand.clear()
        for _ in range(2):
            self.player1_hand.add_card(self.deck.draw())
        for _ in range(2):
            self.player2_hand.add_card(self.deck.draw())

    def check_game_over(self) -> DuelResult | None:
        """Settle the round if it is decided, and deal a new one."""
        first = self.player1_hand.value()
        second = self.player2_hand.value()
        if first > BLACKJACK:
            result = DuelResult.PLAYER2_WINS
        elif second > BLACKJACK:
            result = DuelResult.PLAYER1_WINS
        elif first == BLACKJACK and second == BLACKJACK:
            result = DuelResult.DRAW
        else:
            return None
        self.last_result = result
        self.start_new_game()
        return result

    def hit(self) -> DuelResult | None:
        """The current player draws a card, then the turn passes."""
        self.current_hand.add_card(self.deck.draw())
        result = self.check_game_over()
        self._switch_turns()
        return result

    def stand(self) -> DuelResult | None:
        """The current player passes."""
        result = self.check_game_over()
        self._switch_turns()
        return result

    def _switch_turns(self) -> None:
        self.player1_turn = not self.player1_turn