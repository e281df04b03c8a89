"""Text interface: a menu leading to the bot game or the two-player game."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable

from twentyone.cards import Card, Deck
from twentyone.clicker import ClickerSession
from twentyone.duel import (
    BOT_RULES,
    BOT_RULES_TITLE,
    DUEL_RULES,
    DUEL_RULES_TITLE,
    DuelGame,
)
from twentyone.leaderboard import (
    LEADERBOARD_FILE,
    format_leaderboard,
    read_leaderboard,
    record_result,
)
from twentyone.solo import BetError, SoloGame

MENU_TEXT = (
    "Меню:\n"
    "1. Игра против бота\n"
    "2. Игра против игрока\n"
    "3. Выход"
)
UNKNOWN_CHOICE = "Неизвестный пункт меню"
BET_WARNING = "Ошибка: Ставка некорректна или превышает ваш баланс."
ROUND_OVER = "Раунд окончен. Начните новую игру (n)."
SAVED_MESSAGE = "Ваш результат был успешно сохранён."
CONFIRM_EXIT = "Вы уверены, что хотите выйти? (y/n) "
SOLO_HELP = (
    "Команды: h — взять карту, s — хватит, b СУММА — ставка, n — новая игра,\n"
    "c — кликер, save НИК — сохранить результат, top — таблица лидеров,\n"
    "r1, r2 — правила, q — выход в меню"
)
DUEL_HELP = (
    "Команды: h — взять карту, s — пропустить ход, n — новая игра,\n"
    "r1, r2 — правила, q — выход в меню"
)


class _Console:
    def __init__(self) -> None:
        self.stdin = sys.stdin
        self.stdout = sys.stdout

    def ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)


def _cards_text(cards: list[Card], reveal: int | None = None) -> str:
    shown = [
        str(card) if reveal is None or index < reveal else "??"
        for index, card in enumerate(cards)
    ]
    return " ".join(shown)


def _show_rules(console: _Console, which: str) -> None:
    if which == "r1":
        console.say(BOT_RULES_TITLE)
        console.say(BOT_RULES)
    else:
        console.say(DUEL_RULES_TITLE)
        console.say(DUEL_RULES)


def _confirm_exit(console: _Console) -> bool:
    return console.ask(CONFIRM_EXIT).lower() in ("y", "yes", "д", "да")


def _show_solo(console: _Console, game: SoloGame) -> None:
    reveal_bot = game.outcome is not None and not game.player_turn and game.bot.value() > 0
    settled = game.outcome is not None and game.outcome.name != "BUST"
    console.say(f"Баланс: {game.balance} монет 🪙")
    console.say(
        f"Ваши карты: {_cards_text(game.player_hand.cards)}  "
        f"Очки: {game.player_hand.value()}"
    )
    if reveal_bot and settled:
        console.say(
            f"Карты бота: {_cards_text(game.bot.cards)}  Очки: {game.bot.value()}"
        )
    else:
        console.say(f"Карты бота: {_cards_text(game.bot.cards, reveal=1)}  Очки: ??")


def _run_clicker(
    console: _Console, game: SoloGame, clock: Callable[[], float]
) -> None:
    session = ClickerSession(clock=clock)
    console.say("Нажимайте Enter как можно чаще!")
    while not session.is_over():
        console.ask(f"Оставшееся время: {session.remaining_time()} секунд ")
        session.click()
    console.say("Игра окончена")
    console.say(session.summary())
    game.add_reward(session.reward)
    console.say(f"Баланс: {game.balance} монет 🪙")


def _play_solo(
    console: _Console,
    game: SoloGame,
    leaderboard_path: str,
    clock: Callable[[], float],
) -> None:
    console.say(SOLO_HELP)
    _show_solo(console, game)
    while True:
        verb, _, argument = console.ask("> ").partition(" ")
        verb = verb.lower()
        argument = argument.strip()
        if verb == "q":
            if _confirm_exit(console):
                return
        elif verb in ("h", "s"):
            outcome = game.hit() if verb == "h" else game.stand()
            if outcome is None and not game.player_turn:
                console.say(ROUND_OVER)
                continue
            _show_solo(console, game)
            if outcome is not None:
                console.say(f"Игра окончена: {outcome.message}")
                console.say(f"Баланс: {game.balance} монет 🪙")
        elif verb == "n":
            game.start_new_game()
            _show_solo(console, game)
        elif verb == "b":
            try:
                game.place_bet(int(argument))
            except ValueError as exc:
                if isinstance(exc, BetError) and not game.bet_open:
                    console.say(f"Ошибка: {exc}")
                else:
                    console.say(BET_WARNING)
                continue
            console.say(f"Ваша ставка: {game.bet} монет 🪙")
            console.say(f"Баланс: {game.balance} монет 🪙")
        elif verb == "c":
            _run_clicker(console, game, clock)
        elif verb == "save":
            name = argument or console.ask("Введите ваш ник: ")
            if name:
                record_result(leaderboard_path, name, game.balance)
                console.say(SAVED_MESSAGE)
        elif verb == "top":
            console.say("Таблица лидеров")
            console.say(format_leaderboard(read_leaderboard(leaderboard_path)))
        elif verb in ("r1", "r2"):
            _show_rules(console, verb)
        else:
            console.say(SOLO_HELP)


def _show_duel(console: _Console, game: DuelGame) -> None:
    for number, hand in ((1, game.player1_hand), (2, game.player2_hand)):
        console.say(
            f"Игрок {number}: {_cards_text(hand.cards)}  Очки: {hand.value()}"
        )
    console.say(f"Текущий ход: игрок {game.current_player}")


def _play_duel(console: _Console, game: DuelGame) -> None:
    console.say(DUEL_HELP)
    _show_duel(console, game)
    while True:
        verb = console.ask("> ").lower()
        if verb == "q":
            if _confirm_exit(console):
                return
        elif verb in ("h", "s"):
            result = game.hit() if verb == "h" else game.stand()
            if result is not None:
                console.say(f"Игра окончена: {result.message}")
            _show_duel(console, game)
        elif verb == "n":
            game.start_new_game()
            _show_duel(console, game)
        elif verb in ("r1", "r2"):
            _show_rules(console, verb)
        else:
            console.say(DUEL_HELP)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="twentyone", description="Twenty-one against a bot or a friend."
    )
    parser.add_argument("--seed", type=int, help="seed for shuffling the deck")
    parser.add_argument(
        "--leaderboard",
        default=LEADERBOARD_FILE,
        help="leaderboard file (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the menu until the player chooses to leave."""
    args = _parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else random.Random()
    console = _Console()
    try:
        while True:
            console.say(MENU_TEXT)
            choice = console.ask("> ")
            if choice == "1":
                _play_solo(
                    console, SoloGame(Deck(rng)), args.leaderboard, time.monotonic
                )
            elif choice == "2":
                _play_duel(console, DuelGame(Deck(rng)))
            elif choice == "3":
                return 0
            else:
                console.say(UNKNOWN_CHOICE)
    except (EOFError, KeyboardInterrupt):
        console.say()
        return 0


if __name__ == "__main__":
    sys.exit(main())