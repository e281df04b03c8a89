"""The leaderboard file: names and balances of the best players."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

LEADERBOARD_FILE = "leaderboard.txt"
MAX_ENTRIES = 10
SEPARATOR = " | "
EMPTY_MESSAGE = "Таблица лидеров пуста"
COIN_SUFFIX = "монет 🪙"


@dataclass(frozen=True)
class Player:
    """A leaderboard entry."""

    name: str
    balance: int


def _parse_balance(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def read_leaderboard(path: str | os.PathLike[str] = LEADERBOARD_FILE) -> list[Player]:
    """Read entries from the file; a missing file gives an empty board."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    players = []
    for line in text.splitlines():
        parts = line.split(SEPARATOR)
        if len(parts) == 2:
            players.append(Player(parts[0], _parse_balance(parts[1])))
    return players


def write_leaderboard(
    path: str | os.PathLike[str], players: Iterable[Player]
) -> None:
    """Write entries to the file in the given order."""
    content = "".join(f"{p.name}{SEPARATOR}{p.balance}\n" for p in players)
    Path(path).write_text(content, encoding="utf-8")


def record_result(
    path: str | os.PathLike[str], name: str, balance: int
) -> list[Player]:
    """Add a result, keep the ten richest players and return the new board."""
    if not name:
        raise ValueError("player name must not be empty")
    players = read_leaderboard(path)
    players.append(Player(name, balance))
    players.sort(key=lambda player: player.balance, reverse=True)
    del players[MAX_ENTRIES:]
    write_leaderboard(path, players)
    return players


def format_leaderboard(players: Iterable[Player]) -> str:
    """Numbered text listing of the board."""
    lines = [
        f"{place}. {player.name}{SEPARATOR}{player.balance} {COIN_SUFFIX}\n"
        for place, player in enumerate(players, start=1)
    ]
    return "".join(lines) if lines else EMPTY_MESSAGE