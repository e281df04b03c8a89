import io

from twentyone.cli import (
    BET_WARNING,
    MENU_TEXT,
    SAVED_MESSAGE,
    UNKNOWN_CHOICE,
    main,
)
from twentyone.duel import BOT_RULES, DUEL_RULES
from twentyone.leaderboard import EMPTY_MESSAGE, Player, read_leaderboard


def run(monkeypatch, capsys, text, *args):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(["--seed", "7", *args])
    return code, capsys.readouterr().out


def test_exit_from_menu(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "3\n")
    assert code == 0
    assert out.count(MENU_TEXT) == 1


def test_end_of_input_leaves_cleanly(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "")
    assert code == 0
    assert MENU_TEXT in out


def test_unknown_menu_choice(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "9\n3\n")
    assert UNKNOWN_CHOICE in out
    assert out.count(MENU_TEXT) == 2


def test_solo_shows_starting_balance(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "1\n")
    assert "Баланс: 100 монет 🪙" in out
    assert "Очки: ??" in out


def test_invalid_bet_is_refused(monkeypatch, capsys, tmp_path):
    board = tmp_path / "board.txt"
    _, out = run(monkeypatch, capsys, "1\nb abc\nb 500\nsave Alice\n", "--leaderboard", str(board))
    assert out.count(BET_WARNING) == 2
    assert read_leaderboard(board) == [Player("Alice", 100)]


def test_bet_is_taken_from_balance(monkeypatch, capsys, tmp_path):
    board = tmp_path / "board.txt"
    _, out = run(monkeypatch, capsys, "1\nb 30\nsave Bob\n", "--leaderboard", str(board))
    assert "Ваша ставка: 30 монет 🪙" in out
    assert SAVED_MESSAGE in out
    assert read_leaderboard(board) == [Player("Bob", 70)]


def test_empty_leaderboard_message(monkeypatch, capsys, tmp_path):
    board = tmp_path / "missing.txt"
    _, out = run(monkeypatch, capsys, "1\ntop\n", "--leaderboard", str(board))
    assert EMPTY_MESSAGE in out


def test_quit_game_returns_to_menu(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "1\nq\ny\n3\n")
    assert code == 0
    assert out.count(MENU_TEXT) == 2


def test_declined_quit_stays_in_game(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "1\nq\nn\nr1\n")
    assert out.count(MENU_TEXT) == 1
    assert BOT_RULES in out


def test_duel_starts_with_player_one(monkeypatch, capsys):
    _, out = run(monkeypatch, capsys, "2\ns\nr2\n")
    assert "Текущий ход: игрок 1" in out
    assert "Текущий ход: игрок 2" in out
    assert DUEL_RULES in out


def test_same_seed_gives_same_game(monkeypatch, capsys):
    _, first = run(monkeypatch, capsys, "1\nh\ns\n")
    _, second = run(monkeypatch, capsys, "1\nh\ns\n")
    assert first == second
    assert "Ваши карты:" in first