"""Terminal blackjack against a bot or a second player, with bets, a clicker and a leaderboard."""

__version__ = "0.1.0"