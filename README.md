# twentyone

Blackjack in the terminal. You can play against a dealer bot or against a
friend at the same keyboard. A short clicker round earns extra coins. All game
messages are in Russian.

## Install

    pip install .

## Play

    twentyone [--seed N] [--leaderboard FILE]

- `--seed N` seeds the shuffling, so the same seed deals the same cards.
- `--leaderboard FILE` sets the leaderboard file. The default is
  `leaderboard.txt` in the current directory.

The menu offers three choices: `1` plays against the bot, `2` plays against
another player, and `3` quits. End of input or Ctrl-C also quits.

### Against the bot

You start with 100 coins. At the start of each round you and the bot each get
two cards, and only the bot's first card is shown. The commands are:

| command       | effect                                                    |
|---------------|-----------------------------------------------------------|
| `h`           | take a card; going over 21 loses the round at once        |
| `s`           | stand; the bot draws until it has 17 or more, then the round is settled |
| `b AMOUNT`    | bet a whole number from 1 up to your balance, once per round |
| `n`           | new round                                                 |
| `c`           | play the clicker round                                    |
| `save NAME`   | save your balance to the leaderboard (asks for a name if none is given) |
| `top`         | show the leaderboard                                      |
| `r1`, `r2`    | show the rules for the bot game or the two-player game    |
| `q`           | back to the menu, after you confirm                       |

The bet leaves your balance when you place it. If you beat the bot, or the bot
goes over 21, you get back twice your bet when you have exactly 21. Any other
win pays 1.5 times the bet, rounded down. On a draw you get your stake back. On
a loss you get nothing back. The leaderboard keeps the ten highest balances.

### Clicker

Press Enter as often as you can for 30 seconds. A press that comes at the
deadline still counts. The reward is 5 coins for 60 presses and 25 coins for
90 presses. From 120 presses it is `60 + (presses - 50) * 2` coins. The reward
is added to your balance in the bot game.

### Against another player

Both hands are shown. The players take turns, and each `h` (take a card) or
`s` (pass) hands the turn to the other player. A player who goes over 21 loses.
If both players have exactly 21, the round is a draw. Once a round is decided,
a new one is dealt straight away. `n`, `r1`, `r2` and `q` work as in the bot
game.

Aces count as 11 while that keeps the hand at 21 or less. Otherwise they count
as 1. Jacks, queens and kings are worth 10. The 52-card deck is reshuffled at
the start of every round, and again whenever it runs out.

## Use as a library

```python
import random
from twentyone.cards import Deck
from twentyone.hand import Hand

deck = Deck(random.Random(7))
hand = Hand()
hand.add_card(deck.draw())
hand.add_card(deck.draw())
print(hand.value())
```

- `twentyone.cards`: `Suit`, `Card` (`value()`, `image_path()`, `str()`) and
  `Deck` (`shuffle()`, `draw()`, `remaining`).
- `twentyone.hand`: `Hand` and `BotPlayer`, whose `should_hit()` is true
  below 17.
- `twentyone.solo`: `SoloGame` with `place_bet()`, `hit()`, `stand()`,
  `start_new_game()` and `add_reward()`. These return an `Outcome`. A refused
  bet raises `BetError`.
- `twentyone.duel`: `DuelGame` with `hit()`, `stand()` and
  `check_game_over()`. These return a `DuelResult`.
- `twentyone.clicker`: `reward_for_clicks()` and `ClickerSession`.
- `twentyone.leaderboard`: `Player`, `read_leaderboard()`,
  `write_leaderboard()`, `record_result()` and `format_leaderboard()`. The
  file holds one `name | balance` entry per line.

## What it does not do

- There is no graphical window. Cards are shown as text such as `A♠` or `10♥`.
  `Card.image_path()` returns a resource path, but no card images are included
  and nothing displays them.
- There is no background music or other sound.

## Tests

    pip install .[test]
    pytest