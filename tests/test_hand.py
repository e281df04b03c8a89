from twentyone.cards import Card, Suit
from twentyone.hand import BotPlayer, Hand


def _cards(*ranks):
    return [Card(Suit.HEARTS, rank) for rank in ranks]


def test_player_score_with_aces():
    hand = Hand()
    for card in _cards(10, 5, 1):
        hand.add_card(card)
    assert hand.value() == 16
    hand.add_card(Card(Suit.SPADES, 1))
    assert hand.value() == 17


def test_ace_counts_eleven_when_safe():
    hand = Hand(_cards(1, 13))
    assert hand.value() == 21


def test_two_aces():
    hand = Hand(_cards(1, 1))
    assert hand.value() == 12


def test_empty_hand_scores_zero():
    assert Hand().value() == 0


def test_clear_empties_hand():
    hand = Hand(_cards(2, 3))
    hand.clear()
    assert len(hand) == 0
    assert hand.value() == 0


def test_iteration_keeps_order():
    cards = _cards(4, 9, 12)
    hand = Hand()
    for card in cards:
        hand.add_card(card)
    assert list(hand) == cards


def test_bot_hits_below_seventeen():
    bot = BotPlayer()
    for card in _cards(10, 6):
        bot.add_card(card)
    assert bot.value() == 16
    assert bot.should_hit() is True


def test_bot_stands_at_seventeen():
    bot = BotPlayer()
    for card in _cards(10, 7):
        bot.add_card(card)
    assert bot.should_hit() is False


def test_bot_soft_seventeen_stands():
    bot = BotPlayer()
    for card in _cards(1, 6):
        bot.add_card(card)
    assert bot.value() == 17
    assert bot.should_hit() is False


def test_bot_cards_is_a_copy():
    bot = BotPlayer()
    bot.add_card(Card(Suit.CLUBS, 2))
    cards = bot.cards
    cards.append(Card(Suit.CLUBS, 3))
    assert len(bot.cards) == 1