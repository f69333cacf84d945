import pytest

from blackjack.cards import Card
from blackjack.rules import (
    Standing,
    get_standing,
    hand_value,
    standing_message,
    standing_value,
)

SUIT = "s"


def cards(*values):
    return [Card(SUIT, v) for v in values]


def test_empty_hand_is_zero():
    assert hand_value([]) == 0


def test_plain_card_counts_its_rank():
    assert hand_value(cards(7)) == 7


@pytest.mark.parametrize("face", [11, 12, 13])
def test_face_cards_count_as_ten(face):
    assert hand_value(cards(face)) == hand_value(cards(10))


def test_facedown_cards_are_ignored():
    assert hand_value([Card(SUIT, 6), None]) == hand_value(cards(6))


def test_ace_with_king_is_blackjack():
    assert hand_value(cards(1, 13)) == 21
    assert hand_value(cards(10, 1)) == hand_value(cards(1, 13))


def test_ace_counts_one_when_eleven_would_bust():
    assert hand_value(cards(10, 5, 1)) == hand_value(cards(10, 5)) + 1


def test_ace_counts_eleven_when_it_fits():
    assert hand_value(cards(5, 1)) == hand_value(cards(5)) + 11


@pytest.mark.parametrize(
    "player, dealer, expected",
    [
        (22, 25, Standing.PLAYER_BUST),
        (20, 22, Standing.DEALER_BUST),
        (21, 21, Standing.DEALER_BLACKJACK),
        (21, 18, Standing.PLAYER_BLACKJACK),
        (18, 18, Standing.DRAW),
        (19, 18, Standing.PLAYER),
        (17, 18, Standing.DEALER),
    ],
)
def test_get_standing(player, dealer, expected):
    assert get_standing(player, dealer) is expected


def test_standing_values_are_distinct_codes():
    codes = [standing_value(s) for s in Standing]
    assert sorted(codes) == list(range(1, len(Standing) + 1))
    assert standing_value(Standing.DRAW) == 1
    assert standing_value(Standing.PLAYER_BUST) == 7


@pytest.mark.parametrize(
    "standing, message",
    [
        (Standing.DRAW, "It's a draw! Nobody wins! ¯\\_(ツ)_/¯"),
        (Standing.PLAYER_BLACKJACK, "You win on Blackjack! ⊂(◉‿◉)つ"),
        (Standing.PLAYER, "You Win! ᕕ( ᐛ )ᕗ"),
        (Standing.PLAYER_BUST, "You are Bust! Dealer wins! ୧༼ಠ益ಠ༽୨"),
    ],
)
def test_standing_message(standing, message):
    assert standing_message(standing) == message


def test_every_standing_has_a_message():
    messages = {standing_message(s) for s in Standing}
    assert len(messages) == len(Standing)