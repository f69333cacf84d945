"""Hand values and outcome of a blackjack round."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from blackjack.cards import Card

BLACKJACK = 21


class Standing(Enum):
    """Outcome of comparing the player's hand with the dealer's."""

    DRAW = 1
    PLAYER_BLACKJACK = 2
    DEALER_BLACKJACK = 3
    PLAYER = 4
    DEALER = 5
    DEALER_BUST = 6
    PLAYER_BUST = 7


def hand_value(hand: Iterable[Card | None]) -> int:
    """Score a hand; face-down (``None``) cards are ignored.

    Face cards count 10. An ace counts 11 unless that would take the running
    total past 21, in which case it counts 1.
    """
    total = 0
    for card in hand:
        if card is None:
            continue
        if card.value > 10:
            total += 10
        elif card.value == 1:
            total += 1 if total + 11 > BLACKJACK else 11
        else:
            total += card.value
    return total


def get_standing(player: int, dealer: int) -> Standing:
    """Decide the standing from the two hand values."""
    if player > BLACKJACK:
        return Standing.PLAYER_BUST
    if dealer > BLACKJACK:
        return Standing.DEALER_BUST
    if dealer == BLACKJACK:
        return Standing.DEALER_BLACKJACK
    if player == BLACKJACK:
        return Standing.PLAYER_BLACKJACK
    if player == dealer:
        return Standing.DRAW
    if player > dealer:
        return Standing.PLAYER
    return Standing.DEALER


def standing_value(standing: Standing) -> int:
    """Return the numeric code of a standing."""
    return standing.value


_MESSAGES = {
    Standing.DRAW: "It's a draw! Nobody wins! ¯\\_(ツ)_/¯",
    Standing.PLAYER_BLACKJACK: "You win on Blackjack! ⊂(◉‿◉)つ",
    Standing.DEALER_BLACKJACK: "Dealer wins on Blackjack! (´סּ︵סּ`)",
    Standing.PLAYER: "You Win! ᕕ( ᐛ )ᕗ",
    Standing.DEALER: "Dealer Wins! (ⱺ ʖ̯ⱺ)",
    Standing.DEALER_BUST: "Dealer is Bust! You Win! (͠≖ ͜ʖ͠≖) hehe",
    Standing.PLAYER_BUST: "You are Bust! Dealer wins! ୧༼ಠ益ಠ༽୨",
}


def standing_message(standing: Standing) -> str:
    """Return the line announcing a standing to the player."""
    return _MESSAGES[standing]