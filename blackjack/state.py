"""Mutable state of a blackjack table: deck, hands, wallet and drawing."""

from __future__ import annotations

import math
import random
import re
import subprocess
import sys
import threading
from collections.abc import Callable, Mapping

from blackjack.cards import LOGO, Card, cards_to_art, master_deck
from blackjack.rules import Standing, get_standing, hand_value

Deck = dict[str, list[int]]
Hand = list[Card | None]

STARTING_WALLET = 25

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_RULES = (
    "\nThe rules are as follow:\n"
    "Get as close to 21 as possible by either stand, or hit (Hit means "
    "draw a card)."
    "Ace counts as 11, unless your total pass 21, in which case it "
    "counts as 1."
    "2 through 9 counts as is."
    "10, Jackal, Queen and King all count as 10.\n"
    "A hand over 21 is considered a bust, a loss.\n"
    "Total of 21 equals Jackpot, a win. Unless dealer also has Jackpot, "
    "in which case dealer wins."
    "Dealer must draw at a hand < 16, and stand at 17 or above.\n"
    "Jackpot payoff is 3/2 and a regular win is 1/1.\n"
    "Press any key to continue."
)


def read_stdin_line() -> str:
    """Read one line from standard input, raising EOFError at end of input."""
    line = sys.stdin.readline()
    if not line:
        raise EOFError("end of input")
    return line.rstrip("\r\n")


def write_stdout(text: str) -> None:
    """Write text to standard output and flush it."""
    sys.stdout.write(text)
    sys.stdout.flush()


def first_token(line: str) -> str:
    """Return the first whitespace-separated word of a line, or the line itself."""
    words = line.split()
    return words[0] if words else line


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError("stoi")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError("stoi")
    return number


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def available_deck(currently_dealt: Mapping[str, list[int]]) -> Deck:
    """Return the full deck minus the cards already dealt."""
    deck = master_deck()
    for suit, dealt in currently_dealt.items():
        if suit not in deck:
            continue
        deck[suit] = [value for value in deck[suit] if value not in dealt]
    return deck


def add_card_to_deck(deck: Mapping[str, list[int]], card: Card) -> Deck:
    """Return a copy of ``deck`` with ``card`` added to its suit."""
    new_deck = {suit: list(values) for suit, values in deck.items()}
    new_deck.setdefault(card.color, []).append(card.value)
    return new_deck


class State:
    """The table: cards dealt so far, both hands, the wallet and the bet."""

    def __init__(
        self,
        read_line: Callable[[], str] | None = None,
        write: Callable[[str], object] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.read_line = read_line or read_stdin_line
        self.write = write or write_stdout
        self.rng = rng or random.Random()
        self.currently_dealt: Deck = {}
        self.player_hand: Hand = []
        self.dealer_hand: Hand = []
        self.player_wallet = STARTING_WALLET
        self.player_bet = 0
        self._lock = threading.RLock()

    def shuffle(self) -> None:
        """Return all cards to the deck and empty both hands."""
        with self._lock:
            self.currently_dealt = {}
            self.player_hand = []
            self.dealer_hand = []

    def _deal_to(self, hand: Hand, count: int) -> None:
        available = available_deck(self.currently_dealt)
        cards, self.currently_dealt = self.deal_cards(
            available, self.currently_dealt, count
        )
        hand.extend(cards)

    def initial_deal(self) -> None:
        """Deal two cards to the player, then two to the dealer."""
        with self._lock:
            self._deal_to(self.player_hand, 2)
            self._deal_to(self.dealer_hand, 2)

    def hit_player(self) -> None:
        """Deal one more card to the player."""
        with self._lock:
            self._deal_to(self.player_hand, 1)

    def hit_dealer(self) -> None:
        """Deal one more card to the dealer."""
        with self._lock:
            self._deal_to(self.dealer_hand, 1)

    def bet(self) -> None:
        """Ask for a bet until a valid one is given, and take it from the wallet."""
        with self._lock:
            while True:
                self.write("First, place a bet $")
                token = first_token(self.read_line())
                try:
                    amount = _parse_int(token)
                except ValueError as err:
                    self.write(f"There was an error with that value: {err}\n")
                    continue
                if amount > self.player_wallet:
                    self.write("You cannot bet more than you have\n")
                    continue
                if amount == 0:
                    self.write("Common you have to bet a little!\n")
                    continue
                self.player_bet = amount
                self.player_wallet -= amount
                return

    def maybe_payout(self) -> None:
        """Pay the bet back with winnings if the player drew or won."""
        with self._lock:
            standing = self.standing()
            if standing is Standing.DRAW:
                multiple = 0.0
            elif standing is Standing.PLAYER_BLACKJACK:
                multiple = 1.5
            elif self.player_has_won():
                multiple = 1.0
            else:
                return
            payout = self.player_bet * multiple
            self.player_wallet += self.player_bet + _round_half_away(payout)

    def draw_rules(self) -> None:
        """Show the logo followed by the rules of the game."""
        self.draw_logo()
        self.write(_RULES)

    def draw_logo(self) -> None:
        """Clear the screen and show the logo and the wallet."""
        with self._lock:
            self.clear_console()
            self.write(LOGO)
            self.write(f"Player wallet: ${self.player_wallet}\n")

    def clear_console(self) -> None:
        """Clear the terminal."""
        try:
            subprocess.run(["clear"], check=False)
        except OSError:
            pass

    def draw_board(self, conceal_dealer: bool = True) -> None:
        """Show both hands; with ``conceal_dealer`` only the dealer's first card."""
        with self._lock:
            self.draw_logo()
            self.write("Your hand:\n")
            self.write(cards_to_art(self.player_hand))
            self.write(f"Value: {self.player_value()}\n")
            self.write("Dealer's hand:\n")
            if conceal_dealer:
                self.write(cards_to_art([self.dealer_hand[0], None]))
            else:
                self.write(cards_to_art(self.dealer_hand))
                self.write(f"Value: {self.dealer_value()}\n")

    def dealer_value(self) -> int:
        """Value of the dealer's hand."""
        with self._lock:
            return hand_value(self.dealer_hand)

    def player_value(self) -> int:
        """Value of the player's hand."""
        with self._lock:
            return hand_value(self.player_hand)

    def standing(self) -> Standing:
        """Current standing of the round."""
        with self._lock:
            return get_standing(self.player_value(), self.dealer_value())

    def player_has_won(self) -> bool:
        """Whether the current standing is a win for the player."""
        return self.standing() in (
            Standing.PLAYER,
            Standing.DEALER_BUST,
            Standing.PLAYER_BLACKJACK,
        )

    def random_card_from(self, available: Mapping[str, list[int]]) -> Card | None:
        """Pick a card from ``available``, or ``None`` when it holds no suits.

        The rank is drawn from the first few remaining ranks of the suit,
        as many as there are suits.
        """
        with self._lock:
            if not available:
                return None
            suit = self.rng.choice(list(available))
            values = available[suit]
            limit = min(len(available), len(values))
            if limit == 0:
                return None
            return Card(suit, values[self.rng.randrange(limit)])

    def deal_cards(
        self,
        available: Mapping[str, list[int]],
        dealt: Mapping[str, list[int]],
        count: int,
    ) -> tuple[list[Card], Deck]:
        """Draw up to ``count`` cards; return them and the updated dealt deck."""
        with self._lock:
            new_cards: list[Card] = []
            currently_dealt: Deck = {suit: list(values) for suit, values in dealt.items()}
            for _ in range(count):
                card = self.random_card_from(available)
                if card is None:
                    continue
                currently_dealt = add_card_to_deck(currently_dealt, card)
                new_cards.append(card)
            return new_cards, currently_dealt