"""Playing cards, the deck and their text-art rendering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

CLUBS = "\U000f08ce"
SPADES = "\U000f08d1"
HEARTS = "\U000f08d0"
DIAMONDS = "\U000f08cf"

SUITS = (CLUBS, SPADES, HEARTS, DIAMONDS)
VALUES = tuple(range(1, 14))

LOGO = r"""
.------.            _     _            _    _            _
|A_  _ |.          | |   | |          | |  (_)          | |
|( \/ ).-----.     | |__ | | __ _  ___| | ___  __ _  ___| | __
| \  /|K /\  |     | '_ \| |/ _` |/ __| |/ / |/ _` |/ __| |/ /
src/  \/ | /  \ |     | |_) | | (_| | (__|   <| | (_| | (__|   <
`-----| \  / |     |_.__/|_|\__,_|\___|_|\_\ |\__,_|\___|_|\_\
      |  \/ K|                            _/ |
      `------'                           |__/
"""

_TOP = "╭───╮"
_BOTTOM = "╰───╯"


@dataclass(frozen=True)
class Card:
    """A card: its suit glyph and its rank from 1 (ace) to 13 (king)."""

    color: str
    value: int

    def __str__(self) -> str:
        return f"{self.color}:{self.value}"


_SIGNS = {13: "K", 12: "Q", 11: "J", 1: "A"}


def value_to_sign(value: int) -> str:
    """Return the symbol printed on a card of the given rank."""
    return _SIGNS.get(value, str(value))


def card_art(card: Card) -> list[str]:
    """Return the lines that draw a face-up card."""
    sign = value_to_sign(card.value)
    padding = " " if card.value == 10 else "  "
    return [
        _TOP,
        f"│{sign}{padding}│",
        f"│ {card.color} │",
        f"│{padding}{sign}│",
        _BOTTOM,
    ]


def facedown_card_art() -> list[str]:
    """Return the lines that draw a face-down card."""
    return [_TOP, "│?  │", "│ ? │", "│  ?│", _BOTTOM]


def cards_to_art(cards: Iterable[Card | None]) -> str:
    """Draw cards side by side; ``None`` stands for a face-down card."""
    arts = [facedown_card_art() if card is None else card_art(card) for card in cards]
    if not arts:
        return ""
    return "".join("".join(row) + "\n" for row in zip(*arts))


def master_deck() -> dict[str, list[int]]:
    """Return a fresh full deck: every suit mapped to all thirteen ranks."""
    return {suit: list(VALUES) for suit in SUITS}