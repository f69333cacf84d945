"""A terminal blackjack game: cards and art, hand rules, table state and the game loop."""

__version__ = "0.1.0"
__all__ = ["cards", "game", "rules", "state"]