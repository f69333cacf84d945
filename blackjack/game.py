"""The interactive game loop and its command-line entry point."""

from __future__ import annotations

import logging
from collections.abc import Callable

from blackjack.rules import Standing, standing_message
from blackjack.state import (
    STARTING_WALLET,
    State,
    first_token,
    read_stdin_line,
    write_stdout,
)

log = logging.getLogger(__name__)

DEALER_STANDS_AT = 17


def farewell_message(wallet: int) -> str:
    """Return the closing words for a player leaving with ``wallet``."""
    if wallet == 0:
        return "Game's Over! You have nothing left to bet with."
    if wallet == STARTING_WALLET:
        return "You are break even. Lucky you!\nBye!"
    if wallet > STARTING_WALLET:
        return f"You've earned ${wallet - STARTING_WALLET}. Congratulations! Bye!"
    return f"You've lost ${STARTING_WALLET - wallet}. Very unfortunate. Bye!"


class Blackjack:
    """Plays rounds against the dealer until the player stops or goes broke."""

    def __init__(
        self,
        state: State | None = None,
        read_line: Callable[[], str] | None = None,
        write: Callable[[str], object] | None = None,
    ) -> None:
        self.read_line = read_line or read_stdin_line
        self.write = write or write_stdout
        self.state = state or State(self.read_line, self.write)

    def _ask_yes(self, prompt: str) -> bool:
        self.write(prompt)
        try:
            line = self.read_line()
        except EOFError:
            line = ""
        return first_token(line) == "y"

    def _play_round(self) -> None:
        state = self.state
        state.shuffle()
        state.initial_deal()
        state.draw_logo()
        state.bet()
        state.draw_board(True)

        while state.standing() not in (
            Standing.PLAYER_BLACKJACK,
            Standing.PLAYER_BUST,
        ):
            if not self._ask_yes("Hit? (enter 'y' to draw another card): "):
                break
            state.hit_player()
            state.draw_board(True)

        if state.standing() is not Standing.PLAYER_BUST:
            while (
                state.standing()
                not in (Standing.DEALER_BLACKJACK, Standing.DEALER_BUST)
                and state.dealer_value() < DEALER_STANDS_AT
            ):
                state.hit_dealer()

        state.maybe_payout()
        state.draw_board(False)
        log.debug("Your wallet: $%d", state.player_wallet)
        self.write(standing_message(state.standing()) + "\n")

    def run(self) -> None:
        """Play rounds until the player quits or the wallet is empty."""
        log.debug("Your wallet: $%d", self.state.player_wallet)
        while True:
            self._play_round()
            if self.state.player_wallet <= 0:
                break
            if not self._ask_yes("Do you want to keep going? (enter 'y' to continue): "):
                break
        log.debug("Your wallet: $%d", self.state.player_wallet)
        self.write(farewell_message(self.state.player_wallet) + "\n")


def main(argv: list[str] | None = None) -> int:
    """Start an interactive game on the terminal."""
    try:
        Blackjack().run()
    except (EOFError, KeyboardInterrupt):
        write_stdout("\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())