import io
import random
import subprocess
import sys

import pytest

from blackjack.game import Blackjack, farewell_message, main
from blackjack.rules import standing_message
from blackjack.state import STARTING_WALLET, State


def scripted(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


@pytest.fixture(autouse=True)
def no_clear(monkeypatch):
    monkeypatch.setattr(subprocess, "run", lambda *a, **k: None)


def make_game(lines, seed):
    out = []
    read = scripted(lines)
    state = State(read, out.append, random.Random(seed))
    return Blackjack(state, read, out.append), out


def test_farewell_messages():
    assert farewell_message(0) == "Game's Over! You have nothing left to bet with."
    assert farewell_message(STARTING_WALLET) == "You are break even. Lucky you!\nBye!"
    assert farewell_message(STARTING_WALLET + 5).startswith("You've earned $5.")
    assert farewell_message(STARTING_WALLET - 5).endswith("Very unfortunate. Bye!")


@pytest.mark.parametrize("seed", range(8))
def test_single_round_ends_with_farewell(seed):
    game, out = make_game(["5", "n", "n"], seed)
    game.run()
    text = "".join(out)
    state = game.state
    assert text.endswith(farewell_message(state.player_wallet) + "\n")
    assert standing_message(state.standing()) in text
    assert state.player_bet == 5
    assert state.dealer_value() >= 17 or state.standing().name in (
        "PLAYER_BUST",
        "DEALER_BLACKJACK",
        "DEALER_BUST",
    )


@pytest.mark.parametrize("seed", range(8))
def test_all_in_round(seed):
    game, out = make_game(["25", "n"], seed)
    game.run()
    text = "".join(out)
    wallet = game.state.player_wallet
    assert ("Do you want to keep going?" in text) == (wallet > 0)
    assert text.endswith(farewell_message(wallet) + "\n")


@pytest.mark.parametrize("seed", range(4))
def test_hitting_adds_cards(seed):
    game, out = make_game(["1", "y", "n", "n"], seed)
    game.run()
    text = "".join(out)
    hits_asked = text.count("Hit? (enter 'y' to draw another card): ")
    assert len(game.state.player_hand) == 2 + min(hits_asked, 1)


def test_main_plays_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\nn\nn\n"))
    assert main([]) == 0
    text = capsys.readouterr().out
    assert "First, place a bet $" in text
    assert "Bye!" in text or "Game's Over!" in text


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main() == 1
    assert "First, place a bet $" in capsys.readouterr().out