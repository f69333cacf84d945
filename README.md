# blackjack

A blackjack game for the terminal. You start with a $25 wallet, place a bet
each round and play against the dealer. Cards are drawn as small boxes, with
the dealer's second card kept face down until the round is over. Suits are
shown with Nerd Font glyphs, so a terminal font that has them gives the best
result.

## Installing

```
pip install .
```

## Playing

```
blackjack
```

or, without installing the command:

```
python -m blackjack.game
```

Each round goes like this:

1. Two cards are dealt to you and two to the dealer.
2. The screen is cleared (by running the `clear` command, if there is one)
   and your wallet is shown.
3. You are asked to place a bet. The first word of your answer must start
   with a whole number that is not zero and is no more than what you hold;
   otherwise you are asked again. The bet is taken from your wallet.
4. You see your cards and the first of the dealer's. Enter `y` to hit (draw
   another card); any other answer stands. You stop being asked once your
   hand reaches 21 or goes over.
5. Unless you went bust, the dealer draws until reaching 17 or more, 21, or
   going bust.
6. Both hands are shown and the result is announced.

Payouts: a draw returns your bet, a regular win (including a dealer bust)
returns it plus the same again, and a blackjack (21) returns it plus 3/2 of
it, rounded to whole dollars. If the dealer reaches 21, the dealer wins, even
when you have 21 too.

After each round, enter `y` to keep playing. The game ends when you stop or
when your wallet is empty, and tells you how much you won or lost overall.
If input ends in the middle of a bet, the command exits with status 1.

## Card values

- Ace counts as 11, or as 1 when 11 would take the running total past 21.
- 2 through 10 count as their face value.
- Jack, Queen and King count as 10.

Cards already dealt in a round are not dealt again. The rank of a new card
is picked among the first few still-available ranks of a randomly chosen
suit (as many as there are suits), so low ranks come up more often than in a
real deck.

## Using the pieces

The game logic can be used on its own:

```python
from blackjack.cards import Card, cards_to_art
from blackjack.rules import hand_value, get_standing, standing_message

hand = [Card("♠", 1), Card("♥", 13)]
print(cards_to_art(hand))                    # None in the list draws a face-down card
print(hand_value(hand))                      # 21
print(standing_message(get_standing(21, 18)))
```

- `blackjack.cards` has `Card`, `value_to_sign`, `card_art`,
  `facedown_card_art`, `cards_to_art`, `master_deck` and the `LOGO` text.
- `blackjack.rules` has the `Standing` enum, `hand_value`, `get_standing`,
  `standing_value` and `standing_message`.
- `blackjack.state.State` holds one game's dealt cards, hands, wallet and
  bet. It takes the function it reads input lines from, the function it
  writes output with, and the `random.Random` it draws cards with, so a game
  can be driven from code or tests. `available_deck` and `add_card_to_deck`
  work on decks given as plain dicts of suit to ranks. `State.draw_rules`
  prints the rules text, though the game loop does not show it.
- `blackjack.game.Blackjack` runs the full interactive loop on top of a
  `State`; `farewell_message` gives the closing words for a final wallet.
  The wallet is logged at debug level through the `blackjack.game` logger.

## What it does not do

There is no splitting, doubling down, insurance or multiple decks, and the
wallet is not kept between runs.

## Running the tests

```
pip install .[test]
pytest
```