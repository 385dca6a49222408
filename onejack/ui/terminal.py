"""
Text front end for a game of blackjack.

Reads stick/twist decisions a line at a time and renders the table as plain
text. All game rules live in the engine; this module only talks to the
player.
"""

import logging
from enum import Enum, auto
from typing import Iterable, Optional, Sequence

from onejack.blackjack.state import Finished, GameResult, GameState, InProgress
from onejack.common.card import Card
from onejack.common.io_interface import IOInterface
from onejack.engine.blackjack import BlackjackEngine

logger = logging.getLogger("onejack.ui.terminal")

WELCOME = "Welcome to One Eyed Jack's..."
STICK_OR_TWIST_PROMPT = "[S]tick or [T]wist?:"
PLAY_AGAIN_PROMPT = "... Would you like to play again? [y/n]:"
HIDDEN_CARD = "[? ?]"

RESULT_MESSAGES = {
    GameResult.PLAYER_BLACKJACK: "You win with blackjack!",
    GameResult.DEALER_BLACKJACK: "The dealer wins with blackjack.",
    GameResult.PLAYER_AND_DEALER_BLACKJACK: "DRAW! You and the dealer got blackjack.",
    GameResult.PLAYER_WINS: "You win!",
    GameResult.DEALER_WINS: "The dealer wins!",
    GameResult.PLAYER_BUST: "You went bust!",
    GameResult.DEALER_BUST: "The dealer went bust!",
    GameResult.DRAW: "It's a draw!",
}


class Decision(Enum):
    STICK = auto()
    TWIST = auto()


_DECISIONS = {
    "s": Decision.STICK,
    "stick": Decision.STICK,
    "t": Decision.TWIST,
    "twist": Decision.TWIST,
}


def render_hand(hand: Sequence[Card], hide_first: bool = False) -> str:
    """Render a hand as ``[A ♡] [10 ♢]``, optionally hiding the hole card."""
    shown = [card.short_str() for card in hand]
    if hide_first and shown:
        shown[0] = HIDDEN_CARD
    return " ".join(shown)


def render_scores(possible_scores: Iterable[int]) -> str:
    """Render the possible totals in ascending order, e.g. ``8 or 18``."""
    return " or ".join(str(score) for score in sorted(possible_scores))


class TerminalBlackjackInterface:
    """
    Plays blackjack against the dealer over a line-based IOInterface.

    End of input at any prompt ends the session.
    """

    def __init__(self, engine: BlackjackEngine, io_interface: IOInterface):
        self.engine = engine
        self.io_interface = io_interface

    def start_game(self) -> None:
        """Greet the player and keep dealing until they stop."""
        self.io_interface.output(WELCOME)
        while True:
            finished = self.play_hand(self.engine.deal())
            if finished is None:
                return
            self.print_game_over(finished)
            if not self.prompt_play_again():
                return

    def play_hand(self, game: GameState) -> Optional[Finished]:
        """
        Ask for decisions until the game is decided.

        Returns:
            The finished game, or None if input ran out first
        """
        while isinstance(game, InProgress):
            self.print_cards(game)
            self.io_interface.output(
                f"Your hand is worth: {render_scores(game.possible_scores)}"
            )
            decision = self.prompt_stick_or_twist()
            if decision is None:
                return None
            if decision is Decision.STICK:
                game = self.engine.stick(game)
            else:
                game = self.engine.twist(game)
        return game

    def print_cards(self, game: GameState, reveal_dealer: bool = False) -> None:
        cards = game.state
        self.io_interface.output(
            "Dealer Cards: "
            + render_hand(cards.dealer_hand, hide_first=not reveal_dealer)
        )
        self.io_interface.output("Your Cards:   " + render_hand(cards.player_hand))

    def print_game_over(self, game: Finished) -> None:
        self.print_cards(game, reveal_dealer=True)
        self.io_interface.output(RESULT_MESSAGES[game.result])

    def prompt_stick_or_twist(self) -> Optional[Decision]:
        """Prompt until a recognised answer is given; None at end of input."""
        while True:
            answer = self.io_interface.input(STICK_OR_TWIST_PROMPT)
            if answer is None:
                return None
            decision = _DECISIONS.get(answer.strip().lower())
            if decision is not None:
                return decision
            logger.debug("Unrecognised answer %r", answer)

    def prompt_play_again(self) -> bool:
        answer = self.io_interface.input(PLAY_AGAIN_PROMPT)
        return answer is not None and answer.strip().lower() in ("y", "yes")
