"""
Match phases.

Each phase is its own frozen dataclass carrying only what that phase needs,
so a match can never be, say, in a guess phase without a guesser.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .player import Player


class GamePhase(Enum):
    """Kind of the current match phase."""
    SETUP = "setup"
    REVEAL = "reveal"
    ANNOUNCE = "announce"
    VOTE = "vote"
    RESULT = "result"
    GUESS = "guess"
    GAME_OVER = "game_over"
    CANCELLED = "cancelled"


class Outcome(Enum):
    """How a match ended."""
    CIVILIANS_WIN = "Civilians win"
    IMPOSTORS_WIN = "Impostors win"
    MR_WHITE_WINS = "Mr. White wins"
    UNDERCOVERS_WIN = "Undercovers win"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Setup:
    kind = GamePhase.SETUP


@dataclass(frozen=True)
class Reveal:
    """Players privately view their word, one at a time in speaking order."""
    index: int = 0
    kind = GamePhase.REVEAL


@dataclass(frozen=True)
class Announce:
    """The first speaker is named."""
    starter: Player
    kind = GamePhase.ANNOUNCE


@dataclass(frozen=True)
class Vote:
    round_number: int = 1
    kind = GamePhase.VOTE


@dataclass(frozen=True)
class Result:
    """The player just voted out is revealed."""
    eliminated: Player
    kind = GamePhase.RESULT


@dataclass(frozen=True)
class Guess:
    """An eliminated Mr. White gets one guess at the civilian word."""
    guesser: Player
    kind = GamePhase.GUESS


@dataclass(frozen=True)
class GameOver:
    outcome: Outcome
    kind = GamePhase.GAME_OVER


@dataclass(frozen=True)
class Cancelled:
    kind = GamePhase.CANCELLED


Phase = Union[Setup, Reveal, Announce, Vote, Result, Guess, GameOver, Cancelled]

TERMINAL_PHASES = (GamePhase.GAME_OVER, GamePhase.CANCELLED)
