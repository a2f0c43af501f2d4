"""
Win conditions, evaluated over the players still in play.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from .player import Player
from .phases import Phase, Guess, GameOver, Vote, Outcome
from .roles import Role


@dataclass(frozen=True)
class AliveCounts:
    """Role counts among players still in play."""
    civilians: int = 0
    undercovers: int = 0
    mr_whites: int = 0

    @property
    def impostors(self) -> int:
        return self.undercovers + self.mr_whites

    @property
    def total(self) -> int:
        return self.civilians + self.impostors

    @classmethod
    def from_players(cls, players: Iterable[Player]) -> "AliveCounts":
        players = list(players)
        return cls(
            civilians=sum(1 for p in players if p.role is Role.CIVILIAN),
            undercovers=sum(1 for p in players if p.role is Role.UNDERCOVER),
            mr_whites=sum(1 for p in players if p.role is Role.MR_WHITE),
        )


def check_win_condition(counts: AliveCounts) -> Optional[Outcome]:
    """
    Check whether the match is over after a non-Mr. White elimination.

    Impostor parity is checked first: civilians who are outnumbered have
    lost, whoever the impostors are. A final pair where civilians are not
    outnumbered goes to Mr. White.

    The order only matters with no Mr. White alive and civilians
    outnumbered, which live play never reaches: the last Mr. White leaves
    through a wrong guess, and that already ends the match.

    Returns:
        The winning Outcome, or None if play continues.
    """
    if counts.civilians < counts.impostors:
        return Outcome.IMPOSTORS_WIN
    if counts.mr_whites == 0:
        return Outcome.CIVILIANS_WIN
    if counts.total <= 2:
        return Outcome.MR_WHITE_WINS
    return None


def evaluate_elimination(counts: AliveCounts, eliminated: Player, next_round: int = 1) -> Phase:
    """
    Decide the phase that follows an elimination.

    A Mr. White who is voted out always gets a guess first; that elimination
    never ends the match directly.
    """
    if eliminated.is_mr_white:
        return Guess(guesser=eliminated)

    outcome = check_win_condition(counts)
    if outcome is not None:
        return GameOver(outcome)
    return Vote(round_number=next_round)


def evaluate_wrong_guess(counts: AliveCounts, next_round: int = 1) -> Phase:
    """After a wrong guess, the match goes on only while a Mr. White remains."""
    if counts.mr_whites == 0:
        return GameOver(Outcome.CIVILIANS_WIN)
    return Vote(round_number=next_round)
