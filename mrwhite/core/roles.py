"""
Role definitions and role-count policy for a Mr. White match.
"""

import math
from enum import Enum
from dataclasses import dataclass
from typing import List, Tuple
import random

from .exceptions import InvalidConfiguration
from .randomness import secure_random, randint_inclusive

MIN_PLAYERS = 4
MIN_CIVILIANS = 2


class Team(Enum):
    """Player team affiliation."""
    CIVILIANS = "civilians"
    IMPOSTORS = "impostors"  # Undercovers and Mr. Whites


class Role(Enum):
    """Player roles."""
    CIVILIAN = "civilian"
    UNDERCOVER = "undercover"
    MR_WHITE = "mr_white"

    def __str__(self) -> str:
        return self.display_name

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def team(self) -> Team:
        return Team.CIVILIANS if self is Role.CIVILIAN else Team.IMPOSTORS

    @property
    def is_impostor(self) -> bool:
        """Check if role plays against the civilians."""
        return self.team == Team.IMPOSTORS

    @property
    def has_word(self) -> bool:
        """Mr. White is the only role without a word."""
        return self is not Role.MR_WHITE


_DISPLAY_NAMES = {
    Role.CIVILIAN: "Civilian",
    Role.UNDERCOVER: "Undercover",
    Role.MR_WHITE: "Mr. White",
}


@dataclass(frozen=True)
class RoleCounts:
    """Resolved role counts for a match."""
    total_players: int
    undercover_count: int
    mr_white_count: int

    @property
    def civilian_count(self) -> int:
        return self.total_players - self.undercover_count - self.mr_white_count

    @property
    def impostor_count(self) -> int:
        return self.undercover_count + self.mr_white_count

    def as_deck(self) -> List[Role]:
        """Unshuffled list of roles, one per player."""
        return (
            [Role.MR_WHITE] * self.mr_white_count
            + [Role.UNDERCOVER] * self.undercover_count
            + [Role.CIVILIAN] * self.civilian_count
        )


def random_undercover_range(total_players: int) -> Tuple[int, int]:
    """
    Closed range used when the undercover count is left random.

    Roughly 10% of the table at the low end, just under half of the
    non-civilian floor at the high end.
    """
    low = math.ceil(total_players * 0.1)
    high = max(1, (total_players - 2) // 2)
    return low, high


def random_mr_white_range(undercover_count: int) -> Tuple[int, int]:
    """At most one Mr. White per three undercovers, but always at least one."""
    return 1, max(1, undercover_count // 3)


def max_impostors(total_players: int) -> int:
    """Impostor budget a table of this size allows, never below one."""
    return max(1, (total_players - 2) // 2)


def role_count_limits(total_players: int, undercover_count: int = 0,
                      mr_white_count: int = 0) -> Tuple[int, int]:
    """
    Highest undercover and Mr. White counts a setup may ask for.

    Each limit assumes one of the other role when that count is left
    random, and allows one impostor over the shared budget.

    Returns:
        (max_undercovers, max_mr_whites)
    """
    budget = max_impostors(total_players)
    max_undercovers = max(0, budget - (mr_white_count or 1) + 1)
    max_mr_whites = max(1, budget - (undercover_count or 1) + 1)
    return max_undercovers, max_mr_whites


def clamp_role_counts(total_players: int, undercover_count: int = 0,
                      mr_white_count: int = 0) -> Tuple[int, int]:
    """Pull requested counts down to the limits for this table; 0 stays random."""
    max_undercovers, _ = role_count_limits(total_players, undercover_count, mr_white_count)
    undercover_count = min(undercover_count, max_undercovers)
    _, max_mr_whites = role_count_limits(total_players, undercover_count, mr_white_count)
    return undercover_count, min(mr_white_count, max_mr_whites)


def resolve_role_counts(
    total_players: int,
    undercover_count: int = 0,
    mr_white_count: int = 0,
    rng: random.Random = secure_random,
    min_players: int = MIN_PLAYERS,
) -> RoleCounts:
    """
    Resolve the requested role counts into concrete ones.

    A count of 0 means "pick at random within policy bounds".

    Raises:
        InvalidConfiguration: too few players, negative counts, or not
            enough civilians left over.
    """
    min_players = max(min_players, MIN_PLAYERS)
    if total_players < min_players:
        raise InvalidConfiguration(
            f"Need at least {min_players} players, got {total_players}"
        )
    if undercover_count < 0 or mr_white_count < 0:
        raise InvalidConfiguration("Role counts cannot be negative")

    if undercover_count == 0:
        undercover_count = randint_inclusive(*random_undercover_range(total_players), rng=rng)

    if mr_white_count == 0:
        mr_white_count = randint_inclusive(*random_mr_white_range(undercover_count), rng=rng)

    counts = RoleCounts(
        total_players=total_players,
        undercover_count=undercover_count,
        mr_white_count=mr_white_count,
    )
    if counts.civilian_count < MIN_CIVILIANS:
        raise InvalidConfiguration(
            f"{counts.undercover_count} undercover(s) and {counts.mr_white_count} "
            f"Mr. White(s) leave only {counts.civilian_count} civilian(s) "
            f"for {total_players} players"
        )
    return counts
