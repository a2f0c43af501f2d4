"""
Speaking order selection.

Mr. White gains from not speaking first (less time to invent a plausible
description), so the first seat is drawn from a weighted bag where every
other role counts twice. The previous match's starter is kept out of the
first seat whenever someone else is available.
"""

import logging
import random
from typing import List, Optional

from .exceptions import InvalidConfiguration
from .player import Player
from .randomness import secure_random, choice
from ..storage.preferences import PreferenceStore

logger = logging.getLogger(__name__)

POLICY_FIRST_ONLY = "first_only"
POLICY_FIRST_AND_LAST = "first_and_last"
SPEAKING_ORDER_POLICIES = (POLICY_FIRST_ONLY, POLICY_FIRST_AND_LAST)

MR_WHITE_WEIGHT = 1
DEFAULT_WEIGHT = 2


def weighted_bag(players: List[Player]) -> List[Player]:
    """One entry per Mr. White, two per everyone else."""
    bag = []
    for player in players:
        weight = MR_WHITE_WEIGHT if player.is_mr_white else DEFAULT_WEIGHT
        bag.extend([player] * weight)
    return bag


class SpeakingOrderSelector:
    """Orders the roster for reveal and discussion."""

    def __init__(self, preferences: PreferenceStore, policy: str = POLICY_FIRST_ONLY,
                 rng: random.Random = secure_random):
        if policy not in SPEAKING_ORDER_POLICIES:
            raise InvalidConfiguration(
                f"Unknown speaking order policy: {policy}. "
                f"Must be one of {', '.join(SPEAKING_ORDER_POLICIES)}"
            )
        self.preferences = preferences
        self.policy = policy
        self.rng = rng

    def order(self, roster: List[Player]) -> List[Player]:
        """
        Return a permutation of ``roster`` and remember who starts.

        Raises:
            InvalidConfiguration: if the roster is empty.
        """
        if not roster:
            raise InvalidConfiguration("Cannot order an empty roster")

        if self.policy == POLICY_FIRST_AND_LAST:
            result = self._order_first_and_last(roster)
        else:
            result = self._order_first_only(roster)

        self.preferences.set_last_starter(result[0].name)
        logger.debug("Speaking order: %s", [p.name for p in result])
        return result

    def _pick_weighted(self, pool: List[Player]) -> Player:
        return choice(weighted_bag(pool), self.rng)

    def _draw_rest(self, pool: List[Player]) -> List[Player]:
        """Uniform draws without replacement."""
        pool = list(pool)
        drawn = []
        while pool:
            drawn.append(pool.pop(self.rng.randrange(len(pool))))
        return drawn

    def _order_first_only(self, roster: List[Player]) -> List[Player]:
        last_starter = self.preferences.get_last_starter()
        eligible = self._exclude_last_starter(roster, last_starter)

        first = self._pick_weighted(eligible)
        rest = [p for p in roster if p is not first]
        return [first] + self._draw_rest(rest)

    def _order_first_and_last(self, roster: List[Player]) -> List[Player]:
        pool = list(roster)
        first = self._pick_weighted(pool)
        pool.remove(first)
        if not pool:
            return [first]

        last = self._pick_weighted(pool)
        pool.remove(last)
        return [first] + self._draw_rest(pool) + [last]

    @staticmethod
    def _exclude_last_starter(roster: List[Player], last_starter: Optional[str]) -> List[Player]:
        if not last_starter:
            return list(roster)
        eligible = [p for p in roster if p.name != last_starter]
        # Everyone filtered out: fall back to the whole table for this draw
        return eligible or list(roster)
