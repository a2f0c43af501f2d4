"""
Secret role and word assignment.
"""

import logging
import random
from typing import List, Sequence, Tuple

from .exceptions import InvalidConfiguration
from .player import Player
from .randomness import secure_random, coin_flip, shuffled
from .roles import MIN_PLAYERS, Role, RoleCounts, resolve_role_counts

logger = logging.getLogger(__name__)

WordPair = Tuple[str, str]

MASK_CHAR = "?"


def normalize_player_names(player_names: Sequence[str]) -> List[str]:
    """
    Strip names and check they are usable for a match.

    Raises:
        InvalidConfiguration: on empty or duplicate (case-insensitive) names.
    """
    names = [name.strip() for name in player_names]
    if any(not name for name in names):
        raise InvalidConfiguration("Player names cannot be empty")

    seen = {}
    for name in names:
        key = name.casefold()
        if key in seen:
            raise InvalidConfiguration(
                f"Duplicate player name: '{name}' (already used as '{seen[key]}')"
            )
        seen[key] = name
    return names


def orient_words(word_pair: WordPair, rng: random.Random = secure_random) -> WordPair:
    """
    Flip a fair coin to decide which word the civilians get.

    Returns:
        (civilian_word, undercover_word)
    """
    first, second = word_pair
    if coin_flip(rng):
        return first, second
    return second, first


def build_roster(
    player_names: Sequence[str],
    counts: RoleCounts,
    civilian_word: str,
    undercover_word: str,
    rng: random.Random = secure_random,
) -> List[Player]:
    """Deal a shuffled deck of (role, word) entries to the players in name order."""
    if len(player_names) != counts.total_players:
        raise InvalidConfiguration(
            f"Role counts are for {counts.total_players} players, got {len(player_names)} names"
        )

    mask = MASK_CHAR * len(civilian_word)
    words = {Role.CIVILIAN: civilian_word, Role.UNDERCOVER: undercover_word}
    deck = shuffled(counts.as_deck(), rng)

    return [
        Player(
            name=name,
            role=role,
            word=words[role] if role.has_word else "",
            masked_word=words[role] if role.has_word else mask,
        )
        for name, role in zip(player_names, deck)
    ]


def assign_roles(
    player_names: Sequence[str],
    word_pair: WordPair,
    undercover_count: int = 0,
    mr_white_count: int = 0,
    rng: random.Random = secure_random,
    min_players: int = MIN_PLAYERS,
) -> List[Player]:
    """
    Build the roster for a new match.

    Args:
        player_names: At least four unique names.
        word_pair: The two similar words for this match, in any order.
        undercover_count: Number of undercovers, or 0 for random.
        mr_white_count: Number of Mr. Whites, or 0 for random.
        rng: Random source, secure by default.
        min_players: Smallest table allowed, never below four.

    Returns:
        One Player per input name, in input order, with roles shuffled.

    Raises:
        InvalidConfiguration: bad player count, duplicate names or role
            counts that leave fewer than two civilians.
    """
    names = normalize_player_names(player_names)
    counts = resolve_role_counts(
        len(names), undercover_count, mr_white_count, rng=rng, min_players=min_players,
    )
    civilian_word, undercover_word = orient_words(word_pair, rng)
    roster = build_roster(names, counts, civilian_word, undercover_word, rng)

    logger.info(
        "Assigned roles for %d players: %d civilian(s), %d undercover(s), %d Mr. White(s)",
        counts.total_players, counts.civilian_count,
        counts.undercover_count, counts.mr_white_count,
    )
    return roster
