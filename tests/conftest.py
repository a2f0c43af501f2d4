"""
Pytest fixtures for Mr. White tests.
"""

import random

import pytest

from mrwhite.core import GamePhase, Judge, MatchState, Player, Role, create_match
from mrwhite.config.game_config import GameConfig
from mrwhite.events import EventEmitter
from mrwhite.storage import InMemoryPreferenceStore


PLAYER_NAMES = ["Alice", "Bob", "Chloe", "Dan", "Eve", "Farid"]


@pytest.fixture
def game_config():
    """Test game configuration."""
    return GameConfig(use_judge_announcements=True)


@pytest.fixture
def rng():
    """Seeded generator so failures can be reproduced."""
    return random.Random(1234)


@pytest.fixture
def preferences():
    return InMemoryPreferenceStore()


@pytest.fixture
def event_emitter():
    return EventEmitter()


@pytest.fixture
def match_state(preferences, rng, event_emitter) -> MatchState:
    """A six-player match with one undercover and one Mr. White."""
    return create_match(
        PLAYER_NAMES,
        ("Coffee", "Tea"),
        preferences,
        undercover_count=1,
        mr_white_count=1,
        rng=rng,
        event_emitter=event_emitter,
    )


@pytest.fixture
def judge(match_state, game_config):
    return Judge(match_state, game_config)


def _build_match(roles, civilian_word="cafe", undercover_word="tea") -> MatchState:
    words = {
        Role.CIVILIAN: civilian_word,
        Role.UNDERCOVER: undercover_word,
        Role.MR_WHITE: "",
    }
    roster = [
        Player(name=f"P{i}", role=role, word=words[role],
               masked_word="?" * len(civilian_word) if role is Role.MR_WHITE else words[role])
        for i, role in enumerate(roles, 1)
    ]
    return MatchState(
        roster=roster,
        speaking_order=list(roster),
        civilian_word=civilian_word,
        undercover_word=undercover_word,
    )


@pytest.fixture
def make_match():
    """
    Factory for matches with a fixed roster, speaking in roster order.

    Takes a list of Role values; players are named P1, P2, ...
    """
    return _build_match


@pytest.fixture
def advance_to_vote():
    """Walk a fresh match through reveal and announcement."""
    def _advance(judge: Judge) -> None:
        judge.start_reveal()
        while judge.phase.kind == GamePhase.REVEAL:
            judge.next_reveal()
        judge.start_vote()
    return _advance
