"""
Core match engine: roles, players, match state, and rule enforcement.
"""

from .exceptions import MatchError, InvalidConfiguration, UnknownPlayer, AlreadyEliminated, IllegalTransition
from .roles import (
    Role, Team, RoleCounts, resolve_role_counts, max_impostors, role_count_limits, clamp_role_counts,
)
from .player import Player
from .role_assigner import assign_roles
from .speaking_order import SpeakingOrderSelector
from .guess import GuessResult, normalize_word, resolve_guess
from .phases import (
    GamePhase, Outcome, Phase, Setup, Reveal, Announce, Vote, Result, Guess, GameOver, Cancelled,
)
from .win_evaluator import AliveCounts, check_win_condition, evaluate_elimination, evaluate_wrong_guess
from .game_engine import MatchState, create_match
from .judge import Judge

__all__ = [
    'MatchError',
    'InvalidConfiguration',
    'UnknownPlayer',
    'AlreadyEliminated',
    'IllegalTransition',
    'Role',
    'Team',
    'RoleCounts',
    'resolve_role_counts',
    'max_impostors',
    'role_count_limits',
    'clamp_role_counts',
    'Player',
    'assign_roles',
    'SpeakingOrderSelector',
    'GuessResult',
    'normalize_word',
    'resolve_guess',
    'GamePhase',
    'Outcome',
    'Phase',
    'Setup',
    'Reveal',
    'Announce',
    'Vote',
    'Result',
    'Guess',
    'GameOver',
    'Cancelled',
    'AliveCounts',
    'check_win_condition',
    'evaluate_elimination',
    'evaluate_wrong_guess',
    'MatchState',
    'create_match',
    'Judge',
]
