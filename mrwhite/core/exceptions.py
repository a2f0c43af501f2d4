"""
Exceptions raised by the match engine.
"""

from typing import Optional


class MatchError(Exception):
    """Base class for match engine errors."""


class InvalidConfiguration(MatchError):
    """Raised for bad player counts, player names or role counts."""


class UnknownPlayer(InvalidConfiguration):
    """Raised when a player name is not part of the match roster."""

    def __init__(self, player_name: str, message: str = ""):
        self.player_name = player_name
        self.message = message or f"Player '{player_name}' is not in this match"
        super().__init__(self.message)


class AlreadyEliminated(MatchError):
    """Raised when voting out a player who is already out of play."""

    def __init__(self, player_name: str, message: str = ""):
        self.player_name = player_name
        self.message = message or f"Player '{player_name}' has already been eliminated"
        super().__init__(self.message)


class IllegalTransition(MatchError):
    """Raised when a match action is attempted in the wrong phase."""

    def __init__(self, phase: str, action: str, message: Optional[str] = None):
        self.phase = phase
        self.action = action
        self.message = message or f"Cannot {action} during the {phase} phase"
        super().__init__(self.message)
