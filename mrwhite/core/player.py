"""
Player class representing a match participant.
"""

from dataclasses import dataclass

from .roles import Role


@dataclass(frozen=True)
class Player:
    """
    A player with their secret role and word.

    Players never change after the roster is built. Who is still in play is
    tracked by the match, so a roster can be replayed or audited afterwards.
    """
    name: str
    role: Role
    word: str = ""
    masked_word: str = ""  # Display-only placeholder, never compared

    def __str__(self) -> str:
        return f"{self.name} ({self.role.display_name})"

    @property
    def is_mr_white(self) -> bool:
        return self.role is Role.MR_WHITE

    @property
    def display_word(self) -> str:
        """What the reveal screen shows this player."""
        return self.masked_word if self.is_mr_white else self.word

    def matches_name(self, name: str) -> bool:
        """Case-insensitive name comparison."""
        return self.name.casefold() == name.strip().casefold()
