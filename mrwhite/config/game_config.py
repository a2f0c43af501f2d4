"""
Game configuration and constants.
"""

from dataclasses import dataclass


@dataclass
class GameConfig:
    """Configuration for match setup and the console driver."""

    # Role counts (0 = pick at random within policy bounds)
    undercover_count: int = 0
    mr_white_count: int = 0
    min_players: int = 4

    # Word list
    word_locator: str = ""  # Empty means the built-in word pairs
    fetch_timeout: float = 10.0  # seconds, applies to connect and read

    # Speaking order: "first_only" (last-starter aware) or "first_and_last"
    speaking_order_policy: str = "first_only"

    # Where the last starter, player names and word locator are kept
    preferences_path: str = ".mrwhite_prefs.json"

    log_level: str = "INFO"

    # Judge announcements
    use_judge_announcements: bool = True


# Default configuration instance
default_config = GameConfig()
