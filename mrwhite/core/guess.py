"""
Mr. White's last-chance guess.
"""

import unicodedata
from enum import Enum


class GuessResult(Enum):
    """What an eliminated Mr. White's guess matched."""
    CIVILIAN_WORD = "civilian_word"
    UNDERCOVER_WORD = "undercover_word"
    WRONG = "wrong"


def normalize_word(text: str) -> str:
    """
    Fold a word for comparison: trimmed, case-folded, accents removed.

    >>> normalize_word("  Café ")
    'cafe'
    """
    decomposed = unicodedata.normalize("NFD", text.strip().casefold())
    return "".join(ch for ch in decomposed if unicodedata.category(ch) != "Mn")


def resolve_guess(guess: str, civilian_word: str, undercover_word: str) -> GuessResult:
    """Compare a free-text guess against both words after normalization."""
    normalized = normalize_word(guess)
    if not normalized:
        return GuessResult.WRONG

    if normalized == normalize_word(civilian_word):
        return GuessResult.CIVILIAN_WORD
    if normalized == normalize_word(undercover_word):
        return GuessResult.UNDERCOVER_WORD
    return GuessResult.WRONG
