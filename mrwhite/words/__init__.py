"""
Word pair sources: the built-in table and custom lists fetched over HTTP.
"""

from .exceptions import WordSourceError, FetchFailed, NoValidPairs
from .default_words import DEFAULT_WORD_PAIRS
from .word_source import WordSource, parse_word_pairs, pick_pair

__all__ = [
    'WordSourceError',
    'FetchFailed',
    'NoValidPairs',
    'DEFAULT_WORD_PAIRS',
    'WordSource',
    'parse_word_pairs',
    'pick_pair',
]
