"""
Exceptions for word-list loading.
"""


class WordSourceError(Exception):
    """Base class for word source failures. Callers may fall back to defaults."""


class FetchFailed(WordSourceError):
    """Raised when a custom word list cannot be downloaded."""

    def __init__(self, locator: str, detail: str):
        self.locator = locator
        self.detail = detail
        self.message = f"Failed to load {locator}: {detail}"
        super().__init__(self.message)


class NoValidPairs(WordSourceError):
    """Raised when a word list has no usable 'word,word' line."""

    def __init__(self, locator: str):
        self.locator = locator
        self.message = f"No valid word pairs found in {locator}"
        super().__init__(self.message)
