"""
Word source: built-in pairs or a custom "word,word" list fetched over HTTP.
"""

import logging
import random
from typing import List, Optional, Tuple

import httpx

from .default_words import DEFAULT_WORD_PAIRS
from .exceptions import FetchFailed, NoValidPairs, WordSourceError
from ..core.randomness import secure_random, choice

logger = logging.getLogger(__name__)

WordPair = Tuple[str, str]

DEFAULT_TIMEOUT = 10.0  # seconds


def parse_word_pairs(content: str) -> List[WordPair]:
    """
    Parse newline-separated "word,word" records.

    Blank lines and lines starting with '#' are skipped. Any line that does
    not split into exactly two non-empty words is dropped.
    """
    pairs = []
    for line_number, raw_line in enumerate(content.splitlines(), 1):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        parts = [part.strip() for part in line.split(",")]
        if len(parts) == 2 and all(parts):
            pairs.append((parts[0], parts[1]))
        else:
            logger.debug("Dropping malformed word list line %d: %r", line_number, raw_line)
    return pairs


def pick_pair(pairs: List[WordPair], rng: random.Random = secure_random) -> WordPair:
    """Pick the word pair for one match."""
    return choice(pairs, rng)


class WordSource:
    """
    Supplies the word pairs a match draws from.

    Args:
        timeout: Connect and read timeout in seconds.
        transport: Optional httpx transport for the sync client (tests
            pass an ``httpx.MockTransport``).
        async_transport: Same, for the async client.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT,
                 transport: Optional[httpx.BaseTransport] = None,
                 async_transport: Optional[httpx.AsyncBaseTransport] = None):
        self.timeout = httpx.Timeout(timeout)
        self.transport = transport
        self.async_transport = async_transport

    def load(self, locator: Optional[str] = None) -> List[WordPair]:
        """
        Load word pairs from ``locator``, or the built-in list if it is blank.

        Raises:
            FetchFailed: network error, timeout or non-200 response.
            NoValidPairs: the list downloaded but no line parsed.
        """
        if not locator or not locator.strip():
            return list(DEFAULT_WORD_PAIRS)

        locator = locator.strip()
        logger.info("Fetching word list from %s", locator)
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport,
                              follow_redirects=True) as client:
                response = client.get(locator)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchFailed(locator, str(e) or type(e).__name__) from e

        return self._parse_response(locator, response)

    async def load_async(self, locator: Optional[str] = None) -> List[WordPair]:
        """Async version of ``load`` with the same contract."""
        if not locator or not locator.strip():
            return list(DEFAULT_WORD_PAIRS)

        locator = locator.strip()
        logger.info("Fetching word list from %s", locator)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.async_transport,
                                         follow_redirects=True) as client:
                response = await client.get(locator)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchFailed(locator, str(e) or type(e).__name__) from e

        return self._parse_response(locator, response)

    def load_or_default(self, locator: Optional[str] = None) -> List[WordPair]:
        """Load ``locator``, falling back to the built-in pairs on any word source error."""
        try:
            return self.load(locator)
        except WordSourceError as e:
            logger.warning("%s; using built-in word pairs", e)
            return list(DEFAULT_WORD_PAIRS)

    @staticmethod
    def _parse_response(locator: str, response: httpx.Response) -> List[WordPair]:
        if response.status_code != 200:
            raise FetchFailed(locator, f"HTTP {response.status_code}")

        pairs = parse_word_pairs(response.text)
        if not pairs:
            raise NoValidPairs(locator)

        logger.info("Loaded %d word pairs from %s", len(pairs), locator)
        return pairs
