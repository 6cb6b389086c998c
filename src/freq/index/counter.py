"""Token frequency index binding the trie to the priority heap."""

import logging
from collections.abc import Iterable
from typing import NamedTuple

from .errors import IndexSealed, InsufficientDistinctTokens
from .heap import TokenHeap
from .trie import TokenTrie

logger = logging.getLogger(__name__)


class RankedToken(NamedTuple):
    """A token and its frequency, as returned by :meth:`FrequencyIndex.extract_top`."""

    token: str
    frequency: int


class FrequencyIndex:
    """Counts tokens and ranks them by frequency.

    Tokens are fed one at a time with :meth:`ingest`. Once ingestion is
    complete, :meth:`extract_top` returns the most frequent tokens, with ties
    going to the token seen first. Extraction consumes the ranking, so an
    index accepts no further tokens once extraction has started.

    Example:
        >>> index = FrequencyIndex()
        >>> index.ingest_many(["b", "a", "b", "a"])
        4
        >>> index.extract_top(2)
        [RankedToken(token='b', frequency=2), RankedToken(token='a', frequency=2)]
    """

    def __init__(self) -> None:
        self.trie = TokenTrie()
        self.heap = TokenHeap()
        self._total = 0
        self._distinct = 0
        self._sealed = False

    def ingest(self, token: str) -> None:
        """Count one occurrence of a normalized token.

        Empty tokens are ignored and not counted.

        Raises:
            InvalidSymbol: If the token contains a character outside ``a-z0-9``.
                Counts are left unchanged.
            IndexSealed: If extraction has already started and the token is non-empty.
        """
        if not token:
            return
        if self._sealed:
            raise IndexSealed()

        node = self.trie.lookup_or_create(token)
        if node.is_leaf:
            assert node.heap_slot is not None
            self.heap.increment_and_resift(node.heap_slot)
        else:
            node.is_leaf = True
            self.heap.register_new(token, node)
            self._distinct += 1
        self._total += 1

    def ingest_many(self, tokens: Iterable[str]) -> int:
        """Ingest tokens in order.

        Returns:
            Number of tokens counted (empty tokens excluded).
        """
        before = self._total
        for token in tokens:
            self.ingest(token)
        return self._total - before

    def total_token_count(self) -> int:
        """Return the number of tokens ingested, duplicates included."""
        return self._total

    def distinct_token_count(self) -> int:
        """Return the number of distinct tokens ingested."""
        return self._distinct

    def remaining(self) -> int:
        """Return how many distinct tokens are still available for extraction."""
        return len(self.heap)

    def extract_top(self, k: int) -> list[RankedToken]:
        """Extract the ``k`` highest-ranked tokens in rank order.

        Args:
            k: Number of tokens to extract.

        Returns:
            Tokens ordered by frequency descending, ties by first occurrence.

        Raises:
            ValueError: If ``k`` is negative.
            InsufficientDistinctTokens: If fewer than ``k`` tokens remain.
                Nothing is extracted in that case.
        """
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        available = len(self.heap)
        if k > available:
            raise InsufficientDistinctTokens(k, available)
        if k == 0:
            return []

        self._sealed = True
        logger.debug(f"Extracting top {k} of {available} distinct tokens")
        ranked = []
        for _ in range(k):
            entry = self.heap.extract_max()
            ranked.append(RankedToken(entry.token, entry.frequency))
        return ranked
