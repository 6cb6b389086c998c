"""Building frequency reports from input sources."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ..index import FrequencyIndex, InvalidSymbol, RankedToken
from .config import FreqConfig
from .tokenize import read_source_tokens

logger = logging.getLogger(__name__)


@dataclass
class Report:
    """Ranked tokens together with the counts needed to render them.

    Attributes:
        ranked: Top tokens in rank order.
        total: Number of tokens ingested across all sources.
        distinct: Number of distinct tokens ingested.
        requested: Number of tokens that were asked for.
    """

    ranked: list[RankedToken]
    total: int
    distinct: int
    requested: int

    @property
    def clamped(self) -> bool:
        """True if fewer tokens were ranked than requested."""
        return len(self.ranked) < self.requested


def ingest_sources(index: FrequencyIndex, sources: Iterable[str], config: FreqConfig) -> int:
    """Feed every token from every source into the index.

    Tokens rejected by the index are logged and skipped.

    Args:
        index: Index to ingest into.
        sources: Local file paths or HTTP(S) URLs.
        config: Report configuration (mode, encoding, timeout).

    Returns:
        Number of tokens counted.

    Raises:
        OSError: If a local file cannot be read.
        RuntimeError: If a URL cannot be fetched.
    """
    counted = 0
    for source in sources:
        before = index.total_token_count()
        for token in read_source_tokens(
            source, config.mode, encoding=config.encoding, timeout=config.timeout
        ):
            try:
                index.ingest(token)
            except InvalidSymbol as e:
                logger.warning(f"Skipping token from {source}: {e}")
        added = index.total_token_count() - before
        logger.debug(f"Counted {added} tokens from {source}")
        counted += added
    return counted


def build_report(sources: Iterable[str], config: FreqConfig) -> Report:
    """Count tokens from all sources and rank the top ``config.length``.

    The requested length is clamped to the number of distinct tokens.
    """
    index = FrequencyIndex()
    counted = ingest_sources(index, sources, config)

    distinct = index.distinct_token_count()
    logger.debug(f"Counted {counted} tokens, {distinct} distinct")
    k = min(config.length, distinct)
    if k < config.length:
        logger.info(f"Only {distinct} distinct tokens found, showing {k} instead of {config.length}")

    return Report(
        ranked=index.extract_top(k),
        total=index.total_token_count(),
        distinct=distinct,
        requested=config.length,
    )
