"""Token frequency index: trie deduplication plus an augmented max-heap."""

from .counter import FrequencyIndex, RankedToken
from .errors import (
    EmptyStructure,
    FreqError,
    IndexSealed,
    InsufficientDistinctTokens,
    InvalidSymbol,
)
from .heap import HeapEntry, TokenHeap, ranks_above
from .trie import ALPHABET, ALPHABET_SIZE, TokenTrie, TrieNode, symbol_index

__all__ = [
    "FrequencyIndex",
    "RankedToken",
    "TokenTrie",
    "TrieNode",
    "TokenHeap",
    "HeapEntry",
    "ranks_above",
    "symbol_index",
    "ALPHABET",
    "ALPHABET_SIZE",
    "FreqError",
    "InvalidSymbol",
    "EmptyStructure",
    "InsufficientDistinctTokens",
    "IndexSealed",
]
