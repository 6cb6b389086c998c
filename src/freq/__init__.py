"""Token frequency counting and ranked bar charts."""

from .index import (
    EmptyStructure,
    FreqError,
    FrequencyIndex,
    IndexSealed,
    InsufficientDistinctTokens,
    InvalidSymbol,
    RankedToken,
)

__version__ = "1.0.0"

__all__ = [
    "FrequencyIndex",
    "RankedToken",
    "FreqError",
    "InvalidSymbol",
    "EmptyStructure",
    "InsufficientDistinctTokens",
    "IndexSealed",
]
