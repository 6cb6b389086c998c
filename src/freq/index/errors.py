"""Exceptions raised by the token frequency index."""


class FreqError(Exception):
    """Base class for all frequency index errors."""


class InvalidSymbol(FreqError):
    """A token contains a character outside the supported alphabet.

    Attributes:
        token: The rejected token.
        symbol: The offending character.
        position: Index of the offending character within the token.
    """

    def __init__(self, token: str, symbol: str, position: int) -> None:
        self.token = token
        self.symbol = symbol
        self.position = position
        super().__init__(
            f"Invalid symbol {symbol!r} at position {position} in token {token!r}"
        )


class EmptyStructure(FreqError):
    """Extraction was attempted on an empty heap."""

    def __init__(self) -> None:
        super().__init__("Cannot extract from an empty heap")


class InsufficientDistinctTokens(FreqError):
    """More ranked tokens were requested than distinct tokens are available."""

    def __init__(self, requested: int, available: int) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Requested top {requested} tokens but only {available} distinct tokens are available"
        )


class IndexSealed(FreqError):
    """A token was ingested after extraction had already started."""

    def __init__(self) -> None:
        super().__init__("Cannot ingest tokens after extraction has started")
