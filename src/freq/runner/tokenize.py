"""Tokenization of text inputs into normalized word or character tokens."""

from collections.abc import Iterator
from enum import Enum
from pathlib import Path

from .url import DEFAULT_TIMEOUT, ensure_text_fetched, is_url


class TokenMode(Enum):
    """How input text is split into tokens."""

    WORD = "word"  # Whitespace-separated words
    CHARACTER = "character"  # One token per character


def _is_ascii_alnum(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ("0" <= ch <= "9")


def normalize(raw: str) -> str:
    """Strip non-alphanumeric characters and lowercase ASCII letters.

    Only ASCII letters and digits survive; accented and other non-ASCII
    characters are dropped.

    Args:
        raw: A raw word or character.

    Returns:
        The normalized token, possibly empty.
    """
    return "".join(ch.lower() for ch in raw if _is_ascii_alnum(ch))


def iter_tokens(text: str, mode: TokenMode) -> Iterator[str]:
    """Yield normalized tokens from text, skipping ones that normalize to empty.

    Args:
        text: Input text.
        mode: Word or character tokenization.
    """
    if mode is TokenMode.WORD:
        pieces: list[str] | str = text.split()
    else:
        pieces = text
    for piece in pieces:
        token = normalize(piece)
        if token:
            yield token


def iter_file_tokens(path: Path, mode: TokenMode, encoding: str = "utf-8") -> Iterator[str]:
    """Stream normalized tokens from a text file line by line.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, encoding=encoding, errors="replace") as f:
        for line in f:
            yield from iter_tokens(line, mode)


def read_source_tokens(
    source: str,
    mode: TokenMode,
    encoding: str = "utf-8",
    timeout: int = DEFAULT_TIMEOUT,
) -> Iterator[str]:
    """Yield normalized tokens from a local file path or an HTTP(S) URL.

    Raises:
        OSError: If a local file cannot be read.
        RuntimeError: If a URL cannot be fetched.
    """
    if is_url(source):
        yield from iter_tokens(ensure_text_fetched(source, timeout=timeout), mode)
    else:
        yield from iter_file_tokens(Path(source), mode, encoding=encoding)
