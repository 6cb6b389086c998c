"""Fetching remote text inputs over HTTP(S)."""

from dataclasses import dataclass

import requests

# Default timeout for HTTP requests (in seconds)
DEFAULT_TIMEOUT = 30

# Default headers for HTTP requests
DEFAULT_HEADERS = {
    "User-Agent": "freq/1.0 (token frequency chart)",
}


def is_url(source: str) -> bool:
    """Check if an input source is an HTTP/HTTPS URL.

    Args:
        source: Input string from the command line.

    Returns:
        True if the source starts with http:// or https://.
    """
    return source.startswith("http://") or source.startswith("https://")


@dataclass
class FetchResult:
    """Result of fetching a remote text input."""

    success: bool
    text: str | None
    error: str | None = None


def fetch_text(url: str, timeout: int = DEFAULT_TIMEOUT) -> FetchResult:
    """Download a URL and decode it as text.

    Args:
        url: The URL to fetch.
        timeout: Request timeout in seconds.

    Returns:
        FetchResult with success status and decoded text.
    """
    try:
        response = requests.get(url, timeout=timeout, headers=DEFAULT_HEADERS)
        response.raise_for_status()
        return FetchResult(success=True, text=response.text)
    except requests.RequestException as e:
        return FetchResult(success=False, text=None, error=str(e))


def ensure_text_fetched(url: str, timeout: int = DEFAULT_TIMEOUT) -> str:
    """Fetch a URL and return its text, raising on failure.

    Args:
        url: The URL to fetch.
        timeout: Request timeout in seconds.

    Returns:
        The response body as text.

    Raises:
        RuntimeError: If the request fails.
    """
    result = fetch_text(url, timeout=timeout)
    if not result.success or result.text is None:
        raise RuntimeError(f"Failed to fetch URL {url}: {result.error}")
    return result.text
