"""Command-line collaborators: tokenization, configuration and chart rendering."""

from .cli import main
from .config import FreqConfig, parse_mode
from .render import format_percentage, render_chart
from .report import Report, build_report, ingest_sources
from .tokenize import TokenMode, iter_file_tokens, iter_tokens, normalize, read_source_tokens
from .url import FetchResult, ensure_text_fetched, fetch_text, is_url

__all__ = [
    "FreqConfig",
    "parse_mode",
    "TokenMode",
    "normalize",
    "iter_tokens",
    "iter_file_tokens",
    "read_source_tokens",
    "Report",
    "build_report",
    "ingest_sources",
    "render_chart",
    "format_percentage",
    "is_url",
    "fetch_text",
    "ensure_text_fetched",
    "FetchResult",
    "main",
]
