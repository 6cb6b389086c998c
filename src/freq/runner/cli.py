#!/usr/bin/env python3
"""Token frequency chart CLI."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .config import FreqConfig
from .render import render_chart
from .report import build_report
from .tokenize import TokenMode


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="freq",
        description="Chart the most frequent words or characters in text files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s book.txt                        # Top 10 words
  %(prog)s -l 5 -c book.txt                # Top 5 characters
  %(prog)s --scaled a.txt b.txt            # Scale bars to the top word
  %(prog)s https://example.com/book.txt    # Count a remote text
  %(prog)s --config freq.yml book.txt      # Load defaults from YAML
        """,
    )

    parser.add_argument("inputs", nargs="*", metavar="FILE", help="Text files or HTTP(S) URLs")
    parser.add_argument(
        "-l",
        "--length",
        type=_non_negative_int,
        metavar="LENGTH",
        help="Number of top tokens to show (default: 10)",
    )

    # Token mode
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument(
        "-w",
        dest="mode",
        action="store_const",
        const=TokenMode.WORD,
        help="Count words (default)",
    )
    mode_group.add_argument(
        "-c",
        dest="mode",
        action="store_const",
        const=TokenMode.CHARACTER,
        help="Count characters",
    )

    parser.add_argument(
        "--scaled",
        action="store_true",
        default=None,
        help="Scale bars relative to the most frequent token",
    )
    parser.add_argument(
        "--width",
        type=int,
        metavar="N",
        help="Chart width in columns (default: 80)",
    )
    parser.add_argument("--config", type=Path, help="Path to YAML config with defaults")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _load_config(args: argparse.Namespace) -> FreqConfig:
    config = FreqConfig.from_yaml(args.config) if args.config else FreqConfig()
    config.override(length=args.length, mode=args.mode, scaled=args.scaled, width=args.width)
    return config


def main() -> int:
    """Count tokens and print the frequency chart."""
    parser = _build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if not args.inputs:
        print("No input files were given", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    if args.config and not args.config.exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1

    try:
        config = _load_config(args)
    except (OSError, ValueError, KeyError, yaml.YAMLError) as e:
        print(f"Error: Invalid configuration: {e}", file=sys.stderr)
        return 1

    try:
        report = build_report(args.inputs, config)
    except (OSError, RuntimeError) as e:
        print("Cannot open one or more given files", file=sys.stderr)
        print(f"  {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    if report.distinct == 0:
        print("No data to process")
        return 0

    chart = render_chart(report.ranked, report.total, scaled=config.scaled, width=config.width)
    if chart:
        print(chart)
    return 0


if __name__ == "__main__":
    sys.exit(main())
