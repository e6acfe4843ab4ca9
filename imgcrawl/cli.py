"""Command-line entry point for the image crawler."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_OUTPUT_ROOT, DEFAULT_REQUEST_DELAY, CrawlConfig
from .crawler import run_crawler
from .errors import CrawlError, UrlParseError
from .utils import parse_seed_url

logger = logging.getLogger("imgcrawl.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imgcrawl",
        description="Crawl one site and keep the largest JPEG/GIF copy of every image it embeds.",
    )
    parser.add_argument("url", help="Seed URL; only pages and images on its origin are fetched")
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_ROOT,
        type=Path,
        help="Directory where images are written",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=DEFAULT_REQUEST_DELAY,
        help="Seconds to wait before every request",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Per-request transport timeout in seconds",
    )
    parser.add_argument(
        "--max-concurrency",
        type=int,
        default=None,
        help="Cap on simultaneous requests (unbounded by default)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.url = parse_seed_url(args.url)
    except UrlParseError as exc:
        parser.error(str(exc))
    if args.max_concurrency is not None and args.max_concurrency < 1:
        parser.error("--max-concurrency must be at least 1")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    config = CrawlConfig(
        output_root=args.output,
        request_delay=args.delay,
        request_timeout=args.timeout,
        max_concurrency=args.max_concurrency,
    )

    print(f"Starting crawler for {args.url}")
    print(f"Images will be saved to the '{config.output_root}' directory")

    try:
        summary = asyncio.run(run_crawler(args.url, config))
    except (CrawlError, OSError) as exc:
        logger.error("Crawl aborted: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130

    print("\nCrawling completed!")
    print(f"Pages visited: {summary.pages_visited}")
    print(f"Images downloaded: {summary.images_written}")
    if args.verbose:
        logger.debug(
            "Crawl finished in %.2fs (%d image URLs claimed, %d written)",
            summary.elapsed_seconds,
            summary.images_claimed,
            summary.images_written,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
