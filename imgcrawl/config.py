"""Configuration objects and constants for the crawler."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_OUTPUT_ROOT = Path("downloads")
DEFAULT_REQUEST_DELAY = 0.5
DEFAULT_USER_AGENT = "imgcrawl/0.1"


@dataclass
class CrawlConfig:
    """Top-level settings that control crawling and image storage."""

    output_root: Path = DEFAULT_OUTPUT_ROOT
    request_delay: float = DEFAULT_REQUEST_DELAY
    request_timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    # None keeps fan-out unbounded; a number caps in-flight fetches.
    max_concurrency: Optional[int] = None
