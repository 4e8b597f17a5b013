"""Centralised settings for the listing crawler.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Source site
    # ------------------------------------------------------------------
    base_url: str = field(
        default_factory=lambda: os.environ.get(
            "LISTINGS_BASE_URL", "https://www.ebay.com/sch/garlandcomputer/m.html"
        )
    )

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    data_dir: Path = field(
        default_factory=lambda: Path(os.environ.get("LISTINGS_DATA_DIR", "data"))
    )

    # ------------------------------------------------------------------
    # Fetching / concurrency
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    max_workers: int = field(
        default_factory=lambda: int(os.environ.get("LISTINGS_MAX_WORKERS", "0"))
    )

    def ensure_data_dir(self, data_dir: Path | None = None) -> Path:
        """Create the output directory if it does not exist and return it."""
        target = Path(data_dir) if data_dir is not None else self.data_dir
        target.mkdir(parents=True, exist_ok=True)
        return target


# Module-level singleton: import this everywhere:
#   from listings.config import settings
settings = Settings()
