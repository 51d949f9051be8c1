"""Runtime settings, read from the environment (and a .env file if present)."""

import logging
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


@dataclass(frozen=True)
class Settings:
    dataset_path: Optional[str] = None
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))


def _split_origins(raw: Optional[str]) -> List[str]:
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [o.strip() for o in raw.split(",") if o.strip()]


def load_settings() -> Settings:
    load_dotenv()  # Load environment variables from .env file

    return Settings(
        dataset_path=os.environ.get("SOCIALPATH_DATASET") or None,
        log_level=os.environ.get("SOCIALPATH_LOG_LEVEL", "INFO").upper(),
        cors_origins=_split_origins(os.environ.get("SOCIALPATH_CORS_ORIGINS")),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
