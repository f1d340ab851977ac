"""Environment-based settings for the web3 job hunt."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

from filters import ENGINEERING_KEYWORDS
from sources import ALL_SITES, SiteName, parse_site_names

load_dotenv()


def _parse_keywords(env_name: str, default: Optional[List[str]] = None) -> List[str]:
    raw = os.getenv(env_name)
    if raw is None:
        return list(default or [])
    return [kw.strip() for kw in raw.split(",") if kw.strip()]


def _parse_int(env_name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(env_name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{env_name} must be an integer, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{env_name} must be positive, got {value}")
    return value


@dataclass
class Settings:
    sources: List[SiteName]
    filter_keywords_role: List[str]
    max_workers: Optional[int]
    request_timeout: int
    proxy: str | None
    verify_ssl: bool
    classifier_rules_path: str | None
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        source_names = _parse_keywords("JOB_SOURCES")
        return cls(
            sources=parse_site_names(source_names) if source_names else list(ALL_SITES),
            filter_keywords_role=_parse_keywords("FILTER_KEYWORDS_ROLE", list(ENGINEERING_KEYWORDS)),
            max_workers=_parse_int("MAX_WORKERS", None),
            request_timeout=_parse_int("REQUEST_TIMEOUT", 30),
            proxy=os.getenv("HTTP_PROXY") or os.getenv("HTTPS_PROXY") or None,
            verify_ssl=os.getenv("VERIFY_SSL", "true").lower() not in {"0", "false", "no"},
            classifier_rules_path=os.getenv("CLASSIFIER_RULES_PATH") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
