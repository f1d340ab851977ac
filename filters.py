"""Keyword-based inclusion filters for postings."""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from models import Posting

Predicate = Callable[[Posting], bool]

ENGINEERING_KEYWORDS = ("developer", "engineer", "engineering", "technical")


def title_matches_keywords(posting: Posting, keywords: Sequence[str]) -> bool:
    """
    Returns True if the title contains any keyword (case-insensitive).
    An empty keyword list is treated as "no filter".
    """
    if not keywords:
        return True
    title = posting.title.lower()
    return any(k.lower() in title for k in keywords)


def keyword_filter(keywords: Sequence[str]) -> Optional[Predicate]:
    if not keywords:
        return None
    words = tuple(keywords)
    return lambda posting: title_matches_keywords(posting, words)
