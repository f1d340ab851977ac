"""In-memory job repository: immutable snapshots and the queries over them."""

from __future__ import annotations

import datetime as dt
import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Type

from aggregator import BuildResult, Source, SourceReport, build
from classifier import DEFAULT_RULES, ClassifierRules
from filters import Predicate
from indexer import Indices, index
from models import Level, Location, Posting, Skill

logger = logging.getLogger(__name__)

INDEX_NAMES = ("date", "company", "location", "skill", "level")
_ENUM_KEYED: Dict[str, Type[Enum]] = {"location": Location, "skill": Skill, "level": Level}


def _enum_key(enum_cls: Type[Enum], key: Any) -> Optional[Enum]:
    if isinstance(key, enum_cls):
        return key
    wanted = str(key).strip().lower()
    for member in enum_cls:
        if member.value.lower() == wanted:
            return member
    return None


def newest_first(postings: Iterable[Posting]) -> List[Posting]:
    """Sort by date descending, then company ascending."""
    by_company = sorted(postings, key=lambda job: job.company)
    return sorted(by_company, key=lambda job: job.date_posted, reverse=True)


@dataclass(frozen=True)
class Snapshot:
    postings: Tuple[Posting, ...]
    indices: Indices
    reports: Tuple[SourceReport, ...] = ()
    built_at: Optional[dt.datetime] = None

    @classmethod
    def empty(cls) -> "Snapshot":
        return cls(postings=(), indices=index(()))

    @classmethod
    def from_build(cls, result: BuildResult, rules: ClassifierRules = DEFAULT_RULES) -> "Snapshot":
        return cls(
            postings=result.postings,
            indices=index(result.postings, rules),
            reports=result.reports,
            built_at=dt.datetime.now(dt.timezone.utc),
        )

    def get(self, index_name: str, key: Any) -> Tuple[Posting, ...]:
        """Postings filed under ``key``; an absent key gives an empty tuple."""
        if index_name not in INDEX_NAMES:
            raise ValueError(f"Unknown index {index_name!r} (known: {', '.join(INDEX_NAMES)})")
        enum_cls = _ENUM_KEYED.get(index_name)
        if enum_cls is not None:
            key = _enum_key(enum_cls, key)
            if key is None:
                return ()
        else:
            key = str(key)
        return getattr(self.indices, index_name).get(key, ())

    def all(self, key: Optional[Callable[[Posting], Any]] = None, reverse: bool = False) -> List[Posting]:
        """A copy of the collection, optionally sorted."""
        if key is None:
            return list(self.postings)
        return sorted(self.postings, key=key, reverse=reverse)

    @property
    def failed_sources(self) -> List[str]:
        return [r.source for r in self.reports if not r.ok]


def build_snapshot(
    sources: Sequence[Source],
    include: Optional[Predicate] = None,
    rules: ClassifierRules = DEFAULT_RULES,
    max_workers: Optional[int] = None,
) -> Snapshot:
    return Snapshot.from_build(build(sources, include=include, max_workers=max_workers), rules)


class JobRepository:
    """Holds the current snapshot and rebuilds it on request.

    Readers always see a complete snapshot: a refresh builds the new one
    off to the side and publishes it with a single reference swap.
    """

    def __init__(
        self,
        sources: Sequence[Source],
        include: Optional[Predicate] = None,
        rules: ClassifierRules = DEFAULT_RULES,
        max_workers: Optional[int] = None,
    ) -> None:
        self.sources = tuple(sources)
        self.include = include
        self.rules = rules
        self.max_workers = max_workers
        self._snapshot = Snapshot.empty()
        self._refresh_lock = threading.Lock()

    @property
    def snapshot(self) -> Snapshot:
        return self._snapshot

    def refresh(self) -> Snapshot:
        with self._refresh_lock:
            snapshot = build_snapshot(self.sources, self.include, self.rules, self.max_workers)
            self._snapshot = snapshot
        logger.info("Repository refreshed: %d jobs indexed", len(snapshot.postings))
        return snapshot

    def get(self, index_name: str, key: Any) -> Tuple[Posting, ...]:
        return self._snapshot.get(index_name, key)

    def all(self, key: Optional[Callable[[Posting], Any]] = None, reverse: bool = False) -> List[Posting]:
        return self._snapshot.all(key=key, reverse=reverse)
