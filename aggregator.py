"""Concurrent collection of postings from every configured source.

Each source runs in its own worker thread. A failing source contributes no
postings and a failed report; it never aborts the other sources or raises to
the caller. Results are merged in source-declaration order, whatever order
the workers finish in, so the same inputs always give the same collection.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Protocol, Sequence, Tuple

from fetchers.base import FetchError
from filters import Predicate
from models import Posting

logger = logging.getLogger(__name__)


class Source(Protocol):
    @property
    def name(self) -> str: ...

    def fetch(self) -> List[Posting]: ...


@dataclass(frozen=True)
class SourceReport:
    source: str
    ok: bool
    count: int = 0
    error: Optional[str] = None


@dataclass(frozen=True)
class BuildResult:
    postings: Tuple[Posting, ...]
    reports: Tuple[SourceReport, ...]


def dedupe_batch(jobs: Iterable[Posting]) -> List[Posting]:
    """Drop exact duplicates, keeping the first occurrence."""
    seen: set[Posting] = set()
    unique: List[Posting] = []
    for job in jobs:
        if job in seen:
            continue
        seen.add(job)
        unique.append(job)
    return unique


def _run_source(source: Source) -> Tuple[List[Posting], SourceReport]:
    name = source.name
    try:
        jobs = list(source.fetch())
        unique = dedupe_batch(jobs)
    except FetchError as exc:
        logger.warning("Failed to fetch %s: %s; its jobs will not be included", name, exc)
        return [], SourceReport(name, ok=False, error=str(exc))
    except Exception as exc:
        logger.exception("Unexpected error while fetching %s; its jobs will not be included", name)
        return [], SourceReport(name, ok=False, error=f"{type(exc).__name__}: {exc}")

    if len(unique) != len(jobs):
        logger.info("%s: dropped %d duplicate jobs", name, len(jobs) - len(unique))
    return unique, SourceReport(name, ok=True, count=len(unique))


def build(
    sources: Sequence[Source],
    include: Optional[Predicate] = None,
    max_workers: Optional[int] = None,
) -> BuildResult:
    sources = list(sources)
    if not sources:
        logger.warning("No sources to fetch")
        return BuildResult((), ())

    with ThreadPoolExecutor(max_workers=max_workers or len(sources), thread_name_prefix="fetch") as executor:
        futures = [executor.submit(_run_source, source) for source in sources]
        results = [future.result() for future in futures]

    merged: List[Posting] = []
    reports: List[SourceReport] = []
    for jobs, report in results:
        merged.extend(jobs)
        reports.append(report)

    if include is not None:
        postings = tuple(job for job in merged if include(job))
    else:
        postings = tuple(merged)

    failed = sum(1 for r in reports if not r.ok)
    logger.info(
        "Collected %d jobs from %d/%d sources (%d after filtering)",
        len(merged),
        len(reports) - failed,
        len(reports),
        len(postings),
    )
    return BuildResult(postings, tuple(reports))
