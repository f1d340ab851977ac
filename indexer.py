"""Lookup indices over a collection of postings."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Hashable, List, Mapping, Sequence, Tuple, TypeVar

from classifier import DEFAULT_RULES, ClassifierRules, location_class, seniority, skill_areas
from models import Level, Location, Posting, Skill

K = TypeVar("K", bound=Hashable)

Bucket = Tuple[Posting, ...]


@dataclass(frozen=True)
class Indices:
    date: Mapping[str, Bucket]
    company: Mapping[str, Bucket]
    location: Mapping[Location, Bucket]
    skill: Mapping[Skill, Bucket]
    level: Mapping[Level, Bucket]


def _freeze(buckets: Dict[K, List[Posting]]) -> Mapping[K, Bucket]:
    return MappingProxyType({key: tuple(jobs) for key, jobs in buckets.items()})


def index(collection: Sequence[Posting], rules: ClassifierRules = DEFAULT_RULES) -> Indices:
    """Index every posting by date, company, location class, skill area and level.

    Date, company and location place each posting in exactly one bucket.
    Skill and level place it in every bucket whose keywords match its
    title, possibly none. Bucket contents keep collection order.
    """
    by_date: Dict[str, List[Posting]] = {}
    by_company: Dict[str, List[Posting]] = {}
    by_location: Dict[Location, List[Posting]] = {}
    by_skill: Dict[Skill, List[Posting]] = {}
    by_level: Dict[Level, List[Posting]] = {}

    for job in collection:
        by_date.setdefault(job.date_posted, []).append(job)
        by_company.setdefault(job.company, []).append(job)
        by_location.setdefault(location_class(job, rules), []).append(job)
        for skill in skill_areas(job, rules):
            by_skill.setdefault(skill, []).append(job)
        for level in seniority(job, rules):
            by_level.setdefault(level, []).append(job)

    return Indices(
        date=_freeze(by_date),
        company=_freeze(by_company),
        location=_freeze(by_location),
        skill=_freeze(by_skill),
        level=_freeze(by_level),
    )
