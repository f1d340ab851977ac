"""Keyword heuristics that derive location class, skill areas and seniority.

Job boards expose no structured taxonomy, so every rule here is a
case-insensitive substring test against free text. Results are approximate
by nature: a title may match several skills or levels, or none.

The default keyword tables can be replaced from a YAML file shaped like::

    skills:
      Backend: [backend, server-side]
      DevOps: [devops, platform, infra, sre]
    levels:
      Senior: [senior, snr, sr]

Skills or levels omitted from the file keep their default keywords.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Mapping, Sequence, Tuple, Type, TypeVar, Union

import yaml

from models import Level, Location, Posting, Skill

E = TypeVar("E", Skill, Level)

REMOTE_KEYWORD = "remote"

DEFAULT_SKILL_KEYWORDS: Tuple[Tuple[Skill, Tuple[str, ...]], ...] = (
    (Skill.BACKEND, ("backend",)),
    (Skill.FRONTEND, ("frontend",)),
    (Skill.FULLSTACK, ("fullstack",)),
    (Skill.DEVOPS, ("devops", "platform", "infra")),
    (Skill.BLOCKCHAIN, ("blockchain", "smart contract")),
)

DEFAULT_LEVEL_KEYWORDS: Tuple[Tuple[Level, Tuple[str, ...]], ...] = (
    (Level.JUNIOR, ("junior",)),
    (Level.INTERMEDIATE, ("intermediate",)),
    (Level.SENIOR, ("senior", "snr", "sr")),
    (Level.STAFF, ("staff",)),
    (Level.LEAD, ("lead",)),
    (Level.PRINCIPAL, ("principal", "principle")),
    (Level.MANAGER, ("manager",)),
)


@dataclass(frozen=True)
class ClassifierRules:
    skills: Tuple[Tuple[Skill, Tuple[str, ...]], ...] = DEFAULT_SKILL_KEYWORDS
    levels: Tuple[Tuple[Level, Tuple[str, ...]], ...] = DEFAULT_LEVEL_KEYWORDS
    remote_keyword: str = REMOTE_KEYWORD


DEFAULT_RULES = ClassifierRules()


def _contains_any(text: str, keywords: Sequence[str]) -> bool:
    lowered = text.lower()
    return any(kw.lower() in lowered for kw in keywords)


def _matching(text: str, table: Sequence[Tuple[E, Sequence[str]]]) -> List[E]:
    return [label for label, keywords in table if _contains_any(text, keywords)]


def is_remote(posting: Posting, rules: ClassifierRules = DEFAULT_RULES) -> bool:
    return rules.remote_keyword in posting.location.lower()


def location_class(posting: Posting, rules: ClassifierRules = DEFAULT_RULES) -> Location:
    """Every posting is either Remote or Onsite, never both."""
    return Location.REMOTE if is_remote(posting, rules) else Location.ONSITE


def skill_areas(posting: Posting, rules: ClassifierRules = DEFAULT_RULES) -> List[Skill]:
    """Skills whose keywords occur in the title, in table order."""
    return _matching(posting.title, rules.skills)


def seniority(posting: Posting, rules: ClassifierRules = DEFAULT_RULES) -> List[Level]:
    """Levels whose keywords occur in the title, in table order."""
    return _matching(posting.title, rules.levels)


def _override(
    defaults: Tuple[Tuple[E, Tuple[str, ...]], ...],
    overrides: Mapping[str, Sequence[str]],
    enum_cls: Type[E],
) -> Tuple[Tuple[E, Tuple[str, ...]], ...]:
    by_label: Dict[E, Tuple[str, ...]] = dict(defaults)
    for name, keywords in overrides.items():
        try:
            label = enum_cls(name)
        except ValueError:
            known = ", ".join(m.value for m in enum_cls)
            raise ValueError(f"Unknown {enum_cls.__name__.lower()} {name!r} (known: {known})") from None
        if isinstance(keywords, str) or not isinstance(keywords, (list, tuple)):
            raise ValueError(f"Keywords for {name!r} must be a list of strings")
        by_label[label] = _keywords(name, keywords)
    return tuple(by_label.items())


def _keywords(name: str, keywords: Sequence[object]) -> Tuple[str, ...]:
    cleaned = tuple(str(kw).strip().lower() for kw in keywords)
    if not all(cleaned):
        raise ValueError(f"Keywords for {name!r} must not be empty")
    return cleaned


def load_rules(path: Union[str, Path]) -> ClassifierRules:
    """Build classifier rules from a YAML file, falling back to defaults per label."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Classifier rules in {path} must be a mapping")

    return ClassifierRules(
        skills=_override(DEFAULT_SKILL_KEYWORDS, data.get("skills") or {}, Skill),
        levels=_override(DEFAULT_LEVEL_KEYWORDS, data.get("levels") or {}, Level),
        remote_keyword=_keywords("remote_keyword", [data.get("remote_keyword", REMOTE_KEYWORD)])[0],
    )
