"""Data models for job postings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class Posting:
    title: str
    company: str
    date_posted: str
    location: str
    remuneration: str
    source: str
    tags: Tuple[str, ...] = ()
    apply_link: str = ""


class Location(str, Enum):
    REMOTE = "Remote"
    ONSITE = "Onsite"


class Skill(str, Enum):
    BACKEND = "Backend"
    FRONTEND = "Frontend"
    FULLSTACK = "Fullstack"
    DEVOPS = "DevOps"
    BLOCKCHAIN = "Blockchain"


class Level(str, Enum):
    JUNIOR = "Junior"
    INTERMEDIATE = "Intermediate"
    SENIOR = "Senior"
    STAFF = "Staff"
    LEAD = "Lead"
    PRINCIPAL = "Principal"
    MANAGER = "Manager"
