"""Base classes and errors for job board fetchers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from models import Posting

logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0 Safari/537.36",
}


class FetchError(Exception):
    """A single source could not produce its postings."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source
        self.message = message


class TransportError(FetchError):
    """The site could not be reached."""


class ResponseStatusError(FetchError):
    def __init__(self, source: str, status_code: int) -> None:
        super().__init__(source, f"request failed with code {status_code}")
        self.status_code = status_code


class ParseError(FetchError):
    """The response body could not be read or parsed."""


class MissingFieldError(FetchError):
    def __init__(self, source: str, field: str) -> None:
        super().__init__(source, f"could not get {field}")
        self.field = field


class BaseFetcher(ABC):
    def __init__(
        self,
        source_name: str,
        url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 30,
    ) -> None:
        self.source_name = source_name
        self.url = url
        self.session = session
        self.timeout = timeout

    @property
    def name(self) -> str:
        return self.source_name

    def fetch(self) -> List[Posting]:
        soup = self._get_soup()
        jobs = self.parse(soup)
        logger.info("%s fetched %d jobs", self.source_name, len(jobs))
        return jobs

    @abstractmethod
    def parse(self, soup: BeautifulSoup) -> List[Posting]:
        raise NotImplementedError

    def _get_soup(self) -> BeautifulSoup:
        getter = self.session.get if self.session is not None else requests.get
        try:
            resp = getter(self.url, timeout=self.timeout, headers=HEADERS)
        except requests.RequestException as exc:
            raise TransportError(self.source_name, f"could not load url {self.url} ({exc})") from exc
        if not resp.ok:
            raise ResponseStatusError(self.source_name, resp.status_code)
        try:
            return BeautifulSoup(resp.text, "html.parser")
        except (UnicodeDecodeError, ValueError) as exc:
            raise ParseError(self.source_name, f"error getting response body ({exc})") from exc

    def _require(self, node, field: str):
        if node is None:
            raise MissingFieldError(self.source_name, field)
        return node

    def _posting(self, **fields) -> Posting:
        return Posting(source=self.source_name, **fields)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} for {self.source_name}>"


def text_of(node) -> str:
    return node.get_text().strip() if node is not None else ""
