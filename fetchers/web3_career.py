"""Fetcher for web3.career."""

from __future__ import annotations

import re
from typing import List

from bs4 import BeautifulSoup

from fetchers.base import BaseFetcher, MissingFieldError, text_of
from models import Posting

BASE_URL = "https://web3.career"
ROW_FIELDS = ("job title", "company", "time", "location", "remuneration", "tags")
_ONCLICK_PATH = re.compile(r"'([^']+)'")


class Web3CareerFetcher(BaseFetcher):
    def parse(self, soup: BeautifulSoup) -> List[Posting]:
        jobs: List[Posting] = []
        for row in soup.select("tr.table_row"):
            cells = row.select("td")
            if len(cells) < len(ROW_FIELDS):
                raise MissingFieldError(self.source_name, ROW_FIELDS[len(cells)])

            time_tag = self._require(cells[2].select_one("time"), "time")
            date_posted = (time_tag.get("datetime") or "").split(" ")[0]

            href = ""
            match = _ONCLICK_PATH.search(row.get("onclick", ""))
            if match:
                href = match.group(1)
            if href.startswith("/"):
                href = f"{BASE_URL}{href}"

            jobs.append(
                self._posting(
                    title=text_of(cells[0]),
                    company=text_of(cells[1]),
                    date_posted=date_posted,
                    location=text_of(cells[3]).replace("\n", " "),
                    remuneration=text_of(cells[4]),
                    tags=tuple(text_of(a) for a in cells[5].select("a")),
                    apply_link=href,
                )
            )
        return jobs
