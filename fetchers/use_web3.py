"""Fetcher for useweb3.xyz/jobs."""

from __future__ import annotations

from typing import List

from bs4 import BeautifulSoup

from fetchers.base import BaseFetcher, text_of
from fetchers.formatting import date_from_elapsed, format_range_remuneration
from models import Posting

LOCATION_MARKER = "\N{ROUND PUSHPIN}"
PAY_MARKER = "\N{MONEY BAG}"


class UseWeb3Fetcher(BaseFetcher):
    def parse(self, soup: BeautifulSoup) -> List[Posting]:
        jobs: List[Posting] = []
        for panel in soup.select("div.panel_inner__YQLRW"):
            anchors = panel.select("a")
            title = text_of(self._require(anchors[0] if anchors else None, "job title"))
            company = text_of(self._require(anchors[1] if len(anchors) > 1 else None, "company"))
            link = anchors[0].get("href", "")
            if link.startswith("/"):
                link = f"https://useweb3.xyz{link}"

            spans = panel.select("span")
            location = text_of(self._require(spans[0] if spans else None, "location"))
            elapsed = text_of(self._require(spans[1] if len(spans) > 1 else None, "elapsed time"))

            remuneration = ""
            for badge in panel.select("div.panel_border___58nj"):
                text = text_of(badge)
                if LOCATION_MARKER in text and "remote" not in location.lower():
                    location = f"{location}, {text.replace(LOCATION_MARKER, '').strip()}"
                if PAY_MARKER in text:
                    remuneration = format_range_remuneration(text, strip=PAY_MARKER, lowercase=True)

            jobs.append(
                self._posting(
                    title=title,
                    company=company,
                    date_posted=date_from_elapsed(elapsed),
                    location=location,
                    remuneration=remuneration,
                    apply_link=link,
                )
            )
        return jobs
