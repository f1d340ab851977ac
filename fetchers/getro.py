"""Fetcher for Getro-hosted ecosystem job boards (Solana, Substrate, Near).

These boards share one markup: an infinite-scroll list of cards carrying
schema.org microdata for title, hiring organisation and posting date.
"""

from __future__ import annotations

from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from fetchers.base import BaseFetcher, text_of
from models import Posting


class GetroBoardFetcher(BaseFetcher):
    def parse(self, soup: BeautifulSoup) -> List[Posting]:
        jobs: List[Posting] = []
        for card in soup.select("div.infinite-scroll-component__outerdiv > div > div"):
            title_tag = card.select_one("div[itemprop=title]")
            if title_tag is None:
                continue

            company_meta = self._require(card.select_one("meta[itemprop=name]"), "company")
            date_meta = self._require(card.select_one("meta[itemprop=datePosted]"), "date posted")

            spans = [text_of(span) for span in card.select("span")[:2]]
            location = ", ".join(spans)

            anchor = card.select_one("a[href]")
            link = anchor.get("href", "") if anchor else ""
            if link.startswith("/"):
                link = urljoin(self.url, link)

            jobs.append(
                self._posting(
                    title=text_of(title_tag),
                    company=company_meta.get("content", ""),
                    date_posted=date_meta.get("content", ""),
                    location=location,
                    remuneration="",
                    apply_link=link,
                )
            )
        return jobs
