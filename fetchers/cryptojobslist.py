"""Fetcher for CryptoJobsList."""

from __future__ import annotations

import re
from typing import List

from bs4 import BeautifulSoup

from fetchers.base import BaseFetcher, text_of
from fetchers.formatting import date_from_short, format_range_remuneration
from models import Posting

REMOTE_TAG = "Remote"
_DIGIT = re.compile(r"[0-9]")


class CryptoJobsListFetcher(BaseFetcher):
    def parse(self, soup: BeautifulSoup) -> List[Posting]:
        jobs: List[Posting] = []
        for item in soup.select("section ul li"):
            anchors = item.select("a")
            title_tag = self._require(anchors[0] if anchors else None, "job title")
            company_tag = self._require(anchors[1] if len(anchors) > 1 else None, "company")
            created = self._require(
                item.select_one("span.JobPreviewInline_createdAt__wbWS0"), "elapsed time"
            )
            detail = self._require(item.select_one("span span span"), "location or remuneration")

            # one slot holds either the pay range or an onsite city
            detail_text = text_of(detail)
            remuneration = ""
            onsite = ""
            if "$" in detail_text:
                remuneration = format_range_remuneration(detail_text)
            elif not _DIGIT.search(detail_text):
                onsite = detail_text

            tags = tuple(text_of(a) for a in item.select("span span a"))
            if REMOTE_TAG in tags:
                location = f"{onsite}, {REMOTE_TAG}" if onsite else REMOTE_TAG
            else:
                location = onsite

            link = title_tag.get("href", "")
            if link.startswith("/"):
                link = f"https://cryptojobslist.com{link}"

            jobs.append(
                self._posting(
                    title=text_of(title_tag),
                    company=text_of(company_tag),
                    date_posted=date_from_short(text_of(created)),
                    location=location,
                    remuneration=remuneration,
                    tags=tags,
                    apply_link=link,
                )
            )
        return jobs
