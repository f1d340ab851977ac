"""Web3 job boards this collector knows how to read."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple, Type

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from fetchers.base import HEADERS, BaseFetcher
from fetchers.cryptojobslist import CryptoJobsListFetcher
from fetchers.getro import GetroBoardFetcher
from fetchers.use_web3 import UseWeb3Fetcher
from fetchers.web3_career import Web3CareerFetcher

logger = logging.getLogger(__name__)

# software engineering filter on the Getro boards
_GETRO_ENGINEERING_FILTER = "filter=eyJqb2JfZnVuY3Rpb25zIjpbIlNvZnR3YXJlIEVuZ2luZWVyaW5nIl19"


class SiteName(str, Enum):
    WEB3_CAREER = "web3.career"
    USE_WEB3 = "useweb3.xyz"
    CRYPTO_JOBS_LIST = "cryptojobslist.com"
    SOLANA_JOBS = "jobs.solana.com"
    SUBSTRATE_JOBS = "careers.substrate.io"
    NEAR_JOBS = "careers.near.org"


CATALOGUE: Dict[SiteName, Tuple[Type[BaseFetcher], str]] = {
    SiteName.WEB3_CAREER: (Web3CareerFetcher, "https://web3.career"),
    SiteName.USE_WEB3: (UseWeb3Fetcher, "https://useweb3.xyz/jobs"),
    SiteName.CRYPTO_JOBS_LIST: (CryptoJobsListFetcher, "https://cryptojobslist.com"),
    SiteName.SOLANA_JOBS: (GetroBoardFetcher, f"https://jobs.solana.com/jobs?{_GETRO_ENGINEERING_FILTER}"),
    SiteName.SUBSTRATE_JOBS: (GetroBoardFetcher, f"https://careers.substrate.io/jobs?{_GETRO_ENGINEERING_FILTER}"),
    SiteName.NEAR_JOBS: (GetroBoardFetcher, f"https://careers.near.org/jobs?{_GETRO_ENGINEERING_FILTER}"),
}

ALL_SITES: Tuple[SiteName, ...] = tuple(SiteName)


def parse_site_names(names: Sequence[str]) -> List[SiteName]:
    """Map configured names onto the catalogue, keeping their order."""
    sites: List[SiteName] = []
    for raw in names:
        try:
            site = SiteName(raw.strip().lower())
        except ValueError:
            known = ", ".join(s.value for s in SiteName)
            raise ValueError(f"Unknown job source {raw!r} (known: {known})") from None
        if site not in sites:
            sites.append(site)
    return sites


def make_session(verify: bool = True, proxy: Optional[str] = None) -> requests.Session:
    sess = requests.Session()
    retries = Retry(total=3, backoff_factor=1, status_forcelist=[429, 500, 502, 503, 504], allowed_methods=["GET"])
    sess.mount("http://", HTTPAdapter(max_retries=retries))
    sess.mount("https://", HTTPAdapter(max_retries=retries))
    sess.headers.update(HEADERS)
    if proxy:
        sess.proxies.update({"http": proxy, "https": proxy})
    sess.verify = verify
    return sess


def make_sources(
    sites: Sequence[SiteName] = ALL_SITES,
    session: Optional[requests.Session] = None,
    timeout: float = 30,
) -> List[BaseFetcher]:
    """Instantiate one fetcher per site, in the given order."""
    session = session or make_session()
    fetchers: List[BaseFetcher] = []
    for site in sites:
        fetcher_cls, url = CATALOGUE[site]
        fetchers.append(fetcher_cls(site.value, url, session=session, timeout=timeout))
    logger.debug("Configured %d sources: %s", len(fetchers), ", ".join(s.value for s in sites))
    return fetchers
