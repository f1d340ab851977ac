"""CLI entry for hunting Web3 engineering jobs."""

from __future__ import annotations

import logging

from classifier import DEFAULT_RULES, load_rules
from config import Settings
from filters import keyword_filter
from repl import JobHuntRepl
from repository import JobRepository
from sources import make_session, make_sources


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logger = logging.getLogger(__name__)

    rules = load_rules(settings.classifier_rules_path) if settings.classifier_rules_path else DEFAULT_RULES
    session = make_session(settings.verify_ssl, settings.proxy)
    sources = make_sources(settings.sources, session=session, timeout=settings.request_timeout)
    logger.info("Hunting across %d sources", len(sources))

    repository = JobRepository(
        sources,
        include=keyword_filter(settings.filter_keywords_role),
        rules=rules,
        max_workers=settings.max_workers,
    )
    JobHuntRepl(repository).run()


if __name__ == "__main__":
    main()
