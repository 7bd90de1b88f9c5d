"""
Scheduled vessel movements scraper for the pilotage schedule page.

Composes the fetcher and the extractor; every call downloads the page
again, nothing is cached between calls.
"""

import logging

from ..config import Settings, load_settings
from ..extractor import MovementTableParser
from ..fetcher import HtmlFetcher

logger = logging.getLogger(__name__)


def build_fetcher(settings: Settings) -> HtmlFetcher:
    return HtmlFetcher(
        settings.url,
        timeout=settings.timeout,
        max_attempts=settings.max_attempts,
        backoff=settings.backoff,
        user_agent=settings.user_agent,
    )


def gen_movements(fetcher, parser=None):
    """Generator that yields the scheduled vessel movements."""
    parser = parser or MovementTableParser()
    logger.info(f"Fetching scheduled vessel movements from {fetcher.url}")
    document = fetcher.fetch()
    yield from parser.extract(document)


def get_movements(fetcher, parser=None):
    """Get all scheduled movements as a list."""
    return list(gen_movements(fetcher, parser))


def run_schedule_scraper(settings=None, parser=None):
    """Run the complete fetch-and-extract process."""
    logger.info("Starting scheduled movements scraper")
    settings = settings or load_settings()
    try:
        movements = get_movements(build_fetcher(settings), parser)
        logger.info(f"Successfully scraped {len(movements)} vessel movements")
        return movements
    except Exception as e:
        logger.error(f"Scheduled movements scraping failed: {e}")
        raise


def main():
    """Main entry point for standalone script usage."""
    movements = run_schedule_scraper()
    for movement in movements:
        print(movement)


if __name__ == "__main__":
    main()
