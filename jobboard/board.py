"""
Page state for one viewer: the fetched feed plus its filter set.

Opened once when the page first renders; UI events mutate ``filters``
and every rerender reads ``visible()``.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from jobboard.config import Settings, load_settings
from jobboard.filters import FilterSet, default_filters
from jobboard.log import get_logger
from jobboard.models import JobFeed, JobRecord
from jobboard.sources import get_source
from jobboard.view import PAGE_SIZE, company_options, summary, visible_jobs

log = get_logger(__name__)


@dataclass
class Board:
    feed: JobFeed
    filters: FilterSet = field(default_factory=default_filters)
    page_size: int = PAGE_SIZE
    recency_days: int = 7
    job_title: str = "Business Analyst"

    def visible(self) -> list[JobRecord]:
        return visible_jobs(self.feed.jobs, self.filters, limit=self.page_size)

    def company_options(self) -> list[str]:
        return company_options(self.feed.jobs, limit=self.page_size)

    def caption(self) -> str:
        return summary(self.feed, self.visible(), self.filters)


def open_board(settings: Settings | None = None) -> Board:
    """Fetch once and build a fresh board. Never raises; errors land on ``feed.error``."""
    if settings is None:
        try:
            settings = load_settings()
        except (OSError, ValueError) as exc:
            log.error("Could not load settings: %s", exc)
            return Board(feed=JobFeed.failed("config", f"Invalid settings: {exc}"))

    try:
        source = get_source(settings)
    except ValueError as exc:
        log.error("%s", exc)
        return Board(feed=JobFeed.failed(settings.source, str(exc)))

    feed = source.fetch()
    if feed.ok:
        log.info("Board opened with %d jobs from %s", len(feed.jobs), feed.source)
    return Board(
        feed=feed,
        filters=default_filters(settings.recency_days),
        page_size=settings.page_size,
        recency_days=settings.recency_days,
        job_title=settings.job_title,
    )
