"""What the page shows: the capped job list, select-box options, caption."""
from __future__ import annotations

from jobboard.filters import NONE_OPTION, FilterSet, any_enabled, describe, filter_jobs
from jobboard.models import JobFeed, JobRecord

PAGE_SIZE = 10


def visible_jobs(jobs: list[JobRecord], filters: FilterSet, limit: int = PAGE_SIZE) -> list[JobRecord]:
    if any_enabled(filters):
        return filter_jobs(jobs, filters)[:limit]
    return jobs[:limit]


def company_options(jobs: list[JobRecord], limit: int = PAGE_SIZE) -> list[str]:
    """'None' followed by the companies of the first ``limit`` jobs, in order, once each."""
    options = [NONE_OPTION]
    for job in jobs[:limit]:
        name = job.company_name
        if name.strip() and name not in options:
            options.append(name)
    return options


def summary(feed: JobFeed, shown: list[JobRecord], filters: FilterSet) -> str:
    text = f"Showing {len(shown)} of {len(feed.jobs)} jobs"
    labels = describe(filters)
    if labels:
        text += f" (filters: {', '.join(labels)})"
    return text
