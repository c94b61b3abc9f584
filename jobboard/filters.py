"""
Client-side filters for the job list.

A FilterSet maps a filter id to a FilterDefinition. Each definition is
toggled and parameterised by UI events; a job is shown when every
enabled filter's predicate accepts it. Predicates never raise: bad data
is a non-match.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, Iterable

from jobboard.log import get_logger
from jobboard.models import JobRecord

log = get_logger(__name__)

NONE_OPTION = "None"
DEFAULT_RECENCY_DAYS = 7

_DIGITS = re.compile(r"[0-9]+")

Predicate = Callable[[JobRecord, "str | None"], bool]


class FilterKind(str, Enum):
    RECENCY = "recency"
    COMPANY = "company"


@dataclass
class FilterDefinition:
    kind: FilterKind
    predicate: Predicate
    enabled: bool = False
    parameter: str | None = None

    def matches(self, job: JobRecord) -> bool:
        try:
            return self.predicate(job, self.parameter) is True
        except (LookupError, AttributeError, TypeError, ValueError) as exc:
            log.debug("%s filter rejected %r: %s", self.kind.value, job, exc)
            return False


FilterSet = dict[str, FilterDefinition]


# ── Predicates ───────────────────────────────────────────────────────────


def days_ago(posted_date: str) -> int | None:
    """First contiguous digit run of e.g. '3 days ago', or None."""
    if not isinstance(posted_date, str):
        return None
    m = _DIGITS.search(posted_date)
    return int(m.group()) if m else None


def is_recent(
    job: JobRecord, parameter: str | None = None, *, max_days: int = DEFAULT_RECENCY_DAYS
) -> bool:
    days = days_ago(job.posted_date)
    return days is not None and days <= max_days


def same_company(job: JobRecord, parameter: str | None) -> bool:
    if parameter is None:
        return False
    return job.company_name == parameter


# ── FilterSet ────────────────────────────────────────────────────────────


def default_filters(recency_days: int = DEFAULT_RECENCY_DAYS) -> FilterSet:
    """Both filters, disabled. Built once per view."""
    return {
        FilterKind.RECENCY.value: FilterDefinition(
            kind=FilterKind.RECENCY,
            predicate=partial(is_recent, max_days=recency_days),
        ),
        FilterKind.COMPANY.value: FilterDefinition(
            kind=FilterKind.COMPANY,
            predicate=same_company,
        ),
    }


def active_filters(filters: FilterSet) -> list[FilterDefinition]:
    return [f for f in filters.values() if f.enabled]


def any_enabled(filters: FilterSet) -> bool:
    return any(f.enabled for f in filters.values())


def passes_all_filters(job: JobRecord, filters: FilterSet) -> bool:
    """True iff every enabled filter accepts ``job`` (vacuously true if none are)."""
    return all(f.matches(job) for f in active_filters(filters))


def filter_jobs(jobs: Iterable[JobRecord], filters: FilterSet) -> list[JobRecord]:
    active = active_filters(filters)
    if not active:
        return list(jobs)
    return [j for j in jobs if all(f.matches(j) for f in active)]


# ── Event handlers ───────────────────────────────────────────────────────


def toggle_recency(filters: FilterSet) -> bool:
    """Flip the recency filter; returns the new state."""
    f = filters[FilterKind.RECENCY.value]
    f.enabled = not f.enabled
    log.debug("Recency filter %s", "on" if f.enabled else "off")
    return f.enabled


def select_company(filters: FilterSet, value: str | None) -> None:
    f = filters[FilterKind.COMPANY.value]
    if not value or value == NONE_OPTION:
        f.enabled = False
        f.parameter = None
    else:
        f.enabled = True
        f.parameter = value
    log.debug("Company filter -> %r", f.parameter)


def reset_filters(filters: FilterSet) -> None:
    for f in filters.values():
        f.enabled = False
        f.parameter = None


def describe(filters: FilterSet) -> list[str]:
    """Short labels of the enabled filters, e.g. ['recency', 'company=Acme']."""
    labels: list[str] = []
    for f in active_filters(filters):
        if f.parameter is None:
            labels.append(f.kind.value)
        else:
            labels.append(f"{f.kind.value}={f.parameter}")
    return labels
