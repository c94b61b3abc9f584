"""Data models for job postings and fetch results."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class JobRecord:
    company_name: str
    job_title: str
    short_desc: str = ""
    posted_date: str = ""
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_api(cls, hit: dict[str, Any]) -> JobRecord:
        """Build a record from one element of the upstream ``jobs`` array."""
        return cls(
            company_name=_text(hit.get("companyName")),
            job_title=_text(hit.get("jobTitle")),
            short_desc=_text(hit.get("shortDesc")),
            posted_date=_text(hit.get("postedDate")),
            raw=hit,
        )


@dataclass
class JobFeed:
    jobs: list[JobRecord]
    source: str = "unknown"
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, source: str, error: str) -> JobFeed:
        return cls(jobs=[], source=source, error=error)
