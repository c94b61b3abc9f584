"""Offline sample jobs, for demos without network access (JOB_SOURCE=mock)."""
from __future__ import annotations

from jobboard.config import Settings
from jobboard.log import get_logger
from jobboard.models import JobFeed, JobRecord
from jobboard.sources.base import JobSource

log = get_logger(__name__)

_SAMPLE: list[dict] = [
    {
        "companyName": "Acme Analytics",
        "jobTitle": "Business Analyst",
        "shortDesc": "Gather requirements and turn them into dashboards for the sales team.",
        "postedDate": "3 days ago",
    },
    {
        "companyName": "Globex",
        "jobTitle": "Senior Business Analyst",
        "shortDesc": "Own process mapping across finance and operations.",
        "postedDate": "12 days ago",
    },
    {
        "companyName": "Initech",
        "jobTitle": "Business Systems Analyst",
        "shortDesc": "Bridge IT and the business on ERP rollouts.",
        "postedDate": "1 day ago",
    },
    {
        "companyName": "Acme Analytics",
        "jobTitle": "Junior Business Analyst",
        "shortDesc": "SQL, Excel and stakeholder interviews.",
        "postedDate": "7 days ago",
    },
    {
        "companyName": "Umbrella Health",
        "jobTitle": "Business Analyst, Claims",
        "shortDesc": "Analyse claim workflows and write user stories.",
        "postedDate": "30+ days ago",
    },
]


class MockSource(JobSource):
    name = "mock"

    def __init__(self, settings: Settings) -> None:
        self.num_jobs = settings.num_jobs

    def fetch(self) -> JobFeed:
        log.info("MockSource serving sample jobs")
        jobs = [JobRecord.from_api(dict(hit)) for hit in _SAMPLE]
        return JobFeed(jobs=jobs[: max(self.num_jobs, 0)], source=self.name)
