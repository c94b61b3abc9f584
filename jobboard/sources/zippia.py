"""Zippia job search: one fixed POST, no paging.

Endpoint: https://www.zippia.com/api/jobs/
"""
from __future__ import annotations

import requests

from jobboard.config import Settings
from jobboard.log import get_logger
from jobboard.models import JobFeed, JobRecord
from jobboard.sources.base import JobSource

log = get_logger(__name__)


def build_query(job_title: str, num_jobs: int) -> dict:
    return {
        "companySkills": True,
        "dismissedListingHashes": [],
        "fetchJobDesc": True,
        "jobTitle": job_title,
        "locations": [],
        "numJobs": num_jobs,
        "previousListingHashes": [],
    }


def parse_jobs(data: object) -> list[JobRecord]:
    """Records from a decoded response body; raises ValueError if there is no ``jobs`` list."""
    if not isinstance(data, dict) or not isinstance(data.get("jobs"), list):
        raise ValueError("response has no 'jobs' list")

    jobs: list[JobRecord] = []
    skipped = 0
    for hit in data["jobs"]:
        if not isinstance(hit, dict):
            skipped += 1
            continue
        jobs.append(JobRecord.from_api(hit))
    if skipped:
        log.warning("Zippia: skipped %d malformed job entries", skipped)
    return jobs


class ZippiaSource(JobSource):
    name = "zippia"

    def __init__(self, settings: Settings) -> None:
        self.url = settings.api_url
        self.timeout = settings.timeout
        self.query = build_query(settings.job_title, settings.num_jobs)

    def fetch(self) -> JobFeed:
        try:
            r = requests.post(self.url, json=self.query, timeout=self.timeout)
            r.raise_for_status()
        except (requests.RequestException, ValueError) as exc:
            # urllib3 rejects a non-positive timeout with a bare ValueError
            log.warning("Zippia request failed: %s", exc)
            return JobFeed.failed(self.name, f"Could not reach the job search API: {exc}")

        try:
            jobs = parse_jobs(r.json())
        except ValueError as exc:
            log.warning("Zippia returned an unusable body: %s", exc)
            return JobFeed.failed(self.name, f"Unexpected response from the job search API: {exc}")

        log.info("Zippia %r returned %d jobs", self.query["jobTitle"], len(jobs))
        return JobFeed(jobs=jobs, source=self.name)
