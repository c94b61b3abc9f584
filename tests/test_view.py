"""Tests for the page view model and board state."""

from unittest.mock import patch

from jobboard.board import Board, open_board
from jobboard.config import Settings
from jobboard.filters import default_filters, select_company, toggle_recency
from jobboard.models import JobFeed, JobRecord
from jobboard.view import company_options, summary, visible_jobs


def _job(company_name: str = "Acme", posted_date: str = "3 days ago", title: str = "BA") -> JobRecord:
    return JobRecord(company_name=company_name, job_title=title, posted_date=posted_date)


ACME = _job("Acme", "3 days ago")
GLOBEX = _job("Globex", "12 days ago")


class TestVisibleJobs:
    def test_unfiltered_capped_at_ten(self) -> None:
        jobs = [_job(title=f"BA {i}") for i in range(20)]
        assert visible_jobs(jobs, default_filters()) == jobs[:10]

    def test_filtered_then_capped(self) -> None:
        """Matches beyond the first ten raw records still fill the page."""
        old = [_job("Old Co", "20 days ago", f"old {i}") for i in range(10)]
        new = [_job("New Co", "2 days ago", f"new {i}") for i in range(12)]
        filters = default_filters()
        toggle_recency(filters)
        assert visible_jobs(old + new, filters) == new[:10]

    def test_recency_scenario(self) -> None:
        filters = default_filters()
        toggle_recency(filters)
        assert visible_jobs([ACME, GLOBEX], filters) == [ACME]

    def test_company_scenarios(self) -> None:
        filters = default_filters()
        select_company(filters, "Globex")
        assert visible_jobs([ACME, GLOBEX], filters) == [GLOBEX]
        select_company(filters, "None")
        assert visible_jobs([ACME, GLOBEX], filters) == [ACME, GLOBEX]

    def test_custom_limit(self) -> None:
        jobs = [_job(title=f"BA {i}") for i in range(5)]
        assert visible_jobs(jobs, default_filters(), limit=2) == jobs[:2]

    def test_empty(self) -> None:
        assert visible_jobs([], default_filters()) == []


class TestCompanyOptions:
    def test_none_first_then_dedup_in_order(self) -> None:
        jobs = [_job("Acme"), _job("Globex"), _job("Acme"), _job("Initech")]
        assert company_options(jobs) == ["None", "Acme", "Globex", "Initech"]

    def test_only_first_ten_jobs(self) -> None:
        jobs = [_job(f"Co {i}") for i in range(15)]
        options = company_options(jobs)
        assert len(options) == 11
        assert "Co 10" not in options

    def test_blank_names_skipped(self) -> None:
        assert company_options([_job(""), _job("  "), _job("Acme")]) == ["None", "Acme"]


def test_summary() -> None:
    feed = JobFeed(jobs=[ACME, GLOBEX], source="mock")
    filters = default_filters()
    assert summary(feed, [ACME, GLOBEX], filters) == "Showing 2 of 2 jobs"
    toggle_recency(filters)
    assert summary(feed, [ACME], filters) == "Showing 1 of 2 jobs (filters: recency)"


# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------


class TestBoard:
    def test_visible_and_caption(self) -> None:
        board = Board(feed=JobFeed(jobs=[ACME, GLOBEX], source="mock"))
        select_company(board.filters, "Acme")
        assert board.visible() == [ACME]
        assert board.company_options() == ["None", "Acme", "Globex"]
        assert board.caption() == "Showing 1 of 2 jobs (filters: company=Acme)"

    def test_open_board_mock(self) -> None:
        board = open_board(Settings(source="mock", page_size=3, recency_days=5))
        assert board.feed.ok
        assert board.feed.source == "mock"
        assert len(board.visible()) == 3
        assert board.recency_days == 5

    def test_open_board_uses_recency_setting(self) -> None:
        board = open_board(Settings(source="mock", recency_days=2))
        toggle_recency(board.filters)
        assert [j.posted_date for j in board.visible()] == ["1 day ago"]

    def test_open_board_unknown_source(self) -> None:
        board = open_board(Settings(source="monster"))
        assert not board.feed.ok
        assert "monster" in board.feed.error
        assert board.visible() == []

    def test_open_board_bad_settings(self) -> None:
        with patch("jobboard.board.load_settings", side_effect=ValueError("boom")):
            board = open_board()
        assert not board.feed.ok
        assert "boom" in board.feed.error

    def test_zero_timeout_does_not_raise(self) -> None:
        board = open_board(Settings(source="zippia", timeout=0))
        assert not board.feed.ok
        assert board.visible() == []

    def test_fetch_failure_gives_empty_board(self) -> None:
        failed = JobFeed.failed("zippia", "Could not reach the job search API")
        with patch("jobboard.sources.zippia.ZippiaSource.fetch", return_value=failed):
            board = open_board(Settings(source="zippia"))
        assert board.feed.error == "Could not reach the job search API"
        assert board.visible() == []
        assert board.company_options() == ["None"]
