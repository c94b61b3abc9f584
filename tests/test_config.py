"""Tests for settings loading."""

from pathlib import Path

import pytest

from jobboard.config import ZIPPIA_API_URL, Settings, get_env, load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("JOB_SOURCE", raising=False)


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path / "nope.yaml")
    assert settings == Settings()
    assert settings.api_url == ZIPPIA_API_URL
    assert settings.job_title == "Business Analyst"
    assert settings.num_jobs == 20
    assert settings.page_size == 10
    assert settings.recency_days == 7


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    assert load_settings(_write(tmp_path, "")) == Settings()


def test_overrides(tmp_path: Path) -> None:
    path = _write(tmp_path, "job_title: Data Analyst\nnum_jobs: 5\nsource: Mock\n")
    settings = load_settings(path)
    assert settings.job_title == "Data Analyst"
    assert settings.num_jobs == 5
    assert settings.source == "mock"


def test_numeric_strings_coerced(tmp_path: Path) -> None:
    settings = load_settings(_write(tmp_path, "page_size: '4'\ntimeout: 2\n"))
    assert settings.page_size == 4
    assert settings.timeout == 2.0


def test_unknown_keys_ignored(tmp_path: Path) -> None:
    settings = load_settings(_write(tmp_path, "colour: blue\nrecency_days: 3\n"))
    assert settings.recency_days == 3
    assert not hasattr(settings, "colour")


def test_env_overrides_source(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOB_SOURCE", " mock ")
    settings = load_settings(_write(tmp_path, "source: zippia\n"))
    assert settings.source == "mock"


@pytest.mark.parametrize(
    "text",
    [
        "- a\n- b\n",
        "num_jobs: lots\n",
        "page_size: 0\n",
        "num_jobs: 0\n",
        "num_jobs: -3\n",
        "timeout: 0\n",
        "timeout: -1.5\n",
        "key: [unclosed\n",
    ],
)
def test_invalid_settings(tmp_path: Path, text: str) -> None:
    with pytest.raises(ValueError):
        load_settings(_write(tmp_path, text))


def test_get_env_strips(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOBBOARD_TEST_KEY", "  value \n")
    assert get_env("JOBBOARD_TEST_KEY") == "value"
    assert get_env("JOBBOARD_MISSING_KEY", "fallback") == "fallback"


def test_shipped_settings_file_loads() -> None:
    path = Path(__file__).resolve().parent.parent / "config" / "settings.yaml"
    settings = load_settings(path)
    assert settings.source == "zippia"
    assert settings.num_jobs == 20
