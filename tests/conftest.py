"""Test configuration helpers."""

from datetime import datetime

import pytest

from notemeta.lib import config
from notemeta.lib.dates import RegexDateDetector

FIXED_NOW = datetime(2024, 6, 15, 9, 0)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run every test in an empty directory with no notemeta config or env."""
    for name in ("NOTEMETA_LOG_LEVEL", "NOTEMETA_DAY_FIRST", "NOTEMETA_ENCODING", "NOTEMETA_RECORDS_DIR"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    config.clear_cache()
    yield tmp_path
    config.clear_cache()


@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def detector(fixed_now):
    return RegexDateDetector(now=fixed_now)


@pytest.fixture
def weekly_sync():
    return (
        "---\n"
        "title: Weekly Sync\n"
        "tags: work, meeting\n"
        "date: March 3 2020\n"
        "---\n"
        "# Ignored Heading\n"
        "body text\n"
    )
