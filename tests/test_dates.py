"""Tests for date detection"""

from datetime import datetime

import pytest

from notemeta.lib.dates import RegexDateDetector, default_detector


class TestRegexDateDetector:
    @pytest.mark.parametrize("text, expected", [
        ("2020-03-03", datetime(2020, 3, 3)),
        ("2020-03-03T10:30", datetime(2020, 3, 3, 10, 30)),
        ("2020-03-03 10:30:15", datetime(2020, 3, 3, 10, 30, 15)),
        ("March 3 2020", datetime(2020, 3, 3)),
        ("Mar. 3rd, 2020", datetime(2020, 3, 3)),
        ("3 March 2020", datetime(2020, 3, 3)),
        ("3rd of March, 2020", datetime(2020, 3, 3)),
        ("sept 9 2021", datetime(2021, 9, 9)),
        ("March 3", datetime(2024, 3, 3)),
        ("3/4/2020", datetime(2020, 3, 4)),
        ("3/4/20", datetime(2020, 3, 4)),
        ("03.04.2020", datetime(2020, 4, 3)),
        ("today", datetime(2024, 6, 15)),
        ("tomorrow at 10:30", datetime(2024, 6, 16, 10, 30)),
        ("Yesterday", datetime(2024, 6, 14)),
    ])
    def test_recognized_forms(self, detector, text, expected):
        assert detector.find_first_date(text) == expected

    @pytest.mark.parametrize("text, expected", [
        ("March 3 2020 at 10:30 pm", datetime(2020, 3, 3, 22, 30)),
        ("March 3 2020 9am", datetime(2020, 3, 3, 9, 0)),
        ("March 3 2020, 12:05 a.m.", datetime(2020, 3, 3, 0, 5)),
        ("March 3 2020 5 people", datetime(2020, 3, 3)),
        ("10:30 March 3 2020", datetime(2020, 3, 3, 10, 30)),
        ("9am on 2020-03-03", datetime(2020, 3, 3, 9, 0)),
        ("March 3 2020 25:00", datetime(2020, 3, 3)),
        ("2020-03-03T24:30", datetime(2020, 3, 3)),
    ])
    def test_times(self, detector, text, expected):
        assert detector.find_first_date(text) == expected

    def test_embedded_in_sentence(self, detector):
        assert detector.find_first_date("Kickoff meeting on March 3 2020 in Berlin") == datetime(2020, 3, 3)

    def test_earliest_match_wins(self, detector):
        assert detector.find_first_date("from 2021-01-02 until March 3 2020") == datetime(2021, 1, 2)

    def test_impossible_date_is_skipped(self, detector):
        assert detector.find_first_date("February 30 2020 or 2020-03-01") == datetime(2020, 3, 1)

    def test_day_first(self, fixed_now):
        detector = RegexDateDetector(day_first=True, now=fixed_now)

        assert detector.find_first_date("3/4/2020") == datetime(2020, 4, 3)

    @pytest.mark.parametrize("text", ["asdf", "", "Marching 3 bands", "version 1.2", "2020", "10:30 March"])
    def test_no_match(self, detector, text):
        assert detector.find_first_date(text) is None


class TestDefaultDetector:
    def test_month_first_by_default(self):
        assert default_detector().day_first is False

    def test_day_first_from_env(self, monkeypatch):
        monkeypatch.setenv("NOTEMETA_DAY_FIRST", "yes")

        assert default_detector().day_first is True

    def test_invalid_day_first_falls_back_to_month_first(self, monkeypatch):
        monkeypatch.setenv("NOTEMETA_DAY_FIRST", "maybe")

        assert default_detector().day_first is False

    def test_day_first_from_config(self, isolated_config):
        config_dir = isolated_config / ".notemeta"
        config_dir.mkdir()
        (config_dir / "config.toml").write_text("[dates]\nday_first = true\n", encoding="utf-8")

        assert default_detector().day_first is True
