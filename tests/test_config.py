"""Settings tests: defaults, environment overrides, and validation."""

from datetime import timedelta

import pytest

from tzpulse.config import EngineSettings


class TestDefaults:
    def test_values(self):
        s = EngineSettings()
        assert (s.business_start, s.business_end) == (9, 17)
        assert (s.night_start, s.night_end) == (20, 6)
        assert s.dst_lookahead == timedelta(hours=24)
        assert s.terminator_step == 1.0
        assert s.fallback_zone == "UTC"

    def test_empty_environment(self):
        assert EngineSettings.from_env({}) == EngineSettings()

    def test_unrelated_variables_ignored(self):
        assert EngineSettings.from_env({"PATH": "/usr/bin", "BUSINESS_START": "3"}) == EngineSettings()


class TestFromEnv:
    def test_overrides(self):
        s = EngineSettings.from_env(
            {
                "TZPULSE_BUSINESS_START": "8",
                "TZPULSE_BUSINESS_END": "18",
                "TZPULSE_NIGHT_START": "22",
                "TZPULSE_NIGHT_END": "7",
                "TZPULSE_DST_LOOKAHEAD_HOURS": "48",
                "TZPULSE_TERMINATOR_STEP": "2.5",
                "TZPULSE_FALLBACK_ZONE": "Europe/London",
            }
        )
        assert (s.business_start, s.business_end) == (8, 18)
        assert (s.night_start, s.night_end) == (22, 7)
        assert s.dst_lookahead == timedelta(hours=48)
        assert s.terminator_step == 2.5
        assert s.fallback_zone == "Europe/London"

    def test_whitespace_and_blank(self):
        s = EngineSettings.from_env({"TZPULSE_BUSINESS_START": " 10 ", "TZPULSE_NIGHT_END": ""})
        assert s.business_start == 10
        assert s.night_end == 6

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("TZPULSE_TERMINATOR_STEP", "5")
        assert EngineSettings.from_env().terminator_step == 5.0

    def test_unparseable_value_names_variable(self):
        with pytest.raises(ValueError, match="TZPULSE_NIGHT_END"):
            EngineSettings.from_env({"TZPULSE_NIGHT_END": "six"})

    def test_out_of_range_from_env(self):
        with pytest.raises(ValueError):
            EngineSettings.from_env({"TZPULSE_BUSINESS_END": "25"})


class TestValidation:
    @pytest.mark.parametrize(
        "kwargs",
        [
            {"business_start": -1},
            {"night_end": 30},
            {"business_start": 17, "business_end": 9},
            {"business_start": 12, "business_end": 12},
            {"terminator_step": 0},
            {"dst_lookahead": timedelta(0)},
        ],
    )
    def test_rejected(self, kwargs):
        with pytest.raises(ValueError):
            EngineSettings(**kwargs)

    def test_frozen(self):
        s = EngineSettings()
        with pytest.raises(AttributeError):
            s.business_start = 10
