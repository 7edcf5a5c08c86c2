"""Tests for environment-driven run settings."""
import pytest

from exact_tsp.config import RunConfig, load_config


class TestLoadConfig:
    def test_defaults(self):
        assert load_config({}) == RunConfig()

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("TSP_OUTDIR", "/tmp/tsp-out")
        monkeypatch.setenv("TSP_FIX_START", "yes")
        config = load_config()
        assert config.outdir == "/tmp/tsp-out"
        assert config.fix_start is True

    @pytest.mark.parametrize("raw, expected", [
        ("1", True), ("TRUE", True), ("on", True),
        ("0", False), ("False", False), ("", False),
    ])
    def test_boolean_flags(self, raw, expected):
        config = load_config({"TSP_VERBOSE": raw, "TSP_PLOT": raw})
        assert config.verbose is expected
        assert config.plot is expected

    def test_max_locations(self):
        assert load_config({"TSP_MAX_LOCATIONS": "8"}).max_locations == 8

    def test_bad_max_locations(self):
        with pytest.raises(ValueError, match="integer"):
            load_config({"TSP_MAX_LOCATIONS": "ten"})

    def test_non_positive_max_locations(self):
        with pytest.raises(ValueError, match="positive"):
            load_config({"TSP_MAX_LOCATIONS": "0"})
