"""Tests for oddkit.config module."""

from __future__ import annotations

import pytest

from oddkit.config import (
    CONFIG_FILENAME,
    LOCAL_CONFIG_FILENAME,
    OddkitConfig,
    find_config_file,
)


# ---------------------------------------------------------------------------
# find_config_file
# ---------------------------------------------------------------------------


class TestFindConfigFile:
    def test_finds_in_start_dir(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config_file(tmp_path) == tmp_path / CONFIG_FILENAME

    def test_walks_up(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == tmp_path / CONFIG_FILENAME

    def test_nearest_wins(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text("")
        nested = tmp_path / "project"
        nested.mkdir()
        (nested / CONFIG_FILENAME).write_text("")
        assert find_config_file(nested) == nested / CONFIG_FILENAME


# ---------------------------------------------------------------------------
# OddkitConfig
# ---------------------------------------------------------------------------


class TestOddkitConfig:
    def test_defaults(self):
        config = OddkitConfig.from_dict({}, environ={})
        assert config.seed is None
        assert config.method == "lemire"
        assert config.trials == 1_000_000
        assert config.alpha == 0.001

    def test_from_dict(self):
        data = {"oddkit": {"seed": 1337, "method": "modulo", "trials": 500, "alpha": 0.01}}
        config = OddkitConfig.from_dict(data, environ={})
        assert config.seed == 1337
        assert config.method == "modulo"
        assert config.trials == 500
        assert config.alpha == 0.01

    def test_hex_seed_string(self):
        config = OddkitConfig.from_dict({"oddkit": {"seed": "0x539"}}, environ={})
        assert config.seed == 1337

    def test_local_overrides(self):
        config = OddkitConfig.from_dict(
            {"oddkit": {"seed": 1, "trials": 10}},
            local_overrides={"oddkit": {"seed": 2}},
            environ={},
        )
        assert config.seed == 2
        assert config.trials == 10

    def test_local_overrides_without_base_table(self):
        config = OddkitConfig.from_dict({}, local_overrides={"oddkit": {"method": "modulo"}}, environ={})
        assert config.method == "modulo"

    def test_unknown_keys_warn(self, caplog):
        with caplog.at_level("WARNING", logger="oddkit.config"):
            config = OddkitConfig.from_dict({"oddkit": {"sead": 1}}, environ={})
        assert config.seed is None
        assert "sead" in caplog.text

    def test_env_seed_wins(self):
        config = OddkitConfig.from_dict({"oddkit": {"seed": 1}}, environ={"ODDKIT_SEED": "99"})
        assert config.seed == 99

    def test_invalid_seed(self):
        with pytest.raises(ValueError, match="Invalid seed"):
            OddkitConfig.from_dict({}, environ={"ODDKIT_SEED": "lucky"})

    def test_invalid_method(self):
        with pytest.raises(ValueError, match="Unknown sampling method"):
            OddkitConfig.from_dict({"oddkit": {"method": "naive"}}, environ={})

    def test_invalid_trials(self):
        with pytest.raises(ValueError, match="trials"):
            OddkitConfig(trials=0)

    def test_invalid_alpha(self):
        with pytest.raises(ValueError, match="alpha"):
            OddkitConfig(alpha=1.5)

    def test_load_files(self, tmp_path):
        (tmp_path / CONFIG_FILENAME).write_text('[oddkit]\nseed = 1337\nmethod = "modulo"\n')
        (tmp_path / LOCAL_CONFIG_FILENAME).write_text("[oddkit]\ntrials = 42\n")
        config = OddkitConfig.load(tmp_path, environ={})
        assert config.seed == 1337
        assert config.method == "modulo"
        assert config.trials == 42
        assert config.source == tmp_path / CONFIG_FILENAME

    def test_load_without_file(self, tmp_path):
        config = OddkitConfig.load(tmp_path, environ={"ODDKIT_SEED": "5"})
        assert config.seed == 5
        assert config.source is None
