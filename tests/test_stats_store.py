# ==============================================
# Tests for StatsStore persistence
# ==============================================

import json

import pytest

from float_inspector.analysis import new_profile
from float_inspector.extraction import extract
from float_inspector.persistence import StatsStore


@pytest.fixture
def store(tmp_path):
    return StatsStore(str(tmp_path / "stats"), verbose=False)


@pytest.fixture
def profiles():
    single = new_profile("single", 8, 23)
    single.update(extract(bytes.fromhex("0000803f"), 8, 23))
    double = new_profile("double", 11, 52)
    return {"single": single, "double": double}


class TestStatsStore:
    def test_fresh_store(self, store):
        assert not store.storage_dir.exists()
        assert not store.exists()
        assert store.load_profiles() == {}
        assert store.load_state()["total_entries"] == 0

    def test_save_and_load(self, store, profiles):
        store.save_profiles(profiles)

        assert store.storage_dir.is_dir()
        assert store.exists()
        assert store.load_profiles() == profiles

        state = store.load_state()
        assert state["total_entries"] == 1
        assert state["version"] == StatsStore.VERSION

    def test_file_is_plain_json(self, store, profiles):
        store.save_profiles(profiles)
        with open(store.profiles_file) as f:
            data = json.load(f)
        assert data["single"]["normalized_positive"][0][7] == 1

    def test_clear(self, store, profiles):
        store.save_profiles(profiles)
        store.clear()
        assert not store.exists()

    def test_verbose_prints(self, tmp_path, profiles, capsys):
        StatsStore(str(tmp_path / "loud"), verbose=True).save_profiles(profiles)
        assert "Saved 2 profiles" in capsys.readouterr().out
