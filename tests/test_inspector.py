# ==============================================
# Tests for the FloatInspector orchestrator
# ==============================================

import pytest

from float_inspector.config import AppConfig, StoreConfig
from float_inspector.errors import ProfileMismatch, UnknownFormat
from float_inspector.extraction import Category, extract
from float_inspector.formats import DOUBLE
from float_inspector.inspector import FloatInspector


class TestInspect:
    def test_inspect_uses_default_format(self, inspector):
        info = inspector.inspect(1.0)
        assert info.widths == (8, 23)
        assert inspector.get_status()["total_entries"] == 0

    def test_inspect_named_format(self, inspector):
        assert inspector.inspect(1.0, "double").widths == (11, 52)
        assert inspector.inspect(1.0, DOUBLE).exponent_value == 1023

    def test_inspect_bytes(self, inspector):
        info = inspector.inspect_bytes(b"\x70", 3, 4)
        assert info.category is Category.INFINITY

    def test_unknown_format(self, inspector):
        with pytest.raises(UnknownFormat):
            inspector.inspect(1.0, "quad")


class TestRecord:
    def test_record_counts_per_format(self, inspector):
        inspector.record(1.0)
        inspector.record_many([0.0, -1.0, float("inf")], "double")

        status = inspector.get_status()
        assert status["total_entries"] == 4
        assert status["profiles"] == {"single": 1, "double": 3}
        assert inspector.get_profile("double").infinity == 1

    def test_record_info_mismatch(self, inspector):
        info = extract(bytes.fromhex("0000803f"), 8, 23)
        with pytest.raises(ProfileMismatch):
            inspector.record_info(info, "double")

    def test_report(self, inspector):
        inspector.record_many([1.0, float("nan")])
        text = inspector.report()
        assert "Type: single" in text
        assert "1 NaNs," in text

    def test_record_many_prints_when_verbose(self, tmp_path, capsys):
        config = AppConfig(store=StoreConfig(stats_dir=str(tmp_path)), verbose=True)
        FloatInspector(config).record_many([1.0, 2.0])
        assert "Recorded 2 single values" in capsys.readouterr().out


class TestPersistence:
    def test_resume_previous_run(self, config):
        first = FloatInspector(config)
        first.record_many([1.0, -2.0, 0.0])
        first.save()

        config.store.load_previous = True
        second = FloatInspector(config)
        assert second.get_profile("single").total_entries == 3

        second.record(3.0)
        assert second.get_profile("single").total_entries == 4

    def test_without_load_previous_starts_empty(self, config):
        first = FloatInspector(config)
        first.record(1.0)
        first.save()

        assert FloatInspector(config).get_status()["total_entries"] == 0

    def test_reset(self, inspector):
        inspector.record(1.0)
        inspector.save()
        inspector.reset()
        assert inspector.get_profiles() == {}
        assert not inspector._get_store().exists()

    def test_recording_does_not_touch_the_filesystem(self, config, tmp_path):
        inspector = FloatInspector(config)
        inspector.inspect(1.0)
        inspector.record_many([0.0, 1.0, -2.5])
        inspector.report()
        assert not (tmp_path / "stats").exists()

    def test_resume_from_missing_directory(self, tmp_path):
        stats_dir = tmp_path / "never_saved"
        config = AppConfig(
            store=StoreConfig(stats_dir=str(stats_dir), load_previous=True),
            verbose=False,
        )
        assert FloatInspector(config).get_profiles() == {}
        assert not stats_dir.exists()

    def test_save_creates_directory(self, config, tmp_path):
        inspector = FloatInspector(config)
        inspector.record(1.0)
        inspector.save()
        assert (tmp_path / "stats" / "profiles.json").is_file()
