# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# - config        → AppConfig writing into tmp_path, quiet
# - inspector     → FloatInspector built from `config`
# - cli_env       → Environment for CLI tests (stats dir in tmp_path)
# ==============================================

import pytest

from float_inspector.config import AppConfig, StoreConfig, reset_config
from float_inspector.inspector import FloatInspector


@pytest.fixture
def config(tmp_path):
    """Quiet configuration with the stats directory in tmp_path."""
    return AppConfig(store=StoreConfig(stats_dir=str(tmp_path / "stats")), verbose=False)


@pytest.fixture
def inspector(config):
    """Fresh inspector instance."""
    return FloatInspector(config)


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point the environment-driven config at tmp_path."""
    stats_dir = tmp_path / "cli_stats"
    monkeypatch.setenv("FLOAT_INSPECTOR_STATS_DIR", str(stats_dir))
    monkeypatch.setenv("FLOAT_INSPECTOR_DEFAULT_FORMAT", "single")
    monkeypatch.setenv("FLOAT_INSPECTOR_VERBOSE", "false")
    monkeypatch.setenv("FLOAT_INSPECTOR_LOAD_PREVIOUS", "false")
    reset_config()
    yield stats_dir
    reset_config()
