# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file and
#   provide a typed config object to the inspector, CLI and store.
#
# CLASSES:
# --------
# - StoreConfig (dataclass)
#     stats_dir: str          (default "stats/")
#     load_previous: bool     (default False)
#
# - AppConfig (dataclass)
#     store: StoreConfig
#     default_format: str     (default "single")
#     verbose: bool           (default True)
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the singleton (tests).
#
# ENVIRONMENT:
# ------------
#   FLOAT_INSPECTOR_STATS_DIR       → store.stats_dir
#   FLOAT_INSPECTOR_LOAD_PREVIOUS   → store.load_previous
#   FLOAT_INSPECTOR_DEFAULT_FORMAT  → default_format
#   FLOAT_INSPECTOR_VERBOSE         → verbose
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


TRUE_VARIANTS = {"1", "true", "yes", "on"}


@dataclass
class StoreConfig:
    """Where and whether statistics are persisted."""
    stats_dir: str = "stats/"
    load_previous: bool = False


@dataclass
class AppConfig:
    """Main application configuration."""
    store: StoreConfig = field(default_factory=StoreConfig)
    default_format: str = "single"
    verbose: bool = True


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUE_VARIANTS


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    store_config = StoreConfig(
        stats_dir=os.getenv("FLOAT_INSPECTOR_STATS_DIR", "stats/"),
        load_previous=_env_flag("FLOAT_INSPECTOR_LOAD_PREVIOUS", False),
    )

    _config_instance = AppConfig(
        store=store_config,
        default_format=os.getenv("FLOAT_INSPECTOR_DEFAULT_FORMAT", "single"),
        verbose=_env_flag("FLOAT_INSPECTOR_VERBOSE", True),
    )

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
