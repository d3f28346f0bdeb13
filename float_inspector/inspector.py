# ==============================================
# FloatInspector — Orchestrator
# ==============================================
#
# PURPOSE:
#   Ties the extractor, the statistics profiles, the format adapter
#   and the store together. Callers that want more than a single
#   extract() call use this class.
#
#   value ──► FloatFormat.pack ──► extract ──► FieldInfo
#                                                 │
#                                                 ▼
#                                  StatisticsProfile (one per format)
#                                                 │
#                                                 ▼
#                                       StatsStore.save_profiles
#
# CLASS: FloatInspector
# ---------------------
#
#   Constructor:
#   ------------
#   - __init__(config: AppConfig | None = None)
#       1. Load config (from .env or passed in)
#       2. Load previously saved profiles if config.store.load_previous
#
#       The StatsStore is created on first use (save, reset, resume);
#       inspecting and recording never touch the filesystem.
#
#   Public Methods:
#   ---------------
#   - inspect(value, fmt=None) -> FieldInfo
#   - inspect_bytes(data, exponent_bit_width, mantissa_bit_width) -> FieldInfo
#   - record(value, fmt=None) -> FieldInfo
#   - record_many(values, fmt=None) -> int
#   - record_info(info, fmt) -> None
#   - get_profile(fmt=None) -> StatisticsProfile
#   - get_profiles() -> dict[str, StatisticsProfile]
#   - get_status() -> dict
#   - report(fmt=None) -> str
#   - save() -> None
#   - reset() -> None
#
# ==============================================

from typing import Dict, Iterable, Optional, Union

from float_inspector.config import AppConfig, get_config
from float_inspector.analysis.statistics import StatisticsProfile, new_profile
from float_inspector.extraction import FieldInfo, extract
from float_inspector.formats import FloatFormat, get_format, inspect_value
from float_inspector.persistence.stats_store import StatsStore
from float_inspector.reporting import render_statistics


FormatLike = Union[str, FloatFormat, None]


class FloatInspector:
    """
    Inspects floating-point values and keeps per-format statistics.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        """
        Initialize the inspector.

        Args:
            config: Application configuration. If None, loads from environment.
        """
        self._config = config or get_config()
        self._default_format = get_format(self._config.default_format)
        self._store: Optional[StatsStore] = None
        self._profiles: Dict[str, StatisticsProfile] = {}

        if self._config.store.load_previous:
            self._load_previous_state()

    # ======================================
    # Inspection
    # ======================================
    def inspect(self, value: float, fmt: FormatLike = None) -> FieldInfo:
        """
        Extract the fields of a number without recording it.

        Args:
            value: Number to encode
            fmt: Format name or FloatFormat (defaults to config.default_format)

        Returns:
            The FieldInfo of the encoded value
        """
        return inspect_value(value, self._resolve(fmt))

    def inspect_bytes(
        self, data: bytes, exponent_bit_width: int, mantissa_bit_width: int
    ) -> FieldInfo:
        """Extract the fields of a raw bit pattern without recording it."""
        return extract(data, exponent_bit_width, mantissa_bit_width)

    # ======================================
    # Recording
    # ======================================
    def record(self, value: float, fmt: FormatLike = None) -> FieldInfo:
        """
        Extract the fields of a number and count it in the format's profile.

        Returns:
            The FieldInfo that was counted
        """
        float_format = self._resolve(fmt)
        info = inspect_value(value, float_format)
        self.record_info(info, float_format)
        return info

    def record_many(self, values: Iterable[float], fmt: FormatLike = None) -> int:
        """
        Record every number of an iterable.

        Returns:
            Number of values recorded
        """
        float_format = self._resolve(fmt)
        count = 0
        for value in values:
            self.record(value, float_format)
            count += 1

        if self._config.verbose:
            print(f"✓ Recorded {count} {float_format.name} values")
        return count

    def record_info(self, info: FieldInfo, fmt: FormatLike = None) -> None:
        """
        Count an already extracted FieldInfo.

        Raises:
            ProfileMismatch: The FieldInfo widths do not match the format
        """
        self.get_profile(fmt).update(info)

    # ======================================
    # Access
    # ======================================
    def get_profile(self, fmt: FormatLike = None) -> StatisticsProfile:
        """Return (creating on first use) the profile of a format."""
        float_format = self._resolve(fmt)
        if float_format.name not in self._profiles:
            self._profiles[float_format.name] = new_profile(
                float_format.name,
                float_format.exponent_bit_width,
                float_format.mantissa_bit_width,
            )
        return self._profiles[float_format.name]

    def get_profiles(self) -> Dict[str, StatisticsProfile]:
        return dict(self._profiles)

    def get_status(self) -> dict:
        """
        Return a short summary of what has been recorded.

        Returns:
            {"default_format", "total_entries", "profiles": {name: entries}}
        """
        return {
            "default_format": self._default_format.name,
            "total_entries": sum(p.total_entries for p in self._profiles.values()),
            "profiles": {
                name: profile.total_entries for name, profile in self._profiles.items()
            },
        }

    def report(self, fmt: FormatLike = None) -> str:
        """Render the statistics of one format as text."""
        return render_statistics(self.get_profile(fmt).snapshot())

    # ======================================
    # Persistence
    # ======================================
    def save(self) -> None:
        """Write all profiles to the stats directory."""
        self._get_store().save_profiles(self._profiles)

    def reset(self) -> None:
        """Drop all in-memory profiles and the saved files."""
        self._profiles = {}
        self._get_store().clear()

    def _load_previous_state(self) -> None:
        """Resume from profiles saved by an earlier run."""
        store = self._get_store()
        if not store.exists():
            return

        self._profiles = store.load_profiles()
        if self._config.verbose:
            total = sum(p.total_entries for p in self._profiles.values())
            print(f"✓ Resumed {len(self._profiles)} profiles ({total} entries)")

    def _get_store(self) -> StatsStore:
        if self._store is None:
            self._store = StatsStore(
                self._config.store.stats_dir, verbose=self._config.verbose
            )
        return self._store

    def _resolve(self, fmt: FormatLike) -> FloatFormat:
        if fmt is None:
            return self._default_format
        if isinstance(fmt, FloatFormat):
            return fmt
        return get_format(fmt)
