import json
from pathlib import Path
from typing import Any, Dict
from datetime import datetime

from float_inspector.analysis.statistics import StatisticsProfile


# ==============================================
# StatsStore
# ==============================================
#
# PURPOSE:
#   Persist accumulated StatisticsProfiles to disk so that a long
#   collection run can be resumed after a restart.
#
# WHAT IS PERSISTED:
#   1. Profiles   → One StatisticsProfile per format name
#   2. State      → Save time and file version
#
# CLASS: StatsStore
# -----------------
#   Stateful — holds a reference to the storage directory.
#
#   Constructor:
#   ------------
#   - __init__(storage_dir: str = "stats/", verbose: bool = True)
#       No filesystem access; the directory is created on first save.
#
class StatsStore:
    """
    Handles persistence of statistics profiles to disk.

    Files created:
    - stats/profiles.json   → {format name: profile}
    - stats/state.json      → Save time and version
    """

    VERSION = "1.0"

    def __init__(self, storage_dir: str = "stats/", verbose: bool = True):
        """
        Initialize the statistics store.

        Args:
            storage_dir: Directory to store the JSON files
            verbose: Print a status line for every save/load
        """
        self.storage_dir = Path(storage_dir)
        self.verbose = verbose

        # Define file paths
        self.profiles_file = self.storage_dir / "profiles.json"
        self.state_file = self.storage_dir / "state.json"

#   Methods:
#   --------
#   - save_profiles(profiles: dict[str, StatisticsProfile]) -> None
#   - load_profiles() -> dict[str, StatisticsProfile]
#       Empty dict if nothing was saved yet.
#   - load_state() -> dict
#
    def save_profiles(self, profiles: Dict[str, StatisticsProfile]) -> None:
        """
        Save statistics profiles to disk.

        Args:
            profiles: Dictionary mapping format name -> StatisticsProfile
        """
        self.storage_dir.mkdir(parents=True, exist_ok=True)

        profiles_dict = {
            name: profile.to_dict()
            for name, profile in profiles.items()
        }

        with open(self.profiles_file, 'w') as f:
            json.dump(profiles_dict, f, indent=2)

        state = {
            "total_entries": sum(p.total_entries for p in profiles.values()),
            "last_save": datetime.now().isoformat(),
            "version": self.VERSION,
        }
        with open(self.state_file, 'w') as f:
            json.dump(state, f, indent=2)

        self._log(f"Saved {len(profiles)} profiles to {self.profiles_file}")

    def load_profiles(self) -> Dict[str, StatisticsProfile]:
        """
        Load statistics profiles from disk.

        Returns:
            Dictionary mapping format name -> StatisticsProfile
            Empty dict if file doesn't exist
        """
        if not self.profiles_file.exists():
            self._log(f"No profiles file found at {self.profiles_file}")
            return {}

        with open(self.profiles_file, 'r') as f:
            profiles_dict = json.load(f)

        profiles = {
            name: StatisticsProfile.from_dict(data)
            for name, data in profiles_dict.items()
        }

        self._log(f"Loaded {len(profiles)} profiles from {self.profiles_file}")
        return profiles

    def load_state(self) -> Dict[str, Any]:
        """
        Load store state from disk.

        Returns:
            Dictionary with state information
            Default values if file doesn't exist
        """
        if not self.state_file.exists():
            return {
                "total_entries": 0,
                "last_save": None,
                "version": self.VERSION,
            }

        with open(self.state_file, 'r') as f:
            return json.load(f)

#   UTILITY:
#   - exists() -> bool
#   - clear() -> None
#
    def exists(self) -> bool:
        """
        Check if any saved statistics exist.

        Returns:
            True if this is a restart (profiles exist), False if fresh start
        """
        return self.profiles_file.exists() or self.state_file.exists()

    def clear(self) -> None:
        """
        Delete all saved files (for testing or reset).
        """
        for file in (self.profiles_file, self.state_file):
            if file.exists():
                file.unlink()
                self._log(f"🗑️  Deleted {file}")

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)

# FILE STRUCTURE:
# ---------------
#   stats/
#   ├── profiles.json   → {format: {precision_kind, widths, counters, histograms}}
#   └── state.json      → {total_entries, last_save, version}
#
# =============================================
