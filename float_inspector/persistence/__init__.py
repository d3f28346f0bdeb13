# ==============================================
# PERSISTENCE (Statistics across restarts)
# ==============================================
#
# This package handles saving and loading accumulated statistics
# so that a collection run survives process restarts.
#
# Modules:
# --------
# - stats_store.py  → Save/load StatisticsProfiles as JSON
#
# ==============================================

from .stats_store import StatsStore

__all__ = ["StatsStore"]
