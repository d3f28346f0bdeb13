# ==============================================
# ANALYSIS: STATISTICS AGGREGATION
# ==============================================
#
# This package accumulates classified values (FieldInfo) into
# per-precision counters and bit-count histograms.
#
# Modules:
# --------
# - statistics.py   → StatisticsProfile, StatisticsSnapshot, new_profile()
#
# ==============================================

from .statistics import StatisticsProfile, StatisticsSnapshot, new_profile

__all__ = ["StatisticsProfile", "StatisticsSnapshot", "new_profile"]
