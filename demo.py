#!/usr/bin/env python3
"""
Demonstration: feed a handful of interesting values through the inspector
and print their decomposition followed by the per-format statistics.
"""

import sys

from float_inspector.config import AppConfig, StoreConfig
from float_inspector.inspector import FloatInspector
from float_inspector.reporting import describe


FLT_MAX = 3.4028234663852886e38
FLT_MIN = 1.1754943508222875e-38

SINGLE_VALUES = [0.0, 1.0, -1.0, 3.1415e-20, 3.1415e20, 5e-45, FLT_MAX, FLT_MIN]
DOUBLE_VALUES = [
    0.0, 1.0, -1.0, 3.1415e-300, 3.1415e300, 5e-245,
    sys.float_info.max, sys.float_info.min,
]


def run_demo():
    print("=" * 60)
    print("FloatInspector demonstration")
    print("=" * 60)

    inspector = FloatInspector(AppConfig(store=StoreConfig(stats_dir="stats/"), verbose=False))

    for fmt, values in (("single", SINGLE_VALUES), ("double", DOUBLE_VALUES)):
        print(f"\n--- {fmt} values ---\n")
        for value in values:
            info = inspector.record(value, fmt)
            print(f"{fmt.capitalize()} value: {value:e}")
            print(describe(info))

    for fmt in ("single", "double"):
        print(inspector.report(fmt))

    status = inspector.get_status()
    print(f"✓ {status['total_entries']} values inspected")


if __name__ == "__main__":
    run_demo()
