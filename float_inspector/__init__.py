# ==============================================
# FloatInspector
# ==============================================
#
# Package Structure:
#
# float_inspector/
# ├── extraction/     # Split a raw bit pattern into fields & classify
# ├── analysis/       # Aggregate classifications into histograms
# ├── persistence/    # Save/load statistics across restarts
# ├── formats.py      # Field widths of half/single/double/... formats
# ├── reporting.py    # Text rendering of results
# ├── errors.py       # Exception types
# ├── config.py       # Configuration management
# ├── inspector.py    # Orchestrator class
# └── cli.py          # Command line entry point
#
# ==============================================

from float_inspector.errors import (
    FloatInspectorError,
    FormatError,
    InvalidFieldWidth,
    PackError,
    ProfileMismatch,
    UnknownFormat,
)
from float_inspector.extraction import Category, FieldInfo, Sign, extract
from float_inspector.analysis import StatisticsProfile, StatisticsSnapshot, new_profile

__version__ = "0.1.0"

__all__ = [
    "Category",
    "FieldInfo",
    "FloatInspectorError",
    "FormatError",
    "InvalidFieldWidth",
    "PackError",
    "ProfileMismatch",
    "Sign",
    "StatisticsProfile",
    "StatisticsSnapshot",
    "UnknownFormat",
    "extract",
    "new_profile",
]
