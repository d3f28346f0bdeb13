# ==============================================
# Reporting
# ==============================================
#
# PURPOSE:
#   Turn FieldInfo values and StatisticsSnapshots into human-readable
#   text. Pure formatting: every function returns a new string and
#   makes no decisions about the data.
#
# FUNCTIONS:
# ----------
# - describe(info: FieldInfo) -> str
# - render_statistics(snapshot: StatisticsSnapshot) -> str
# - hex_field(field: bytes) -> str
#
# ==============================================

from typing import List, Sequence

from float_inspector.analysis.statistics import StatisticsSnapshot
from float_inspector.extraction.field_info import Category, FieldInfo, Sign


CATEGORY_LABELS = {
    Category.NORMALIZED: "Normalized",
    Category.DENORMALIZED: "Denormalized",
    Category.NAN: "Not a Number",
    Category.INFINITY: "Infinity",
}


def hex_field(field: bytes) -> str:
    """Render an LSB-first field as 0x-prefixed hex, most significant byte first."""
    return "0x" + (field[::-1].hex() if field else "0")


def describe(info: FieldInfo) -> str:
    """
    Describe one extracted value.

    Args:
        info: The FieldInfo to describe

    Returns:
        A multi-line description
    """
    rows = [
        ("Sign", "+" if info.sign is Sign.POSITIVE else "-"),
        ("Type", CATEGORY_LABELS[info.category]),
        ("Exponent length", f"{info.exponent_bit_width} bits"),
        ("Number of non zero exponent bits", str(info.non_zero_exponent_bit_count)),
        ("Exponent", hex_field(info.exponent)),
        ("Mantissa length", f"{info.mantissa_bit_width} bits"),
        ("Number of non zero mantissa bits", str(info.non_zero_mantissa_bit_count)),
        ("Mantissa", hex_field(info.mantissa)),
    ]
    width = max(len(label) for label, _ in rows) + 2
    return "\n".join(f"{label + ':':<{width}}{value}" for label, value in rows) + "\n"


def _render_grid(title: str, grid: Sequence[Sequence[int]]) -> List[str]:
    # one row per mantissa count, one column per exponent count
    lines = [title]
    for row in grid:
        lines.append("\t".join(str(cell) for cell in row))
    lines.append("")
    return lines


def _render_column(title: str, column: Sequence[int]) -> List[str]:
    lines = [title]
    lines.extend(str(cell) for cell in column)
    lines.append("")
    return lines


def render_statistics(snapshot: StatisticsSnapshot) -> str:
    """
    Render aggregated statistics.

    Layout: a header with the precision kind and coarse counters, then
    the positive/negative normalized grids and the positive/negative
    denormalized columns.

    Args:
        snapshot: Snapshot taken from a StatisticsProfile

    Returns:
        The report text
    """
    lines = [
        "--- Statistics ---",
        "",
        f"Type: {snapshot.precision_kind}",
        f"{snapshot.total_entries} entries overall,",
        "",
        f"{snapshot.normalized} normalized numbers,",
        f"{snapshot.denormalized} denormalized numbers,",
        f"{snapshot.positive} positive numbers,",
        f"{snapshot.negative} negative numbers,",
        f"{snapshot.nan} NaNs,",
        f"{snapshot.infinity} times infinity.",
        f"{snapshot.exponent_bit_width} exponent bits,",
        f"{snapshot.mantissa_bit_width} mantissa bits.",
        "",
    ]

    lines += _render_grid(
        "Non-zero bits of positive normalized numbers:", snapshot.normalized_positive
    )
    lines += _render_grid(
        "Non-zero bits of negative normalized numbers:", snapshot.normalized_negative
    )
    lines += _render_column(
        "Non-zero bits of positive denormalized numbers:", snapshot.denormalized_positive
    )
    lines += _render_column(
        "Non-zero bits of negative denormalized numbers:", snapshot.denormalized_negative
    )

    return "\n".join(lines) + "\n"
