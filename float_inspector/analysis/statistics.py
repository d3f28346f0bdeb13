# ==============================================
# StatisticsProfile
# ==============================================
#
# PURPOSE:
#   Accumulate the classifications of many floating-point values of one
#   precision (one fixed exponent/mantissa width pair) into counters and
#   histograms of their significant exponent/mantissa bit counts.
#
# CLASS: StatisticsProfile (dataclass)
# ------------------------------------
#   Attributes:
#   -----------
#   - precision_kind: str          → Descriptive tag ("single", "double", ...)
#   - exponent_bit_width: int      → E, fixed at creation
#   - mantissa_bit_width: int      → M, fixed at creation
#   - total_entries, normalized, denormalized, nan, infinity,
#     positive, negative: int      → Coarse counters
#   - normalized_positive / normalized_negative: list[list[int]]
#       (M+1) x (E+1) grids indexed [Z_m][Z_e]
#   - denormalized_positive / denormalized_negative: list[int]
#       M+1 cells indexed [Z_m]
#
#   Methods:
#   --------
#   - update(info: FieldInfo) -> None
#       Count one value. Raises ProfileMismatch on a width mismatch and
#       InvalidFieldWidth on an out-of-range bit count, before touching
#       any counter.
#
#   - update_all(infos: Iterable[FieldInfo]) -> int
#
#   - merge(other: StatisticsProfile) -> None
#       Add another profile's counts (one profile per thread, merged).
#
#   - snapshot() -> StatisticsSnapshot
#       Read-only copy for reporting.
#
#   - reset() -> None
#
#   - to_dict() / from_dict()  → Persistence
#
# FUNCTION:
# ---------
# - new_profile(precision_kind, exponent_bit_width, mantissa_bit_width)
#
# ==============================================

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple

from float_inspector.errors import InvalidFieldWidth, ProfileMismatch
from float_inspector.extraction.field_info import Category, FieldInfo, Sign


@dataclass(frozen=True)
class StatisticsSnapshot:
    """Read-only view of a StatisticsProfile at one point in time."""

    precision_kind: str
    exponent_bit_width: int
    mantissa_bit_width: int

    total_entries: int
    normalized: int
    denormalized: int
    nan: int
    infinity: int
    positive: int
    negative: int

    normalized_positive: Tuple[Tuple[int, ...], ...]
    normalized_negative: Tuple[Tuple[int, ...], ...]
    denormalized_positive: Tuple[int, ...]
    denormalized_negative: Tuple[int, ...]

    def histogram_total(self) -> int:
        """Sum of every histogram cell (normalized + denormalized values)."""
        return (
            sum(map(sum, self.normalized_positive))
            + sum(map(sum, self.normalized_negative))
            + sum(self.denormalized_positive)
            + sum(self.denormalized_negative)
        )


@dataclass
class StatisticsProfile:
    """
    Counters and bit-count histograms for one floating-point precision.

    Not thread-safe: keep one profile per producer and merge() them, or
    serialize calls to update().
    """

    # --- Identity ---
    precision_kind: str
    exponent_bit_width: int
    mantissa_bit_width: int

    # --- Coarse counters ---
    total_entries: int = 0
    normalized: int = 0
    denormalized: int = 0
    nan: int = 0
    infinity: int = 0
    positive: int = 0
    negative: int = 0

    # --- Histograms (sized in __post_init__) ---
    normalized_positive: List[List[int]] = field(default_factory=list)
    normalized_negative: List[List[int]] = field(default_factory=list)
    denormalized_positive: List[int] = field(default_factory=list)
    denormalized_negative: List[int] = field(default_factory=list)

    def __post_init__(self):
        """Validate widths and allocate empty histograms."""
        if self.exponent_bit_width < 0 or self.mantissa_bit_width < 0:
            raise InvalidFieldWidth(
                f"field widths must be non-negative "
                f"(E={self.exponent_bit_width}, M={self.mantissa_bit_width})"
            )
        if self.exponent_bit_width == 0 and self.mantissa_bit_width == 0:
            raise InvalidFieldWidth("exponent and mantissa widths are both zero")

        if not self.normalized_positive:
            self.normalized_positive = self._empty_grid()
        if not self.normalized_negative:
            self.normalized_negative = self._empty_grid()
        if not self.denormalized_positive:
            self.denormalized_positive = self._empty_column()
        if not self.denormalized_negative:
            self.denormalized_negative = self._empty_column()

    @property
    def widths(self) -> Tuple[int, int]:
        return self.exponent_bit_width, self.mantissa_bit_width

    # ======================================
    # Update logic
    # ======================================
    def update(self, info: FieldInfo) -> None:
        """
        Count one classified value.

        Args:
            info: FieldInfo with the same widths as this profile

        Raises:
            ProfileMismatch: The FieldInfo widths differ from the profile's
            InvalidFieldWidth: A bit count lies outside [0, width]
        """
        if info.widths != self.widths:
            raise ProfileMismatch(self.widths, info.widths)

        z_e = info.non_zero_exponent_bit_count
        z_m = info.non_zero_mantissa_bit_count
        if not (0 <= z_e <= self.exponent_bit_width
                and 0 <= z_m <= self.mantissa_bit_width):
            raise InvalidFieldWidth(
                f"bit counts (Z_e={z_e}, Z_m={z_m}) outside "
                f"[0, {self.exponent_bit_width}] x [0, {self.mantissa_bit_width}]"
            )

        negative = info.sign is Sign.NEGATIVE

        self.total_entries += 1

        if info.category is Category.NORMALIZED:
            self.normalized += 1
            self._count_sign(negative)
            grid = self.normalized_negative if negative else self.normalized_positive
            grid[z_m][z_e] += 1

        elif info.category is Category.DENORMALIZED:
            self.denormalized += 1
            self._count_sign(negative)
            column = self.denormalized_negative if negative else self.denormalized_positive
            column[z_m] += 1

        elif info.category is Category.NAN:
            # NaNs are not attributed to a sign
            self.nan += 1

        elif info.category is Category.INFINITY:
            self.infinity += 1
            self._count_sign(negative)

    def update_all(self, infos: Iterable[FieldInfo]) -> int:
        """
        Count every FieldInfo of an iterable.

        Returns:
            Number of values counted
        """
        count = 0
        for info in infos:
            self.update(info)
            count += 1
        return count

    def merge(self, other: "StatisticsProfile") -> None:
        """
        Add the counts of another profile with the same widths.

        Args:
            other: Profile to fold into this one (left unchanged)

        Raises:
            ProfileMismatch: The profiles have different widths
        """
        if other.widths != self.widths:
            raise ProfileMismatch(self.widths, other.widths)

        self.total_entries += other.total_entries
        self.normalized += other.normalized
        self.denormalized += other.denormalized
        self.nan += other.nan
        self.infinity += other.infinity
        self.positive += other.positive
        self.negative += other.negative

        for mine, theirs in (
            (self.normalized_positive, other.normalized_positive),
            (self.normalized_negative, other.normalized_negative),
        ):
            for row, other_row in zip(mine, theirs):
                for col, value in enumerate(other_row):
                    row[col] += value

        for mine, theirs in (
            (self.denormalized_positive, other.denormalized_positive),
            (self.denormalized_negative, other.denormalized_negative),
        ):
            for index, value in enumerate(theirs):
                mine[index] += value

    def reset(self) -> None:
        """Zero every counter and histogram cell."""
        self.total_entries = 0
        self.normalized = 0
        self.denormalized = 0
        self.nan = 0
        self.infinity = 0
        self.positive = 0
        self.negative = 0
        self.normalized_positive = self._empty_grid()
        self.normalized_negative = self._empty_grid()
        self.denormalized_positive = self._empty_column()
        self.denormalized_negative = self._empty_column()

    # ======================================
    # Reporting view
    # ======================================
    def snapshot(self) -> StatisticsSnapshot:
        """
        Take a read-only copy of the current counts.

        Returns:
            A StatisticsSnapshot that later updates do not affect
        """
        return StatisticsSnapshot(
            precision_kind=self.precision_kind,
            exponent_bit_width=self.exponent_bit_width,
            mantissa_bit_width=self.mantissa_bit_width,
            total_entries=self.total_entries,
            normalized=self.normalized,
            denormalized=self.denormalized,
            nan=self.nan,
            infinity=self.infinity,
            positive=self.positive,
            negative=self.negative,
            normalized_positive=tuple(tuple(row) for row in self.normalized_positive),
            normalized_negative=tuple(tuple(row) for row in self.normalized_negative),
            denormalized_positive=tuple(self.denormalized_positive),
            denormalized_negative=tuple(self.denormalized_negative),
        )

    # ======================================
    # Serialization
    # ======================================
    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the profile to a serializable dictionary for persistence.

        Returns:
            A dictionary representation suitable for JSON storage.
        """
        return {
            "precision_kind": self.precision_kind,
            "exponent_bit_width": self.exponent_bit_width,
            "mantissa_bit_width": self.mantissa_bit_width,
            "total_entries": self.total_entries,
            "normalized": self.normalized,
            "denormalized": self.denormalized,
            "nan": self.nan,
            "infinity": self.infinity,
            "positive": self.positive,
            "negative": self.negative,
            "normalized_positive": [list(row) for row in self.normalized_positive],
            "normalized_negative": [list(row) for row in self.normalized_negative],
            "denormalized_positive": list(self.denormalized_positive),
            "denormalized_negative": list(self.denormalized_negative),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StatisticsProfile":
        """
        Reconstruct a StatisticsProfile from stored data.

        Histograms whose shape does not match the stored widths are
        rejected rather than silently resized.

        Args:
            data: Dictionary with saved profile information

        Returns:
            A StatisticsProfile instance

        Raises:
            ProfileMismatch: A stored histogram has the wrong shape
        """
        profile = cls(
            precision_kind=data["precision_kind"],
            exponent_bit_width=data["exponent_bit_width"],
            mantissa_bit_width=data["mantissa_bit_width"],
        )
        profile.total_entries = data.get("total_entries", 0)
        profile.normalized = data.get("normalized", 0)
        profile.denormalized = data.get("denormalized", 0)
        profile.nan = data.get("nan", 0)
        profile.infinity = data.get("infinity", 0)
        profile.positive = data.get("positive", 0)
        profile.negative = data.get("negative", 0)

        rows = profile.mantissa_bit_width + 1
        cols = profile.exponent_bit_width + 1
        for name in ("normalized_positive", "normalized_negative"):
            grid = data.get(name)
            if grid is None:
                continue
            if len(grid) != rows or any(len(row) != cols for row in grid):
                raise ProfileMismatch(
                    profile.widths, (len(grid[0]) - 1 if grid else -1, len(grid) - 1)
                )
            setattr(profile, name, [list(row) for row in grid])

        for name in ("denormalized_positive", "denormalized_negative"):
            column = data.get(name)
            if column is None:
                continue
            if len(column) != rows:
                raise ProfileMismatch(
                    profile.widths, (profile.exponent_bit_width, len(column) - 1)
                )
            setattr(profile, name, list(column))

        return profile

    # ======================================
    # Helpers
    # ======================================
    def _count_sign(self, negative: bool) -> None:
        if negative:
            self.negative += 1
        else:
            self.positive += 1

    def _empty_grid(self) -> List[List[int]]:
        return [
            [0] * (self.exponent_bit_width + 1)
            for _ in range(self.mantissa_bit_width + 1)
        ]

    def _empty_column(self) -> List[int]:
        return [0] * (self.mantissa_bit_width + 1)


def new_profile(
    precision_kind: str, exponent_bit_width: int, mantissa_bit_width: int
) -> StatisticsProfile:
    """
    Create an empty profile for one precision.

    Args:
        precision_kind: Descriptive tag, never inspected
        exponent_bit_width: E
        mantissa_bit_width: M

    Returns:
        A StatisticsProfile with (M+1) x (E+1) normalized grids and
        M+1 denormalized columns, all zero
    """
    return StatisticsProfile(
        precision_kind=precision_kind,
        exponent_bit_width=exponent_bit_width,
        mantissa_bit_width=mantissa_bit_width,
    )
