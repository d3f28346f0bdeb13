# ==============================================
# Errors
# ==============================================
#
# PURPOSE:
#   Exception types raised by the extractor, the statistics
#   aggregator and the platform format adapter.
#
# HIERARCHY:
# ----------
# - FloatInspectorError            → base for everything below
#     - InvalidFieldWidth          → bad (E, M) pair, count out of range
#                                    or buffer too short
#     - ProfileMismatch            → FieldInfo widths differ from the profile
#     - FormatError                → base for float format problems
#         - UnknownFormat          → format name not known
#         - PackError              → value cannot be encoded in the format
#
# Every error is raised before any caller-visible state is touched.
#
# ==============================================


class FloatInspectorError(Exception):
    """Base class for all errors raised by float_inspector."""


class InvalidFieldWidth(FloatInspectorError, ValueError):
    """Raised when field widths are invalid or the buffer is too short."""


class ProfileMismatch(FloatInspectorError, ValueError):
    """
    Raised when a FieldInfo (or another profile) does not have the
    exponent/mantissa widths of the target StatisticsProfile.
    """

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"profile expects (E={expected[0]}, M={expected[1]}), "
            f"got (E={actual[0]}, M={actual[1]})"
        )


class FormatError(FloatInspectorError):
    """Base class for float format errors."""


class UnknownFormat(FormatError, KeyError):
    """Raised when a format name or alias is not known."""

    def __str__(self):
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ""


class PackError(FormatError, ValueError):
    """Raised when a value cannot be encoded in a format."""
