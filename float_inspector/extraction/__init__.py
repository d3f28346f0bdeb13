# ==============================================
# EXTRACTION: FIELD EXTRACTOR & CLASSIFIER
# ==============================================
#
# This package splits a raw floating-point bit pattern of any
# (exponent, mantissa) width into its fields and classifies it.
#
# Modules:
# --------
# - bit_reader.py   → BitReader, bit spans over an LSB-first buffer
# - field_info.py   → Sign, Category and the FieldInfo value type
# - extractor.py    → extract(), bit counting and classification
#
# ==============================================

from .bit_reader import BitReader
from .field_info import Category, FieldInfo, Sign
from .extractor import (
    classify,
    count_exponent_bits,
    count_mantissa_bits,
    extract,
    required_byte_count,
)

__all__ = [
    "BitReader",
    "Category",
    "FieldInfo",
    "Sign",
    "classify",
    "count_exponent_bits",
    "count_mantissa_bits",
    "extract",
    "required_byte_count",
]
