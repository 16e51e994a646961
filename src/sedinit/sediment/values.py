"""Typed parsing of raw input strings.

Each helper raises MissingOrMalformedValue naming the key on failure, so
callers never have to translate errors.
"""

import math
import re

from sedinit.contracts.failure import MissingOrMalformedValue

FLOAT_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
INT_PATTERN = re.compile(r"[+-]?\d+")


def parse_flag(value: str, key: str) -> bool:
    """"TRUE..." -> True, "FALSE..." -> False, anything else is fatal.

    Matching is a case-sensitive prefix test, so "TRUE " and "FALSEHOOD"
    resolve while "true" and "yes" do not.
    """
    if value.startswith("TRUE"):
        return True
    if value.startswith("FALSE"):
        return False
    raise MissingOrMalformedValue(key, f"expected TRUE or FALSE, got {value!r}")


def parse_float(value: str, key: str) -> float:
    """Plain decimal or exponent notation only.

    Python-only spellings such as "1_000", "0x10", "nan" and "inf" are
    rejected.
    """
    if not isinstance(value, str) or not FLOAT_PATTERN.fullmatch(value.strip()):
        raise MissingOrMalformedValue(key, f"expected a number, got {value!r}")
    result = float(value)
    if not math.isfinite(result):
        raise MissingOrMalformedValue(key, f"out of range, got {value!r}")
    return result


def parse_positive_float(value: str, key: str) -> float:
    result = parse_float(value, key)
    if result <= 0:
        raise MissingOrMalformedValue(key, f"must be positive, got {result}")
    return result


def parse_int(value: str, key: str) -> int:
    if not isinstance(value, str) or not INT_PATTERN.fullmatch(value.strip()):
        raise MissingOrMalformedValue(key, f"expected an integer, got {value!r}")
    return int(value)
