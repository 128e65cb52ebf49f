"""Parse width/height arguments given as pixel counts or percentages."""

import math
import re

from climg.config import SizeSpec
from climg.core.errors import InvalidSize

# Optional sign, digits, optional fraction; the fraction is truncated
_NUMBER = re.compile(r'[+-]?\d+(?:\.\d*)?')


def _to_int(text: str, original: SizeSpec) -> int:
    if not _NUMBER.fullmatch(text):
        raise InvalidSize(original)
    number = int(float(text))
    if number < 0:
        raise InvalidSize(original)
    return number


def parse_size(value: SizeSpec, reference_max: int) -> int:
    """
    Resolve a size against a reference maximum.

    Args:
        value: Pixel count (80, "80") or percentage ("50%"). A missing or
            falsy value selects reference_max.
        reference_max: The size that 100% refers to

    Returns:
        Size in pixels (fractions truncated toward zero)

    Raises:
        InvalidSize: If value is not a non-negative number or percentage
    """
    if not value:
        return reference_max

    if isinstance(value, bool):
        raise InvalidSize(value)
    if isinstance(value, (int, float)):
        if not math.isfinite(value) or value < 0:
            raise InvalidSize(value)
        return int(value)

    text = str(value).strip()
    if text.endswith('%'):
        percent = _to_int(text[:-1].strip(), value)
        return reference_max * percent // 100
    return _to_int(text, value)
