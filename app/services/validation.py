# app/services/validation.py
from __future__ import annotations

import math
from typing import Optional, Union

from ..core.errors import InvalidDimensionsError

Raw = Union[str, int, float, None]

def parse_number(raw: Raw) -> Optional[float]:
    """
    Lenient query-string number. Anything that is not a finite number
    (absent, empty, "abc", "NaN", "inf") becomes None, i.e. "no constraint".
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            return None
    if not math.isfinite(value):
        return None
    return value

def parse_int(raw: Raw) -> Optional[int]:
    """Like parse_number, but only whole numbers count ("2.0" ok, "2.5" not)."""
    value = parse_number(raw)
    if value is None or not value.is_integer():
        return None
    return int(value)

def parse_page(raw: Raw) -> int:
    page = parse_int(raw)
    return page if page is not None and page >= 1 else 1

def parse_dimension(raw: Union[str, int, float], max_dimension: int) -> int:
    """
    Strict pixel dimension: a positive integer no larger than max_dimension.
    Unlike the filter parsers this rejects instead of falling back.
    """
    if isinstance(raw, bool):
        raise InvalidDimensionsError(f"invalid dimension: {raw!r}")
    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            raise InvalidDimensionsError(f"invalid dimension: {raw!r}")
        value = int(raw)
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            raise InvalidDimensionsError(f"invalid dimension: {raw!r}") from None
    if value <= 0 or value > max_dimension:
        raise InvalidDimensionsError(
            f"dimensions must be between 1 and {max_dimension}, got {value}"
        )
    return value
