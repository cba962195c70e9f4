"""
Normalizers that turn untrusted model output into bounded, typed values.

Every function here is total: whatever comes in, a value satisfying the
requested range / choice / length comes out. Substitutions are logged at
DEBUG level only.
"""

from __future__ import annotations

import logging
import math
from datetime import date, datetime
from typing import Any, Collection, List, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _to_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            num = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            num = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(num) or math.isinf(num):
        return None
    return num


def validate_range(value: Any, minimum: float, maximum: float, default: float) -> float:
    """Coerce to a number within [minimum, maximum], rounded half-up to one decimal.

    Anything non-numeric or out of range becomes `default`.
    """
    num = _to_number(value)
    if num is None or num < minimum or num > maximum:
        if value is not None:
            logger.debug(f"Replacing out-of-range value {value!r} with {default}")
        return default
    return math.floor(num * 10 + 0.5) / 10


def validate_choice(value: Any, allowed: Collection[T], default: T) -> T:
    if isinstance(value, str) and value in allowed:
        return value  # type: ignore[return-value]
    if value is not None:
        logger.debug(f"Replacing unknown value {value!r} with {default!r}")
    return default


def validate_list(value: Any, max_items: int) -> List[str]:
    """Keep the string items of a list, in order, truncated to max_items."""
    if not isinstance(value, (list, tuple)):
        return []
    items = [v.strip() for v in value if isinstance(v, str) and v.strip()]
    return items[:max_items]


def validate_text(value: Any, default: str, max_length: Optional[int] = None) -> str:
    if not isinstance(value, str) or not value.strip():
        return default
    text = value.strip()
    if max_length is not None:
        text = text[:max_length].rstrip()
    return text


def validate_date(value: Any) -> Optional[str]:
    """Return an ISO `YYYY-MM-DD` string, or None when the value is not a date."""
    if not value or not isinstance(value, str):
        return None
    raw = value.strip()
    try:
        return date.fromisoformat(raw).isoformat()
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(raw.replace("Z", "+00:00")).date().isoformat()
    except ValueError:
        return None


def validate_bool(value: Any, default: bool) -> bool:
    return value if isinstance(value, bool) else default
