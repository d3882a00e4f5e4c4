"""
Range tokens used by the price and rating dimensions.

A token is either "min-max" (both bounds inclusive) or "min+" (open-ended
upper bound). Bounds that do not parse coerce to 0 so a malformed token never
raises.
"""
import math
from typing import Any, NamedTuple, Optional


class Bounds(NamedTuple):
    lower: float
    upper: Optional[float]  # None = open-ended

    @property
    def is_open(self) -> bool:
        return self.upper is None


def to_number(value: Any) -> Optional[float]:
    """Coerce an entity field to a finite float, or None if it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _bound(text: str) -> float:
    number = to_number(text.replace("+", ""))
    return number if number is not None else 0.0


def parse_range(token: Any) -> Optional[Bounds]:
    """
    Parse a range token like "15-30", "100+" or "4+".

    Returns:
        Bounds, or None when the token is empty / the catch-all "all".
    """
    if not isinstance(token, str):
        return None
    token = token.strip()
    if not token or token.lower() == "all":
        return None

    lower, _, upper = token.partition("-")
    upper = upper.strip()
    if not upper or lower.strip().endswith("+"):
        return Bounds(_bound(lower), None)
    return Bounds(_bound(lower), _bound(upper))


def in_range(value: Any, bounds: Bounds) -> bool:
    """Inclusive containment test; non-numeric values never match."""
    number = to_number(value)
    if number is None:
        return False
    if number < bounds.lower:
        return False
    return bounds.upper is None or number <= bounds.upper


def in_bucket(value: Any, bounds: Bounds) -> bool:
    """
    Half-open containment used for facet buckets: [lower, upper).

    Bounded buckets that share an edge therefore partition the axis, while
    open-ended ("N+") buckets behave as thresholds.
    """
    number = to_number(value)
    if number is None:
        return False
    if number < bounds.lower:
        return False
    return bounds.upper is None or number < bounds.upper
