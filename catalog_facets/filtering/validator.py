"""
Filter validation.

Turns untrusted filter input (UI state, a decoded query string, a stale
bookmark) into a complete canonical filter state. Every schema dimension is
present in the result; values outside a dimension's domain are replaced by
the dimension's default, and keys that are not dimensions are dropped.
Validation never raises.
"""
from typing import Any, Dict, List, Mapping, Tuple

from pydantic import BaseModel, Field

from catalog_facets.filtering.values import encodable
from catalog_facets.schema.dimensions import Dimension, DimensionKind, FilterSchema, FilterValue
from catalog_facets.utils.logger import get_logger

logger = get_logger("filtering.validator")

_MISSING = object()

_BOOLEAN_STRINGS = {
    "true": True,
    "false": False,
    "all": None,
}


class ValidationReport(BaseModel):
    """Outcome of validating raw filter input."""
    state: Dict[str, FilterValue] = Field(description="Canonical filter state")
    unknown_keys: List[str] = Field(default_factory=list, description="Input keys that are not dimensions")
    replaced: List[str] = Field(default_factory=list, description="Dimensions whose input was invalid and defaulted")

    @property
    def clean(self) -> bool:
        return not self.unknown_keys and not self.replaced


def _coerce(dimension: Dimension, raw: Any) -> Tuple[FilterValue, bool]:
    """
    Coerce one raw value into the dimension's domain.

    Returns:
        (value, accepted) where accepted is False when the default was substituted.
    """
    if dimension.kind == DimensionKind.BOOLEAN:
        if raw is None or isinstance(raw, bool):
            return raw, True
        if isinstance(raw, str):
            key = raw.strip().lower()
            if key in _BOOLEAN_STRINGS:
                return _BOOLEAN_STRINGS[key], True
        return dimension.default, False

    if not isinstance(raw, str):
        return dimension.default, False

    if dimension.kind == DimensionKind.TEXT:
        text = raw.strip()
        if not encodable(text):
            return dimension.default, False
        if dimension.catch_all is not None and (not text or text.lower() == dimension.catch_all):
            return dimension.catch_all, True
        return text, True

    # SELECT / RANGE: closed option set
    token = raw.strip().lower()
    if token in dimension.option_values():
        return token, True
    return dimension.default, False


class FilterValidator:
    """Validator bound to one filter schema."""

    def __init__(self, schema: FilterSchema):
        self.schema = schema

    def inspect(self, raw: Any) -> ValidationReport:
        """Validate and report what was dropped or defaulted."""
        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            logger.debug(f"[{self.schema.kind}] Ignoring non-mapping filter input of type {type(raw).__name__}")
            return ValidationReport(state=self.schema.defaults(), replaced=list(self.schema.names()))

        state: Dict[str, FilterValue] = {}
        replaced: List[str] = []
        for dimension in self.schema:
            value = raw.get(dimension.name, _MISSING)
            if value is _MISSING:
                state[dimension.name] = dimension.default
                continue
            coerced, accepted = _coerce(dimension, value)
            state[dimension.name] = coerced
            if not accepted:
                replaced.append(dimension.name)

        unknown_keys = [str(key) for key in raw.keys() if key not in self.schema]

        if unknown_keys:
            logger.debug(f"[{self.schema.kind}] Dropping unrecognized filter keys: {unknown_keys}")
        if replaced:
            logger.debug(f"[{self.schema.kind}] Defaulted invalid filter values for: {replaced}")

        return ValidationReport(state=state, unknown_keys=unknown_keys, replaced=replaced)

    def validate(self, raw: Any) -> Dict[str, FilterValue]:
        """Return the canonical filter state for raw input."""
        return self.inspect(raw).state

    __call__ = validate
