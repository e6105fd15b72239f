from enum import Enum
import math
import re
from typing import Any, Dict, Iterable


class InferredType(str, Enum):
    """
    Classification label attached to observed values.
    """
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    EMAIL = "email"
    URL = "url"
    ARRAY = "array"
    OBJECT = "object"
    NULL = "null"
    UNKNOWN = "unknown"


# Prefix matches: "2024-01-15T10:00" is still a date
DATE_PATTERNS = (
    re.compile(r"^\d{4}-\d{2}-\d{2}"),
    re.compile(r"^\d{2}/\d{2}/\d{4}"),
)
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
URL_PATTERN = re.compile(r"^https?://")


def _is_number(value: Any) -> bool:
    """
    Check if value coerces to a finite number.
    Accepts native ints/floats and numeric strings.
    Whitespace-only strings are not numbers, although JavaScript's
    Number("  ") coerces them to 0.
    """
    if isinstance(value, (int, float)):
        try:
            return math.isfinite(value)
        except OverflowError:
            # ints beyond float range
            return False

    if not isinstance(value, str) or "_" in value:
        return False

    try:
        number = float(value.strip())
    except ValueError:
        return False

    return math.isfinite(number)


def _is_date(value: str) -> bool:
    return any(p.match(value) for p in DATE_PATTERNS)


def classify_value(value: Any) -> InferredType:
    """
    Classify a single raw value.

    Precedence (first match wins):
    null -> boolean -> number -> date -> email -> url -> string
    -> array -> object -> unknown
    """
    if value is None or value == "":
        return InferredType.NULL

    # bool is a subclass of int, test it first
    if isinstance(value, bool):
        return InferredType.BOOLEAN

    if _is_number(value):
        return InferredType.NUMBER

    if isinstance(value, str):
        if _is_date(value):
            return InferredType.DATE
        if EMAIL_PATTERN.match(value):
            return InferredType.EMAIL
        if URL_PATTERN.match(value):
            return InferredType.URL
        return InferredType.STRING

    if isinstance(value, (list, tuple)):
        return InferredType.ARRAY

    if isinstance(value, dict):
        return InferredType.OBJECT

    return InferredType.UNKNOWN


def classify_column(values: Iterable[Any]) -> InferredType:
    """
    Infer the representative type of a column.

    Every non-None value is classified and the most common type wins.
    Ties go to the type encountered first. A column with no values
    is reported as NULL.
    """
    counts: Dict[InferredType, int] = {}

    for value in values:
        if value is None:
            continue
        inferred = classify_value(value)
        counts[inferred] = counts.get(inferred, 0) + 1

    if not counts:
        return InferredType.NULL

    # dicts keep insertion order, and max() returns the first maximal item
    return max(counts, key=counts.get)
