"""
Lenient cell parsing

Spreadsheet cells come back as whatever the workbook holds: ints, floats,
strings typed by hand, or nothing at all. The parsers turn them into numbers
without raising; clean_cell guards values on their way into the workbook.
"""
import math
from typing import Any, Optional

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from app.core.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    """True for empty cells (None, NaN or whitespace-only text)."""
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def parse_number(value: Any) -> Optional[float]:
    """
    Numeric value of a cell

    Returns:
        The number as a float, or None when the cell is blank or holds text
        that is not a number.
    """
    if is_blank(value):
        return None
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
        return None if math.isnan(number) or math.isinf(number) else number
    return None


def to_float(value: Any, default: float = 0.0) -> float:
    number = parse_number(value)
    return default if number is None else number


def to_int(value: Any, default: int = 0) -> int:
    """Integer value of a cell, truncating fractions; default when not numeric."""
    number = parse_number(value)
    return default if number is None else int(number)


def clean_cell(value: Any, field: Optional[str] = None) -> Any:
    """
    Value safe to write into a cell: scalars pass through, anything else becomes text

    Raises:
        ValidationError: the text holds control characters a workbook cannot store
    """
    if value is None or isinstance(value, (bool, int, float)):
        return value
    text = value if isinstance(value, str) else str(value)
    if ILLEGAL_CHARACTERS_RE.search(text):
        raise ValidationError(f"Invalid characters in {field or 'text'}", field=field)
    return text
