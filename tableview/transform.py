"""
Column-oriented fields -> row-oriented display model.

Every cell ends up as exactly one display string: missing and null values
become "", lists are joined with ", ", and scalars use a canonical text form
(booleans as true/false, numbers without locale formatting).
"""
import math
from decimal import Decimal
from typing import Any, List, Sequence

from tableview.schemas import Column, FieldDescriptor, RowRecord, TableModel

LIST_SEPARATOR = ", "


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    # repr gives the shortest round-trip digits; only the layout changes here.
    sign = "-" if value < 0 else ""
    _, digit_tuple, exp = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    point = k + exp  # position of the decimal point relative to the digits

    if k <= point <= 21:
        text = digits + "0" * (point - k)
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        e = point - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
    return sign + text


def to_display_string(value: Any) -> str:
    """Canonical string form of a single cell value."""
    if value is None:
        return ""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, (list, tuple)):
        return LIST_SEPARATOR.join(to_display_string(v) for v in value)
    return str(value)


def fields_to_table(fields: Sequence[FieldDescriptor]) -> TableModel:
    """
    Build the table model for one presentation pass.

    The row count is the longest field's length; shorter fields contribute ""
    past their own end. Input fields are never modified.
    """
    if not fields:
        return TableModel(columns=[], rows=[])

    max_length = max(len(field.data) for field in fields)
    columns = [Column(key=field.name, label=field.name) for field in fields]

    rows: List[RowRecord] = []
    for i in range(max_length):
        row: RowRecord = {}
        for field in fields:
            value = field.data[i] if i < len(field.data) else None
            row[field.name] = to_display_string(value)
        rows.append(row)

    return TableModel(columns=columns, rows=rows)
