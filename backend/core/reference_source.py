"""Lookup sources for reference (combo box) columns."""

import locale
import math
import numbers
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from core.responses import ReferenceEntry


BLANK_DISPLAY = " "


def field_value(item: Any, field_name: str) -> Any:
    """Read a field from a row mapping or an attribute-style entity."""
    if isinstance(item, Mapping):
        return item[field_name]
    try:
        return getattr(item, field_name)
    except AttributeError:
        raise KeyError(field_name) from None


def _display_key(display: Any) -> tuple:
    # bool is an int subclass; collate it as text. NaN goes after all numbers.
    if isinstance(display, (numbers.Real, Decimal)) and not isinstance(display, bool):
        if math.isnan(display):
            return (0, 1, 0)
        return (0, 0, display)
    if display is None:
        return (1, locale.strxfrm(""))
    return (1, locale.strxfrm(str(display)))


def build_reference_source(
    items: Iterable[Any],
    value_field: str,
    display_field: str,
    include_blank: bool = False,
) -> list[ReferenceEntry]:
    """Build the sorted value domain of a reference column.

    Every item yields exactly one entry. Entries are ordered by display
    value; ties keep their input order. When include_blank is set, a
    "no selection" entry (value None, display " ") is placed first.
    """
    entries = [
        ReferenceEntry(
            value=field_value(item, value_field),
            display=field_value(item, display_field),
        )
        for item in items
    ]
    entries.sort(key=lambda entry: _display_key(entry.display))

    if include_blank:
        entries.insert(0, ReferenceEntry(value=None, display=BLANK_DISPLAY))

    return entries
