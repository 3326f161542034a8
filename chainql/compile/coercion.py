"""Value coercion: Python values to SQL literal text.

Coercion follows the runtime type of the value, never a declared column
type:

* ``str`` is wrapped in single quotes (embedded quotes doubled unless
  ``escape_quotes=False``).
* ``bool`` becomes ``TRUE`` / ``FALSE``.
* ``int``, ``float`` and ``Decimal`` pass through unquoted.  NaN and the
  infinities have no SQL literal and are rejected.

Nothing else is coerced.  There is no ``NULL`` literal and no date or array
formatting; callers pre-format such values to text.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from chainql.errors import CoercionError

_NUMERIC_TYPES = (int, float, Decimal)


def is_literal_value(value: Any) -> bool:
    """Return ``True`` when ``value`` has a SQL literal form."""
    if isinstance(value, (str, bool)):
        return True
    return isinstance(value, _NUMERIC_TYPES) and _is_finite(value)


def _is_finite(value: int | float | Decimal) -> bool:
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return True


def quote_text(text: str, escape_quotes: bool = True) -> str:
    """Wrap ``text`` in single quotes.

    Args:
        text: Raw text value.
        escape_quotes: Double embedded single quotes (``O'Brien`` becomes
            ``'O''Brien'``).

    Returns:
        The quoted literal.
    """
    if escape_quotes:
        text = text.replace("'", "''")
    return f"'{text}'"


def coerce_literal(
    value: Any,
    escape_quotes: bool = True,
    field: str | None = None,
) -> str:
    """Convert ``value`` to SQL literal text.

    Args:
        value: A ``str``, ``bool``, ``int``, ``float`` or ``Decimal``.
        escape_quotes: Passed to :func:`quote_text` for text values.
        field: Field name, used only in the error message.

    Returns:
        Literal text ready to splice into a statement.

    Raises:
        CoercionError: If ``value`` is of any other type, or is a non-finite
            number.
    """
    if isinstance(value, str):
        return quote_text(value, escape_quotes)
    # bool is a subclass of int, so it must be checked first.
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, _NUMERIC_TYPES) and _is_finite(value):
        return str(value)
    raise CoercionError(value, field=field)


def coerce_mapping(
    conditions: Mapping[str, Any],
    escape_quotes: bool = True,
) -> dict[str, str]:
    """Coerce every value of a field → value mapping.

    The input mapping is left untouched; a new dict is returned in the same
    key order.

    Raises:
        CoercionError: On the first value that cannot be coerced.
    """
    return {
        field: coerce_literal(value, escape_quotes, field=field)
        for field, value in conditions.items()
    }
