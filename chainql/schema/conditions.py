"""Typed filter conditions for the WHERE clause.

A filter fragment is one of two variants:

* :class:`Equality` — ``<field> = <coerced value>``; the value always goes
  through :func:`~chainql.compile.coercion.coerce_literal`.
* :class:`Raw` — caller-supplied text inserted verbatim.  Raw text is an
  unescaped trust boundary: the caller owns its correctness and its safety
  against injection.

``Condition`` is the discriminated union of both.  Pydantic parses raw dicts
(e.g. from a serialized :class:`~chainql.schema.query_state.QueryState`)
into the right variant::

    CONDITION_ADAPTER.validate_python({"field": "age", "value": 25})
    # Equality(field='age', value=25)
    CONDITION_ADAPTER.validate_python({"text": "age > 18"})
    # Raw(text='age > 18')
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Discriminator, Tag, TypeAdapter, field_validator

from chainql.errors import CoercionError

_FROZEN = ConfigDict(extra="forbid", frozen=True)


class Equality(BaseModel):
    """An equality predicate: ``{"field": "users.name", "value": "Mike"}``."""

    model_config = _FROZEN

    field: str
    value: Any

    @field_validator("value")
    @classmethod
    def _check_literal(cls, v: Any) -> Any:
        from chainql.compile.coercion import is_literal_value  # avoid circular import

        if not is_literal_value(v):
            raise ValueError(
                f"unsupported literal type {type(v).__name__}; "
                "expected str, int, float, Decimal or bool"
            )
        return v


class Raw(BaseModel):
    """A verbatim predicate fragment: ``{"text": "age > 18"}``."""

    model_config = _FROZEN

    text: str


def _condition_discriminator(v: Any) -> str | None:
    """Return the tag for the Pydantic discriminated union."""
    if isinstance(v, dict):
        if "text" in v:
            return "raw"
        if "field" in v:
            return "eq"
    if isinstance(v, Equality):
        return "eq"
    if isinstance(v, Raw):
        return "raw"
    return None


Condition = Annotated[
    Annotated[Equality, Tag("eq")] | Annotated[Raw, Tag("raw")],
    Discriminator(_condition_discriminator),
]

#: Parse a raw dict into a typed Condition.
CONDITION_ADAPTER: TypeAdapter[Condition] = TypeAdapter(Condition)


def equalities(conditions: Mapping[str, Any]) -> list[Equality]:
    """Expand a field → value mapping into one :class:`Equality` per entry.

    Args:
        conditions: Mapping of field expression to literal value.  Key order
            is preserved.

    Returns:
        A list of equality conditions; empty for an empty mapping.

    Raises:
        CoercionError: If a value has no SQL literal form.
    """
    from chainql.compile.coercion import is_literal_value  # avoid circular import

    result: list[Equality] = []
    for field, value in conditions.items():
        if not is_literal_value(value):
            raise CoercionError(value, field=field)
        result.append(Equality(field=field, value=value))
    return result


def to_conditions(
    condition: Mapping[str, Any] | str | Equality | Raw | Sequence[Equality | Raw],
) -> list[Equality | Raw]:
    """Normalise any accepted ``where`` argument to a list of conditions.

    * mapping → one :class:`Equality` per entry
    * ``str`` → one :class:`Raw`
    * a single condition → ``[condition]``
    * a list / tuple of conditions → as-is

    Raises:
        CoercionError: If a mapping value has no SQL literal form.
        TypeError: If ``condition`` is none of the accepted shapes.
    """
    if isinstance(condition, Mapping):
        return equalities(condition)
    if isinstance(condition, str):
        return [Raw(text=condition)]
    if isinstance(condition, (Equality, Raw)):
        return [condition]
    if isinstance(condition, Sequence):
        items = list(condition)
        for item in items:
            if not isinstance(item, (Equality, Raw)):
                raise TypeError(
                    f"Expected Equality or Raw in condition list, got {type(item).__name__}."
                )
        return items
    raise TypeError(
        "where() accepts a mapping, a string, an Equality/Raw condition or a "
        f"list of them; got {type(condition).__name__}."
    )
