"""chainQL compilation layer: QueryState → SQL text."""
from chainql.compile.coercion import coerce_literal, coerce_mapping, quote_text
from chainql.compile.renderer import DeleteRenderer, SelectRenderer

__all__ = [
    "coerce_literal",
    "coerce_mapping",
    "quote_text",
    "DeleteRenderer",
    "SelectRenderer",
]
