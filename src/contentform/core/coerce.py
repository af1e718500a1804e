"""Coercion of declared free-text field content into typed entry values.

Content is always declared as text. It becomes an ``int`` when it is a plain
integer literal, a ``float`` when it is a decimal or scientific literal, and
stays a ``str`` otherwise. Numbers written with leading zeros (``"007"``,
``"0044 20 7946"``) are treated as identifiers and kept as strings, as is
anything Python's own parsers would accept but a literal would not
(``" 42"``, ``"1_000"``, ``"inf"``, ``"nan"``).
"""

from __future__ import annotations

import math
import re

from pydantic import BaseModel

Scalar = int | float | str

_INTEGER_RE = re.compile(r"[+-]?(?:0|[1-9][0-9]*)")
_FLOAT_RE = re.compile(r"[+-]?(?:(?:0|[1-9][0-9]*)(?:\.[0-9]+)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class FieldValue(BaseModel):
    """One coerced (field id, locale) value of an entry."""

    id: str
    locale: str
    value: Scalar

    model_config = {"frozen": True}


def coerce_content(content: str) -> Scalar:
    if _INTEGER_RE.fullmatch(content):
        return int(content)
    if _FLOAT_RE.fullmatch(content):
        number = float(content)
        if math.isfinite(number):
            return number
    return content


def render_scalar(value: Scalar) -> str:
    """Render a coerced value back to declarable text.

    ``coerce_content(render_scalar(coerce_content(s))) == coerce_content(s)``
    holds for every string ``s``.
    """
    if isinstance(value, float):
        return repr(value)
    return str(value)
