"""Compact descriptions of JSON values for mismatch messages."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping, Sequence
from typing import Any

_EXPONENT = re.compile(r"e\+?(-?)0*(\d)")


def describe_json_value(value: Any) -> str:
    """Render a JSON value tagged with its kind, e.g. `Number(1.2)` or `String("a")`."""
    if value is None:
        return "Null"
    if isinstance(value, bool):
        return f"Bool({'true' if value else 'false'})"
    if isinstance(value, int):
        return f"Number({value})"
    if isinstance(value, float):
        return f"Number({_format_float(value)})"
    if isinstance(value, str):
        return f"String({_quote(value)})"
    if isinstance(value, Mapping):
        members = ", ".join(
            f"{_quote(str(key))}: {describe_json_value(member)}" for key, member in value.items()
        )
        return f"Object {{{members}}}"
    if isinstance(value, Sequence):
        elements = ", ".join(describe_json_value(element) for element in value)
        return f"Array [{elements}]"
    return repr(value)


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _format_float(value: float) -> str:
    # 1e+20 -> 1e20, 1e-07 -> 1e-7
    return _EXPONENT.sub(r"e\1\2", repr(value))
