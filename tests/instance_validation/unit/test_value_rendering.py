"""Mismatch value rendering tests."""

from __future__ import annotations

from typing import Any

import pytest
from json_schema_lite.instance_validation import (
    SchemaMismatch,
    SchemaMismatchKind,
    ValidationReport,
    describe_json_value,
)


@pytest.mark.parametrize(
    ("value", "rendered"),
    [
        (None, "Null"),
        (True, "Bool(true)"),
        (False, "Bool(false)"),
        (7, "Number(7)"),
        (1.2, "Number(1.2)"),
        (1.0, "Number(1.0)"),
        (1e20, "Number(1e20)"),
        (2.5e-07, "Number(2.5e-7)"),
        (10**20, "Number(100000000000000000000)"),
        ("a\"b", 'String("a\\"b")'),
        ("grün", 'String("grün")'),
        ([1, "x"], 'Array [Number(1), String("x")]'),
        ({"k": None}, 'Object {"k": Null}'),
    ],
)
def test_describes_values_with_their_kind(value: Any, rendered: str) -> None:
    assert describe_json_value(value) == rendered


def test_report_exposes_messages_and_kind_filter() -> None:
    missing = SchemaMismatch(
        kind=SchemaMismatchKind.MISSING_REQUIRED, message="missing", expected="a"
    )
    wrong = SchemaMismatch(kind=SchemaMismatchKind.TYPE_MISMATCH, message="wrong", location="/b")
    report = ValidationReport((missing, wrong))

    assert not report.is_ok
    assert report.messages == ("missing", "wrong")
    assert report.of_kind(SchemaMismatchKind.TYPE_MISMATCH) == (wrong,)
    assert str(wrong) == "wrong"
    assert ValidationReport().is_ok
