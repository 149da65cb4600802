"""
Canonical evidence form

Goals:
- normalize_for_hashing is idempotent and independent of key order.
- Strings are trimmed with the JavaScript whitespace set.
- UNDEFINED drops mapping entries; None is kept.
- canonical_json matches JSON.stringify output for the same document.
"""
from __future__ import annotations

import json
import pickle

import pytest
from hypothesis import given, strategies as st

from andamio_core.encoding.canonical import (
    UNDEFINED,
    canonical_bytes,
    canonical_json,
    normalize_for_hashing,
)
from andamio_core.errors import ErrorCode, SerializationError

json_leaves = (
    st.none()
    | st.booleans()
    | st.integers(min_value=-(2**53), max_value=2**53)
    | st.floats(allow_nan=False, allow_infinity=False)
    | st.text(max_size=20)
)
json_values = st.recursive(
    json_leaves,
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=8), children, max_size=4),
    max_leaves=20,
)


@given(json_values)
def test_normalize_is_idempotent(value: object) -> None:
    once = normalize_for_hashing(value)
    assert normalize_for_hashing(once) == once


@given(st.dictionaries(st.text(max_size=8), json_leaves, max_size=6))
def test_key_order_does_not_matter(d: dict) -> None:
    reversed_d = dict(reversed(list(d.items())))
    assert canonical_json(d) == canonical_json(reversed_d)


def test_keys_are_sorted_recursively() -> None:
    doc = {"b": 1, "a": {"d": [{"z": 1, "y": 2}], "c": None}}
    assert canonical_json(doc) == '{"a":{"c":null,"d":[{"y":2,"z":1}]},"b":1}'


def test_strings_are_trimmed() -> None:
    assert normalize_for_hashing("  hello world \n") == "hello world"
    assert normalize_for_hashing(["\t a ", "b"]) == ["a", "b"]


@pytest.mark.parametrize("ws", ["\u00a0", "\ufeff", "\u3000", "\u2028", "\u000b"])
def test_trim_covers_javascript_whitespace(ws: str) -> None:
    assert normalize_for_hashing(f"{ws}x{ws}") == "x"


def test_trim_keeps_characters_javascript_keeps() -> None:
    # U+0085 (NEL) and U+001C are not whitespace to String.prototype.trim
    assert normalize_for_hashing("\u0085x\u001c") == "\u0085x\u001c"


def test_undefined_entries_are_dropped() -> None:
    doc = {"keep": None, "drop": UNDEFINED, "nested": {"x": UNDEFINED, "y": 1}}
    assert normalize_for_hashing(doc) == {"keep": None, "nested": {"y": 1}}


def test_undefined_outside_mapping_is_null() -> None:
    assert normalize_for_hashing(UNDEFINED) is None
    assert normalize_for_hashing([1, UNDEFINED]) == [1, None]
    assert canonical_json([UNDEFINED]) == "[null]"


def test_undefined_is_a_falsy_singleton() -> None:
    assert not UNDEFINED
    assert repr(UNDEFINED) == "UNDEFINED"
    assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


def test_tuples_become_lists_and_keys_become_strings() -> None:
    assert normalize_for_hashing((1, 2)) == [1, 2]
    assert normalize_for_hashing({1: "a"}) == {"1": "a"}


def test_numbers_render_like_javascript() -> None:
    assert canonical_json([1.0, -0.5, 3, True]) == "[1,-0.5,3,true]"
    assert canonical_json(float("nan")) == "null"
    assert canonical_json({"x": float("inf")}) == '{"x":null}'


@pytest.mark.parametrize(
    "value, text",
    [
        # String(x) in JavaScript for each value
        (123456789012345680000.0, "123456789012345680000"),
        (2.0**53 + 2, "9007199254740994"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.5e300, "1.5e+300"),
        (1.7976931348623157e308, "1.7976931348623157e+308"),
        (1e-7, "1e-7"),
        (-1.25e-7, "-1.25e-7"),
        (0.000001, "0.000001"),
        (123.456, "123.456"),
        (0.1, "0.1"),
        (5e-324, "5e-324"),
        (-0.0, "0"),
    ],
)
def test_float_digits_match_javascript(value: float, text: str) -> None:
    assert canonical_json(value) == text
    assert canonical_json({"n": [value]}) == f'{{"n":[{text}]}}'


def test_large_ints_render_exactly() -> None:
    assert canonical_json(2**70) == str(2**70)


def test_non_ascii_is_not_escaped() -> None:
    assert canonical_json({"t": "héllo ✓"}) == '{"t":"héllo ✓"}'
    assert canonical_bytes({"t": "é"}) == '{"t":"é"}'.encode("utf-8")


def test_compact_output_parses_back(evidence_doc: dict) -> None:
    text = canonical_json(evidence_doc)
    assert ", " not in text and ": " not in text
    assert json.loads(text) == normalize_for_hashing(evidence_doc)


def test_unserializable_value_raises() -> None:
    with pytest.raises(SerializationError) as ei:
        canonical_json({"when": object()})
    assert ei.value.to_dict()["code"] == ErrorCode.SERIALIZATION.value
    assert ei.value.data["value_type"] == "dict"
