"""Tests for value classification and type inference."""

import pytest

from json_typegen.codegen.core.errors import ConversionError, DepthExceeded
from json_typegen.codegen.core.schema import (
    ITEM,
    MAX_DEPTH_LIMIT,
    UNKNOWN,
    ArrayOf,
    Primitive,
    Record,
    RecordField,
    ValueKind,
    classify,
    contains_unknown,
    infer_type,
    iter_records,
    max_depth_of,
    requires_name,
)


# ---------------------------------------------------------------------------
# classify
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "value, kind",
    [
        (True, ValueKind.BOOLEAN),
        (False, ValueKind.BOOLEAN),
        (3, ValueKind.INTEGER),
        (3.5, ValueKind.FLOAT),
        (3.0, ValueKind.INTEGER),
        ("x", ValueKind.STRING),
        (None, ValueKind.NULL),
        ([], ValueKind.ARRAY),
        ({}, ValueKind.RECORD),
    ],
)
def test_classify(value, kind):
    assert classify(value) is kind


def test_classify_rejects_non_json_objects():
    with pytest.raises(TypeError):
        classify(object())


# ---------------------------------------------------------------------------
# infer_type
# ---------------------------------------------------------------------------

def test_infer_primitive():
    assert infer_type("hello") == Primitive(ValueKind.STRING)
    assert infer_type(None) == Primitive(ValueKind.NULL)


def test_infer_empty_array_is_unknown():
    assert infer_type([]) == ArrayOf(UNKNOWN)
    assert infer_type({"items": []}).fields[0].type == ArrayOf(UNKNOWN)


def test_infer_array_uses_first_element_only():
    assert infer_type([1, "a"]) == ArrayOf(Primitive(ValueKind.INTEGER))


def test_infer_record_keeps_key_order():
    tree = infer_type({"zeta": 1, "alpha": "a", "mid": None})
    assert [f.key for f in tree.fields] == ["zeta", "alpha", "mid"]


def test_infer_nested():
    tree = infer_type({"user": {"name": "a"}, "ids": [[1.5]]})
    assert tree == Record(
        (
            RecordField("user", Record((RecordField("name", Primitive(ValueKind.STRING)),))),
            RecordField("ids", ArrayOf(ArrayOf(Primitive(ValueKind.FLOAT)))),
        )
    )


def test_tree_is_immutable():
    tree = infer_type({"a": 1})
    with pytest.raises(AttributeError):
        tree.fields = ()


def test_depth_guard():
    value = {"a": {"b": {"c": 1}}}
    assert max_depth_of(infer_type(value, max_depth=3)) == 3

    with pytest.raises(DepthExceeded) as excinfo:
        infer_type(value, max_depth=2)
    assert excinfo.value.depth == 3
    assert excinfo.value.limit == 2
    assert isinstance(excinfo.value, ConversionError)


@pytest.mark.parametrize("max_depth", [0, MAX_DEPTH_LIMIT + 1])
def test_depth_limit_out_of_range(max_depth):
    with pytest.raises(ValueError, match="max_depth"):
        infer_type({"a": 1}, max_depth=max_depth)


def test_default_depth_limit():
    value = []
    for _ in range(300):
        value = [value]
    with pytest.raises(DepthExceeded):
        infer_type(value)


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------

def test_requires_name():
    assert requires_name(infer_type({"a": 1}))
    assert requires_name(infer_type([[{"a": 1}]]))
    assert not requires_name(infer_type([1]))
    assert not requires_name(infer_type("x"))


def test_contains_unknown():
    assert contains_unknown(infer_type([]))
    assert contains_unknown(infer_type([None]))
    assert not contains_unknown(infer_type([1]))


def test_iter_records_is_post_order():
    tree = infer_type({"user": {"name": "a"}, "orders": [{"id": 1}]})
    paths = [path for path, _ in iter_records(tree)]
    assert paths == [("user",), ("orders", ITEM), ()]
