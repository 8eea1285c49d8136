"""Tests for the conversion facade across every target."""

import json
import re
from collections import Counter

import pytest

import json_typegen
from json_typegen import (
    ConversionError,
    DepthExceeded,
    InvalidRootName,
    UnsupportedTarget,
    convert,
    convert_to_source,
    quick_generate,
)
from json_typegen.codegen.core.config import ConfigError
from json_typegen.codegen.core.schema import DEFAULT_MAX_DEPTH


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

def test_convert_returns_code_and_metadata(user_sample):
    result = convert(user_sample, "User", "typescript")

    assert result.success
    assert result.error_message is None
    assert result.code.startswith("export interface UserAddress {")
    assert result.code.endswith("}\n")
    assert result.metadata["target"] == "typescript"
    assert result.metadata["root_name"] == "User"
    assert result.metadata["type_count"] == 3


def test_convert_is_deterministic(user_sample, target):
    first = convert(user_sample, "Root", target)
    second = convert(user_sample, "Root", target)
    assert first.code == second.code
    assert first.warnings == second.warnings


def test_nested_record_named_in_every_target(target):
    code = convert({"user": {"name": "a"}}, "Root", target).code
    assert "RootUser" in code


@pytest.mark.parametrize(
    "target, header",
    [
        ("typescript", "export interface {} {{"),
        ("java", "public class {} {{"),
        ("flutter", "class {} {{"),
        ("swift", "struct {}: Codable {{"),
        ("go", "type {} struct {{"),
        ("kotlin", "data class {}("),
    ],
)
def test_declarations_innermost_first(target, header):
    code = convert({"user": {"name": "a"}}, "Root", target).code
    assert code.index(header.format("RootUser")) < code.index(header.format("Root"))


def test_field_order_preserved(target):
    code = convert({"zeta": 1, "alpha": "a", "mid": True}, "Root", target).code.lower()
    assert code.index("zeta") < code.index("alpha") < code.index("mid")


@pytest.mark.parametrize(
    "target, dynamic_sequence",
    [
        ("typescript", "any[]"),
        ("java", "List<Object>"),
        ("flutter", "List<dynamic>"),
        ("swift", "[Any]"),
        ("go", "[]interface{}"),
        ("kotlin", "List<Any>"),
    ],
)
def test_empty_array_uses_dynamic_sequence(target, dynamic_sequence):
    result = convert({"items": []}, "Root", target)
    assert dynamic_sequence in result.code
    assert any("empty array" in warning for warning in result.warnings)


@pytest.mark.parametrize(
    "target, integer_sequence",
    [
        ("typescript", "number[]"),
        ("java", "List<Integer>"),
        ("flutter", "List<int>"),
        ("swift", "[Int]"),
        ("go", "[]int"),
        ("kotlin", "List<Int>"),
    ],
)
def test_heterogeneous_array_uses_first_element(target, integer_sequence):
    assert integer_sequence in convert({"values": [1, "a"]}, "Root", target).code


@pytest.mark.parametrize(
    "target, key_mapping",
    [
        ("typescript", '"first-name": string;'),
        ("java", '@JsonProperty("first-name")'),
        ("flutter", "json['first-name']"),
        ("swift", 'case firstName = "first-name"'),
        ("go", '`json:"first-name"`'),
        ("kotlin", '@SerialName("first-name")'),
    ],
)
def test_original_key_is_retrievable(target, key_mapping):
    assert key_mapping in convert({"first-name": "Ada"}, "Root", target).code


@pytest.mark.parametrize(
    "target, fragments",
    [
        ("java", ["private String class_;", '@JsonProperty("class")']),
        ("flutter", ["final String class_;", "json['class']"]),
        ("swift", ["let _class: String", 'case _class = "class"']),
        ("go", ["Type_ string", '`json:"type"`']),
        ("kotlin", ["val `class`: String"]),
    ],
)
def test_reserved_keys_are_escaped(target, fragments):
    code = convert({"class": "x", "type": "y"}, "Root", target).code
    for fragment in fragments:
        assert fragment in code


KEY_BAG_SAMPLE = {
    "id": 1,
    "class": "x",
    "type": "y",
    "default": 2,
    "first-name": "z",
    "1st": True,
    "user_id": 3,
    "userId": 4,
    "self": 5,
    "import": 6,
    "it's": 7,
}


def _typescript_keys(code):
    names = re.findall(r'^\s+("(?:[^"\\]|\\.)*"|[A-Za-z_$][\w$]*): ', code, re.M)
    return [json.loads(name) if name.startswith('"') else name for name in names]


def _java_keys(code):
    keys, mapped = [], None
    for line in code.splitlines():
        annotation = re.match(r'\s+@JsonProperty\((".*")\)$', line)
        declaration = re.match(r"\s+private \S+ (\w+);$", line)
        if annotation:
            mapped = json.loads(annotation.group(1))
        elif declaration:
            keys.append(mapped if mapped is not None else declaration.group(1))
            mapped = None
    return keys


def _flutter_keys(code):
    literals = re.findall(r"json\['((?:[^'\\]|\\.)*)'\]", code)
    return [re.sub(r"\\(.)", r"\1", literal) for literal in literals]


def _swift_keys(code):
    cases = re.findall(r'^\s+case (\w+)(?: = (".*"))?$', code, re.M)
    return [json.loads(literal) if literal else name for name, literal in cases]


def _go_keys(code):
    return [json.loads(tag) for tag in re.findall(r'`json:("(?:[^"\\]|\\.)*")`', code)]


def _kotlin_keys(code):
    fields = re.findall(r'^\s+(?:@SerialName\((".*")\) )?val (`[^`]+`|\w+): ', code, re.M)
    return [json.loads(literal) if literal else name.strip("`") for literal, name in fields]


@pytest.mark.parametrize(
    "target, extract_keys",
    [
        ("typescript", _typescript_keys),
        ("java", _java_keys),
        ("flutter", _flutter_keys),
        ("swift", _swift_keys),
        ("go", _go_keys),
        ("kotlin", _kotlin_keys),
    ],
)
def test_declared_keys_reproduce_the_input_keys(target, extract_keys):
    code = convert(KEY_BAG_SAMPLE, "Root", target).code
    assert Counter(extract_keys(code)) == Counter(KEY_BAG_SAMPLE)


def test_kotlin_reserved_keys(reserved_sample):
    code = convert(reserved_sample, "Root", "kotlin").code

    assert "val `class`: String," in code
    assert "val `type`: String," in code
    assert "val default: Int," in code
    assert '@SerialName("first-name") val firstName: String' in code
    assert "import kotlinx.serialization.SerialName" in code


def test_add_comments(target):
    plain = convert({"tags": [], "x": None, "meta": {}}, "Root", target)
    commented = convert(
        {"tags": [], "x": None, "meta": {}}, "Root", target, {"add_comments": True}
    )

    assert "// " not in plain.code
    assert "// Element type unknown: the sample array was empty" in commented.code
    assert "// Type unknown: the sample value was null" in commented.code
    assert "// No fields in the sample object" in commented.code


# ---------------------------------------------------------------------------
# Non-record roots
# ---------------------------------------------------------------------------

def test_typescript_alias_for_array_root():
    code = convert([{"id": 1}], "Root", "typescript").code
    assert "export interface RootItem {" in code
    assert code.rstrip().endswith("export type Root = RootItem[];")


def test_typescript_alias_for_primitive_root():
    assert convert("x", "Root", "ts").code == "export type Root = string;\n"


@pytest.mark.parametrize(
    "target, wrapper_field",
    [
        ("java", "private List<RootItem> items;"),
        ("flutter", "final List<RootItem> items;"),
        ("swift", "let items: [RootItem]"),
        ("go", 'Items []RootItem `json:"items"`'),
        ("kotlin", "val items: List<RootItem> = listOf()"),
    ],
)
def test_array_root_wrapper(target, wrapper_field):
    code = convert([{"id": 1}], "Root", target).code
    assert wrapper_field in code


@pytest.mark.parametrize(
    "target, wrapper_field",
    [
        ("java", "private double value;"),
        ("flutter", "final double value;"),
        ("swift", "let value: Double"),
        ("go", 'Value float64 `json:"value"`'),
        ("kotlin", "val value: Double"),
    ],
)
def test_primitive_root_wrapper(target, wrapper_field):
    assert wrapper_field in convert(2.5, "Root", target).code


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("root_name", ["", "   ", "My Root", "Root\n", None, 5])
def test_invalid_root_name(root_name):
    result = convert({"a": 1}, root_name, "typescript")

    assert not result.success
    assert result.code == ""
    assert isinstance(result.exception, InvalidRootName)


def test_unsupported_target():
    result = convert({"a": 1}, "Root", "cobol")

    assert not result.success
    assert result.code == ""
    assert isinstance(result.exception, UnsupportedTarget)
    assert "cobol" in result.error_message


def test_depth_exceeded():
    result = convert({"a": {"b": {"c": 1}}}, "Root", "go", {"max_depth": 2})

    assert not result.success
    assert result.code == ""
    assert isinstance(result.exception, DepthExceeded)


def nested_records(levels):
    value = {"leaf": 1}
    for _ in range(levels - 1):
        value = {"child": value}
    return value


def test_default_depth_limit(target):
    assert convert(nested_records(DEFAULT_MAX_DEPTH), "Root", target).success

    result = convert(nested_records(DEFAULT_MAX_DEPTH + 1), "Root", target)
    assert isinstance(result.exception, DepthExceeded)


def test_depth_limit_cannot_be_raised_past_maximum():
    deep = []
    for _ in range(3000):
        deep = [deep]

    with pytest.raises(ConfigError, match="max_depth"):
        convert(deep, "Root", "go", {"max_depth": 100000})


def test_convert_to_source_raises():
    with pytest.raises(ConversionError):
        convert_to_source({"a": 1}, "", "java")
    with pytest.raises(UnsupportedTarget):
        convert_to_source({"a": 1}, "Root", "cobol")


def test_non_json_values_propagate():
    with pytest.raises(TypeError):
        convert({"when": object()}, "Root", "typescript")


# ---------------------------------------------------------------------------
# Convenience API
# ---------------------------------------------------------------------------

def test_quick_generate_accepts_text_and_values():
    from_text = quick_generate('{"id": 1}', "go")
    from_value = quick_generate({"id": 1}, "go")
    assert from_text == from_value
    assert 'Id int `json:"id"`' in from_text


def test_quick_generate_options():
    code = quick_generate({"id": 1}, "kotlin", root_name="User", package_name="com.example")
    assert code.startswith("package com.example\n")
    assert "data class User(" in code


def test_quick_generate_invalid_json():
    with pytest.raises(json.JSONDecodeError):
        quick_generate("{", "go")


def test_custom_type_overrides():
    code = convert({"n": 1, "x": None}, "Root", "go", {"int_type": "int64", "null_type": "any"}).code
    assert "N int64" in code
    assert "X any" in code


def test_collision_warning_and_unique_names():
    sample = {"a": {"b_c": {"x": 1}}, "a_b": {"c": {"y": 1}}}

    result = convert(sample, "Root", "java")
    assert any("RootABC" in warning for warning in result.warnings)

    unique = convert(sample, "Root", "java", {"unique_type_names": True})
    assert "public class RootABC1 {" in unique.code


def test_version():
    assert json_typegen.__version__ == "0.1.0"
