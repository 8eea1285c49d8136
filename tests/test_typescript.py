"""Tests for the TypeScript generator."""

import pytest

from json_typegen.codegen import convert, convert_to_source, get_generator
from json_typegen.codegen.languages import TypeScriptGenerator, create_typescript_generator


def generate(data, root_name="Root", **options):
    return convert_to_source(data, root_name, "typescript", options or None)


def test_user_interfaces(user_sample):
    assert generate(user_sample, "User") == (
        "export interface UserAddress {\n"
        "  city: string;\n"
        "  zip: string;\n"
        "}\n"
        "\n"
        "export interface UserOrdersItem {\n"
        "  sku: string;\n"
        "  qty: number;\n"
        "}\n"
        "\n"
        "export interface User {\n"
        "  id: number;\n"
        "  name: string;\n"
        "  score: number;\n"
        "  active: boolean;\n"
        "  tags: string[];\n"
        "  address: UserAddress;\n"
        "  orders: UserOrdersItem[];\n"
        "  nickname: any;\n"
        "}\n"
    )


def test_keys_are_kept_or_quoted():
    code = generate({"first-name": "a", "class": "b", "$ref": "c", "9": 1})

    assert '  "first-name": string;' in code
    assert "  class: string;" in code
    assert "  $ref: string;" in code
    assert '  "9": number;' in code


def test_nested_arrays():
    code = generate({"matrix": [[1, 2]], "groups": [[{"id": 1}]]})

    assert "matrix: number[][];" in code
    assert "export interface RootGroupsItemItem {" in code
    assert "groups: RootGroupsItemItem[][];" in code


def test_empty_record():
    assert generate({}) == "export interface Root {\n}\n"


def test_alias_roots():
    assert generate([1, 2]) == "export type Root = number[];\n"
    assert generate(None) == "export type Root = any;\n"
    assert generate([]) == "export type Root = any[];\n"


def test_alias_comment():
    code = generate([], add_comments=True)
    assert code == (
        "// Element type unknown: the sample array was empty\n"
        "export type Root = any[];\n"
    )


def test_indentation_options():
    assert "    id: number;" in generate({"id": 1}, indent_size=4)
    assert "\tid: number;" in generate({"id": 1}, use_tabs=True)


def test_quoted_keys_are_not_renames():
    result = convert({"first-name": "a"}, "Root", "ts")
    assert not any("renamed" in warning for warning in result.warnings)


def test_factory():
    generator = create_typescript_generator()
    assert isinstance(generator, TypeScriptGenerator)
    assert isinstance(get_generator("ts"), TypeScriptGenerator)
    assert generator.language_name == "typescript"
    assert generator.file_extension == ".ts"
    assert generator.config.indent == "  "


@pytest.mark.parametrize(
    "option, value, expected",
    [
        ("string_type", "String", "name: String;"),
        ("null_type", "unknown", "nickname: unknown;"),
    ],
)
def test_type_overrides(user_sample, option, value, expected):
    assert expected in generate(user_sample, **{option: value})
