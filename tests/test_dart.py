"""Tests for the Flutter (Dart) generator."""

import pytest

from json_typegen.codegen import convert_to_source, get_generator
from json_typegen.codegen.languages import DartGenerator, create_dart_generator


def generate(data, root_name="Root", **options):
    return convert_to_source(data, root_name, "flutter", options or None)


def test_model_classes():
    code = generate({"id": 1, "score": 1.5, "tags": ["a"], "address": {"city": "x"}})

    assert code == (
        "class RootAddress {\n"
        "  final String city;\n"
        "\n"
        "  RootAddress({required this.city});\n"
        "\n"
        "  factory RootAddress.fromJson(Map<String, dynamic> json) {\n"
        "    return RootAddress(\n"
        "      city: json['city'] as String,\n"
        "    );\n"
        "  }\n"
        "\n"
        "  Map<String, dynamic> toJson() {\n"
        "    return {\n"
        "      'city': city,\n"
        "    };\n"
        "  }\n"
        "}\n"
        "\n"
        "class Root {\n"
        "  final int id;\n"
        "  final double score;\n"
        "  final List<String> tags;\n"
        "  final RootAddress address;\n"
        "\n"
        "  Root({required this.id, required this.score, required this.tags, "
        "required this.address});\n"
        "\n"
        "  factory Root.fromJson(Map<String, dynamic> json) {\n"
        "    return Root(\n"
        "      id: json['id'] as int,\n"
        "      score: (json['score'] as num).toDouble(),\n"
        "      tags: (json['tags'] as List<dynamic>).cast<String>(),\n"
        "      address: RootAddress.fromJson(json['address'] as Map<String, dynamic>),\n"
        "    );\n"
        "  }\n"
        "\n"
        "  Map<String, dynamic> toJson() {\n"
        "    return {\n"
        "      'id': id,\n"
        "      'score': score,\n"
        "      'tags': tags,\n"
        "      'address': address.toJson(),\n"
        "    };\n"
        "  }\n"
        "}\n"
    )


@pytest.mark.parametrize(
    "value, from_json",
    [
        (
            [{"sku": "a"}],
            "(json['v'] as List<dynamic>).map((e) => "
            "RootVItem.fromJson(e as Map<String, dynamic>)).toList()",
        ),
        ([1.5], "(json['v'] as List<dynamic>).map((e) => (e as num).toDouble()).toList()"),
        (
            [[1]],
            "(json['v'] as List<dynamic>).map((e) => (e as List<dynamic>).cast<int>()).toList()",
        ),
        (
            [[1.5]],
            "(json['v'] as List<dynamic>).map((e) => (e as List<dynamic>)"
            ".map((e1) => (e1 as num).toDouble()).toList()).toList()",
        ),
        ([], "json['v'] as List<dynamic>"),
        (None, "json['v']"),
        (True, "json['v'] as bool"),
    ],
)
def test_from_json_expressions(value, from_json):
    assert f"      v: {from_json},\n" in generate({"v": value})


def test_to_json_of_record_lists():
    code = generate({"orders": [{"sku": "a"}], "grid": [[{"x": 1}]]})

    assert "'orders': orders.map((e) => e.toJson()).toList()," in code
    assert "'grid': grid.map((e) => e.map((e1) => e1.toJson()).toList()).toList()," in code


def test_reserved_and_escaped_keys():
    code = generate({"class": "a", "$id": 1, "it's": True})

    assert "  final String class_;" in code
    assert "      class_: json['class'] as String," in code
    assert "      'class': class_," in code
    assert "      id: json['\\$id'] as int," in code
    assert "      itS: json['it\\'s'] as bool," in code


def test_digit_leading_key_stays_public():
    code = generate({"1st": "a"})

    assert "  final String n1st;" in code
    assert "  Root({required this.n1st});" in code
    assert "      n1st: json['1st'] as String," in code
    assert "_1st" not in code


def test_empty_record():
    assert generate({}) == (
        "class Root {\n"
        "  Root();\n"
        "\n"
        "  factory Root.fromJson(Map<String, dynamic> json) {\n"
        "    return Root();\n"
        "  }\n"
        "\n"
        "  Map<String, dynamic> toJson() {\n"
        "    return {};\n"
        "  }\n"
        "}\n"
    )


def test_primitive_root_wrapper():
    code = generate("hello")
    assert "  final String value;" in code
    assert "      value: json['value'] as String," in code


def test_dart_alias():
    assert isinstance(get_generator("dart"), DartGenerator)


def test_factory():
    generator = create_dart_generator()
    assert generator.language_name == "flutter"
    assert generator.file_extension == ".dart"
