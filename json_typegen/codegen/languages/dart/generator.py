"""
Dart (Flutter) code generator implementation.

Generates immutable model classes with a ``fromJson`` factory and a
``toJson`` method that read and write the original JSON keys.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator, Declaration, DeclaredField
from ...core.naming import IdentifierPolicy
from ...core.schema import (
    ITEM,
    ArrayOf,
    Path as TreePath,
    Primitive,
    Record,
    TypeNode,
    Unknown,
    ValueKind,
    requires_name,
)
from .naming import DART_POLICY, dart_string_literal

JSON_MAP = "Map<String, dynamic>"


class DartGenerator(CodeGenerator):
    """Code generator for Flutter/Dart model classes."""

    TYPE_MAP = {
        ValueKind.NULL: "dynamic",
        ValueKind.BOOLEAN: "bool",
        ValueKind.INTEGER: "int",
        ValueKind.FLOAT: "double",
        ValueKind.STRING: "String",
    }
    UNKNOWN_TYPE = "dynamic"

    def get_template_directory(self) -> Optional[Path]:
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        return "flutter"

    @property
    def file_extension(self) -> str:
        return ".dart"

    @property
    def policy(self) -> IdentifierPolicy:
        return DART_POLICY

    def render_array(self, element_type: str, element: TypeNode) -> str:
        return f"List<{element_type}>"

    def generate_declaration(self, declaration: Declaration) -> str:
        fields = [self._generate_field_data(field) for field in declaration.fields]

        if fields:
            params = ", ".join(f"required this.{field['name']}" for field in fields)
            constructor = f"{declaration.name}({{{params}}});"
        else:
            constructor = f"{declaration.name}();"

        context = self.template_context(
            declaration, fields=fields, constructor=constructor
        )
        return self.render_template("class.dart.j2", context)

    def _generate_field_data(self, field: DeclaredField) -> Dict[str, Any]:
        field_data = self.field_context(field)
        key_literal = dart_string_literal(field.key)
        field_data["key_literal"] = key_literal
        field_data["from_json"] = self._from_json(
            field.type, field.path, f"json[{key_literal}]"
        )
        field_data["to_json"] = self._to_json(field.type, field.identifier)
        return field_data

    def _from_json(
        self, node: TypeNode, path: TreePath, source: str, depth: int = 0
    ) -> str:
        """Expression converting decoded JSON at source into node's Dart type."""
        if isinstance(node, Record):
            return f"{self.binding.type_name(path)}.fromJson({source} as {JSON_MAP})"

        if isinstance(node, ArrayOf):
            element = node.element
            as_list = f"({source} as List<dynamic>)"

            if isinstance(element, Unknown):
                return f"{source} as List<dynamic>"
            if isinstance(element, Primitive) and element.kind != ValueKind.FLOAT:
                return f"{as_list}.cast<{self.type_map[element.kind]}>()"

            var = self._lambda_var(depth)
            inner = self._from_json(element, path + (ITEM,), var, depth + 1)
            return f"{as_list}.map(({var}) => {inner}).toList()"

        if isinstance(node, Primitive):
            if node.kind == ValueKind.FLOAT:
                return f"({source} as num).toDouble()"
            if node.kind == ValueKind.NULL:
                return source
            return f"{source} as {self.type_map[node.kind]}"

        return source

    def _to_json(self, node: TypeNode, source: str, depth: int = 0) -> str:
        """Expression encoding the Dart value at source back to JSON."""
        if isinstance(node, Record):
            return f"{source}.toJson()"

        if isinstance(node, ArrayOf) and requires_name(node.element):
            var = self._lambda_var(depth)
            inner = self._to_json(node.element, var, depth + 1)
            return f"{source}.map(({var}) => {inner}).toList()"

        return source

    @staticmethod
    def _lambda_var(depth: int) -> str:
        return "e" if depth == 0 else f"e{depth}"


def create_dart_generator(config: Optional[GeneratorConfig] = None) -> DartGenerator:
    """Create a Flutter/Dart generator with default configuration."""
    return DartGenerator(config or load_config("flutter"))
