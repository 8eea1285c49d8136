"""
Java code generator implementation.

Generates plain Java classes with private fields, getters and setters,
and Jackson ``@JsonProperty`` annotations for renamed fields.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator, Declaration, DeclaredField
from ...core.naming import IdentifierPolicy
from ...core.schema import TypeNode, ValueKind
from .naming import JAVA_POLICY

LIST_IMPORT = "import java.util.List;"
JSON_PROPERTY_IMPORT = "import com.fasterxml.jackson.annotation.JsonProperty;"

# Generic type arguments must be reference types
BOXED_TYPES = {
    "boolean": "Boolean",
    "byte": "Byte",
    "char": "Character",
    "double": "Double",
    "float": "Float",
    "int": "Integer",
    "long": "Long",
    "short": "Short",
}


class JavaGenerator(CodeGenerator):
    """Code generator for Java classes."""

    TYPE_MAP = {
        ValueKind.NULL: "Object",
        ValueKind.BOOLEAN: "boolean",
        ValueKind.INTEGER: "int",
        ValueKind.FLOAT: "double",
        ValueKind.STRING: "String",
    }
    UNKNOWN_TYPE = "Object"

    def get_template_directory(self) -> Optional[Path]:
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return ".java"

    @property
    def policy(self) -> IdentifierPolicy:
        return JAVA_POLICY

    def render_array(self, element_type: str, element: TypeNode) -> str:
        self.imports.add(LIST_IMPORT)
        return f"List<{BOXED_TYPES.get(element_type, element_type)}>"

    def generate_declaration(self, declaration: Declaration) -> str:
        fields = [self._generate_field_data(field) for field in declaration.fields]
        context = self.template_context(declaration, fields=fields)
        return self.render_template("class.java.j2", context)

    def _generate_field_data(self, field: DeclaredField) -> Dict[str, Any]:
        field_data = self.field_context(field)
        accessor = field.identifier[:1].upper() + field.identifier[1:]
        field_data["getter"] = f"get{accessor}"
        field_data["setter"] = f"set{accessor}"
        field_data["key_literal"] = json.dumps(field.key)

        if field.name.renamed:
            self.imports.add(JSON_PROPERTY_IMPORT)

        return field_data

    def get_package_declaration(self) -> Optional[str]:
        if self.config.package_name:
            return f"package {self.config.package_name};"
        return None


def create_java_generator(config: Optional[GeneratorConfig] = None) -> JavaGenerator:
    """Create a Java generator with default configuration."""
    return JavaGenerator(config or load_config("java"))
