"""
Kotlin code generator implementation.

Generates ``kotlinx.serialization`` data classes; renamed properties carry
``@SerialName`` with the original JSON key.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator, Declaration, DeclaredField
from ...core.naming import IdentifierPolicy
from ...core.schema import ArrayOf, TypeNode, ValueKind
from .naming import KOTLIN_POLICY, kotlin_string_literal

SERIALIZABLE_IMPORT = "import kotlinx.serialization.Serializable"
SERIAL_NAME_IMPORT = "import kotlinx.serialization.SerialName"


class KotlinGenerator(CodeGenerator):
    """Code generator for Kotlin serializable data classes."""

    TYPE_MAP = {
        ValueKind.NULL: "Any?",
        ValueKind.BOOLEAN: "Boolean",
        ValueKind.INTEGER: "Int",
        ValueKind.FLOAT: "Double",
        ValueKind.STRING: "String",
    }
    UNKNOWN_TYPE = "Any"

    def get_template_directory(self) -> Optional[Path]:
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        return "kotlin"

    @property
    def file_extension(self) -> str:
        return ".kt"

    @property
    def policy(self) -> IdentifierPolicy:
        return KOTLIN_POLICY

    def render_array(self, element_type: str, element: TypeNode) -> str:
        return f"List<{element_type}>"

    def generate_declaration(self, declaration: Declaration) -> str:
        self.imports.add(SERIALIZABLE_IMPORT)
        fields = [self._generate_field_data(field) for field in declaration.fields]
        context = self.template_context(declaration, fields=fields)
        return self.render_template("class.kt.j2", context)

    def _generate_field_data(self, field: DeclaredField) -> Dict[str, Any]:
        field_data = self.field_context(field)
        field_data["key_literal"] = kotlin_string_literal(field.key)
        field_data["default"] = " = listOf()" if isinstance(field.type, ArrayOf) else ""

        if field.name.renamed:
            self.imports.add(SERIAL_NAME_IMPORT)

        return field_data

    def get_package_declaration(self) -> Optional[str]:
        if self.config.package_name:
            return f"package {self.config.package_name}"
        return None


def create_kotlin_generator(config: Optional[GeneratorConfig] = None) -> KotlinGenerator:
    """Create a Kotlin generator with default configuration."""
    return KotlinGenerator(config or load_config("kotlin"))
