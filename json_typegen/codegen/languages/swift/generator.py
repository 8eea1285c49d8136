"""
Swift code generator implementation.

Generates ``Codable`` structs; a ``CodingKeys`` enum maps every property
back to its JSON key.
"""

from pathlib import Path
from typing import Optional

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator, Declaration
from ...core.naming import IdentifierPolicy
from ...core.schema import TypeNode, ValueKind
from .naming import SWIFT_POLICY, swift_string_literal


class SwiftGenerator(CodeGenerator):
    """Code generator for Swift Codable structs."""

    TYPE_MAP = {
        ValueKind.NULL: "Any?",
        ValueKind.BOOLEAN: "Bool",
        ValueKind.INTEGER: "Int",
        ValueKind.FLOAT: "Double",
        ValueKind.STRING: "String",
    }
    UNKNOWN_TYPE = "Any"

    def get_template_directory(self) -> Optional[Path]:
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        return "swift"

    @property
    def file_extension(self) -> str:
        return ".swift"

    @property
    def policy(self) -> IdentifierPolicy:
        return SWIFT_POLICY

    def render_array(self, element_type: str, element: TypeNode) -> str:
        return f"[{element_type}]"

    def generate_declaration(self, declaration: Declaration) -> str:
        fields = []
        for field in declaration.fields:
            field_data = self.field_context(field)
            field_data["key_literal"] = swift_string_literal(field.key)
            fields.append(field_data)

        context = self.template_context(declaration, fields=fields)
        return self.render_template("struct.swift.j2", context)


def create_swift_generator(config: Optional[GeneratorConfig] = None) -> SwiftGenerator:
    """Create a Swift generator with default configuration."""
    return SwiftGenerator(config or load_config("swift"))
