"""
TypeScript code generator implementation.

Generates exported interfaces, plus a type alias when the root is not an
object.
"""

from pathlib import Path
from typing import Optional

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator, Declaration
from ...core.naming import IdentifierPolicy
from ...core.schema import TypeNode, ValueKind
from .naming import TYPESCRIPT_POLICY


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript interfaces."""

    TYPE_MAP = {
        ValueKind.NULL: "any",
        ValueKind.BOOLEAN: "boolean",
        ValueKind.INTEGER: "number",
        ValueKind.FLOAT: "number",
        ValueKind.STRING: "string",
    }
    UNKNOWN_TYPE = "any"

    def get_template_directory(self) -> Optional[Path]:
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        return "typescript"

    @property
    def file_extension(self) -> str:
        return ".ts"

    @property
    def policy(self) -> IdentifierPolicy:
        return TYPESCRIPT_POLICY

    def render_array(self, element_type: str, element: TypeNode) -> str:
        # Union and function types need parentheses before []
        if " " in element_type:
            return f"({element_type})[]"
        return f"{element_type}[]"

    def generate_declaration(self, declaration: Declaration) -> str:
        if declaration.wrapper:
            return self._generate_alias(declaration)

        fields = [self.field_context(field) for field in declaration.fields]
        context = self.template_context(declaration, fields=fields)
        return self.render_template("interface.ts.j2", context)

    def _generate_alias(self, declaration: Declaration) -> str:
        """Non-object roots become `export type Root = ...;`."""
        (field,) = declaration.fields
        context = {
            "name": declaration.name,
            "type": self.render_type(field.type, field.path),
            "comment": self.field_comment(field),
        }
        return self.render_template("alias.ts.j2", context)


def create_typescript_generator(
    config: Optional[GeneratorConfig] = None,
) -> TypeScriptGenerator:
    """Create a TypeScript generator with default configuration."""
    return TypeScriptGenerator(config or load_config("typescript"))
