"""
Go code generator implementation.

Generates Go structs with JSON tags from an inferred type tree.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator, Declaration, DeclaredField
from ...core.naming import IdentifierPolicy, NameBinding
from ...core.schema import TypeNode, ValueKind, iter_records
from .naming import GO_POLICY, json_tag_problem, validate_go_package_name


class GoGenerator(CodeGenerator):
    """Code generator for Go structs with JSON tags."""

    TYPE_MAP = {
        ValueKind.NULL: "interface{}",
        ValueKind.BOOLEAN: "bool",
        ValueKind.INTEGER: "int",
        ValueKind.FLOAT: "float64",
        ValueKind.STRING: "string",
    }
    UNKNOWN_TYPE = "interface{}"

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Go generator with configuration."""
        super().__init__(config)
        self.package_name = self.config.package_name or "main"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Go templates directory."""
        return Path(__file__).parent / "templates"

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    @property
    def policy(self) -> IdentifierPolicy:
        return GO_POLICY

    def render_array(self, element_type: str, element: TypeNode) -> str:
        return f"[]{element_type}"

    def generate_declaration(self, declaration: Declaration) -> str:
        """Generate Go struct for a single declaration using templates."""
        fields = [self._generate_field_data(field) for field in declaration.fields]
        context = self.template_context(declaration, fields=fields)
        return self.render_template("struct.go.j2", context)

    def _generate_field_data(self, field: DeclaredField) -> Dict[str, Any]:
        """Generate field data for template."""
        field_data = self.field_context(field)
        field_data["json_tag"] = self._render_json_tag(field.key)
        return field_data

    @staticmethod
    def _render_json_tag(key: str) -> str:
        # "-" alone means "skip this field"; "-," names a field "-"
        name = "-," if key == "-" else key
        tag = f"json:{json.dumps(name, ensure_ascii=False)}"
        if "`" in tag:
            return json.dumps(tag, ensure_ascii=False)
        return f"`{tag}`"

    def get_package_declaration(self) -> Optional[str]:
        """Get Go package declaration."""
        return self.render_template(
            "package.go.j2", {"package_name": self.package_name}
        )

    def validate(self, tree: TypeNode, binding: NameBinding) -> List[str]:
        """Validate the tree for Go generation."""
        warnings = super().validate(tree, binding)
        warnings.extend(validate_go_package_name(self.package_name))

        for path, record in iter_records(tree):
            for record_field in record.fields:
                problem = json_tag_problem(record_field.key)
                if problem:
                    field_name = binding.field_name(path + (record_field.key,))
                    warnings.append(
                        f"Key {record_field.key!r} in {binding.type_name(path)} cannot "
                        f"be mapped by a json tag ({problem}) - encoding/json will use "
                        f"{field_name.identifier}"
                    )
        return warnings


def create_go_generator(config: Optional[GeneratorConfig] = None) -> GoGenerator:
    """Create a Go generator, using the Go defaults when no config is given."""
    return GoGenerator(config or load_config("go"))
