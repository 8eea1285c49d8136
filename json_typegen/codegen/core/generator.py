"""
Shared machinery of the target generators.

A generator turns a type tree plus its NameBinding into one source file:
declarations are collected innermost first, rendered one by one through
the target's Jinja2 templates, and framed with the package line and the
imports the rendering asked for.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Set, Tuple

from .config import GeneratorConfig
from .naming import FieldName, IdentifierPolicy, NameBinding
from .schema import (
    ITEM,
    ArrayOf,
    Path as TreePath,
    Primitive,
    Record,
    TypeNode,
    Unknown,
    ValueKind,
    contains_unknown,
    innermost_element,
    iter_records,
    max_depth_of,
)
from .templates import TemplateEngine, create_template_engine


@dataclass(frozen=True)
class DeclaredField:
    """One field of a declaration, as the generators see it."""

    name: FieldName
    type: TypeNode
    path: TreePath

    @property
    def key(self) -> str:
        return self.name.key

    @property
    def identifier(self) -> str:
        return self.name.identifier


@dataclass(frozen=True)
class Declaration:
    """A named type to emit: a record, or the wrapper around a non-record root."""

    name: str
    path: TreePath
    fields: Tuple[DeclaredField, ...]
    wrapper: bool = False


def collect_declarations(tree: TypeNode, binding: NameBinding) -> List[Declaration]:
    """
    List every declaration to emit, nested types before the types using them.

    A root that is not a record gets a synthetic wrapper declaration holding
    a single ``items`` (array) or ``value`` (primitive) field.
    """
    declarations = []

    for path, record in iter_records(tree):
        declared = tuple(
            DeclaredField(
                name=binding.field_name(path + (record_field.key,)),
                type=record_field.type,
                path=path + (record_field.key,),
            )
            for record_field in record.fields
        )
        declarations.append(Declaration(binding.type_name(path), path, declared))

    if not isinstance(tree, Record):
        wrapper_field = DeclaredField(name=binding.wrapper_field, type=tree, path=())
        declarations.append(
            Declaration(binding.root_name, (), (wrapper_field,), wrapper=True)
        )

    return declarations


class CodeGenerator(ABC):
    """
    Base class of the target generators.

    Subclasses provide the primitive TYPE_MAP, the identifier policy, the
    array spelling and one ``generate_declaration`` per declaration; the
    base class handles ordering, type rendering, warnings and layout.
    """

    # Primitive kind -> target type; overridable through config.custom
    TYPE_MAP: Dict[ValueKind, str] = {}
    UNKNOWN_TYPE = "any"
    TYPE_OVERRIDE_KEYS = {
        ValueKind.NULL: "null_type",
        ValueKind.BOOLEAN: "bool_type",
        ValueKind.INTEGER: "int_type",
        ValueKind.FLOAT: "float_type",
        ValueKind.STRING: "string_type",
    }

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.type_map = {
            kind: self.config.custom.get(option, self.TYPE_MAP[kind])
            for kind, option in self.TYPE_OVERRIDE_KEYS.items()
        }
        self.unknown_type = self.config.custom.get("unknown_type", self.UNKNOWN_TYPE)
        self.template_engine: TemplateEngine = create_template_engine(
            self.get_template_directory()
        )

        # Per-generation state, reset by generate()
        self.binding: Optional[NameBinding] = None
        self.imports: Set[str] = set()

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Canonical target id ('typescript', 'flutter', ...)."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Extension of the generated file, dot included."""

    @property
    @abstractmethod
    def policy(self) -> IdentifierPolicy:
        """How JSON keys become field identifiers in this target."""

    def get_template_directory(self) -> Optional[Path]:
        """Directory holding this target's ``*.j2`` templates."""
        return None

    def generate(self, tree: TypeNode, binding: NameBinding) -> str:
        """Render the whole file for tree, named by binding."""
        self.binding = binding
        self.imports = set()

        # Declarations first: rendering them is what fills self.imports
        blocks = [
            self.generate_declaration(declaration)
            for declaration in collect_declarations(tree, binding)
        ]

        header = []
        package = self.get_package_declaration()
        if package:
            header.append(package)
        imports = self.get_import_statements()
        if imports:
            header.append("\n".join(imports))

        return "\n\n".join(header + blocks) + "\n"

    @abstractmethod
    def generate_declaration(self, declaration: Declaration) -> str:
        """Render a single record (or root wrapper) declaration."""

    # Type rendering (visitor over TypeNode)

    def render_type(self, node: TypeNode, path: TreePath) -> str:
        """Render the target type expression for node at path."""
        if isinstance(node, Record):
            return self.binding.type_name(path)
        if isinstance(node, ArrayOf):
            element_type = self.render_type(node.element, path + (ITEM,))
            return self.render_array(element_type, node.element)
        if isinstance(node, Primitive):
            return self.type_map[node.kind]
        return self.unknown_type

    @abstractmethod
    def render_array(self, element_type: str, element: TypeNode) -> str:
        """Render a sequence type given its rendered element type."""

    def get_import_statements(self) -> List[str]:
        """Imports requested while rendering, sorted."""
        return sorted(self.imports)

    def get_package_declaration(self) -> Optional[str]:
        return None

    # Comments

    def field_comment(self, field: DeclaredField) -> Optional[str]:
        """Comment flagging fields whose type could not be inferred."""
        if not self.config.add_comments or not contains_unknown(field.type):
            return None

        inner = innermost_element(field.type)
        prefix = "Element type" if isinstance(field.type, ArrayOf) else "Type"

        if isinstance(inner, Unknown):
            return f"{prefix} unknown: the sample array was empty"
        return f"{prefix} unknown: the sample value was null"

    def declaration_comment(self, declaration: Declaration) -> Optional[str]:
        """Comment flagging declarations with no fields."""
        if self.config.add_comments and not declaration.fields:
            return "No fields in the sample object"
        return None

    def template_context(self, declaration: Declaration, **extra) -> Dict[str, Any]:
        """Common template variables for one declaration."""
        context = {
            "name": declaration.name,
            "description": self.declaration_comment(declaration),
            "indent": self.config.indent,
        }
        context.update(extra)
        return context

    def field_context(self, field: DeclaredField) -> Dict[str, Any]:
        """Template variables shared by every target for one field."""
        return {
            "name": field.identifier,
            "key": field.key,
            "type": self.render_type(field.type, field.path),
            "comment": self.field_comment(field),
            "renamed": field.name.renamed,
        }

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)

    def validate(self, tree: TypeNode, binding: NameBinding) -> List[str]:
        """
        Collect warnings about the tree and its names: empty records, types
        the sample could not reveal, renamed keys and colliding type names.

        Generators extend this with target-specific checks.
        """
        warnings = []

        for path, record in iter_records(tree):
            type_name = binding.type_name(path)

            if not record.fields:
                warnings.append(
                    f"Type {type_name} has no fields - will generate an empty declaration"
                )

            for record_field in record.fields:
                field_name = binding.field_name(path + (record_field.key,))

                if contains_unknown(record_field.type):
                    where = f"{type_name}.{record_field.key}"
                    if isinstance(innermost_element(record_field.type), Unknown):
                        warnings.append(
                            f"Unknown element type in {where} (empty array) - "
                            f"using {self.unknown_type}"
                        )
                    else:
                        warnings.append(
                            f"Null value in {where} - "
                            f"using {self.type_map[ValueKind.NULL]}"
                        )

                if field_name.renamed:
                    warnings.append(
                        f"Field {type_name}.{record_field.key} renamed to "
                        f"{field_name.identifier}"
                    )

        for name in binding.collisions:
            warnings.append(f"Type name {name} is composed by more than one path")

        return warnings

    def format_code(self, code: str) -> str:
        """Strip trailing spaces, squeeze blank runs to one line, end with one newline."""
        lines = []
        for line in code.split("\n"):
            line = line.rstrip()
            if line or (lines and lines[-1]):
                lines.append(line)
        return "\n".join(lines).strip("\n") + "\n"


class GenerationResult:
    """Outcome of one conversion: code, warnings and metadata, or an error."""

    def __init__(
        self,
        code: str,
        warnings: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Optional[Exception] = None
    ) -> "GenerationResult":
        """A failed result: no code, the error message and the exception."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    def __repr__(self) -> str:
        if self.success:
            return f"GenerationResult(success=True, lines={self.code.count(chr(10))})"
        return f"GenerationResult(success=False, error={self.error_message!r})"


def generate_code(
    generator: CodeGenerator, tree: TypeNode, binding: NameBinding
) -> GenerationResult:
    """
    Run generator over tree and package code, warnings and metadata.

    Metadata keys: language, file_extension, root_name, type_count,
    field_count, max_depth, has_unknowns.
    """
    warnings = generator.validate(tree, binding)
    code = generator.format_code(generator.generate(tree, binding))

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "root_name": binding.root_name,
        "type_count": len(set(binding.type_names.values())),
        "field_count": len(binding.field_names),
        "max_depth": max_depth_of(tree),
        "has_unknowns": any(
            isinstance(innermost_element(node), Unknown) for node in _walk(tree)
        ),
    }

    return GenerationResult(code, warnings, metadata)


def _walk(node: TypeNode) -> Iterator[TypeNode]:
    yield node
    if isinstance(node, Record):
        for record_field in node.fields:
            yield from _walk(record_field.type)
    elif isinstance(node, ArrayOf):
        yield from _walk(node.element)
