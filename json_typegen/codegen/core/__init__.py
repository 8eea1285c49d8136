"""
Core code generation components.

Provides the type tree, naming, configuration and base classes used by all
language generators.
"""

from .errors import ConversionError, DepthExceeded, InvalidRootName
from .generator import (
    CodeGenerator,
    Declaration,
    DeclaredField,
    GenerationResult,
    collect_declarations,
    generate_code,
)
from .schema import (
    ITEM,
    UNKNOWN,
    ArrayOf,
    Primitive,
    Record,
    RecordField,
    TypeNode,
    Unknown,
    ValueKind,
    classify,
    infer_type,
)
from .naming import (
    EscapeRule,
    FieldName,
    IdentifierPolicy,
    NameBinding,
    NameSanitizer,
    NamingCase,
    assign_names,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Errors surfaced by a conversion
    "ConversionError",
    "DepthExceeded",
    "InvalidRootName",
    # Base generator interface
    "CodeGenerator",
    "Declaration",
    "DeclaredField",
    "GenerationResult",
    "collect_declarations",
    "generate_code",
    # Type tree
    "ITEM",
    "UNKNOWN",
    "ArrayOf",
    "Primitive",
    "Record",
    "RecordField",
    "TypeNode",
    "Unknown",
    "ValueKind",
    "classify",
    "infer_type",
    # Naming
    "EscapeRule",
    "FieldName",
    "IdentifierPolicy",
    "NameBinding",
    "NameSanitizer",
    "NamingCase",
    "assign_names",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
