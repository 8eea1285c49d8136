"""
json_typegen code generation module.

Infers structural types from a JSON sample and generates model code in
TypeScript, Java, Flutter (Dart), Swift, Go and Kotlin.
"""

import json

from .converter import convert, convert_to_source
from .registry import (
    GeneratorRegistry,
    RegistryError,
    UnsupportedTarget,
    get_generator,
    get_identifier_policy,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    list_identifier_policies,
    list_supported_languages,
    register_generator,
)
from .core.errors import ConversionError, DepthExceeded, InvalidRootName
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config

# Version info
__version__ = "0.1.0"


def quick_generate(json_data, language="typescript", root_name="Root", **options):
    """
    Quick code generation from JSON data.

    Args:
        json_data: JSON text, or an already parsed value (dict/list/...)
        language: Target language
        root_name: Name of the root type
        **options: Generator options (indent_size, package_name, ...)

    Returns:
        Generated code string

    Raises:
        json.JSONDecodeError: If json_data is text that is not valid JSON
        ConversionError: If the conversion fails
    """
    # Convert string to parsed JSON if needed
    if isinstance(json_data, str):
        json_data = json.loads(json_data)

    return convert_to_source(json_data, root_name, language, options or None)


# Export main interfaces
__all__ = [
    "CodeGenerator",
    "ConfigError",
    "ConfigManager",
    "ConversionError",
    "DepthExceeded",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorRegistry",
    "InvalidRootName",
    "RegistryError",
    "UnsupportedTarget",
    "convert",
    "convert_to_source",
    "generate_code",
    "get_generator",
    "get_identifier_policy",
    "get_language_info",
    "is_language_supported",
    "list_all_language_info",
    "list_identifier_policies",
    "list_supported_languages",
    "load_config",
    "quick_generate",
    "register_generator",
]
