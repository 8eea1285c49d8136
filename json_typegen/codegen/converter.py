"""
Conversion facade: JSON value in, source code out.

Composes inference, naming and the selected generator. Every call builds
fresh state; nothing is cached between conversions.
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

from .core.errors import ConversionError, InvalidRootName
from .core.config import GeneratorConfig
from .core.generator import GenerationResult, generate_code
from .core.naming import assign_names
from .core.schema import infer_type
from .registry import get_generator, get_registry
from ..logging_config import get_logger

logger = get_logger(__name__)

ConfigLike = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


def convert(
    json_value: Any, root_name: str, target: str, config: ConfigLike = None
) -> GenerationResult:
    """
    Convert a parsed JSON value into source code for one target.

    Args:
        json_value: Parsed JSON (dict/list/str/int/float/bool/None)
        root_name: Name of the root type, used verbatim
        target: Target id or alias (e.g. 'typescript', 'dart', 'kt')
        config: GeneratorConfig, override dict, or config file path

    Returns:
        GenerationResult; on DepthExceeded, InvalidRootName or
        UnsupportedTarget it is a failed result with empty code
    """
    try:
        return _run_conversion(json_value, root_name, target, config)
    except ConversionError as e:
        logger.warning("Conversion to %s failed: %s", target, e)
        return GenerationResult.error(str(e), e)


def convert_to_source(
    json_value: Any,
    root_name: str = "Root",
    target: str = "typescript",
    config: ConfigLike = None,
) -> str:
    """
    Like convert, but return the code and raise ConversionError on failure.
    """
    return _run_conversion(json_value, root_name, target, config).code


def _run_conversion(
    json_value: Any, root_name: str, target: str, config: ConfigLike
) -> GenerationResult:
    _validate_root_name(root_name)
    language = get_registry().resolve(target)
    generator = get_generator(language, config)

    tree = infer_type(json_value, generator.config.max_depth)
    binding = assign_names(
        tree,
        root_name,
        generator.policy,
        unique_type_names=generator.config.unique_type_names,
    )

    result = generate_code(generator, tree, binding)
    result.metadata["target"] = language

    logger.info(
        "Generated %s for %s: %d types, %d warnings",
        language,
        root_name,
        result.metadata["type_count"],
        len(result.warnings),
    )
    return result


def _validate_root_name(root_name: Any):
    """Reject root names no target could use, before any inference."""
    if not isinstance(root_name, str):
        raise InvalidRootName(root_name, "must be a string")
    if not root_name.strip():
        raise InvalidRootName(root_name, "must not be empty")
    if any(char.isspace() for char in root_name):
        raise InvalidRootName(root_name, "must not contain whitespace")
