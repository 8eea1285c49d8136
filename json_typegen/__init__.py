"""json_typegen: generate typed model code from sample JSON.

Infers a structural type from one JSON document and renders it as
TypeScript, Java, Flutter (Dart), Swift, Go or Kotlin declarations.
"""

from .codegen import (
    ConversionError,
    DepthExceeded,
    GenerationResult,
    GeneratorConfig,
    InvalidRootName,
    UnsupportedTarget,
    __version__,
    convert,
    convert_to_source,
    list_supported_languages,
    quick_generate,
)

__all__ = [
    "ConversionError",
    "DepthExceeded",
    "GenerationResult",
    "GeneratorConfig",
    "InvalidRootName",
    "UnsupportedTarget",
    "__version__",
    "convert",
    "convert_to_source",
    "list_supported_languages",
    "quick_generate",
]
