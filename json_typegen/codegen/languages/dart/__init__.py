"""
Flutter (Dart) code generator module.

Generates model classes with fromJson/toJson.
"""

from .generator import DartGenerator, create_dart_generator
from .naming import DART_POLICY, DART_RESERVED_WORDS, dart_string_literal

__all__ = [
    "DartGenerator",
    "DART_POLICY",
    "DART_RESERVED_WORDS",
    "create_dart_generator",
    "dart_string_literal",
]
