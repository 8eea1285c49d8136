"""
Kotlin code generator module.

Generates @Serializable data classes.
"""

from .generator import KotlinGenerator, create_kotlin_generator
from .naming import KOTLIN_POLICY, KOTLIN_RESERVED_WORDS, kotlin_string_literal

__all__ = [
    "KotlinGenerator",
    "KOTLIN_POLICY",
    "KOTLIN_RESERVED_WORDS",
    "create_kotlin_generator",
    "kotlin_string_literal",
]
