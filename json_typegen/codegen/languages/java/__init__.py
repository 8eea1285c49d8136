"""
Java code generator module.

Generates Java classes with accessors and Jackson annotations.
"""

from .generator import JavaGenerator, create_java_generator
from .naming import JAVA_POLICY, JAVA_RESERVED_WORDS

__all__ = [
    "JavaGenerator",
    "JAVA_POLICY",
    "JAVA_RESERVED_WORDS",
    "create_java_generator",
]
