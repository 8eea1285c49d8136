"""
TypeScript code generator module.

Generates exported interfaces for JSON objects.
"""

from .generator import TypeScriptGenerator, create_typescript_generator
from .naming import TYPESCRIPT_POLICY

__all__ = [
    "TypeScriptGenerator",
    "TYPESCRIPT_POLICY",
    "create_typescript_generator",
]
