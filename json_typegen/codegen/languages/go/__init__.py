"""
Go code generator module.

Generates Go structs with JSON tags.
"""

from .generator import GoGenerator, create_go_generator
from .naming import GO_POLICY, GO_RESERVED_WORDS, validate_go_package_name

__all__ = [
    "GoGenerator",
    "GO_POLICY",
    "GO_RESERVED_WORDS",
    "create_go_generator",
    "validate_go_package_name",
]
