"""
Swift code generator module.

Generates Codable structs with CodingKeys.
"""

from .generator import SwiftGenerator, create_swift_generator
from .naming import SWIFT_POLICY, SWIFT_RESERVED_WORDS, swift_string_literal

__all__ = [
    "SwiftGenerator",
    "SWIFT_POLICY",
    "SWIFT_RESERVED_WORDS",
    "create_swift_generator",
    "swift_string_literal",
]
