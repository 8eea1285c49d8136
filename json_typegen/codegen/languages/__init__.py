"""
Language-specific code generators.

One package per target: TypeScript, Java, Flutter (Dart), Swift, Go, Kotlin.
"""

from .dart import DartGenerator, create_dart_generator
from .go import GoGenerator, create_go_generator
from .java import JavaGenerator, create_java_generator
from .kotlin import KotlinGenerator, create_kotlin_generator
from .swift import SwiftGenerator, create_swift_generator
from .typescript import TypeScriptGenerator, create_typescript_generator

__all__ = [
    "DartGenerator",
    "GoGenerator",
    "JavaGenerator",
    "KotlinGenerator",
    "SwiftGenerator",
    "TypeScriptGenerator",
    "create_dart_generator",
    "create_go_generator",
    "create_java_generator",
    "create_kotlin_generator",
    "create_swift_generator",
    "create_typescript_generator",
]
