"""
Kotlin naming rules: camelCase properties, keywords wrapped in backticks.
"""

import json

from ...core.naming import EscapeRule, IdentifierPolicy, NamingCase

KOTLIN_RESERVED_WORDS = frozenset(
    {
        "as",
        "break",
        "class",
        "continue",
        "do",
        "else",
        "false",
        "for",
        "fun",
        "if",
        "in",
        "interface",
        "is",
        "null",
        "object",
        "package",
        "return",
        "super",
        "this",
        "throw",
        "true",
        "try",
        "type",
        "typealias",
        "typeof",
        "val",
        "var",
        "when",
        "while",
    }
)

KOTLIN_POLICY = IdentifierPolicy(
    target="kotlin",
    identifier_case=NamingCase.CAMEL_CASE,
    escape_rule=EscapeRule.BACKTICKS,
    reserved_words=KOTLIN_RESERVED_WORDS,
)


def kotlin_string_literal(value: str) -> str:
    """Double-quoted Kotlin string literal; ``$`` must not start a template."""
    return json.dumps(value, ensure_ascii=False).replace("$", "\\$")
