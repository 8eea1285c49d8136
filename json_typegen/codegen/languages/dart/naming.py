"""
Dart naming rules: camelCase fields, reserved words suffixed with an underscore.
"""

from ...core.naming import EscapeRule, IdentifierPolicy, NamingCase

DART_RESERVED_WORDS = frozenset(
    {
        "assert",
        "await",
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "default",
        "do",
        "else",
        "enum",
        "extends",
        "false",
        "final",
        "finally",
        "for",
        "if",
        "in",
        "is",
        "new",
        "null",
        "rethrow",
        "return",
        "super",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "var",
        "void",
        "while",
        "with",
        "yield",
    }
)

DART_POLICY = IdentifierPolicy(
    target="flutter",
    identifier_case=NamingCase.CAMEL_CASE,
    escape_rule=EscapeRule.SUFFIX_UNDERSCORE,
    reserved_words=DART_RESERVED_WORDS,
    # A leading underscore would make the field library-private
    digit_prefix="n",
)

_STRING_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "$": "\\$",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def dart_string_literal(value: str) -> str:
    """Single-quoted Dart string literal for value."""
    return "'" + "".join(_STRING_ESCAPES.get(char, char) for char in value) + "'"
