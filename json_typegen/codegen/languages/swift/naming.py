"""
Swift naming rules.

Properties are camelCase; keywords get a leading underscore and keep their
JSON key through CodingKeys.
"""

from ...core.naming import EscapeRule, IdentifierPolicy, NamingCase

SWIFT_RESERVED_WORDS = frozenset(
    {
        # Declarations
        "associatedtype",
        "class",
        "deinit",
        "enum",
        "extension",
        "fileprivate",
        "func",
        "import",
        "init",
        "inout",
        "internal",
        "let",
        "operator",
        "private",
        "precedencegroup",
        "protocol",
        "public",
        "rethrows",
        "static",
        "struct",
        "subscript",
        "typealias",
        "var",
        # Statements
        "break",
        "case",
        "catch",
        "continue",
        "default",
        "defer",
        "do",
        "else",
        "fallthrough",
        "for",
        "guard",
        "if",
        "in",
        "repeat",
        "return",
        "switch",
        "throw",
        "where",
        "while",
        # Expressions
        "as",
        "false",
        "is",
        "nil",
        "self",
        "super",
        "throws",
        "true",
        "try",
    }
)

SWIFT_POLICY = IdentifierPolicy(
    target="swift",
    identifier_case=NamingCase.CAMEL_CASE,
    escape_rule=EscapeRule.PREFIX_UNDERSCORE,
    reserved_words=SWIFT_RESERVED_WORDS,
)


def swift_string_literal(value: str) -> str:
    """Double-quoted Swift string literal for value."""
    escaped = []
    for char in value:
        if char in '"\\':
            escaped.append("\\" + char)
        elif char == "\n":
            escaped.append("\\n")
        elif char == "\r":
            escaped.append("\\r")
        elif char == "\t":
            escaped.append("\\t")
        elif ord(char) < 0x20:
            escaped.append(f"\\u{{{ord(char):x}}}")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'
