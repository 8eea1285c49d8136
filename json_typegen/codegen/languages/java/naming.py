"""
Java naming rules: camelCase fields, keywords suffixed with an underscore.
"""

from ...core.naming import EscapeRule, IdentifierPolicy, NamingCase

# Keywords and literals that cannot be used as identifiers
JAVA_RESERVED_WORDS = frozenset(
    {
        "abstract",
        "assert",
        "boolean",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "class",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extends",
        "false",
        "final",
        "finally",
        "float",
        "for",
        "goto",
        "if",
        "implements",
        "import",
        "instanceof",
        "int",
        "interface",
        "long",
        "native",
        "new",
        "null",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "short",
        "static",
        "strictfp",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "true",
        "try",
        "void",
        "volatile",
        "while",
    }
)

JAVA_POLICY = IdentifierPolicy(
    target="java",
    identifier_case=NamingCase.CAMEL_CASE,
    escape_rule=EscapeRule.SUFFIX_UNDERSCORE,
    reserved_words=JAVA_RESERVED_WORDS,
)
