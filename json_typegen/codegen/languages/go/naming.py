"""
Go-specific naming rules.

Field names are exported (PascalCase); keywords get an underscore suffix.
"""

from ...core.naming import EscapeRule, IdentifierPolicy, NamingCase


# Go reserved words
GO_RESERVED_WORDS = frozenset(
    {
        "break",
        "case",
        "chan",
        "const",
        "continue",
        "default",
        "defer",
        "else",
        "fallthrough",
        "for",
        "func",
        "go",
        "goto",
        "if",
        "import",
        "interface",
        "map",
        "package",
        "range",
        "return",
        "select",
        "struct",
        "switch",
        "type",
        "var",
    }
)

GO_POLICY = IdentifierPolicy(
    target="go",
    identifier_case=NamingCase.PASCAL_CASE,
    escape_rule=EscapeRule.SUFFIX_UNDERSCORE,
    reserved_words=GO_RESERVED_WORDS,
    # Exported identifiers must start with an upper-case letter
    digit_prefix="N",
)


def validate_go_package_name(name: str) -> list[str]:
    """
    Validate Go package name according to Go naming rules.

    Returns:
        List of validation warnings (empty if valid)
    """
    warnings = []

    if not name:
        warnings.append("Package name cannot be empty")
        return warnings

    if not name.isidentifier():
        warnings.append(f"'{name}' is not a valid Go identifier")

    if name[0].isupper():
        warnings.append("Package names should be lowercase")

    if "_" in name:
        warnings.append("Package names should not contain underscores")

    if name.lower() in GO_RESERVED_WORDS:
        warnings.append(f"'{name}' is a Go reserved word")

    return warnings


# Punctuation encoding/json accepts in a tag name (besides letters and digits)
_TAG_NAME_PUNCTUATION = frozenset("!#$%&()*+-./:;<=>?@[]^_{|}~ ")


def json_tag_problem(key: str) -> str | None:
    """
    Describe why encoding/json cannot map key through a struct tag.

    Returns:
        A short reason, or None when ``json:"key"`` round-trips the key
    """
    if key == "":
        return "empty key"
    if "," in key:
        return "comma in key"
    if any(
        not (char.isalpha() or char.isdigit() or char in _TAG_NAME_PUNCTUATION)
        for char in key
    ):
        return "characters not allowed in tag names"
    return None
