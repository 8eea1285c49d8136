"""
TypeScript naming rules.

Property names keep the JSON key; keys that are not identifiers are quoted.
"""

from ...core.naming import EscapeRule, IdentifierPolicy, NamingCase

TYPESCRIPT_POLICY = IdentifierPolicy(
    target="typescript",
    identifier_case=NamingCase.ORIGINAL,
    escape_rule=EscapeRule.QUOTE,
)
