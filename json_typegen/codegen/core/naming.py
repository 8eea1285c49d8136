"""
Naming utilities for safe code generation.

Handles name sanitization, case conversions, keyword conflicts, and the
structural naming pass that gives every nested record a type name.
"""

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, List, Optional, Set

from .schema import ITEM, ArrayOf, Path, Record, TypeNode, requires_name
from ...logging_config import get_logger

logger = get_logger(__name__)

_JS_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


class NamingCase(Enum):
    """Different naming case styles."""

    ORIGINAL = "original"  # user-name (kept as is)
    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName


class EscapeRule(Enum):
    """How an identifier that is reserved (or invalid) gets escaped."""

    SUFFIX_UNDERSCORE = "suffix_underscore"  # class_
    PREFIX_UNDERSCORE = "prefix_underscore"  # _class
    BACKTICKS = "backticks"  # `class`
    QUOTE = "quote"  # "first-name"


@dataclass(frozen=True)
class IdentifierPolicy:
    """Per-target rules for turning JSON keys into identifiers."""

    target: str
    identifier_case: NamingCase
    escape_rule: EscapeRule
    reserved_words: FrozenSet[str] = frozenset()
    digit_prefix: str = "_"

    def is_reserved(self, name: str) -> bool:
        return name.lower() in self.reserved_words

    def escape(self, name: str) -> str:
        """Apply this policy's escape rule to a name."""
        if self.escape_rule == EscapeRule.SUFFIX_UNDERSCORE:
            return f"{name}_"
        if self.escape_rule == EscapeRule.PREFIX_UNDERSCORE:
            return f"_{name}"
        if self.escape_rule == EscapeRule.BACKTICKS:
            return f"`{name}`"
        return json.dumps(name, ensure_ascii=False)


@dataclass(frozen=True)
class FieldName:
    """Generated identifier for one record field plus its JSON key."""

    key: str
    identifier: str

    @property
    def bare(self) -> str:
        """Identifier without backtick or quote decoration."""
        if self.identifier.startswith('"'):
            return json.loads(self.identifier)
        return self.identifier.strip("`")

    @property
    def renamed(self) -> bool:
        """True when the identifier no longer spells the JSON key."""
        return self.bare != self.key


@dataclass
class NameBinding:
    """Names assigned to one type tree for one target."""

    root_name: str
    type_names: Dict[Path, str] = field(default_factory=dict)
    field_names: Dict[Path, FieldName] = field(default_factory=dict)
    wrapper_field: Optional[FieldName] = None
    collisions: List[str] = field(default_factory=list)

    def type_name(self, path: Path) -> str:
        return self.type_names[path]

    def field_name(self, path: Path) -> FieldName:
        return self.field_names[path]


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(self, policy: IdentifierPolicy):
        """
        Initialize name sanitizer.

        Args:
            policy: Identifier policy of the target language
        """
        self.policy = policy
        self._used_names: Set[str] = set()

    def sanitize_name(
        self, name: str, target_case: Optional[NamingCase] = None
    ) -> str:
        """
        Sanitize a name for safe use in the target language.

        Args:
            name: Original name (usually a JSON key)
            target_case: Desired case style, defaults to the policy's

        Returns:
            Identifier, unique among names used since the last reset
        """
        target_case = target_case or self.policy.identifier_case

        if target_case == NamingCase.ORIGINAL:
            return self._sanitize_original(name)

        # Step 1: Basic cleanup
        cleaned = self._clean_basic(name)

        # Step 2: Convert to target case
        converted = self._convert_case(cleaned, target_case) or "field"
        if converted[0].isdigit():
            converted = f"{self.policy.digit_prefix}{converted}"

        # Step 3: Handle duplicates, then reserved words
        unique = self._make_unique(converted)
        if self.policy.is_reserved(unique):
            return self.policy.escape(unique)
        return unique

    def _sanitize_original(self, name: str) -> str:
        """Keep the key verbatim, quoting it if it is not an identifier."""
        self._used_names.add(name)
        if _JS_IDENTIFIER.fullmatch(name) and not self.policy.is_reserved(name):
            return name
        return self.policy.escape(name)

    def type_segment(self, name: str) -> str:
        """PascalCase fragment used when composing nested type names."""
        return self._to_pascal_case(self._clean_basic(name)) or "Field"

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - replace invalid characters."""
        # Replace non-alphanumeric chars except underscore and hyphen
        cleaned = re.sub(r"[^a-zA-Z0-9_-]", "_", name)

        # Remove leading/trailing underscores and hyphens
        cleaned = cleaned.strip("_-")

        # Ensure not empty
        if not cleaned:
            cleaned = "field"

        return cleaned

    def _convert_case(self, name: str, target_case: NamingCase) -> str:
        """Convert name to target case style."""
        if target_case == NamingCase.SNAKE_CASE:
            return self._to_snake_case(name)
        elif target_case == NamingCase.CAMEL_CASE:
            return self._to_camel_case(name)
        elif target_case == NamingCase.PASCAL_CASE:
            return self._to_pascal_case(name)
        else:
            return name

    def _to_snake_case(self, name: str) -> str:
        """Convert to snake_case."""
        # Replace hyphens with underscores
        name = name.replace("-", "_")

        # Insert underscore before uppercase letters
        name = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)

        # Convert to lowercase and clean up multiple underscores
        name = name.lower()
        name = re.sub(r"_+", "_", name)

        return name.strip("_")

    def _to_camel_case(self, name: str) -> str:
        """Convert to camelCase."""
        snake = self._to_snake_case(name)
        parts = [part for part in snake.split("_") if part]

        if not parts:
            return name

        # First part lowercase, rest title case
        return parts[0].lower() + "".join(part.capitalize() for part in parts[1:])

    def _to_pascal_case(self, name: str) -> str:
        """Convert to PascalCase."""
        snake = self._to_snake_case(name)
        parts = snake.split("_")

        # All parts title case
        return "".join(part.capitalize() for part in parts if part)

    def _make_unique(self, name: str) -> str:
        """Suffix a counter while the name is already taken."""
        original_name = name
        counter = 1
        while name in self._used_names:
            name = f"{original_name}_{counter}"
            counter += 1
        self._used_names.add(name)
        return name

    def reset_used_names(self):
        """Reset the tracking of used names."""
        self._used_names.clear()


def assign_names(
    tree: TypeNode,
    root_name: str,
    policy: IdentifierPolicy,
    unique_type_names: bool = False,
) -> NameBinding:
    """
    Assign type names and field identifiers to a type tree.

    Nested records are named by concatenating the parent's name with the
    PascalCase field key (``RootUser``); array elements append ``Item``
    (``RootTagsItem``). The root keeps root_name verbatim.

    Args:
        tree: Inferred type tree
        root_name: Caller-supplied name for the root type
        policy: Identifier policy of the target language
        unique_type_names: Suffix a counter onto repeated composed names

    Returns:
        NameBinding for this tree
    """
    binding = NameBinding(root_name=root_name)
    sanitizer = NameSanitizer(policy)
    owners: Dict[str, Path] = {}

    def bind_type(path: Path, name: str) -> str:
        if path and name in owners:
            if unique_type_names:
                base, counter = name, 1
                while name in owners:
                    name = f"{base}{counter}"
                    counter += 1
            elif name not in binding.collisions:
                logger.debug(
                    "Type name %s composed by %r and %r", name, owners[name], path
                )
                binding.collisions.append(name)
        owners.setdefault(name, path)
        binding.type_names[path] = name
        return name

    def visit(node: TypeNode, path: Path, context_name: str):
        if isinstance(node, Record):
            name = bind_type(path, context_name)

            # Field identifiers are unique per record
            sanitizer.reset_used_names()
            for record_field in node.fields:
                field_path = path + (record_field.key,)
                binding.field_names[field_path] = FieldName(
                    key=record_field.key,
                    identifier=sanitizer.sanitize_name(record_field.key),
                )

            for record_field in node.fields:
                visit(
                    record_field.type,
                    path + (record_field.key,),
                    name + sanitizer.type_segment(record_field.key),
                )

        elif isinstance(node, ArrayOf):
            visit(node.element, path + (ITEM,), context_name + "Item")

    if not isinstance(tree, Record):
        if requires_name(tree):
            bind_type((), root_name)
        wrapper_key = "items" if isinstance(tree, ArrayOf) else "value"
        sanitizer.reset_used_names()
        binding.wrapper_field = FieldName(
            key=wrapper_key, identifier=sanitizer.sanitize_name(wrapper_key)
        )

    visit(tree, (), root_name)

    logger.debug(
        "Assigned %d type names and %d field names for root %s",
        len(binding.type_names),
        len(binding.field_names),
        root_name,
    )
    return binding
