"""
Core type representation for code generation.

Classifies parsed JSON values and infers an immutable structural type tree
that every language generator works from.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Tuple, Union

from .errors import DepthExceeded

# Path segments are field keys (str) or ITEM for an array's sampled element
ITEM = 0
Path = Tuple[Union[str, int], ...]

DEFAULT_MAX_DEPTH = 256
# Tree walks recurse up to twice per level and must stay under the
# interpreter recursion limit
MAX_DEPTH_LIMIT = 400


class ValueKind(Enum):
    """Neutral kinds a single JSON value can take."""

    NULL = "null"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    RECORD = "record"


PRIMITIVE_KINDS = frozenset(
    {
        ValueKind.NULL,
        ValueKind.BOOLEAN,
        ValueKind.INTEGER,
        ValueKind.FLOAT,
        ValueKind.STRING,
    }
)


def classify(value: Any) -> ValueKind:
    """
    Classify one parsed JSON value.

    Floats with no fractional part classify as INTEGER, so ``3.0`` and ``3``
    are indistinguishable here.

    Raises:
        TypeError: If value is not something a JSON parser produces
    """
    if value is None:
        return ValueKind.NULL
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.INTEGER if value.is_integer() else ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.RECORD
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


@dataclass(frozen=True)
class Unknown:
    """Untyped element, e.g. the element of an empty array."""

    def __repr__(self) -> str:
        return "Unknown"


UNKNOWN = Unknown()


@dataclass(frozen=True)
class Primitive:
    kind: ValueKind

    def __post_init__(self):
        if self.kind not in PRIMITIVE_KINDS:
            raise ValueError(f"Not a primitive kind: {self.kind}")


@dataclass(frozen=True)
class ArrayOf:
    element: "TypeNode"


@dataclass(frozen=True)
class RecordField:
    key: str
    type: "TypeNode"


@dataclass(frozen=True)
class Record:
    """Object shape; fields keep the source key order."""

    fields: Tuple[RecordField, ...] = ()


TypeNode = Union[Primitive, ArrayOf, Record, Unknown]


def infer_type(value: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> TypeNode:
    """
    Infer the structural type of a parsed JSON value.

    Arrays are typed from their first element only; later elements are not
    inspected, so ``[1, "a"]`` is an array of integers.

    Args:
        value: Parsed JSON (dict/list/str/int/float/bool/None)
        max_depth: Maximum number of nested arrays/objects, at most
            MAX_DEPTH_LIMIT

    Returns:
        Root TypeNode

    Raises:
        DepthExceeded: If nesting goes beyond max_depth
        ValueError: If max_depth is outside 1..MAX_DEPTH_LIMIT
    """
    if not 1 <= max_depth <= MAX_DEPTH_LIMIT:
        raise ValueError(
            f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}, got {max_depth}"
        )

    def infer_node(node: Any, depth: int) -> TypeNode:
        kind = classify(node)

        if kind in PRIMITIVE_KINDS:
            return Primitive(kind)

        depth += 1
        if depth > max_depth:
            raise DepthExceeded(depth, max_depth)

        if kind == ValueKind.ARRAY:
            if len(node) == 0:
                return ArrayOf(UNKNOWN)
            return ArrayOf(infer_node(node[0], depth))

        return Record(
            tuple(
                RecordField(key=str(key), type=infer_node(val, depth))
                for key, val in node.items()
            )
        )

    return infer_node(value, 0)


def innermost_element(node: TypeNode) -> TypeNode:
    """Strip every ArrayOf layer and return what is left."""
    while isinstance(node, ArrayOf):
        node = node.element
    return node


def requires_name(node: TypeNode) -> bool:
    """True for records and arrays that (eventually) hold records."""
    return isinstance(innermost_element(node), Record)


def contains_unknown(node: TypeNode) -> bool:
    """True if the node is, or is an array of, Unknown or null."""
    inner = innermost_element(node)
    return isinstance(inner, Unknown) or (
        isinstance(inner, Primitive) and inner.kind == ValueKind.NULL
    )


def iter_records(node: TypeNode, path: Path = ()) -> Iterator[Tuple[Path, Record]]:
    """Yield (path, record) for every record, innermost first."""
    if isinstance(node, Record):
        for field in node.fields:
            yield from iter_records(field.type, path + (field.key,))
        yield path, node
    elif isinstance(node, ArrayOf):
        yield from iter_records(node.element, path + (ITEM,))


def max_depth_of(node: TypeNode) -> int:
    """Get maximum nesting depth of arrays/records in this tree."""
    if isinstance(node, Record):
        return 1 + max((max_depth_of(f.type) for f in node.fields), default=0)
    if isinstance(node, ArrayOf):
        return 1 + max_depth_of(node.element)
    return 0
