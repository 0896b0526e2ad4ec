"""
Introspection node shapes.

Introspection JSON carries no single discriminant: a node's shape is implied
by which keys it has. `classify` turns that into an explicit `NodeKind` by
checking the rules below in order. The first match wins and the order is
load-bearing, e.g. a bare `SCALAR` reference named `ID` is a type reference,
not a suppressed builtin scalar.

     1. name starts with "__"            -> INTERNAL
     2. ofType set, kind NON_NULL        -> NON_NULL
     3. ofType set, kind LIST            -> LIST
     4. ofType present but null          -> NAMED_REF
     5. SCALAR named String/Int/...      -> BUILTIN_SCALAR
     6. directive named skip/include     -> BUILTIN_DIRECTIVE
     7. type + string or null defaultValue -> ARGUMENT
     8. type + args                      -> FIELD
     9. kind OBJECT                      -> OBJECT
    10. kind INPUT_OBJECT                -> INPUT_OBJECT
    11. kind UNION                       -> UNION
    12. kind INTERFACE                   -> INTERFACE
    13. kind ENUM                        -> ENUM
    14. kind SCALAR                      -> SCALAR
    15. has locations                    -> DIRECTIVE

Rules 7-15 also require a string name.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

BUILTIN_SCALARS = frozenset({"String", "Int", "Float", "Boolean", "ID"})
BUILTIN_DIRECTIVES = frozenset({"skip", "include"})

INTERNAL_PREFIX = "__"


class NodeKind(str, Enum):
    INTERNAL = "internal"
    NON_NULL = "non_null"
    LIST = "list"
    NAMED_REF = "named_ref"
    BUILTIN_SCALAR = "builtin_scalar"
    BUILTIN_DIRECTIVE = "builtin_directive"
    ARGUMENT = "argument"
    FIELD = "field"
    OBJECT = "object"
    INPUT_OBJECT = "input_object"
    UNION = "union"
    INTERFACE = "interface"
    ENUM = "enum"
    SCALAR = "scalar"
    DIRECTIVE = "directive"


# Node kinds that render to nothing.
SUPPRESSED = frozenset({NodeKind.INTERNAL, NodeKind.BUILTIN_SCALAR, NodeKind.BUILTIN_DIRECTIVE})

_KIND_RULES = (
    ("OBJECT", "fields", NodeKind.OBJECT),
    ("INPUT_OBJECT", "inputFields", NodeKind.INPUT_OBJECT),
    ("UNION", "possibleTypes", NodeKind.UNION),
    ("INTERFACE", "fields", NodeKind.INTERFACE),
    ("ENUM", "enumValues", NodeKind.ENUM),
)


def classify(node: Any) -> Optional[NodeKind]:
    """
    Determine the shape of an introspection node.

    Args:
        node: One introspection node (mapping)

    Returns:
        Matching NodeKind, or None if the node matches no rule
    """
    if not isinstance(node, Mapping):
        return None

    name = node.get("name")
    kind = node.get("kind")
    of_type = node.get("ofType")

    if isinstance(name, str) and name.startswith(INTERNAL_PREFIX):
        return NodeKind.INTERNAL
    if of_type is not None and kind == "NON_NULL":
        return NodeKind.NON_NULL
    if of_type is not None and kind == "LIST":
        return NodeKind.LIST
    if "ofType" in node and of_type is None and isinstance(name, str):
        return NodeKind.NAMED_REF
    if kind == "SCALAR" and name in BUILTIN_SCALARS:
        return NodeKind.BUILTIN_SCALAR
    if "locations" in node and name in BUILTIN_DIRECTIVES:
        return NodeKind.BUILTIN_DIRECTIVE
    # Every remaining shape is a named definition.
    if not isinstance(name, str):
        return None

    if "type" in node and "defaultValue" in node:
        default = node["defaultValue"]
        return NodeKind.ARGUMENT if default is None or isinstance(default, str) else None
    if "type" in node and "args" in node:
        return NodeKind.FIELD

    for expected_kind, required_key, node_kind in _KIND_RULES:
        if kind == expected_kind and required_key in node:
            return node_kind

    if kind == "SCALAR":
        return NodeKind.SCALAR
    if "locations" in node:
        return NodeKind.DIRECTIVE

    return None
