"""Render a full introspection result as SDL."""

import logging
from collections.abc import Mapping
from typing import Any

from . import doc as d
from .errors import InvalidPayload
from .layout import LINE_WIDTH, format_doc
from .translator import render_node

logger = logging.getLogger(__name__)


def schema_root(payload: Any) -> Mapping[str, Any]:
    """
    Locate the `__schema` object in an introspection payload.

    Accepts `{"__schema": {...}}` or the transport envelope `{"data": {"__schema": {...}}}`.

    Raises:
        InvalidPayload: If no schema root with directives and types is found
    """
    if not isinstance(payload, Mapping):
        raise InvalidPayload(f"Expected a mapping, got {type(payload).__name__}")

    if "__schema" in payload:
        schema = payload["__schema"]
    elif isinstance(payload.get("data"), Mapping) and "__schema" in payload["data"]:
        schema = payload["data"]["__schema"]
    else:
        raise InvalidPayload("Payload has no '__schema' root")

    if not isinstance(schema, Mapping):
        raise InvalidPayload("'__schema' is not an object")

    missing = [key for key in ("directives", "types") if key not in schema]
    if missing:
        raise InvalidPayload(f"'__schema' is missing {', '.join(missing)}")

    return schema


def from_introspection(payload: Any) -> str:
    """
    Convert an introspection result into SDL text.

    Directives come first, then types, each in input order. Builtins and
    introspection types are left out. Definitions are separated by a blank
    line and the output ends with a single newline.

    Args:
        payload: Introspection result

    Returns:
        SDL text

    Raises:
        InvalidPayload: If the payload has no usable schema root
        UnrecognizedNode: If any node has an unknown shape
    """
    schema = schema_root(payload)
    nodes = list(schema["directives"] or []) + list(schema["types"] or [])

    docs = [render_node(node) for node in nodes]
    definitions = [doc for doc in docs if not d.is_empty(doc)]
    logger.debug("Rendering %d definitions (%d suppressed)", len(definitions), len(docs) - len(definitions))

    document = d.concat([d.join(definitions, d.concat([d.line, d.line])), d.line])
    return format_doc(document, LINE_WIDTH)
