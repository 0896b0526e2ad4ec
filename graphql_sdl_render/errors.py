"""Errors raised while rendering SDL."""

from collections.abc import Mapping
from typing import Any


class SDLRenderError(Exception):
    """Base class for rendering failures."""


class UnrecognizedNode(SDLRenderError):
    """An introspection node matched none of the known shapes."""

    def __init__(self, node: Any):
        self.node = node
        name = node.get("name") if isinstance(node, Mapping) else None
        kind = node.get("kind") if isinstance(node, Mapping) else None
        super().__init__(f"Unrecognized introspection node (kind={kind!r}, name={name!r}): {node!r}")


class InvalidPayload(SDLRenderError):
    """The top-level payload is not an introspection result."""
