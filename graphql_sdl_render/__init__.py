"""Render GraphQL introspection results as SDL."""

from .errors import InvalidPayload, SDLRenderError, UnrecognizedNode
from .render import from_introspection

__all__ = ["from_introspection", "InvalidPayload", "SDLRenderError", "UnrecognizedNode"]
