"""Layout engine: renders a document to text at a fixed maximum width."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .doc import Concat, Doc, ForceBreak, Group, Line, Nest, NestMode, Text

LINE_WIDTH = 120

Mode = Literal["flat", "break"]


@dataclass(frozen=True)
class _Frame:
    indent: int
    mode: Mode
    doc: Doc


def fits(doc: Doc, remaining: int) -> bool:
    """
    Check whether `doc`, flattened onto a single line, fits in `remaining` columns.

    Pure measurement: walks the tree without producing output. Anything that
    can never be flat (`ForceBreak`, `Nest` with mode always, text spanning
    several lines) makes the document not fit.

    Args:
        doc: Document to measure
        remaining: Columns left on the current line

    Returns:
        True if the flat rendering fits
    """
    if remaining < 0:
        return False

    used = 0
    stack: list[Doc] = [doc]
    while stack:
        d = stack.pop()

        if isinstance(d, Text):
            if "\n" in d.s:
                return False
            used += len(d.s)
        elif isinstance(d, Line):
            used += len(d.flat)
        elif isinstance(d, Concat):
            stack.extend(reversed(d.parts))
        elif isinstance(d, Group):
            stack.append(d.doc)
        elif isinstance(d, Nest):
            if d.mode == NestMode.ALWAYS:
                return False
            stack.append(d.doc)
        elif isinstance(d, ForceBreak):
            return False
        else:
            raise TypeError(f"Not a document: {d!r}")

        if used > remaining:
            return False

    return True


def format_doc(doc: Doc, width: int = LINE_WIDTH) -> str:
    """
    Render a document to a string.

    Top level starts broken. Each `Group` is measured against the space left
    on the current line and rendered flat when it fits. Indentation after a
    broken line is written lazily, so blank lines carry no trailing spaces.

    Args:
        doc: Document to render
        width: Maximum line width

    Returns:
        Rendered text
    """
    out: list[str] = []
    col = 0
    pending_indent = 0

    stack: list[_Frame] = [_Frame(indent=0, mode="break", doc=doc)]

    while stack:
        frame = stack.pop()
        ind, mode, d = frame.indent, frame.mode, frame.doc

        if isinstance(d, Text):
            if not d.s:
                continue
            if pending_indent:
                out.append(" " * pending_indent)
                pending_indent = 0
            out.append(d.s)
            if "\n" in d.s:
                col = len(d.s) - d.s.rfind("\n") - 1
            else:
                col += len(d.s)
            continue

        if isinstance(d, Concat):
            # push in reverse so the first part is processed first
            for p in reversed(d.parts):
                stack.append(_Frame(ind, mode, p))
            continue

        if isinstance(d, Line):
            if mode == "flat":
                if d.flat:
                    stack.append(_Frame(ind, mode, Text(d.flat)))
            else:
                out.append("\n")
                pending_indent = ind
                col = ind
            continue

        if isinstance(d, Nest):
            if d.mode == NestMode.ALWAYS:
                stack.append(_Frame(ind + d.delta, "break", d.doc))
            else:
                stack.append(_Frame(ind + d.delta, mode, d.doc))
            continue

        if isinstance(d, ForceBreak):
            stack.append(_Frame(ind, "break", d.doc))
            continue

        if isinstance(d, Group):
            if mode == "flat" or fits(d.doc, width - col):
                stack.append(_Frame(ind, "flat", d.doc))
            else:
                stack.append(_Frame(ind, "break", d.doc))
            continue

        raise TypeError(f"Not a document: {d!r}")

    return "".join(out)
