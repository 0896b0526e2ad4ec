"""Document algebra for the SDL pretty printer.

A document is an immutable tree of layout primitives. Nothing here knows about
GraphQL; the translator builds documents bottom-up and the layout engine
turns them into text.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Union


class NestMode(str, Enum):
    """How a `Nest` interacts with the enclosing group."""

    BREAK = "break"  # indent only if the surrounding group breaks
    ALWAYS = "always"  # force broken and indent


@dataclass(frozen=True)
class Text:
    s: str


@dataclass(frozen=True)
class Concat:
    parts: tuple[Doc, ...]


@dataclass(frozen=True)
class Line:
    """Soft line break. Renders as `flat` when its group fits, else newline + indent."""

    flat: str = " "


@dataclass(frozen=True)
class Nest:
    delta: int
    mode: NestMode
    doc: Doc


@dataclass(frozen=True)
class Group:
    """Fit-or-break decision point."""

    doc: Doc


@dataclass(frozen=True)
class ForceBreak:
    """Always rendered broken, no fit check."""

    doc: Doc


Doc = Union[Text, Concat, Line, Nest, Group, ForceBreak]

DocLike = Union[Doc, str]


empty = Text("")
line = Line()
softline = Line("")


def text(s: str) -> Text:
    return Text(s)


def to_doc(d: DocLike) -> Doc:
    """Promote bare strings to `Text`."""
    if isinstance(d, str):
        return Text(d)
    if not isinstance(d, (Text, Concat, Line, Nest, Group, ForceBreak)):
        raise TypeError(f"Not a document: {d!r}")
    return d


def concat(docs: Sequence[DocLike]) -> Doc:
    """Concatenate documents left to right, flattening nested concats."""
    parts: list[Doc] = []
    for d in docs:
        d = to_doc(d)
        if isinstance(d, Concat):
            parts.extend(d.parts)
        else:
            parts.append(d)
    return Concat(tuple(parts))


def break_with(flat: str) -> Line:
    """Line break that renders as `flat` when its group stays on one line."""
    return Line(flat)


def glue(a: DocLike, sep: DocLike, b: DocLike) -> Doc:
    return concat([a, sep, b])


def nest(doc: DocLike, delta: int, mode: NestMode = NestMode.BREAK) -> Nest:
    return Nest(delta, NestMode(mode), to_doc(doc))


def group(doc: DocLike) -> Group:
    return Group(to_doc(doc))


def force_break(doc: DocLike) -> ForceBreak:
    return ForceBreak(to_doc(doc))


def fold_doc(docs: Sequence[DocLike], combine: Callable[[Doc, Doc], Doc]) -> Doc:
    """
    Right-fold a sequence of documents into one.

    `combine(doc_i, acc)` is applied from the last element toward the first,
    the last element being the initial accumulator. An empty sequence folds
    to `empty`.

    Args:
        docs: Documents (or strings) to fold
        combine: Binary combinator taking the current element and the accumulator

    Returns:
        Single combined document
    """
    if not docs:
        return empty
    acc = to_doc(docs[-1])
    for d in reversed(docs[:-1]):
        acc = combine(to_doc(d), acc)
    return acc


def join(docs: Sequence[DocLike], separator: DocLike) -> Doc:
    """Interleave `separator` between documents."""
    return fold_doc(docs, lambda d, acc: concat([d, separator, acc]))


def is_empty(doc: Doc) -> bool:
    """True when the document renders to nothing at all."""
    if isinstance(doc, Text):
        return doc.s == ""
    if isinstance(doc, Concat):
        return all(is_empty(p) for p in doc.parts)
    return False
