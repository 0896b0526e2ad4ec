"""Schema translator: maps introspection nodes to layout documents."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, Optional

from . import doc as d
from .doc import Doc, NestMode
from .errors import UnrecognizedNode
from .nodes import NodeKind, classify

INDENT = 2

Node = Mapping[str, Any]


def render_node(node: Node) -> Doc:
    """
    Translate one introspection node into a document.

    Args:
        node: Introspection node (type, field, argument, directive or type reference)

    Returns:
        Document for the node; `doc.empty` for suppressed nodes

    Raises:
        UnrecognizedNode: If the node matches no known shape
    """
    kind = classify(node)
    if kind is None:
        raise UnrecognizedNode(node)
    return _RENDERERS[kind](node)


def _suppressed(node: Node) -> Doc:
    return d.empty


def _non_null(node: Node) -> Doc:
    return d.concat([render_node(node["ofType"]), "!"])


def _list(node: Node) -> Doc:
    return d.concat(["[", render_node(node["ofType"]), "]"])


def _named_ref(node: Node) -> Doc:
    return d.text(node["name"])


def _argument(node: Node) -> Doc:
    return with_description(
        d.concat([node["name"], ": ", render_node(node["type"]), default_value(node["defaultValue"])]),
        node.get("description"),
    )


def _field(node: Node) -> Doc:
    signature = d.concat([
        node["name"],
        arguments_clause(node.get("args") or []),
        ": ",
        render_node(node["type"]),
    ])
    return with_description(
        deprecated(signature, node.get("isDeprecated"), node.get("deprecationReason")),
        node.get("description"),
    )


def _object(node: Node) -> Doc:
    header = d.concat([node["name"], implements_clause(node.get("interfaces") or [])])
    return with_description(
        block("type", header, [render_node(f) for f in node.get("fields") or []]),
        node.get("description"),
    )


def _input_object(node: Node) -> Doc:
    return with_description(
        block("input", node["name"], [render_node(f) for f in node.get("inputFields") or []]),
        node.get("description"),
    )


def _union(node: Node) -> Doc:
    possible = child_names(node.get("possibleTypes") or [])
    return with_description(
        d.concat(["union ", node["name"], " = ", d.join(possible, " | ")]),
        node.get("description"),
    )


def _interface(node: Node) -> Doc:
    return with_description(
        block("interface", node["name"], [render_node(f) for f in node.get("fields") or []]),
        node.get("description"),
    )


def _enum(node: Node) -> Doc:
    values = [d.text(name) for name in child_names(node.get("enumValues") or [])]
    return with_description(block("enum", node["name"], values), node.get("description"))


def _scalar(node: Node) -> Doc:
    return with_description(d.concat(["scalar ", node["name"]]), node.get("description"))


def _directive(node: Node) -> Doc:
    return with_description(
        d.concat([
            "directive @",
            node["name"],
            arguments_clause(node.get("args") or []),
            " on ",
            d.join(list(node.get("locations") or []), " | "),
        ]),
        node.get("description"),
    )


_RENDERERS: dict[NodeKind, Callable[[Node], Doc]] = {
    NodeKind.INTERNAL: _suppressed,
    NodeKind.NON_NULL: _non_null,
    NodeKind.LIST: _list,
    NodeKind.NAMED_REF: _named_ref,
    NodeKind.BUILTIN_SCALAR: _suppressed,
    NodeKind.BUILTIN_DIRECTIVE: _suppressed,
    NodeKind.ARGUMENT: _argument,
    NodeKind.FIELD: _field,
    NodeKind.OBJECT: _object,
    NodeKind.INPUT_OBJECT: _input_object,
    NodeKind.UNION: _union,
    NodeKind.INTERFACE: _interface,
    NodeKind.ENUM: _enum,
    NodeKind.SCALAR: _scalar,
    NodeKind.DIRECTIVE: _directive,
}


# Helpers


def child_names(children: Sequence[Node]) -> list[str]:
    """Names of referenced members (enum values, possible types, interfaces)."""
    names = []
    for child in children:
        name = child.get("name") if isinstance(child, Mapping) else None
        if not isinstance(name, str):
            raise UnrecognizedNode(child)
        names.append(name)
    return names


def default_value(value: Optional[str]) -> Doc:
    """` = <value>` for a pre-formatted GraphQL literal, nothing for null."""
    if value is None:
        return d.empty
    return d.concat([" = ", value])


def deprecated(doc: Doc, is_deprecated: Any, reason: Optional[str]) -> Doc:
    """Append `@deprecated` markup when the member is deprecated."""
    if is_deprecated is not True:
        return doc
    if reason is None:
        return d.concat([doc, " @deprecated"])
    return d.concat([doc, " @deprecated(reason: ", quoted_reason(reason), ")"])


def quoted_reason(reason: str) -> Doc:
    """
    Quote a deprecation reason.

    Single-line reasons become a plain string literal. Multi-line reasons become
    a block string with one line per original line, always broken.
    """
    lines = reason.strip().split("\n")
    if len(lines) == 1:
        return d.concat(['"', lines[0], '"'])

    body = d.fold_doc(lines, lambda ln, acc: d.glue(ln, d.softline, acc))
    return d.force_break(
        d.glue(
            d.nest(d.glue('"""', d.softline, body), INDENT, NestMode.ALWAYS),
            d.softline,
            '"""',
        )
    )


def with_description(doc: Doc, description: Optional[str]) -> Doc:
    """Prefix a definition with its description string, on its own line."""
    if description is None:
        return doc
    if "\n" in description:
        quoted = d.join(['"""', description, '"""'], d.line)
    else:
        quoted = d.concat(['"', description, '"'])
    return d.join([quoted, doc], d.line)


def implements_clause(interfaces: Sequence[Node]) -> Doc:
    if not interfaces:
        return d.empty
    return d.concat([" implements ", d.join(child_names(interfaces), ", ")])


def arguments_clause(args: Sequence[Node]) -> Doc:
    """
    Parenthesised argument list.

    Inline when it fits, otherwise one argument per indented line. If any
    argument has a description the list is always broken.
    """
    if not args:
        return d.empty

    arg_docs = [render_node(a) for a in args]
    any_descriptions = any(a.get("description") is not None for a in args)

    inner = d.glue("(", d.softline, d.fold_doc(arg_docs, lambda a, acc: d.glue(a, d.break_with(", "), acc)))
    if any_descriptions:
        inner = d.force_break(inner)

    return d.group(d.glue(d.nest(inner, INDENT, NestMode.BREAK), d.softline, ")"))


def block(keyword: str, header: d.DocLike, body: Sequence[Doc]) -> Doc:
    """
    `keyword header { ... }` with each body member on its own indented line.

    Members that render to nothing are dropped; if none remain the braces
    still render, on consecutive lines.
    """
    members = [m for m in body if not d.is_empty(m)]
    opening = d.concat([keyword, " ", header, " {"])

    if not members:
        return d.force_break(d.concat([opening, d.softline, "}"]))

    inner = d.glue(opening, d.softline, d.join(members, d.softline))
    return d.force_break(d.glue(d.nest(inner, INDENT, NestMode.ALWAYS), d.softline, "}"))
