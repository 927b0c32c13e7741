"""
Directive lookup on SDL declaration nodes.

Directives are the annotations attached to types and fields
(e.g. ``@unique``, ``@relation(name: "PostAuthor")``).
"""

from __future__ import annotations

from typing import Any

from graphql.language import (
    BooleanValueNode,
    DirectiveNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    Node,
    NullValueNode,
    StringValueNode,
    ValueNode,
    print_ast,
)

LITERAL_VALUE_NODES = (StringValueNode, IntValueNode, FloatValueNode, BooleanValueNode, EnumValueNode)


class DirectiveKeys:
    """Directive names understood by the datamodel parser."""

    DEFAULT = "default"
    IS_EMBEDDED = "embedded"
    DB = "db"
    IS_CREATED_AT = "createdAt"
    IS_UPDATED_AT = "updatedAt"
    IS_UNIQUE = "unique"
    IS_ID = "id"
    RELATION = "relation"


# Directives consumed into descriptor flags, hidden from the extra directive list
RESERVED_DIRECTIVES = frozenset(
    {
        DirectiveKeys.DEFAULT,
        DirectiveKeys.IS_EMBEDDED,
        DirectiveKeys.DB,
        DirectiveKeys.IS_CREATED_AT,
        DirectiveKeys.IS_UPDATED_AT,
        DirectiveKeys.IS_UNIQUE,
        DirectiveKeys.IS_ID,
    }
)


def directives_of(node: Node) -> list[DirectiveNode]:
    """Return the directives attached to a node, in source order."""
    return list(getattr(node, "directives", None) or ())


def find_directive(node: Node, name: str) -> DirectiveNode | None:
    """
    Find a directive by name.

    Args:
        node: A type or field definition node
        name: Directive name, without the leading ``@``

    Returns:
        The first directive with that name, or None
    """
    for directive in directives_of(node):
        if directive.name.value == name:
            return directive
    return None


def has_directive(node: Node, name: str) -> bool:
    """Check whether a directive with the given name is attached to a node."""
    return find_directive(node, name) is not None


def literal_value(value_node: ValueNode | None) -> Any:
    """
    Convert a value node to its literal representation.

    Strings, enum values and numbers are returned as written in the
    source, booleans as bool and null as None. Lists and objects are
    returned as their printed SDL text.
    """
    if value_node is None or isinstance(value_node, NullValueNode):
        return None
    if isinstance(value_node, LITERAL_VALUE_NODES):
        return value_node.value
    return print_ast(value_node)


def directive_argument(directive: DirectiveNode | None, arg_name: str) -> Any:
    """
    Get the literal value of a directive argument.

    Args:
        directive: The directive node (None is accepted)
        arg_name: The argument name

    Returns:
        The literal value, or None if the directive or argument is missing
    """
    if directive is None:
        return None
    for argument in directive.arguments or ():
        if argument.name.value == arg_name:
            return literal_value(argument.value)
    return None


def directive_arguments(directive: DirectiveNode) -> dict[str, Any]:
    """Return all arguments of a directive as a name -> literal value mapping."""
    return {argument.name.value: literal_value(argument.value) for argument in directive.arguments or ()}


def extra_directives(node: Node, reserved: frozenset[str] = RESERVED_DIRECTIVES) -> list[DirectiveNode]:
    """Return the directives of a node whose names are not reserved."""
    return [directive for directive in directives_of(node) if directive.name.value not in reserved]
