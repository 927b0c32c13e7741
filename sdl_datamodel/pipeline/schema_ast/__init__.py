"""
Schema AST module.

Wraps the graphql-core SDL parser and provides modifier and
directive helpers over its nodes.
"""

from __future__ import annotations

from .directives import (
    RESERVED_DIRECTIVES,
    DirectiveKeys,
    directive_argument,
    directive_arguments,
    directives_of,
    extra_directives,
    find_directive,
    has_directive,
    literal_value,
)
from .modifiers import TypeModifier, resolve_type, resolve_type_modifier, resolve_type_name
from .parser import SchemaParser

__all__ = [
    "DirectiveKeys",
    "RESERVED_DIRECTIVES",
    "directives_of",
    "find_directive",
    "has_directive",
    "directive_argument",
    "directive_arguments",
    "extra_directives",
    "literal_value",
    "TypeModifier",
    "resolve_type",
    "resolve_type_name",
    "resolve_type_modifier",
    "SchemaParser",
]
