"""
Errors raised while building a datamodel.

Only malformed type wrappers and inconsistent named relations are fatal.
Everything else degrades to an incomplete model.
"""

from __future__ import annotations


class DatamodelError(Exception):
    """Base class for all errors raised by the datamodel parser."""

    pass


class StructuralError(DatamodelError):
    """Raised when a type modifier chain does not end in a named type.

    This can happen when:
    - A list or non-null wrapper has no inner type
    - The innermost node is not a named type
    """

    pass


class RelationMismatchError(DatamodelError):
    """Raised when the two sides of a named relation point to inconsistent types."""

    def __init__(self, relation_name: str):
        self.relation_name = relation_name
        super().__init__(f"Relation type mismatch for relation {relation_name}")


class ConfigError(DatamodelError, ValueError):
    """Raised when the parser configuration cannot be used."""

    pass
