"""SDL Datamodel Parser

A Python package for turning SDL datamodel definitions into a
normalized object model with resolved relations, ready for
database-schema tooling.
"""

__version__ = "0.1.0"

from .pipeline import (
    ClassificationPolicy,
    ConfigError,
    DatamodelError,
    DatamodelParser,
    FieldDescriptor,
    FieldRef,
    Model,
    ParserConfig,
    RelationMismatchError,
    ScalarRef,
    StructuralError,
    TypeDescriptor,
    TypeRef,
    build_policy,
    directive_policy,
    legacy_policy,
    parse_datamodel,
)

__all__ = [
    "DatamodelParser",
    "parse_datamodel",
    "ParserConfig",
    "ClassificationPolicy",
    "build_policy",
    "directive_policy",
    "legacy_policy",
    "Model",
    "TypeDescriptor",
    "FieldDescriptor",
    "ScalarRef",
    "TypeRef",
    "FieldRef",
    "DatamodelError",
    "StructuralError",
    "RelationMismatchError",
    "ConfigError",
]
