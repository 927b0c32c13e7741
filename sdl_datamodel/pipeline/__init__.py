"""
Pipeline - SDL datamodel parser.

This module turns an SDL document into a normalized datamodel
in three phases:

1. Phase 1 (Parser): Parse SDL text into a graphql-core document
2. Phase 2 (Builder): Build type descriptors from object and enum definitions
3. Phase 3 (Resolver): Link type references and pair relation fields
"""

from __future__ import annotations

from .analyzer import FieldDescriptor, FieldRef, Model, ScalarRef, TypeDescriptor, TypeRef
from .config import ParserConfig
from .datamodel_parser import DatamodelParser, parse_datamodel
from .errors import ConfigError, DatamodelError, RelationMismatchError, StructuralError
from .policy import ClassificationPolicy, build_policy, directive_policy, legacy_policy

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
