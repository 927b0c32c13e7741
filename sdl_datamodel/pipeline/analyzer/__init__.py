"""
Analyzer module.

Contains the datamodel nodes, the model builder and the relation resolver.
"""

from __future__ import annotations

from .model_builder import ModelBuilder
from .model_nodes import (
    DirectiveInfo,
    FieldDescriptor,
    FieldRef,
    Model,
    ScalarRef,
    TypeDescriptor,
    TypeRef,
    TypeReference,
)
from .relation_resolver import RelationResolver

__all__ = [
    "DirectiveInfo",
    "FieldDescriptor",
    "FieldRef",
    "Model",
    "ScalarRef",
    "TypeDescriptor",
    "TypeRef",
    "TypeReference",
    "ModelBuilder",
    "RelationResolver",
]
