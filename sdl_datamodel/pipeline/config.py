"""
Configuration for the datamodel parser.

Selects the classification policy and the reserved field names
used by the legacy policy.
"""

from __future__ import annotations

from dataclasses import dataclass

POLICY_DIRECTIVE = "directive"
POLICY_LEGACY = "legacy"

POLICY_NAMES = (POLICY_DIRECTIVE, POLICY_LEGACY)


@dataclass
class ParserConfig:
    """Configuration options for datamodel parsing."""

    # Classification policy: "directive" (@id, @createdAt, ...) or "legacy" (reserved names)
    policy: str = POLICY_DIRECTIVE

    # Reserved field names, only consulted by the legacy policy
    id_field_name: str = "id"
    created_at_field_name: str = "createdAt"
    updated_at_field_name: str = "updatedAt"

    @staticmethod
    def from_dict(d: dict) -> ParserConfig:
        """Create a config from a dictionary."""
        config = ParserConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "policy": self.policy,
            "id_field_name": self.id_field_name,
            "created_at_field_name": self.created_at_field_name,
            "updated_at_field_name": self.updated_at_field_name,
        }
