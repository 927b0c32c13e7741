"""
Human-readable datamodel summary rendered from a Jinja2 template.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from .pipeline.analyzer.model_nodes import Model

TEMPLATE_DIR = Path(__file__).parent / "templates"

# Field flags shown in the summary, in display order
FIELD_FLAGS = [
    ("is_id", "id"),
    ("is_unique", "unique"),
    ("is_read_only", "readOnly"),
    ("is_created_at", "createdAt"),
    ("is_updated_at", "updatedAt"),
]


def _sdl_type(type_name: str, field: dict) -> str:
    """Render a field type the way it reads in SDL."""
    if field["is_list"]:
        return f"[{type_name}]"
    if field["is_required"]:
        return f"{type_name}!"
    return type_name


def _flags(field: dict) -> list[str]:
    flags = [label for key, label in FIELD_FLAGS if field[key]]
    if field["database_name"]:
        flags.append(f"db: {field['database_name']}")
    flags.extend(f"@{directive['name']}" for directive in field["directives"])
    return flags


def _setup_environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        lstrip_blocks=True,
        trim_blocks=True,
    )
    env.filters["sdl_type"] = _sdl_type
    env.filters["flags"] = _flags
    return env


def render_summary(model: Model) -> str:
    """
    Render a summary of the model's types, fields and relations.

    Args:
        model: The resolved datamodel

    Returns:
        The summary text
    """
    template = _setup_environment().get_template("summary.txt.jinja2")
    return template.render(types=model.to_dict()["types"])
