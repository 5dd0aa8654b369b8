"""
Structural classification of decoded document nodes.

A TOML (or JSON, YAML, ...) document decodes into a handful of Python shapes;
the normalizers dispatch on :class:`NodeKind` instead of on concrete types.
"""
import enum
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticCustomError

from dfwconf.core.errors import SHAPE_ERROR


class NodeKind(enum.Enum):
    INTEGER = "integer"
    STRING = "string"
    STRUCT = "map"
    SEQUENCE = "sequence"
    OTHER = "other"


def node_kind(value: Any) -> NodeKind:
    """Classify ``value``. Booleans are never integers here."""
    if isinstance(value, bool):
        return NodeKind.OTHER
    if isinstance(value, int):
        return NodeKind.INTEGER
    if isinstance(value, str):
        return NodeKind.STRING
    # Already-validated records count as maps so normalizing twice is a no-op.
    if isinstance(value, (Mapping, BaseModel)):
        return NodeKind.STRUCT
    if isinstance(value, (list, tuple)):
        return NodeKind.SEQUENCE
    return NodeKind.OTHER


def describe(value: Any) -> str:
    """Short description of a node for error messages, e.g. ``boolean `True```."""
    kind = node_kind(value)
    if kind in (NodeKind.INTEGER, NodeKind.STRING):
        return f"{kind.value} `{value}`"
    if kind is not NodeKind.OTHER:
        return kind.value
    if isinstance(value, bool):
        return f"boolean `{value}`"
    if value is None:
        return "null"
    return type(value).__name__


def shape_error(value: Any, expected: str, index=None) -> PydanticCustomError:
    """Build the error for a node that has none of the ``expected`` shapes."""
    if index is None:
        return PydanticCustomError(
            SHAPE_ERROR,
            "invalid type: {found}, expected {expected}",
            {"found": describe(value), "expected": expected},
        )
    return PydanticCustomError(
        SHAPE_ERROR,
        "invalid type at index {index}: {found}, expected {expected}",
        {"found": describe(value), "expected": expected, "index": index},
    )
