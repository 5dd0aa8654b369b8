"""
Error types raised while loading a firewall configuration.
"""
from typing import Any, Dict, List, Optional

# Error types reported in ``ConfigLoadError.errors``. ``missing`` and
# ``extra_forbidden`` are produced by pydantic itself.
SHAPE_ERROR = "shape_error"
PORT_FORMAT_ERROR = "port_format"
ALIAS_CONFLICT_ERROR = "alias_conflict"
MISSING_ERROR = "missing"
UNKNOWN_KEY_ERROR = "extra_forbidden"
TOML_SYNTAX_ERROR = "toml_syntax"


class ConfigLoadError(ValueError):
    """Raised when a configuration document cannot be decoded.

    ``errors`` holds one dict per problem with the keys ``type``, ``loc`` and
    ``msg``, in the order pydantic reported them.
    """

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []

    @property
    def error_types(self) -> List[str]:
        return [error["type"] for error in self.errors]

    @classmethod
    def from_validation_error(cls, exc) -> "ConfigLoadError":
        """Build from a ``pydantic.ValidationError``."""
        errors = [
            {"type": error["type"], "loc": tuple(error["loc"]), "msg": error["msg"]}
            for error in exc.errors()
        ]
        lines = [
            f"{format_loc(error['loc'])}: {error['msg']}" for error in errors
        ]
        noun = "error" if len(errors) == 1 else "errors"
        message = f"{len(errors)} configuration {noun}:\n" + "\n".join(lines)
        return cls(message, errors)


def format_loc(loc) -> str:
    """Render a pydantic location tuple as a dotted path, e.g. ``a.rules[0].b``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path or "<root>"
