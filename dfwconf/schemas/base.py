"""Base schema shared by every configuration record."""
from collections.abc import Mapping
from typing import Any, ClassVar, Dict

from pydantic import BaseModel, model_validator
from pydantic_core import PydanticCustomError

from dfwconf.core.errors import ALIAS_CONFLICT_ERROR


class StrictModel(BaseModel):
    """Closed-world, immutable configuration record.

    Unknown keys are rejected instead of being dropped, and instances cannot be
    mutated once validated.

    Subclasses may declare ``field_aliases`` mapping an accepted alternative
    key to its canonical field name. Aliases are resolved before validation;
    giving both the alias and the canonical key is an error.
    """

    field_aliases: ClassVar[Dict[str, str]] = {}

    model_config = {"extra": "forbid", "frozen": True}

    @model_validator(mode="before")
    @classmethod
    def resolve_field_aliases(cls, data: Any) -> Any:
        if not cls.field_aliases or not isinstance(data, Mapping):
            return data

        resolved = dict(data)
        for alias, canonical in cls.field_aliases.items():
            if alias not in resolved:
                continue
            if canonical in resolved:
                raise PydanticCustomError(
                    ALIAS_CONFLICT_ERROR,
                    "'{alias}' is an alias of '{canonical}', only one of them may be set",
                    {"alias": alias, "canonical": canonical},
                )
            resolved[canonical] = resolved.pop(alias)
        return resolved
