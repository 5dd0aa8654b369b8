"""Schema for references to externally managed nftables tables."""
from typing import Tuple

from pydantic import Field

from dfwconf.schemas.base import StrictModel


class Table(StrictModel):
    """Reference to an nftables table and the input/forward chains within it.

    Used when rules in a table managed outside of dfwconf have to be
    coordinated with the generated ruleset.
    """
    name: str = Field(..., description="Name of the custom table")
    chains: Tuple[str, ...] = Field(..., description="Names of the input and forward chains in the table")
