"""Enum types shared by the configuration schema."""
from dfwconf.models.nftables import ChainPolicy, RuleVerdict

__all__ = [
    "ChainPolicy",
    "RuleVerdict",
]
