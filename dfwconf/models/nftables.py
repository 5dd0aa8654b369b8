"""nftables verdict and policy enums used by the configuration schema."""
import enum


class ChainPolicy(str, enum.Enum):
    """Default policy of an nftables base chain."""
    ACCEPT = "accept"
    DROP = "drop"


class RuleVerdict(str, enum.Enum):
    """Terminal verdict of a rule."""
    ACCEPT = "accept"
    DROP = "drop"
    REJECT = "reject"
