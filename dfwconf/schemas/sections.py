"""
Schemas for the sections of a firewall configuration and their rules.

Every section and every rule list is optional. Records reject unknown keys.
"""
from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import Field, field_validator

from dfwconf.models.nftables import ChainPolicy, RuleVerdict
from dfwconf.schemas.base import StrictModel
from dfwconf.schemas.ports import ExposePort
from dfwconf.schemas.tables import Table
from dfwconf.utils.normalizers import (
    single_or_seq_string_or_struct,
    string_or_seq_string,
    struct_or_seq_struct,
)

VERDICT_ALIASES = {"action": "verdict"}


class Defaults(StrictModel):
    """Defaults used while building the rules.

    Example::

        [defaults]
        custom_tables = { name = "filter", chains = ["input", "forward"] }
        external_network_interfaces = ["eth0", "eth1"]
    """
    custom_tables: Optional[Tuple[Table, ...]] = Field(
        None, description="Externally managed tables, a single table or a list of tables"
    )
    external_network_interfaces: Optional[Tuple[str, ...]] = Field(
        None, description="External interfaces of the host, a string or a list of strings"
    )
    default_docker_bridge_to_host_policy: ChainPolicy = Field(
        ChainPolicy.ACCEPT,
        description="Whether the default Docker bridge may access host resources",
    )

    @field_validator("custom_tables", mode="before")
    @classmethod
    def expand_custom_tables(cls, v: Any) -> Any:
        if v is None:
            return None
        return struct_or_seq_struct(v)

    @field_validator("external_network_interfaces", mode="before")
    @classmethod
    def expand_external_network_interfaces(cls, v: Any) -> Any:
        if v is None:
            return None
        return string_or_seq_string(v)


class Initialization(StrictModel):
    """Raw nftables commands executed before the generated rules."""
    rules: Optional[Tuple[str, ...]] = None


class ContainerToContainerRule(StrictModel):
    """Rule for traffic between containers sharing a network."""
    field_aliases: ClassVar[Dict[str, str]] = VERDICT_ALIASES

    network: str = Field(..., description="Common network of source and destination container")
    src_container: Optional[str] = None
    dst_container: Optional[str] = None
    matches: Optional[str] = Field(None, description="Additional nftables match expression")
    verdict: RuleVerdict


class ContainerToContainer(StrictModel):
    """How containers may communicate amongst each other.

    Traffic between containers on the same bridge is only filtered when the
    host has ``net.bridge.bridge-nf-call-iptables`` enabled; otherwise the
    default policy only applies to traffic crossing two bridges.
    """
    default_policy: ChainPolicy
    rules: Optional[Tuple[ContainerToContainerRule, ...]] = None


class ContainerToWiderWorldRule(StrictModel):
    field_aliases: ClassVar[Dict[str, str]] = VERDICT_ALIASES

    network: Optional[str] = None
    src_container: Optional[str] = None
    matches: Optional[str] = None
    verdict: RuleVerdict
    external_network_interface: Optional[str] = Field(
        None, description="Interface to target, defaults to the first external interface"
    )


class ContainerToWiderWorld(StrictModel):
    """How containers may communicate with the wider world."""
    default_policy: RuleVerdict
    rules: Optional[Tuple[ContainerToWiderWorldRule, ...]] = None


class ContainerToHostRule(StrictModel):
    field_aliases: ClassVar[Dict[str, str]] = VERDICT_ALIASES

    network: str
    src_container: Optional[str] = None
    matches: Optional[str] = None
    verdict: RuleVerdict


class ContainerToHost(StrictModel):
    """How containers may communicate with the host."""
    default_policy: RuleVerdict
    rules: Optional[Tuple[ContainerToHostRule, ...]] = None


class WiderWorldToContainerRule(StrictModel):
    """Expose container ports to the wider world.

    ``expose_port`` accepts an integer, a port string, a map or a list of
    those; ``source_cidr_v4`` (alias ``source_cidr``) and ``source_cidr_v6``
    accept a string or a list of strings. CIDRs are not validated.
    """
    field_aliases: ClassVar[Dict[str, str]] = {"source_cidr": "source_cidr_v4"}

    network: str
    dst_container: str
    expose_port: Tuple[ExposePort, ...]
    external_network_interface: Optional[str] = None
    source_cidr_v4: Optional[Tuple[str, ...]] = None
    source_cidr_v6: Optional[Tuple[str, ...]] = None

    @field_validator("expose_port", mode="before")
    @classmethod
    def expand_expose_port(cls, v: Any) -> Any:
        return single_or_seq_string_or_struct(v)

    @field_validator("source_cidr_v4", "source_cidr_v6", mode="before")
    @classmethod
    def expand_source_cidrs(cls, v: Any) -> Any:
        if v is None:
            return None
        return string_or_seq_string(v)


class WiderWorldToContainer(StrictModel):
    rules: Optional[Tuple[WiderWorldToContainerRule, ...]] = None


class ContainerDNATRule(StrictModel):
    """Forward ports of one container to a container on another network."""
    src_network: Optional[str] = None
    src_container: Optional[str] = None
    dst_network: str
    dst_container: str
    expose_port: Tuple[ExposePort, ...]

    @field_validator("expose_port", mode="before")
    @classmethod
    def expand_expose_port(cls, v: Any) -> Any:
        return single_or_seq_string_or_struct(v)


class ContainerDNAT(StrictModel):
    """Destination NAT between containers that share no network."""
    rules: Optional[Tuple[ContainerDNATRule, ...]] = None
