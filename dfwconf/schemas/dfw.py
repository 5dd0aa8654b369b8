"""Root schema of a firewall configuration document.

Example document::

    [defaults]
    custom_tables = { name = "filter", chains = ["input", "forward"] }
    external_network_interfaces = "eth0"

    [initialization]
    rules = ["add table inet custom"]

    [container_to_container]
    default_policy = "drop"

    [[container_to_container.rules]]
    network = "common_network"
    src_container = "container_a"
    dst_container = "container_b"
    verdict = "accept"

    [wider_world_to_container]

    [[wider_world_to_container.rules]]
    network = "common_network"
    dst_container = "container_a"
    expose_port = [80, 443]

    [container_dnat]

    [[container_dnat.rules]]
    src_network = "common_network"
    src_container = "container_a"
    dst_network = "other_network"
    dst_container = "container_c"
    expose_port = { host_port = 8080, container_port = 80, family = "tcp" }
"""
from typing import Optional

from dfwconf.schemas.base import StrictModel
from dfwconf.schemas.sections import (
    ContainerDNAT,
    ContainerToContainer,
    ContainerToHost,
    ContainerToWiderWorld,
    Defaults,
    Initialization,
    WiderWorldToContainer,
)

SECTION_NAMES = (
    "defaults",
    "initialization",
    "container_to_container",
    "container_to_wider_world",
    "container_to_host",
    "wider_world_to_container",
    "container_dnat",
)


class DFW(StrictModel):
    """Complete configuration. Every section is optional."""
    defaults: Optional[Defaults] = None
    initialization: Optional[Initialization] = None
    container_to_container: Optional[ContainerToContainer] = None
    container_to_wider_world: Optional[ContainerToWiderWorld] = None
    container_to_host: Optional[ContainerToHost] = None
    wider_world_to_container: Optional[WiderWorldToContainer] = None
    container_dnat: Optional[ContainerDNAT] = None

    def rule_counts(self):
        """Number of rules per configured section, sections without rules excluded."""
        counts = {}
        for name in SECTION_NAMES:
            section = getattr(self, name)
            rules = getattr(section, "rules", None)
            if rules:
                counts[name] = len(rules)
        return counts
