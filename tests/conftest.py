"""
Pytest configuration and fixtures.
"""
import logging

import pytest

from dfwconf.services.config_service import ConfigService


SAMPLE_CONFIG = """
[defaults]
external_network_interfaces = "eni"

[initialization]
rules = ["add table inet custom"]

[container_to_container]
default_policy = "drop"

[[container_to_container.rules]]
network = "network"
src_container = "src_container"
dst_container = "dst_container"
matches = "FILTER"
verdict = "accept"

[container_to_wider_world]
default_policy = "accept"

[[container_to_wider_world.rules]]
network = "network"
src_container = "src_container"
matches = "FILTER"
verdict = "accept"
external_network_interface = "eni"

[container_to_host]
default_policy = "accept"

[[container_to_host.rules]]
network = "network"
src_container = "src_container"
matches = "FILTER"
verdict = "accept"

[wider_world_to_container]

[[wider_world_to_container.rules]]
network = "network"
dst_container = "dst_container"
expose_port = 80
external_network_interface = "eni"

[[wider_world_to_container.rules]]
network = "network"
dst_container = "dst_container"
expose_port = 22
external_network_interface = "eni"
source_cidr_v4 = ["192.0.2.1/32", "192.0.2.2/32"]
source_cidr_v6 = ["2001:db8::1/128", "2001:db8::2/128"]

[container_dnat]

[[container_dnat.rules]]
src_network = "src_network"
src_container = "src_container"
dst_network = "dst_network"
dst_container = "dst_container"
expose_port = 80
"""


@pytest.fixture(scope="function")
def service():
    """Provide a fresh config service."""
    return ConfigService()


@pytest.fixture(scope="function")
def sample_config_text():
    """TOML document using every section."""
    return SAMPLE_CONFIG


@pytest.fixture(scope="function")
def restore_root_logger():
    """Remove handlers added to the root logger during a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
