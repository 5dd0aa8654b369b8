"""Typed schema for declarative container-firewall configuration."""
from dfwconf.core.errors import ConfigLoadError
from dfwconf.schemas.dfw import DFW
from dfwconf.schemas.ports import ExposePort
from dfwconf.services.config_service import ConfigService, load_config, loads_config
from dfwconf.utils.port_parser import PortFormatError, parse_port

__version__ = "0.1.0"

__all__ = [
    "ConfigLoadError",
    "ConfigService",
    "DFW",
    "ExposePort",
    "PortFormatError",
    "load_config",
    "loads_config",
    "parse_port",
]
