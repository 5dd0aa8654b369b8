"""Schema for a port exposed on the host or between containers."""
from typing import Annotated, Optional

from pydantic import Field, StrictInt

from dfwconf.schemas.base import StrictModel

DEFAULT_PROTOCOL = "tcp"

# Unsigned 16-bit; port 0 is not excluded here.
PortNumber = Annotated[StrictInt, Field(ge=0, le=65535)]


class ExposePort(StrictModel):
    """A port mapping: ``host_port``, optional ``container_port`` and ``family``.

    All of the following describe the same mapping::

        expose_port = { host_port = 8080 }
        expose_port = { host_port = 8080, family = "tcp" }
        expose_port = "8080/tcp"
        expose_port = 8080

    ``container_port`` is kept absent when not given; use
    :attr:`effective_container_port` to get the port the traffic is mapped to.
    """
    host_port: PortNumber = Field(..., description="Port the container port is exposed on, on the host")
    container_port: Optional[PortNumber] = Field(None, description="Port inside the container")
    family: str = Field(DEFAULT_PROTOCOL, min_length=1, description="Transport protocol, e.g. tcp or udp")

    @property
    def effective_container_port(self) -> int:
        if self.container_port is None:
            return self.host_port
        return self.container_port
