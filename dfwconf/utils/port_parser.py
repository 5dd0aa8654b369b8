"""
Parser for the compact port notation ``<HOST_PORT>[:<CONTAINER_PORT>][/<FAMILY>]``.
"""
import logging
import re
from typing import Optional

from dfwconf.schemas.ports import DEFAULT_PROTOCOL, ExposePort

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")
_MAX_PORT = 65535


class PortFormatError(ValueError):
    """Raised when a port string does not follow the port notation."""

    def __init__(self, value: str, reason: Optional[str] = None):
        self.value = value
        self.reason = reason
        message = f"port string has invalid format '{value}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UninitializedFieldError(ValueError):
    """Raised by :meth:`ExposePortBuilder.build` when a required field was never set."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"`{field_name}` must be initialized")


class ExposePortBuilder:
    """Accumulates the fields of an :class:`ExposePort`.

    Fields can be set in any order; :meth:`build` fills in the defaults.
    """

    def __init__(self):
        self.host_port: Optional[int] = None
        self.container_port: Optional[int] = None
        self.family: Optional[str] = None

    def ports(self, value: str) -> "ExposePortBuilder":
        """
        Set host and container port from ``<HOST_PORT>[:<CONTAINER_PORT>]``.

        Raises:
            PortFormatError: wrong number of ``:`` separated tokens, or a
                token that is not an unsigned 16-bit integer
        """
        tokens = value.split(":")
        if len(tokens) not in (1, 2):
            raise PortFormatError(value)

        try:
            self.host_port = parse_port_number(tokens[0])
            if len(tokens) == 2:
                self.container_port = parse_port_number(tokens[1])
        except ValueError as e:
            raise PortFormatError(value, str(e)) from e
        return self

    def build(self) -> ExposePort:
        if self.host_port is None:
            raise UninitializedFieldError("host_port")
        return ExposePort(
            host_port=self.host_port,
            container_port=self.container_port,
            family=self.family if self.family is not None else DEFAULT_PROTOCOL,
        )


def parse_port_number(token: str) -> int:
    """Parse an unsigned 16-bit integer, rejecting signs, blanks and separators."""
    if not token:
        raise ValueError("cannot parse integer from empty string")
    if not _DIGITS.fullmatch(token):
        raise ValueError(f"invalid digit found in '{token}'")
    number = int(token)
    if number > _MAX_PORT:
        raise ValueError(f"number too large to fit in target type: {token}")
    return number


def parse_port(value: str) -> ExposePort:
    """
    Convert a port string into an :class:`ExposePort`.

    The string is split on its last ``/``: the right side is the family, the
    left side holds the host port and optional container port. Without a
    ``/`` the family defaults to ``tcp``. A missing container port stays
    absent, it is not copied from the host port.

    Examples:
        ``"80"``          -> host_port=80, container_port=None, family="tcp"
        ``"53/udp"``      -> host_port=53, container_port=None, family="udp"
        ``"80:8080/tcp"`` -> host_port=80, container_port=8080, family="tcp"

    Raises:
        PortFormatError: the string does not follow the notation
    """
    body, separator, family = value.rpartition("/")
    if not separator:
        body, family = value, None
    elif not family:
        raise PortFormatError(value, "missing family after '/'")

    builder = ExposePortBuilder()
    try:
        builder.ports(body)
    except PortFormatError as e:
        # Report the complete input, not just the port part.
        raise PortFormatError(value, e.reason) from e
    builder.family = family

    port = builder.build()
    logger.debug(f"Parsed port string '{value}' as {port!r}")
    return port
