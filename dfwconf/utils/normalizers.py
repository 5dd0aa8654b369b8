"""
Normalizers for fields that accept several encodings of the same value.

Each ``*_or_*`` function takes a raw document node and returns a list in the
shape the field's type expects; they are used as ``mode="before"`` field
validators by the schemas. Records inside the returned lists are left as
mappings so pydantic validates them with a precise error location.

The ``normalize_*`` functions run the same expansion and then fully validate
the result, for use outside of a schema.
"""
from typing import Annotated, Any, Callable, List, Tuple

from pydantic import BeforeValidator, TypeAdapter
from pydantic_core import PydanticCustomError

from dfwconf.core.errors import PORT_FORMAT_ERROR
from dfwconf.schemas.ports import ExposePort
from dfwconf.schemas.tables import Table
from dfwconf.utils.port_parser import PortFormatError, parse_port
from dfwconf.utils.shapes import NodeKind, node_kind, shape_error

STRING_OR_SEQ_STRING = "string or sequence of strings"
STRUCT_OR_SEQ_STRUCT = "map or sequence of maps"
STRING_OR_STRUCT = "integer, string or map"
SINGLE_OR_SEQ_STRING_OR_STRUCT = "integer, string, or map, or a sequence of those"


def string_or_seq_string(value: Any) -> List[str]:
    """``"eth0"`` -> ``["eth0"]``; a sequence of strings is kept as is."""
    kind = node_kind(value)
    if kind is NodeKind.STRING:
        return [value]
    if kind is NodeKind.SEQUENCE:
        for index, element in enumerate(value):
            if node_kind(element) is not NodeKind.STRING:
                raise shape_error(element, "string", index)
        return list(value)
    raise shape_error(value, STRING_OR_SEQ_STRING)


def struct_or_seq_struct(value: Any) -> List[Any]:
    """A single map becomes a one-element list; a sequence of maps is kept."""
    kind = node_kind(value)
    if kind is NodeKind.STRUCT:
        return [value]
    if kind is NodeKind.SEQUENCE:
        return list(value)
    raise shape_error(value, STRUCT_OR_SEQ_STRUCT)


def string_or_struct(value: Any, parser: Callable[[str], Any] = parse_port, index=None) -> Any:
    """
    Decode one port node: integers and strings go through ``parser``, maps are
    returned unchanged for record validation.
    """
    kind = node_kind(value)
    if kind is NodeKind.STRUCT:
        return value
    if kind is NodeKind.INTEGER:
        value = str(value)
    elif kind is not NodeKind.STRING:
        raise shape_error(value, STRING_OR_STRUCT, index)

    try:
        return parser(value)
    except PortFormatError as e:
        raise PydanticCustomError(PORT_FORMAT_ERROR, "{error}", {"error": str(e)}) from e


def single_or_seq_string_or_struct(value: Any, parser: Callable[[str], Any] = parse_port) -> List[Any]:
    """
    Accept an integer, a string, a map or a sequence mixing those.

    ``80``, ``"53/udp"`` and ``{host_port = 443}`` each yield a one-element
    list; ``[80, "53/udp"]`` yields one entry per element, in order. Nested
    sequences are rejected.
    """
    kind = node_kind(value)
    if kind is NodeKind.SEQUENCE:
        return [
            string_or_struct(element, parser, index)
            for index, element in enumerate(value)
        ]
    if kind is NodeKind.OTHER:
        raise shape_error(value, SINGLE_OR_SEQ_STRING_OR_STRUCT)
    return [string_or_struct(value, parser)]


StringList = Annotated[Tuple[str, ...], BeforeValidator(string_or_seq_string)]
TableList = Annotated[Tuple[Table, ...], BeforeValidator(struct_or_seq_struct)]
PortList = Annotated[Tuple[ExposePort, ...], BeforeValidator(single_or_seq_string_or_struct)]

_string_list = TypeAdapter(StringList)
_table_list = TypeAdapter(TableList)
_port_list = TypeAdapter(PortList)


def normalize_strings(value: Any) -> Tuple[str, ...]:
    """Raises ``pydantic.ValidationError`` on failure, like the other ``normalize_*``."""
    return _string_list.validate_python(value)


def normalize_tables(value: Any) -> Tuple[Table, ...]:
    return _table_list.validate_python(value)


def normalize_ports(value: Any) -> Tuple[ExposePort, ...]:
    return _port_list.validate_python(value)
