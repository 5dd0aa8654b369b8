"""
Service for decoding firewall configuration documents.
"""
import logging
import tomllib
from collections.abc import Mapping
from typing import Any, Iterable

from pydantic import ValidationError

from dfwconf.core.errors import TOML_SYNTAX_ERROR, ConfigLoadError
from dfwconf.schemas.dfw import DFW

logger = logging.getLogger(__name__)


class ConfigService:
    """Turns a configuration document into a validated, immutable :class:`DFW`.

    Decoding is all-or-nothing: any error aborts the load and no partial
    configuration is returned.
    """

    def load(self, document: Mapping) -> DFW:
        """
        Decode an already parsed document (nested mappings, lists and scalars).

        Args:
            document: Top-level mapping of section names to sections

        Returns:
            Validated configuration

        Raises:
            ConfigLoadError: the document does not match the schema
        """
        try:
            config = DFW.model_validate(document)
        except ValidationError as e:
            error = ConfigLoadError.from_validation_error(e)
            logger.error(f"Failed to load configuration ({len(error.errors)} errors)")
            logger.debug(str(error))
            raise error from e

        counts = config.rule_counts()
        logger.info(
            f"Loaded configuration: {sum(counts.values())} rules "
            f"({', '.join(f'{name}={count}' for name, count in counts.items()) or 'none'})"
        )
        return config

    def loads(self, text: str) -> DFW:
        """
        Parse TOML text and decode it.

        Raises:
            ConfigLoadError: the text is not valid TOML or does not match the schema
        """
        return self.load(self._parse_toml(text))

    def loads_fragments(self, texts: Iterable[str]) -> DFW:
        """
        Decode several TOML fragments as one document.

        This is the ``conf.d`` layout: each fragment usually holds one
        section. Fragments are joined in the given order, so a section
        defined in two fragments is a TOML error.
        """
        return self.loads("\n".join(texts))

    @staticmethod
    def _parse_toml(text: str) -> Any:
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Configuration is not valid TOML: {e}")
            raise ConfigLoadError(
                f"invalid TOML: {e}",
                [{"type": TOML_SYNTAX_ERROR, "loc": (), "msg": str(e)}],
            ) from e


def load_config(document: Mapping) -> DFW:
    """Decode an already parsed configuration document."""
    return ConfigService().load(document)


def loads_config(text: str) -> DFW:
    """Decode configuration TOML text."""
    return ConfigService().loads(text)
