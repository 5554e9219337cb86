"""Read and write METS documents as bytes or files."""

import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path
from typing import Any

from schemas.mets import Mets

from .codecs import TimestampCodec
from .marshal import Marshaller
from .unmarshal import Unmarshaller
from .xmltree import make_parser, parse_xml, serialize_xml

logger = logging.getLogger(__name__)

READER_CONFIG_KEYS = frozenset({"remove_blank_text", "huge_tree"})
WRITER_CONFIG_KEYS = frozenset({"pretty_print", "xml_declaration", "encoding"})


def _check_config(config: dict[str, Any], allowed: frozenset[str]) -> None:
    unknown = sorted(set(config) - allowed)
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")


class MetsReader:
    """Parse METS XML into a :class:`~schemas.mets.Mets` entity.

    Config keys:
        remove_blank_text: Drop whitespace-only text between elements (default: True)
        huge_tree: Lift libxml2's size limits for very large documents (default: False)

    Args:
        config: Optional reader configuration
        timestamp_codec: Codec for date-time attributes

    Raises:
        ValueError: If *config* contains unknown keys
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        timestamp_codec: TimestampCodec | None = None,
    ):
        config = config or {}
        _check_config(config, READER_CONFIG_KEYS)

        self._config = config
        self.unmarshaller = Unmarshaller(timestamp_codec)

    @property
    def remove_blank_text(self) -> bool:
        return bool(self._config.get("remove_blank_text", True))

    @property
    def huge_tree(self) -> bool:
        return bool(self._config.get("huge_tree", False))

    def read(self, data: bytes) -> Mets:
        """Parse METS XML bytes.

        Args:
            data: Serialized METS document

        Returns:
            The decoded Mets entity

        Raises:
            MalformedInputError: If *data* is not well-formed or not METS
            InvalidValueError: If an attribute value cannot be decoded
            MissingRequiredFieldError: If an agent lacks its role or name
        """
        parser = make_parser(self.remove_blank_text, self.huge_tree)
        root = parse_xml(data, parser)
        return self.unmarshaller.unmarshal(root)

    def read_file(self, path: Path | str) -> Mets:
        path = Path(path)
        logger.info(f"Reading METS from {path}")
        return self.read(path.read_bytes())


class MetsWriter:
    """Serialize a :class:`~schemas.mets.Mets` entity to METS XML.

    Writing stamps the header's modification date and fills in mandatory
    sections that are missing; see :class:`~metskit.marshal.Marshaller`.

    Config keys:
        pretty_print: Indent the output (default: True)
        xml_declaration: Emit an XML declaration (default: True)
        encoding: Output encoding (default: "UTF-8")

    Args:
        config: Optional writer configuration
        timestamp_codec: Codec for date-time attributes
        clock: Zero-argument callable returning the current time

    Raises:
        ValueError: If *config* contains unknown keys
    """

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        timestamp_codec: TimestampCodec | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        config = config or {}
        _check_config(config, WRITER_CONFIG_KEYS)

        self._config = config
        self.marshaller = Marshaller(timestamp_codec, clock)

    @property
    def pretty_print(self) -> bool:
        return bool(self._config.get("pretty_print", True))

    @property
    def xml_declaration(self) -> bool:
        return bool(self._config.get("xml_declaration", True))

    @property
    def encoding(self) -> str:
        return str(self._config.get("encoding", "UTF-8"))

    def write(self, mets: Mets) -> bytes:
        """Serialize *mets* to bytes in the configured encoding."""
        root = self.marshaller.marshal(mets)
        return serialize_xml(
            root,
            pretty_print=self.pretty_print,
            xml_declaration=self.xml_declaration,
            encoding=self.encoding,
        )

    def write_file(self, mets: Mets, path: Path | str) -> Path:
        """Serialize *mets* to *path*, creating parent directories.

        Returns:
            Path to the written file
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(self.write(mets))
        logger.info(f"Wrote METS to {path}")
        return path


def read(data: bytes) -> Mets:
    """Parse METS XML bytes with a default :class:`MetsReader`."""
    return MetsReader().read(data)


def write(mets: Mets) -> bytes:
    """Serialize *mets* with a default :class:`MetsWriter`."""
    return MetsWriter().write(mets)
