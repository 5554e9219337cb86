"""Tests for MetsReader and MetsWriter."""

import logging

import pytest

from metskit import io
from metskit.codecs import TimestampCodec
from metskit.io import MetsReader, MetsWriter
from schemas import Mets, MetsHdr


class TestMetsReaderConfig:
    """Tests for reader configuration."""

    def test_defaults(self):
        """Reader defaults drop blank text and keep size limits."""
        reader = MetsReader()

        assert reader.remove_blank_text is True
        assert reader.huge_tree is False

    def test_custom_config(self):
        """Config values are exposed as properties."""
        reader = MetsReader({"remove_blank_text": False, "huge_tree": True})

        assert reader.remove_blank_text is False
        assert reader.huge_tree is True

    def test_rejects_unknown_keys(self):
        """Unknown config keys raise ValueError."""
        with pytest.raises(ValueError, match="pretty_print"):
            MetsReader({"pretty_print": True})


class TestMetsWriterConfig:
    """Tests for writer configuration."""

    def test_defaults(self):
        """Writer defaults to pretty UTF-8 with a declaration."""
        writer = MetsWriter()

        assert writer.pretty_print is True
        assert writer.xml_declaration is True
        assert writer.encoding == "UTF-8"

    def test_rejects_unknown_keys(self):
        """Unknown config keys raise ValueError."""
        with pytest.raises(ValueError, match="indent"):
            MetsWriter({"indent": 2})

    def test_declaration_and_pretty_print(self, fixed_clock):
        """The declaration and indentation can be switched off."""
        writer = MetsWriter({"pretty_print": False, "xml_declaration": False}, clock=fixed_clock)

        data = writer.write(Mets())

        assert data.startswith(b"<mets:mets")
        assert b"\n" not in data

    def test_default_output(self, fixed_clock):
        """Default output starts with an XML declaration and is indented."""
        data = MetsWriter(clock=fixed_clock).write(Mets())

        assert data.startswith(b"<?xml version='1.0' encoding='UTF-8'?>")
        assert b"\n  <mets:structMap>" in data

    def test_timestamp_codec_is_used(self, fixed_clock):
        """The injected codec controls how dates are written."""
        writer = MetsWriter(
            {"pretty_print": False},
            timestamp_codec=TimestampCodec(utc_designator=False),
            clock=fixed_clock,
        )

        data = writer.write(Mets(mets_hdr=MetsHdr()))

        assert b'LASTMODDATE="2024-03-01T12:30:00+00:00"' in data


class TestFiles:
    """Tests for file reading and writing."""

    def test_write_and_read_file(self, tmp_path, fixed_clock, caplog):
        """write_file creates parent directories and read_file reads it back."""
        path = tmp_path / "out" / "mets.xml"
        mets = Mets(objid="obj-1")

        with caplog.at_level(logging.INFO, logger="metskit.io"):
            written = MetsWriter(clock=fixed_clock).write_file(mets, path)
            result = MetsReader().read_file(written)

        assert written == path
        assert path.exists()
        assert result.objid == "obj-1"
        assert f"Wrote METS to {path}" in caplog.text
        assert f"Reading METS from {path}" in caplog.text

    def test_read_missing_file(self, tmp_path):
        """Reading a missing file raises the underlying OSError."""
        with pytest.raises(FileNotFoundError):
            MetsReader().read_file(tmp_path / "missing.xml")


class TestModuleFunctions:
    """Tests for the module-level read and write helpers."""

    def test_read_write(self, sample_mets_xml):
        """read and write use default reader and writer instances."""
        mets = io.read(sample_mets_xml)

        data = io.write(mets)

        assert io.read(data).objid == "obj-001"
