"""Tests for the CLI module."""

import logging

from lxml import etree

from metskit.cli import main
from metskit.io import MetsReader
from metskit.xmltree import METS_NS


class TestCLINew:
    """Tests for the new command."""

    def test_new_writes_minimal_document(self, tmp_path):
        """new writes a header and one structMap with the given attributes."""
        output = tmp_path / "new" / "mets.xml"

        result = main([
            "new",
            "--output", str(output),
            "--objid", "obj-7",
            "--label", "A book",
            "--type", "book",
        ])

        assert result == 0
        mets = MetsReader().read_file(output)
        assert mets.objid == "obj-7"
        assert mets.label == "A book"
        assert mets.type == "book"
        assert mets.mets_hdr.create_date is not None
        assert len(mets.struct_maps) == 1

    def test_new_mints_objid(self, tmp_path):
        """new generates an OBJID when none is given."""
        output = tmp_path / "mets.xml"

        result = main(["new", "--output", str(output)])

        assert result == 0
        root = etree.parse(str(output)).getroot()
        assert root.tag == f"{{{METS_NS}}}mets"
        objid = root.get("OBJID")
        assert objid is not None
        assert len(objid) == 8
        assert objid[0].isalpha()


class TestCLINormalize:
    """Tests for the normalize command."""

    def test_normalize_round_trips(self, tmp_path, sample_mets_xml):
        """normalize rewrites a document that reads back the same."""
        input_path = tmp_path / "in.xml"
        input_path.write_bytes(sample_mets_xml)
        output = tmp_path / "out.xml"

        result = main(["normalize", "--input", str(input_path), "--output", str(output)])

        assert result == 0
        original = MetsReader().read(sample_mets_xml)
        normalized = MetsReader().read_file(output)
        assert normalized.struct_maps == original.struct_maps
        assert normalized.file_sec == original.file_sec
        assert normalized.mets_hdr.create_date == original.mets_hdr.create_date

    def test_normalize_missing_input(self, tmp_path, caplog):
        """normalize fails when the input does not exist."""
        result = main([
            "normalize",
            "--input", str(tmp_path / "missing.xml"),
            "--output", str(tmp_path / "out.xml"),
        ])

        assert result == 1
        assert "Input file not found" in caplog.text

    def test_normalize_malformed_input(self, tmp_path, caplog):
        """normalize logs and fails on input that is not METS."""
        input_path = tmp_path / "in.xml"
        input_path.write_bytes(b"<not-closed>")

        result = main([
            "normalize",
            "--input", str(input_path),
            "--output", str(tmp_path / "out.xml"),
        ])

        assert result == 1
        assert "Failed to normalize" in caplog.text
        assert not (tmp_path / "out.xml").exists()


class TestCLIValidate:
    """Tests for the validate command."""

    def test_validate_consistent_document(self, tmp_path, sample_mets_xml, caplog):
        """validate succeeds on a consistent document."""
        input_path = tmp_path / "in.xml"
        input_path.write_bytes(sample_mets_xml)

        with caplog.at_level(logging.INFO):
            result = main(["validate", "--input", str(input_path)])

        assert result == 0
        assert "is valid" in caplog.text

    def test_validate_reports_problems(self, tmp_path, caplog):
        """validate fails and lists problems for a broken document."""
        input_path = tmp_path / "in.xml"
        input_path.write_bytes(
            b'<mets xmlns="http://www.loc.gov/METS/">'
            b'<structMap><div DMDID="missing"><fptr FILEID="nofile"/></div></structMap>'
            b"</mets>"
        )

        result = main(["validate", "--input", str(input_path)])

        assert result == 1
        assert "Found 2 problem(s)" in caplog.text
        assert "Div DMDID 'missing' does not resolve" in caplog.text
        assert "Fptr FILEID 'nofile' does not resolve" in caplog.text

    def test_validate_bad_enumeration(self, tmp_path, caplog):
        """validate fails when the document cannot be read."""
        input_path = tmp_path / "in.xml"
        input_path.write_bytes(
            b'<mets xmlns="http://www.loc.gov/METS/">'
            b'<fileSec><fileGrp><file ID="f" CHECKSUMTYPE="NOT-A-REAL-TYPE"/></fileGrp></fileSec>'
            b"</mets>"
        )

        result = main(["validate", "--input", str(input_path)])

        assert result == 1
        assert "Failed to read" in caplog.text
        assert "NOT-A-REAL-TYPE" in caplog.text


class TestCLIMain:
    """Tests for the main entry point."""

    def test_no_command_prints_help(self, capsys):
        """Running without a command prints help and succeeds."""
        result = main([])

        assert result == 0
        assert "metskit" in capsys.readouterr().out
