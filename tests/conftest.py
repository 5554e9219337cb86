"""Pytest fixtures for metskit tests."""

from datetime import datetime, timezone

import pytest

FIXED_NOW = datetime(2024, 3, 1, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def sample_mets_xml() -> bytes:
    """A METS document exercising every supported section.

    Structure::

        mets (OBJID, LABEL, TYPE, PROFILE)
          metsHdr (agent, altRecordID, metsDocumentID)
          dmdSec dmd1 (mdWrap with a MODS record)
          amdSec amd1 (techMD mdRef, digiprovMD mdWrap)
          fileSec
            fileGrp MASTER
              fileGrp IMAGES
                file f1 (FLocat, two streams, transformFile)
              file f2 (FContent)
          structMap PHYSICAL
            div book: mptr, div page1, fptr f1, div page2
          structLink (one smLink)
          behaviorSec
    """
    return b"""<?xml version="1.0" encoding="UTF-8"?>
<mets:mets xmlns:mets="http://www.loc.gov/METS/"
           xmlns:xlink="http://www.w3.org/1999/xlink"
           xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
           xsi:schemaLocation="http://www.loc.gov/METS/ http://www.loc.gov/standards/mets/mets.xsd"
           ID="doc" OBJID="obj-001" LABEL="Sample book" TYPE="book" PROFILE="http://example.org/profile">
  <mets:metsHdr ID="hdr" CREATEDATE="2020-05-06T07:08:09Z" LASTMODDATE="2021-01-02T03:04:05.5+02:00"
                RECORDSTATUS="draft" ADMID="amd1">
    <mets:agent ID="agent1" ROLE="CREATOR" TYPE="ORGANIZATION">
      <mets:name>Example Library</mets:name>
      <mets:note>Digitised in house</mets:note>
      <mets:note>Second note</mets:note>
    </mets:agent>
    <mets:agent ROLE="OTHER" OTHERROLE="REVIEWER" TYPE="OTHER" OTHERTYPE="SOFTWARE">
      <mets:name>checker</mets:name>
    </mets:agent>
    <mets:altRecordID TYPE="local">alt-42</mets:altRecordID>
    <mets:metsDocumentID TYPE="urn">urn:example:doc</mets:metsDocumentID>
  </mets:metsHdr>
  <mets:dmdSec ID="dmd1" STATUS="final" CREATED="2020-05-06T07:08:09">
    <mets:mdWrap MDTYPE="MODS" LABEL="Descriptive record" MIMETYPE="text/xml">
      <mets:xmlData>
        <mods:mods xmlns:mods="http://www.loc.gov/mods/v3">
          <mods:titleInfo>
            <mods:title>Sample book</mods:title>
          </mods:titleInfo>
        </mods:mods>
      </mets:xmlData>
    </mets:mdWrap>
  </mets:dmdSec>
  <mets:amdSec ID="amd1">
    <mets:techMD ID="tech1" ADMID="prov1">
      <mets:mdRef LOCTYPE="URL" xlink:type="simple" xlink:href="http://example.org/tech.xml"
                  xlink:show="new" xlink:actuate="onRequest" MDTYPE="NISOIMG" SIZE="1024"
                  CHECKSUM="abc123" CHECKSUMTYPE="SHA-256" XPTR="#xpointer(/a)"/>
    </mets:techMD>
    <mets:digiprovMD ID="prov1">
      <mets:mdWrap MDTYPE="PREMIS:EVENT">
        <mets:xmlData>
          <event xmlns="http://www.loc.gov/premis/v3"><eventType>capture</eventType></event>
        </mets:xmlData>
      </mets:mdWrap>
    </mets:digiprovMD>
  </mets:amdSec>
  <mets:fileSec ID="fs">
    <mets:fileGrp ID="grp-master" USE="MASTER" VERSDATE="2020-05-06T07:08:09Z">
      <mets:fileGrp ID="grp-images" USE="IMAGES">
        <mets:file ID="f1" SEQ="1" MIMETYPE="image/tiff" SIZE="2048" ADMID="tech1 prov1"
                   CHECKSUM="d41d8cd98f00b204e9800998ecf8427e" CHECKSUMTYPE="MD5"
                   CREATED="2020-05-06T07:08:09Z" BETYPE="BYTE" BEGIN="0" END="2047">
          <mets:FLocat LOCTYPE="OTHER" OTHERLOCTYPE="SYSTEM" xlink:href="images/0001.tif" USE="master"/>
          <mets:stream ID="s1" streamType="video/mpeg" BEGIN="0" END="99" BETYPE="BYTE"/>
          <mets:stream ID="s2" streamType="audio/mpeg" OWNERID="own-2" DMDID="dmd1"/>
          <mets:transformFile TRANSFORMTYPE="decompression" TRANSFORMALGORITHM="zip" TRANSFORMORDER="1"/>
        </mets:file>
      </mets:fileGrp>
      <mets:file ID="f2" MIMETYPE="text/plain">
        <mets:FContent USE="inline">
          <mets:xmlData>
            <note xmlns="urn:example:notes">Inline content</note>
          </mets:xmlData>
        </mets:FContent>
      </mets:file>
    </mets:fileGrp>
  </mets:fileSec>
  <mets:structMap ID="sm1" TYPE="PHYSICAL" LABEL="Physical structure">
    <mets:div ID="book" TYPE="book" LABEL="Sample book" DMDID="dmd1" xlink:label="book-label">
      <mets:mptr LOCTYPE="URL" xlink:href="http://example.org/other-mets.xml" CONTENTIDS="urn:a urn:b"/>
      <mets:div ID="page1" TYPE="page" ORDER="1" ORDERLABEL="i" ADMID="tech1">
        <mets:fptr ID="fp1" FILEID="f1"/>
      </mets:div>
      <mets:fptr ID="fp2">
        <mets:seq ID="seq1">
          <mets:area ID="area1" FILEID="f1" SHAPE="RECT" COORDS="0,0,100,100"/>
          <mets:par ID="par1">
            <mets:area FILEID="f2" BEGIN="0" END="10" BETYPE="BYTE" EXTENT="10" EXTTYPE="BYTE"/>
          </mets:par>
        </mets:seq>
      </mets:fptr>
      <mets:div ID="page2" TYPE="page" ORDER="2"/>
    </mets:div>
  </mets:structMap>
  <mets:structLink ID="sl">
    <mets:smLink xlink:from="book-label" xlink:to="page-label" xlink:arcrole="http://example.org/next"
                 xlink:title="next page" xlink:show="embed" xlink:actuate="onLoad"/>
  </mets:structLink>
  <mets:behaviorSec ID="beh1">
    <mets:behavior ID="b1" BTYPE="display">
      <mets:mechanism LOCTYPE="URL" xlink:href="http://example.org/viewer"/>
    </mets:behavior>
  </mets:behaviorSec>
</mets:mets>
"""


@pytest.fixture
def minimal_mets_xml() -> bytes:
    """Smallest document the reader accepts."""
    return b'<mets xmlns="http://www.loc.gov/METS/"/>'
