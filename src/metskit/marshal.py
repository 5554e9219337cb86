"""Marshal engine: METS entity tree to lxml element tree.

Each ``_marshal_<entity>`` method populates an element that its caller
has already created, so one method can serve several element names (an
``MdSec`` becomes a ``dmdSec``, ``techMD``, ``rightsMD``, ``sourceMD`` or
``digiprovMD`` depending on where it sits).

Marshalling has deliberate side effects on the entity tree:

- the header's LASTMODDATE is set to the current time, and CREATEDATE too
  if it was unset
- an empty ``Mets.struct_maps``, ``FileSec.file_grps`` or
  ``StructMap.div`` receives one empty member before it is written

Both are idempotent, so writing the same document twice adds nothing new
on the second pass.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum

from lxml import etree

from schemas.common import Locator, Timestamp
from schemas.file_sec import FContent, File, FileGrp, FileSec, FLocat, Stream, TransformFile
from schemas.header import Agent, MetsHdr, RecordID
from schemas.md_sec import AmdSec, MdRef, MdSec, MdWrap
from schemas.mets import Mets
from schemas.struct_link import SmLink, StructLink
from schemas.struct_map import Area, Div, Fptr, Mptr, Par, Seq, StructMap

from .codecs import TimestampCodec, encode_enum, join_idrefs
from .xmltree import (
    METS_SCHEMA_LOCATION,
    NSMAP,
    mets_tag,
    parse_fragment,
    xlink_attr,
    xsi_attr,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Marshaller:
    """Convert a :class:`~schemas.mets.Mets` tree into a METS element tree.

    Args:
        timestamp_codec: Codec used for every date-time attribute
        clock: Zero-argument callable returning the current time, used to
            stamp the header
    """

    def __init__(
        self,
        timestamp_codec: TimestampCodec | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.timestamp_codec = timestamp_codec or TimestampCodec()
        self.clock = clock or utc_now

    def marshal(self, mets: Mets) -> etree._Element:
        """Build the ``mets:mets`` root element for *mets*.

        Args:
            mets: Document to marshal; mandatory sections missing from it
                are added in place

        Returns:
            Root lxml element declaring the METS, XLink and XSI namespaces
        """
        root = etree.Element(mets_tag("mets"), nsmap=NSMAP)
        root.set(xsi_attr("schemaLocation"), METS_SCHEMA_LOCATION)
        self._marshal_mets(mets, root)
        return root

    def _set(self, element: etree._Element, name: str, value) -> None:
        """Set attribute *name* unless *value* is unset (None or empty list)."""
        if value is None or (isinstance(value, list) and not value):
            return

        if isinstance(value, Enum):
            text = encode_enum(value)
        elif isinstance(value, Timestamp):
            text = self.timestamp_codec.encode(value)
        elif isinstance(value, list):
            text = join_idrefs(value)
        else:
            text = str(value)
        element.set(name, text)

    def _append_xml_data(self, fragments: list[str], element: etree._Element) -> None:
        if not fragments:
            return
        xml_data = etree.SubElement(element, mets_tag("xmlData"))
        for fragment in fragments:
            xml_data.append(parse_fragment(fragment))

    def _marshal_mets(self, mets: Mets, root: etree._Element) -> None:
        self._set(root, "ID", mets.id)
        self._set(root, "OBJID", mets.objid)
        self._set(root, "LABEL", mets.label)
        self._set(root, "TYPE", mets.type)
        self._set(root, "PROFILE", mets.profile)

        if mets.mets_hdr is not None:
            self._marshal_mets_hdr(mets.mets_hdr, etree.SubElement(root, mets_tag("metsHdr")))

        for dmd_sec in mets.dmd_secs:
            self._marshal_md_sec(dmd_sec, etree.SubElement(root, mets_tag("dmdSec")))

        for amd_sec in mets.amd_secs:
            self._marshal_amd_sec(amd_sec, etree.SubElement(root, mets_tag("amdSec")))

        if mets.file_sec is not None:
            self._marshal_file_sec(mets.file_sec, etree.SubElement(root, mets_tag("fileSec")))

        if not mets.struct_maps:
            logger.debug("Document has no structMap; adding an empty one")
            mets.struct_maps.append(StructMap())
        for struct_map in mets.struct_maps:
            self._marshal_struct_map(struct_map, etree.SubElement(root, mets_tag("structMap")))

        if mets.struct_link is not None:
            self._marshal_struct_link(
                mets.struct_link, etree.SubElement(root, mets_tag("structLink"))
            )

        for fragment in mets.behavior_secs:
            root.append(parse_fragment(fragment))

    # ------------------------------------------------------------------
    # metsHdr
    # ------------------------------------------------------------------

    def _marshal_mets_hdr(self, mets_hdr: MetsHdr, element: etree._Element) -> None:
        now = self.timestamp_codec.stamp(self.clock())
        if mets_hdr.create_date is None:
            mets_hdr.create_date = now
        mets_hdr.last_mod_date = now

        self._set(element, "ID", mets_hdr.id)
        self._set(element, "ADMID", mets_hdr.admid)
        self._set(element, "CREATEDATE", mets_hdr.create_date)
        self._set(element, "LASTMODDATE", mets_hdr.last_mod_date)
        self._set(element, "RECORDSTATUS", mets_hdr.record_status)

        for agent in mets_hdr.agents:
            self._marshal_agent(agent, etree.SubElement(element, mets_tag("agent")))

        for alt_record_id in mets_hdr.alt_record_ids:
            self._marshal_record_id(
                alt_record_id, etree.SubElement(element, mets_tag("altRecordID"))
            )

        if mets_hdr.mets_document_id is not None:
            self._marshal_record_id(
                mets_hdr.mets_document_id,
                etree.SubElement(element, mets_tag("metsDocumentID")),
            )

    def _marshal_agent(self, agent: Agent, element: etree._Element) -> None:
        self._set(element, "ID", agent.id)
        self._set(element, "ROLE", agent.role)
        self._set(element, "OTHERROLE", agent.other_role)
        self._set(element, "TYPE", agent.type)
        self._set(element, "OTHERTYPE", agent.other_type)

        name = etree.SubElement(element, mets_tag("name"))
        name.text = agent.name
        for text in agent.notes:
            note = etree.SubElement(element, mets_tag("note"))
            note.text = text

    def _marshal_record_id(self, record_id: RecordID, element: etree._Element) -> None:
        self._set(element, "ID", record_id.id)
        self._set(element, "TYPE", record_id.type)
        element.text = record_id.identifier

    # ------------------------------------------------------------------
    # dmdSec / amdSec
    # ------------------------------------------------------------------

    def _marshal_md_sec(self, md_sec: MdSec, element: etree._Element) -> None:
        self._set(element, "ID", md_sec.id)
        self._set(element, "GROUPID", md_sec.group_id)
        self._set(element, "ADMID", md_sec.admid)
        self._set(element, "CREATED", md_sec.created)
        self._set(element, "STATUS", md_sec.status)

        if md_sec.md_ref is not None:
            self._marshal_md_ref(md_sec.md_ref, etree.SubElement(element, mets_tag("mdRef")))
        if md_sec.md_wrap is not None:
            self._marshal_md_wrap(md_sec.md_wrap, etree.SubElement(element, mets_tag("mdWrap")))

    def _marshal_locator(self, locator: Locator, element: etree._Element) -> None:
        self._set(element, "ID", locator.id)
        self._set(element, "LOCTYPE", locator.loctype)
        self._set(element, "OTHERLOCTYPE", locator.other_loctype)
        self._set(element, xlink_attr("type"), locator.xlink_type)
        self._set(element, xlink_attr("href"), locator.href)
        self._set(element, xlink_attr("role"), locator.role)
        self._set(element, xlink_attr("arcrole"), locator.arcrole)
        self._set(element, xlink_attr("title"), locator.title)
        self._set(element, xlink_attr("show"), locator.show)
        self._set(element, xlink_attr("actuate"), locator.actuate)

    def _marshal_md_ref(self, md_ref: MdRef, element: etree._Element) -> None:
        self._marshal_locator(md_ref, element)
        self._set(element, "LABEL", md_ref.label)
        self._set(element, "XPTR", md_ref.xptr)
        self._set(element, "MDTYPE", md_ref.mdtype)
        self._set(element, "OTHERMDTYPE", md_ref.other_mdtype)
        self._set(element, "MDTYPEVERSION", md_ref.mdtype_version)
        self._set(element, "MIMETYPE", md_ref.mimetype)
        self._set(element, "SIZE", md_ref.size)
        self._set(element, "CREATED", md_ref.created)
        self._set(element, "CHECKSUM", md_ref.checksum)
        self._set(element, "CHECKSUMTYPE", md_ref.checksum_type)

    def _marshal_md_wrap(self, md_wrap: MdWrap, element: etree._Element) -> None:
        self._set(element, "ID", md_wrap.id)
        self._set(element, "LABEL", md_wrap.label)
        self._set(element, "MDTYPE", md_wrap.mdtype)
        self._set(element, "OTHERMDTYPE", md_wrap.other_mdtype)
        self._set(element, "MDTYPEVERSION", md_wrap.mdtype_version)
        self._set(element, "MIMETYPE", md_wrap.mimetype)
        self._set(element, "SIZE", md_wrap.size)
        self._set(element, "CREATED", md_wrap.created)
        self._set(element, "CHECKSUM", md_wrap.checksum)
        self._set(element, "CHECKSUMTYPE", md_wrap.checksum_type)
        self._append_xml_data(md_wrap.xml_data, element)

    def _marshal_amd_sec(self, amd_sec: AmdSec, element: etree._Element) -> None:
        self._set(element, "ID", amd_sec.id)
        sections = (
            ("techMD", amd_sec.tech_md),
            ("rightsMD", amd_sec.rights_md),
            ("sourceMD", amd_sec.source_md),
            ("digiprovMD", amd_sec.digiprov_md),
        )
        for tag, md_secs in sections:
            for md_sec in md_secs:
                self._marshal_md_sec(md_sec, etree.SubElement(element, mets_tag(tag)))

    # ------------------------------------------------------------------
    # fileSec
    # ------------------------------------------------------------------

    def _marshal_file_sec(self, file_sec: FileSec, element: etree._Element) -> None:
        self._set(element, "ID", file_sec.id)

        if not file_sec.file_grps:
            logger.debug("fileSec has no fileGrp; adding an empty one")
            file_sec.file_grps.append(FileGrp())
        for file_grp in file_sec.file_grps:
            self._marshal_file_grp(file_grp, etree.SubElement(element, mets_tag("fileGrp")))

    def _marshal_file_grp(self, file_grp: FileGrp, element: etree._Element) -> None:
        self._set(element, "ID", file_grp.id)
        self._set(element, "VERSDATE", file_grp.versdate)
        self._set(element, "USE", file_grp.use)

        for sub_grp in file_grp.file_grps:
            self._marshal_file_grp(sub_grp, etree.SubElement(element, mets_tag("fileGrp")))
        for file in file_grp.files:
            self._marshal_file(file, etree.SubElement(element, mets_tag("file")))

    def _marshal_file(self, file: File, element: etree._Element) -> None:
        self._set(element, "ID", file.id)
        self._set(element, "SEQ", file.seq)
        self._set(element, "OWNERID", file.owner_id)
        self._set(element, "ADMID", file.admid)
        self._set(element, "DMDID", file.dmdid)
        self._set(element, "GROUPID", file.group_id)
        self._set(element, "USE", file.use)
        self._set(element, "BEGIN", file.begin)
        self._set(element, "END", file.end)
        self._set(element, "BETYPE", file.betype)
        self._set(element, "MIMETYPE", file.mimetype)
        self._set(element, "SIZE", file.size)
        self._set(element, "CREATED", file.created)
        self._set(element, "CHECKSUM", file.checksum)
        self._set(element, "CHECKSUMTYPE", file.checksum_type)

        for flocat in file.flocats:
            self._marshal_flocat(flocat, etree.SubElement(element, mets_tag("FLocat")))
        if file.fcontent is not None:
            self._marshal_fcontent(file.fcontent, etree.SubElement(element, mets_tag("FContent")))
        for stream in file.streams:
            self._marshal_stream(stream, etree.SubElement(element, mets_tag("stream")))
        for transform_file in file.transform_files:
            self._marshal_transform_file(
                transform_file, etree.SubElement(element, mets_tag("transformFile"))
            )
        for sub_file in file.files:
            self._marshal_file(sub_file, etree.SubElement(element, mets_tag("file")))

    def _marshal_flocat(self, flocat: FLocat, element: etree._Element) -> None:
        self._marshal_locator(flocat, element)
        self._set(element, "USE", flocat.use)

    def _marshal_fcontent(self, fcontent: FContent, element: etree._Element) -> None:
        self._set(element, "ID", fcontent.id)
        self._set(element, "USE", fcontent.use)
        self._append_xml_data(fcontent.xml_data, element)

    def _marshal_stream(self, stream: Stream, element: etree._Element) -> None:
        self._set(element, "ID", stream.id)
        self._set(element, "streamType", stream.stream_type)
        self._set(element, "OWNERID", stream.owner_id)
        self._set(element, "ADMID", stream.admid)
        self._set(element, "DMDID", stream.dmdid)
        self._set(element, "BEGIN", stream.begin)
        self._set(element, "END", stream.end)
        self._set(element, "BETYPE", stream.betype)

    def _marshal_transform_file(
        self, transform_file: TransformFile, element: etree._Element
    ) -> None:
        self._set(element, "ID", transform_file.id)
        self._set(element, "TRANSFORMTYPE", transform_file.transform_type)
        self._set(element, "TRANSFORMALGORITHM", transform_file.transform_algorithm)
        self._set(element, "TRANSFORMKEY", transform_file.transform_key)
        self._set(element, "TRANSFORMBEHAVIOR", transform_file.transform_behavior)
        self._set(element, "TRANSFORMORDER", transform_file.transform_order)

    # ------------------------------------------------------------------
    # structMap
    # ------------------------------------------------------------------

    def _marshal_struct_map(self, struct_map: StructMap, element: etree._Element) -> None:
        self._set(element, "ID", struct_map.id)
        self._set(element, "TYPE", struct_map.type)
        self._set(element, "LABEL", struct_map.label)

        if struct_map.div is None:
            logger.debug("structMap has no div; adding an empty one")
            struct_map.div = Div()
        self._marshal_div(struct_map.div, etree.SubElement(element, mets_tag("div")))

    def _append_member(
        self, member: Div | Mptr | Fptr | Par | Seq | Area, parent: etree._Element
    ) -> None:
        """Append a union member as a child named after its ``kind``."""
        marshal = {
            "div": self._marshal_div,
            "mptr": self._marshal_mptr,
            "fptr": self._marshal_fptr,
            "par": self._marshal_par,
            "seq": self._marshal_seq,
            "area": self._marshal_area,
        }[member.kind]
        marshal(member, etree.SubElement(parent, mets_tag(member.kind)))

    def _marshal_div(self, div: Div, element: etree._Element) -> None:
        self._set(element, "ID", div.id)
        self._set(element, "ORDER", div.order)
        self._set(element, "ORDERLABEL", div.order_label)
        self._set(element, "LABEL", div.label)
        self._set(element, "TYPE", div.type)
        self._set(element, "DMDID", div.dmdid)
        self._set(element, "ADMID", div.admid)
        self._set(element, "CONTENTIDS", div.content_ids)
        self._set(element, xlink_attr("label"), div.xlink_label)

        for child in div.children:
            self._append_member(child, element)

    def _marshal_mptr(self, mptr: Mptr, element: etree._Element) -> None:
        self._marshal_locator(mptr, element)
        self._set(element, "CONTENTIDS", mptr.content_ids)

    def _marshal_fptr(self, fptr: Fptr, element: etree._Element) -> None:
        self._set(element, "ID", fptr.id)
        self._set(element, "FILEID", fptr.file_id)
        self._set(element, "CONTENTIDS", fptr.content_ids)

        if fptr.content is not None:
            self._append_member(fptr.content, element)

    def _marshal_par(self, par: Par, element: etree._Element) -> None:
        self._set(element, "ID", par.id)
        for member in par.members:
            self._append_member(member, element)

    def _marshal_seq(self, seq: Seq, element: etree._Element) -> None:
        self._set(element, "ID", seq.id)
        for member in seq.members:
            self._append_member(member, element)

    def _marshal_area(self, area: Area, element: etree._Element) -> None:
        self._set(element, "ID", area.id)
        self._set(element, "FILEID", area.file_id)
        self._set(element, "SHAPE", area.shape)
        self._set(element, "COORDS", area.coords)
        self._set(element, "BEGIN", area.begin)
        self._set(element, "END", area.end)
        self._set(element, "BETYPE", area.betype)
        self._set(element, "EXTENT", area.extent)
        self._set(element, "EXTTYPE", area.ext_type)
        self._set(element, "ADMID", area.admid)
        self._set(element, "CONTENTIDS", area.content_ids)

    # ------------------------------------------------------------------
    # structLink
    # ------------------------------------------------------------------

    def _marshal_struct_link(self, struct_link: StructLink, element: etree._Element) -> None:
        self._set(element, "ID", struct_link.id)
        for sm_link in struct_link.links:
            self._marshal_sm_link(sm_link, etree.SubElement(element, mets_tag("smLink")))

    def _marshal_sm_link(self, sm_link: SmLink, element: etree._Element) -> None:
        self._set(element, "ID", sm_link.id)
        self._set(element, xlink_attr("arcrole"), sm_link.arcrole)
        self._set(element, xlink_attr("title"), sm_link.title)
        self._set(element, xlink_attr("show"), sm_link.show)
        self._set(element, xlink_attr("actuate"), sm_link.actuate)
        self._set(element, xlink_attr("from"), sm_link.link_from)
        self._set(element, xlink_attr("to"), sm_link.link_to)
