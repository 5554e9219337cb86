"""Unmarshal engine: lxml element tree to METS entity tree.

Children are matched by local name, so documents using any prefix (or
the default namespace) for METS are accepted. XLink attributes are
matched by namespace URI.

Every entity is assembled as a keyword dict and constructed only once
all of its attributes and children have decoded, so a decoding error
never leaves a half-built entity behind. Children the model has no place
for are dropped and logged at DEBUG level.
"""

import logging
from enum import Enum

from lxml import etree

from schemas.common import MetsElement
from schemas.enums import (
    Actuate,
    AgentRole,
    AgentType,
    AreaBeType,
    ChecksumType,
    ExtType,
    FileBeType,
    LocType,
    MdType,
    Shape,
    Show,
    TransformType,
    XlinkType,
)
from schemas.file_sec import FContent, File, FileGrp, FileSec, FLocat, Stream, TransformFile
from schemas.header import Agent, MetsHdr, RecordID
from schemas.md_sec import AmdSec, MdRef, MdSec, MdWrap
from schemas.mets import Mets
from schemas.struct_link import SmLink, StructLink
from schemas.struct_map import Area, Div, Fptr, Mptr, Par, Seq, StructMap

from .codecs import TimestampCodec, decode_enum, decode_int, parse_idrefs
from .exceptions import MalformedInputError, MissingRequiredFieldError
from .xmltree import child_elements, local_name, serialize_fragment, xlink_attr

logger = logging.getLogger(__name__)


class Unmarshaller:
    """Convert a METS element tree into a :class:`~schemas.mets.Mets` tree.

    Args:
        timestamp_codec: Codec used for every date-time attribute
    """

    def __init__(self, timestamp_codec: TimestampCodec | None = None):
        self.timestamp_codec = timestamp_codec or TimestampCodec()

    def unmarshal(self, root: etree._Element) -> Mets:
        """Build a Mets entity from a parsed ``mets`` root element.

        Args:
            root: Root element of a parsed METS document

        Returns:
            Populated Mets entity

        Raises:
            MalformedInputError: If the root element is not ``mets``
            InvalidValueError: If an attribute value cannot be decoded
            MissingRequiredFieldError: If an agent lacks its role or name
        """
        if local_name(root) != "mets":
            raise MalformedInputError(f"Root element is <{local_name(root)}>, expected <mets>")
        return self._unmarshal_mets(root)

    # ------------------------------------------------------------------
    # attribute helpers
    # ------------------------------------------------------------------

    def _int(self, element: etree._Element, name: str) -> int | None:
        value = element.get(name)
        return None if value is None else decode_int(value, name)

    def _enum(self, element: etree._Element, name: str, enum_cls: type[Enum]):
        value = element.get(name)
        return None if value is None else decode_enum(enum_cls, value, name)

    def _timestamp(self, element: etree._Element, name: str):
        value = element.get(name)
        return None if value is None else self.timestamp_codec.decode(value, name)

    def _idrefs(self, element: etree._Element, name: str) -> list[str]:
        value = element.get(name)
        return [] if value is None else parse_idrefs(value)

    def _drop(self, parent: etree._Element, child: etree._Element) -> None:
        logger.debug(f"Dropping unsupported <{local_name(child)}> in <{local_name(parent)}>")

    def _xml_data(self, element: etree._Element) -> list[str]:
        return [serialize_fragment(fragment) for fragment in child_elements(element)]

    def _locator_kwargs(self, element: etree._Element) -> dict:
        return {
            "id": element.get("ID"),
            "loctype": self._enum(element, "LOCTYPE", LocType),
            "other_loctype": element.get("OTHERLOCTYPE"),
            "xlink_type": self._enum(element, xlink_attr("type"), XlinkType),
            "href": element.get(xlink_attr("href")),
            "role": element.get(xlink_attr("role")),
            "arcrole": element.get(xlink_attr("arcrole")),
            "title": element.get(xlink_attr("title")),
            "show": self._enum(element, xlink_attr("show"), Show),
            "actuate": self._enum(element, xlink_attr("actuate"), Actuate),
        }

    # ------------------------------------------------------------------
    # mets
    # ------------------------------------------------------------------

    def _unmarshal_mets(self, element: etree._Element) -> Mets:
        kwargs = {
            "id": element.get("ID"),
            "objid": element.get("OBJID"),
            "label": element.get("LABEL"),
            "type": element.get("TYPE"),
            "profile": element.get("PROFILE"),
            "dmd_secs": [],
            "amd_secs": [],
            "struct_maps": [],
            "behavior_secs": [],
        }

        for child in child_elements(element):
            name = local_name(child)
            if name == "metsHdr":
                kwargs["mets_hdr"] = self._unmarshal_mets_hdr(child)
            elif name == "dmdSec":
                kwargs["dmd_secs"].append(self._unmarshal_md_sec(child))
            elif name == "amdSec":
                kwargs["amd_secs"].append(self._unmarshal_amd_sec(child))
            elif name == "fileSec":
                kwargs["file_sec"] = self._unmarshal_file_sec(child)
            elif name == "structMap":
                kwargs["struct_maps"].append(self._unmarshal_struct_map(child))
            elif name == "structLink":
                kwargs["struct_link"] = self._unmarshal_struct_link(child)
            elif name == "behaviorSec":
                kwargs["behavior_secs"].append(serialize_fragment(child))
            else:
                self._drop(element, child)

        return Mets(**kwargs)

    # ------------------------------------------------------------------
    # metsHdr
    # ------------------------------------------------------------------

    def _unmarshal_mets_hdr(self, element: etree._Element) -> MetsHdr:
        kwargs = {
            "id": element.get("ID"),
            "admid": self._idrefs(element, "ADMID"),
            "create_date": self._timestamp(element, "CREATEDATE"),
            "last_mod_date": self._timestamp(element, "LASTMODDATE"),
            "record_status": element.get("RECORDSTATUS"),
            "agents": [],
            "alt_record_ids": [],
        }

        for child in child_elements(element):
            name = local_name(child)
            if name == "agent":
                kwargs["agents"].append(self._unmarshal_agent(child))
            elif name == "altRecordID":
                kwargs["alt_record_ids"].append(self._unmarshal_record_id(child))
            elif name == "metsDocumentID":
                kwargs["mets_document_id"] = self._unmarshal_record_id(child)
            else:
                self._drop(element, child)

        return MetsHdr(**kwargs)

    def _unmarshal_agent(self, element: etree._Element) -> Agent:
        role = self._enum(element, "ROLE", AgentRole)
        if role is None:
            raise MissingRequiredFieldError("agent", "ROLE")

        kwargs = {
            "id": element.get("ID"),
            "role": role,
            "other_role": element.get("OTHERROLE"),
            "type": self._enum(element, "TYPE", AgentType),
            "other_type": element.get("OTHERTYPE"),
            "notes": [],
        }

        for child in child_elements(element):
            name = local_name(child)
            if name == "name":
                kwargs["name"] = child.text or ""
            elif name == "note":
                kwargs["notes"].append(child.text or "")
            else:
                self._drop(element, child)

        if "name" not in kwargs:
            raise MissingRequiredFieldError("agent", "name")
        return Agent(**kwargs)

    def _unmarshal_record_id(self, element: etree._Element) -> RecordID:
        return RecordID(
            id=element.get("ID"),
            type=element.get("TYPE"),
            identifier=element.text or "",
        )

    # ------------------------------------------------------------------
    # dmdSec / amdSec
    # ------------------------------------------------------------------

    def _unmarshal_md_sec(self, element: etree._Element) -> MdSec:
        kwargs = {
            "id": element.get("ID"),
            "group_id": element.get("GROUPID"),
            "admid": self._idrefs(element, "ADMID"),
            "created": self._timestamp(element, "CREATED"),
            "status": element.get("STATUS"),
        }

        for child in child_elements(element):
            name = local_name(child)
            if name == "mdRef":
                kwargs["md_ref"] = self._unmarshal_md_ref(child)
            elif name == "mdWrap":
                kwargs["md_wrap"] = self._unmarshal_md_wrap(child)
            else:
                self._drop(element, child)

        return MdSec(**kwargs)

    def _unmarshal_md_ref(self, element: etree._Element) -> MdRef:
        kwargs = self._locator_kwargs(element)
        kwargs.update(
            label=element.get("LABEL"),
            xptr=element.get("XPTR"),
            mdtype=self._enum(element, "MDTYPE", MdType),
            other_mdtype=element.get("OTHERMDTYPE"),
            mdtype_version=element.get("MDTYPEVERSION"),
            mimetype=element.get("MIMETYPE"),
            size=self._int(element, "SIZE"),
            created=self._timestamp(element, "CREATED"),
            checksum=element.get("CHECKSUM"),
            checksum_type=self._enum(element, "CHECKSUMTYPE", ChecksumType),
        )
        return MdRef(**kwargs)

    def _unmarshal_md_wrap(self, element: etree._Element) -> MdWrap:
        kwargs = {
            "id": element.get("ID"),
            "label": element.get("LABEL"),
            "mdtype": self._enum(element, "MDTYPE", MdType),
            "other_mdtype": element.get("OTHERMDTYPE"),
            "mdtype_version": element.get("MDTYPEVERSION"),
            "mimetype": element.get("MIMETYPE"),
            "size": self._int(element, "SIZE"),
            "created": self._timestamp(element, "CREATED"),
            "checksum": element.get("CHECKSUM"),
            "checksum_type": self._enum(element, "CHECKSUMTYPE", ChecksumType),
            "xml_data": [],
        }

        for child in child_elements(element):
            if local_name(child) == "xmlData":
                kwargs["xml_data"].extend(self._xml_data(child))
            else:
                self._drop(element, child)

        return MdWrap(**kwargs)

    def _unmarshal_amd_sec(self, element: etree._Element) -> AmdSec:
        sections = {
            "techMD": "tech_md",
            "rightsMD": "rights_md",
            "sourceMD": "source_md",
            "digiprovMD": "digiprov_md",
        }
        kwargs = {"id": element.get("ID")}
        for field in sections.values():
            kwargs[field] = []

        for child in child_elements(element):
            field = sections.get(local_name(child))
            if field is None:
                self._drop(element, child)
            else:
                kwargs[field].append(self._unmarshal_md_sec(child))

        return AmdSec(**kwargs)

    # ------------------------------------------------------------------
    # fileSec
    # ------------------------------------------------------------------

    def _unmarshal_file_sec(self, element: etree._Element) -> FileSec:
        file_grps = []
        for child in child_elements(element):
            if local_name(child) == "fileGrp":
                file_grps.append(self._unmarshal_file_grp(child))
            else:
                self._drop(element, child)

        return FileSec(id=element.get("ID"), file_grps=file_grps)

    def _unmarshal_file_grp(self, element: etree._Element) -> FileGrp:
        kwargs = {
            "id": element.get("ID"),
            "versdate": self._timestamp(element, "VERSDATE"),
            "use": element.get("USE"),
            "file_grps": [],
            "files": [],
        }

        for child in child_elements(element):
            name = local_name(child)
            if name == "fileGrp":
                kwargs["file_grps"].append(self._unmarshal_file_grp(child))
            elif name == "file":
                kwargs["files"].append(self._unmarshal_file(child))
            else:
                self._drop(element, child)

        return FileGrp(**kwargs)

    def _unmarshal_file(self, element: etree._Element) -> File:
        kwargs = {
            "id": element.get("ID"),
            "seq": self._int(element, "SEQ"),
            "owner_id": element.get("OWNERID"),
            "admid": self._idrefs(element, "ADMID"),
            "dmdid": self._idrefs(element, "DMDID"),
            "group_id": element.get("GROUPID"),
            "use": element.get("USE"),
            "begin": element.get("BEGIN"),
            "end": element.get("END"),
            "betype": self._enum(element, "BETYPE", FileBeType),
            "mimetype": element.get("MIMETYPE"),
            "size": self._int(element, "SIZE"),
            "created": self._timestamp(element, "CREATED"),
            "checksum": element.get("CHECKSUM"),
            "checksum_type": self._enum(element, "CHECKSUMTYPE", ChecksumType),
            "flocats": [],
            "streams": [],
            "transform_files": [],
            "files": [],
        }

        for child in child_elements(element):
            name = local_name(child)
            if name == "FLocat":
                kwargs["flocats"].append(self._unmarshal_flocat(child))
            elif name == "FContent":
                kwargs["fcontent"] = self._unmarshal_fcontent(child)
            elif name == "stream":
                kwargs["streams"].append(self._unmarshal_stream(child))
            elif name == "transformFile":
                kwargs["transform_files"].append(self._unmarshal_transform_file(child))
            elif name == "file":
                kwargs["files"].append(self._unmarshal_file(child))
            else:
                self._drop(element, child)

        return File(**kwargs)

    def _unmarshal_flocat(self, element: etree._Element) -> FLocat:
        kwargs = self._locator_kwargs(element)
        kwargs["use"] = element.get("USE")
        return FLocat(**kwargs)

    def _unmarshal_fcontent(self, element: etree._Element) -> FContent:
        xml_data = []
        for child in child_elements(element):
            if local_name(child) == "xmlData":
                xml_data.extend(self._xml_data(child))
            else:
                self._drop(element, child)

        return FContent(id=element.get("ID"), use=element.get("USE"), xml_data=xml_data)

    def _unmarshal_stream(self, element: etree._Element) -> Stream:
        return Stream(
            id=element.get("ID"),
            stream_type=element.get("streamType"),
            owner_id=element.get("OWNERID"),
            admid=self._idrefs(element, "ADMID"),
            dmdid=self._idrefs(element, "DMDID"),
            begin=element.get("BEGIN"),
            end=element.get("END"),
            betype=self._enum(element, "BETYPE", FileBeType),
        )

    def _unmarshal_transform_file(self, element: etree._Element) -> TransformFile:
        return TransformFile(
            id=element.get("ID"),
            transform_type=self._enum(element, "TRANSFORMTYPE", TransformType),
            transform_algorithm=element.get("TRANSFORMALGORITHM"),
            transform_key=element.get("TRANSFORMKEY"),
            transform_behavior=element.get("TRANSFORMBEHAVIOR"),
            transform_order=self._int(element, "TRANSFORMORDER"),
        )

    # ------------------------------------------------------------------
    # structMap
    # ------------------------------------------------------------------

    def _unmarshal_struct_map(self, element: etree._Element) -> StructMap:
        kwargs = {
            "id": element.get("ID"),
            "type": element.get("TYPE"),
            "label": element.get("LABEL"),
        }

        for child in child_elements(element):
            if local_name(child) == "div" and "div" not in kwargs:
                kwargs["div"] = self._unmarshal_div(child)
            else:
                self._drop(element, child)

        return StructMap(**kwargs)

    def _unmarshal_member(
        self, element: etree._Element, allowed: tuple[str, ...]
    ) -> MetsElement | None:
        """Decode a union member, or return None if its tag is not in *allowed*."""
        name = local_name(element)
        if name not in allowed:
            return None

        unmarshal = {
            "div": self._unmarshal_div,
            "mptr": self._unmarshal_mptr,
            "fptr": self._unmarshal_fptr,
            "par": self._unmarshal_par,
            "seq": self._unmarshal_seq,
            "area": self._unmarshal_area,
        }[name]
        return unmarshal(element)

    def _unmarshal_members(self, element: etree._Element, allowed: tuple[str, ...]) -> list:
        members = []
        for child in child_elements(element):
            member = self._unmarshal_member(child, allowed)
            if member is None:
                self._drop(element, child)
            else:
                members.append(member)
        return members

    def _unmarshal_div(self, element: etree._Element) -> Div:
        return Div(
            id=element.get("ID"),
            order=self._int(element, "ORDER"),
            order_label=element.get("ORDERLABEL"),
            label=element.get("LABEL"),
            type=element.get("TYPE"),
            dmdid=self._idrefs(element, "DMDID"),
            admid=self._idrefs(element, "ADMID"),
            content_ids=self._idrefs(element, "CONTENTIDS"),
            xlink_label=element.get(xlink_attr("label")),
            children=self._unmarshal_members(element, ("div", "mptr", "fptr")),
        )

    def _unmarshal_mptr(self, element: etree._Element) -> Mptr:
        kwargs = self._locator_kwargs(element)
        kwargs["content_ids"] = self._idrefs(element, "CONTENTIDS")
        return Mptr(**kwargs)

    def _unmarshal_fptr(self, element: etree._Element) -> Fptr:
        kwargs = {
            "id": element.get("ID"),
            "file_id": element.get("FILEID"),
            "content_ids": self._idrefs(element, "CONTENTIDS"),
        }

        for child in child_elements(element):
            if "content" in kwargs:
                self._drop(element, child)
                continue
            content = self._unmarshal_member(child, ("par", "seq", "area"))
            if content is None:
                self._drop(element, child)
            else:
                kwargs["content"] = content

        return Fptr(**kwargs)

    def _unmarshal_par(self, element: etree._Element) -> Par:
        return Par(
            id=element.get("ID"),
            members=self._unmarshal_members(element, ("area", "seq")),
        )

    def _unmarshal_seq(self, element: etree._Element) -> Seq:
        return Seq(
            id=element.get("ID"),
            members=self._unmarshal_members(element, ("area", "par")),
        )

    def _unmarshal_area(self, element: etree._Element) -> Area:
        return Area(
            id=element.get("ID"),
            file_id=element.get("FILEID"),
            shape=self._enum(element, "SHAPE", Shape),
            coords=element.get("COORDS"),
            begin=element.get("BEGIN"),
            end=element.get("END"),
            betype=self._enum(element, "BETYPE", AreaBeType),
            extent=element.get("EXTENT"),
            ext_type=self._enum(element, "EXTTYPE", ExtType),
            admid=self._idrefs(element, "ADMID"),
            content_ids=self._idrefs(element, "CONTENTIDS"),
        )

    # ------------------------------------------------------------------
    # structLink
    # ------------------------------------------------------------------

    def _unmarshal_struct_link(self, element: etree._Element) -> StructLink:
        links = []
        for child in child_elements(element):
            if local_name(child) == "smLink":
                links.append(self._unmarshal_sm_link(child))
            else:
                self._drop(element, child)

        return StructLink(id=element.get("ID"), links=links)

    def _unmarshal_sm_link(self, element: etree._Element) -> SmLink:
        return SmLink(
            id=element.get("ID"),
            arcrole=element.get(xlink_attr("arcrole")),
            title=element.get(xlink_attr("title")),
            show=self._enum(element, xlink_attr("show"), Show),
            actuate=self._enum(element, xlink_attr("actuate"), Actuate),
            link_from=element.get(xlink_attr("from")),
            link_to=element.get(xlink_attr("to")),
        )
