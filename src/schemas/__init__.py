"""Schema definitions for METS documents."""

from .common import Locator, MetsElement, Timestamp
from .enums import (
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
from .file_sec import FContent, File, FileGrp, FileSec, FLocat, Stream, TransformFile
from .header import Agent, MetsHdr, RecordID
from .md_sec import AmdSec, MdRef, MdSec, MdWrap
from .mets import Mets
from .struct_link import SmLink, StructLink
from .struct_map import Area, Div, Fptr, Mptr, Par, Seq, StructMap

__all__ = [
    "Actuate",
    "Agent",
    "AgentRole",
    "AgentType",
    "AmdSec",
    "Area",
    "AreaBeType",
    "ChecksumType",
    "Div",
    "ExtType",
    "FContent",
    "File",
    "FileBeType",
    "FileGrp",
    "FileSec",
    "FLocat",
    "Fptr",
    "Locator",
    "LocType",
    "MdRef",
    "MdSec",
    "MdType",
    "MdWrap",
    "Mets",
    "MetsElement",
    "MetsHdr",
    "Mptr",
    "Par",
    "RecordID",
    "Seq",
    "Shape",
    "Show",
    "SmLink",
    "StructLink",
    "StructMap",
    "Timestamp",
    "TransformFile",
    "TransformType",
    "XlinkType",
]
