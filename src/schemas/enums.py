"""Closed value sets used by METS attributes.

Each member's value is its wire token, exactly as it appears in a METS
document. Several sets include an ``OTHER`` member; it is a valid token
with no behaviour of its own (the free-text companion attribute, such as
``OTHERROLE`` or ``OTHERLOCTYPE``, carries the actual value).
"""

from enum import Enum


class ChecksumType(str, Enum):
    """Values for ``@CHECKSUMTYPE``."""

    ADLER_32 = "Adler-32"
    CRC_32 = "CRC32"
    HAVAL = "HAVAL"
    MD5 = "MD5"
    MNP = "MNP"
    SHA_1 = "SHA-1"
    SHA_256 = "SHA-256"
    SHA_384 = "SHA-384"
    SHA_512 = "SHA-512"
    TIGER = "TIGER"
    WHIRLPOOL = "WHIRLPOOL"


class AgentRole(str, Enum):
    """Values for ``agent/@ROLE``."""

    CREATOR = "CREATOR"
    EDITOR = "EDITOR"
    ARCHIVIST = "ARCHIVIST"
    PRESERVATION = "PRESERVATION"
    DISSEMINATOR = "DISSEMINATOR"
    CUSTODIAN = "CUSTODIAN"
    IPOWNER = "IPOWNER"
    OTHER = "OTHER"


class AgentType(str, Enum):
    """Values for ``agent/@TYPE``."""

    INDIVIDUAL = "INDIVIDUAL"
    ORGANIZATION = "ORGANIZATION"
    OTHER = "OTHER"


class LocType(str, Enum):
    """Values for ``@LOCTYPE``."""

    ARK = "ARK"
    URN = "URN"
    URL = "URL"
    PURL = "PURL"
    HANDLE = "HANDLE"
    DOI = "DOI"
    OTHER = "OTHER"


class MdType(str, Enum):
    """Values for ``@MDTYPE`` on mdRef and mdWrap."""

    MARC = "MARC"
    MODS = "MODS"
    EAD = "EAD"
    DC = "DC"
    NISOIMG = "NISOIMG"
    LC_AV = "LC-AV"
    VRA = "VRA"
    TEIHDR = "TEIHDR"
    DDI = "DDI"
    FGDC = "FGDC"
    LOM = "LOM"
    PREMIS = "PREMIS"
    PREMIS_OBJECT = "PREMIS:OBJECT"
    PREMIS_AGENT = "PREMIS:AGENT"
    PREMIS_RIGHTS = "PREMIS:RIGHTS"
    PREMIS_EVENT = "PREMIS:EVENT"
    TEXTMD = "TEXTMD"
    METSRIGHTS = "METSRIGHTS"
    ISO_19115_2003_NAP = "ISO 19115:2003 NAP"
    OTHER = "OTHER"


class Show(str, Enum):
    """Values for ``@xlink:show``."""

    NEW = "new"
    REPLACE = "replace"
    EMBED = "embed"
    OTHER = "other"
    NONE = "none"


class Actuate(str, Enum):
    """Values for ``@xlink:actuate``."""

    ON_LOAD = "onLoad"
    ON_REQUEST = "onRequest"
    OTHER = "other"
    NONE = "none"


class XlinkType(str, Enum):
    """Values for ``@xlink:type`` on locator elements."""

    SIMPLE = "simple"


class FileBeType(str, Enum):
    """Values for ``@BETYPE`` on file and stream (bytes only)."""

    BYTE = "BYTE"


class TransformType(str, Enum):
    """Values for ``transformFile/@TRANSFORMTYPE``."""

    DECOMPRESSION = "decompression"
    DECRYPTION = "decryption"


class Shape(str, Enum):
    """Values for ``area/@SHAPE``."""

    RECT = "RECT"
    CIRCLE = "CIRCLE"
    POLY = "POLY"


class AreaBeType(str, Enum):
    """Values for ``area/@BETYPE``."""

    BYTE = "BYTE"
    IDREF = "IDREF"
    SMIL = "SMIL"
    MIDI = "MIDI"
    SMPTE_25 = "SMPTE-25"
    SMPTE_24 = "SMPTE-24"
    SMPTE_DF_30 = "SMPTE-DF30"
    SMPTE_NDF_30 = "SMPTE-NDF30"
    SMPTE_DF_29_97 = "SMPTE-DF29.97"
    SMPTE_NDF_29_97 = "SMPTE-NDF29.97"
    TIME = "TIME"
    TCF = "TCF"
    XPTR = "XPTR"


class ExtType(str, Enum):
    """Values for ``area/@EXTTYPE``."""

    BYTE = "BYTE"
    SMIL = "SMIL"
    MIDI = "MIDI"
    SMPTE_25 = "SMPTE-25"
    SMPTE_24 = "SMPTE-24"
    SMPTE_DF_30 = "SMPTE-DF30"
    SMPTE_NDF_30 = "SMPTE-NDF30"
    SMPTE_DF_29_97 = "SMPTE-DF29.97"
    SMPTE_NDF_29_97 = "SMPTE-NDF29.97"
    TIME = "TIME"
    TCF = "TCF"
