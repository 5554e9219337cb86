"""Metadata section schemas (``dmdSec`` and the ``amdSec`` subsections).

A metadata section either points at metadata held outside the document
(``mdRef``) or wraps it inline (``mdWrap``). The schema expects exactly one
of the two; the model does not enforce it (see
:func:`metskit.validation.validate`).
"""

from .common import Locator, MetsElement, Timestamp
from .enums import ChecksumType, MdType


class MdRef(Locator):
    """Pointer to metadata external to the METS document."""

    label: str | None = None
    xptr: str | None = None
    mdtype: MdType | None = None
    other_mdtype: str | None = None
    mdtype_version: str | None = None
    mimetype: str | None = None
    size: int | None = None
    created: Timestamp | None = None
    checksum: str | None = None
    checksum_type: ChecksumType | None = None


class MdWrap(MetsElement):
    """Metadata embedded in the METS document.

    Attributes:
        xml_data: Serialized XML fragments carried inside ``xmlData``.
            They are stored and re-emitted verbatim; the payload format
            is never interpreted.
    """

    label: str | None = None
    mdtype: MdType | None = None
    other_mdtype: str | None = None
    mdtype_version: str | None = None
    mimetype: str | None = None
    size: int | None = None
    created: Timestamp | None = None
    checksum: str | None = None
    checksum_type: ChecksumType | None = None
    xml_data: list[str] = []


class MdSec(MetsElement):
    """A descriptive or administrative metadata section.

    The same schema backs ``dmdSec``, ``techMD``, ``rightsMD``,
    ``sourceMD`` and ``digiprovMD``; the element name is chosen by the
    containing section.
    """

    group_id: str | None = None
    admid: list[str] = []
    created: Timestamp | None = None
    status: str | None = None
    md_ref: MdRef | None = None
    md_wrap: MdWrap | None = None


class AmdSec(MetsElement):
    """Administrative metadata, split into four ordered subsections."""

    tech_md: list[MdSec] = []
    rights_md: list[MdSec] = []
    source_md: list[MdSec] = []
    digiprov_md: list[MdSec] = []
