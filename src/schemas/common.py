"""Base schemas shared by every METS entity."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from .enums import Actuate, LocType, Show, XlinkType


class MetsElement(BaseModel):
    """Base for every METS entity.

    Attributes:
        id: Value of ``@ID``; the target of IDREF attributes elsewhere in
            the document. References are plain strings and are never
            resolved by the model.
    """

    id: str | None = None


class Timestamp(BaseModel):
    """An xs:dateTime attribute value.

    The lexical text is what gets written back, so a value read from a
    document round-trips unchanged (``.500``, ``+00:00`` and digits below
    a microsecond included). ``value`` is the parsed datetime, naive when
    the text carries no offset.

    Attributes:
        text: Lexical form as it appears in the document
        value: Parsed value, truncated to microseconds
    """

    model_config = ConfigDict(frozen=True)

    text: str
    value: datetime

    def __str__(self) -> str:
        return self.text


class Locator(MetsElement):
    """Location attributes shared by FLocat, mdRef and mptr.

    Attributes:
        xlink_type: ``@xlink:type`` (only "simple" is allowed)
        href: ``@xlink:href``
        role: ``@xlink:role``
        arcrole: ``@xlink:arcrole``
        title: ``@xlink:title``
        show: ``@xlink:show``
        actuate: ``@xlink:actuate``
        loctype: ``@LOCTYPE``
        other_loctype: ``@OTHERLOCTYPE``, used with ``LocType.OTHER``
    """

    xlink_type: XlinkType | None = None
    href: str | None = None
    role: str | None = None
    arcrole: str | None = None
    title: str | None = None
    show: Show | None = None
    actuate: Actuate | None = None
    loctype: LocType | None = None
    other_loctype: str | None = None
