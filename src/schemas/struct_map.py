"""Structural map schemas (``mets:structMap``).

Div children, and the members of par and seq, are heterogeneous ordered
lists. They are modelled as tagged unions on ``kind`` so a single list
keeps the relative order of the different element kinds.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

from .common import Locator, MetsElement
from .enums import AreaBeType, ExtType, Shape


class Area(MetsElement):
    """A region of a file (spatial, temporal or byte range)."""

    kind: Literal["area"] = "area"
    file_id: str | None = None
    shape: Shape | None = None
    coords: str | None = None
    begin: str | None = None
    end: str | None = None
    betype: AreaBeType | None = None
    extent: str | None = None
    ext_type: ExtType | None = None
    admid: list[str] = []
    content_ids: list[str] = []


class Par(MetsElement):
    """Files or parts of files to be played in parallel.

    Attributes:
        members: ``area`` and ``seq`` children in document order
    """

    kind: Literal["par"] = "par"
    members: list[Annotated[Area | Seq, Field(discriminator="kind")]] = []


class Seq(MetsElement):
    """Files or parts of files to be played in sequence.

    Attributes:
        members: ``area`` and ``par`` children in document order
    """

    kind: Literal["seq"] = "seq"
    members: list[Annotated[Area | Par, Field(discriminator="kind")]] = []


class Fptr(MetsElement):
    """Pointer from a div to content in this document's fileSec.

    Either ``file_id`` points at a whole file, or ``content`` holds a
    single par, seq or area.
    """

    kind: Literal["fptr"] = "fptr"
    file_id: str | None = None
    content_ids: list[str] = []
    content: Annotated[Par | Seq | Area, Field(discriminator="kind")] | None = None


class Mptr(Locator):
    """Pointer from a div to another METS document."""

    kind: Literal["mptr"] = "mptr"
    content_ids: list[str] = []


class Div(MetsElement):
    """A node of the structural map.

    Attributes:
        order: ``@ORDER``
        order_label: ``@ORDERLABEL``
        label: ``@LABEL``
        type: ``@TYPE``
        dmdid: IDREFs to descriptive metadata
        admid: IDREFs to administrative metadata
        content_ids: ``@CONTENTIDS``
        xlink_label: ``@xlink:label``, the target of smLink arcs
        children: ``div``, ``mptr`` and ``fptr`` children in document order
    """

    kind: Literal["div"] = "div"
    order: int | None = None
    order_label: str | None = None
    label: str | None = None
    type: str | None = None
    dmdid: list[str] = []
    admid: list[str] = []
    content_ids: list[str] = []
    xlink_label: str | None = None
    children: list[Annotated[Div | Mptr | Fptr, Field(discriminator="kind")]] = []


class StructMap(MetsElement):
    """A structural map with its single root div."""

    label: str | None = None
    type: str | None = None
    div: Div | None = None


Par.model_rebuild()
Seq.model_rebuild()
Fptr.model_rebuild()
Div.model_rebuild()
