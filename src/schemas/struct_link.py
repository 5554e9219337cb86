"""Structural link schemas (``mets:structLink``).

Only ``smLink`` is modelled; ``smLinkGrp`` is not supported and is
dropped when a document is read.
"""

from .common import MetsElement
from .enums import Actuate, Show


class SmLink(MetsElement):
    """A link between two divs, identified by their ``xlink:label``.

    Attributes:
        link_from: ``@xlink:from``
        link_to: ``@xlink:to``
    """

    arcrole: str | None = None
    title: str | None = None
    show: Show | None = None
    actuate: Actuate | None = None
    link_from: str | None = None
    link_to: str | None = None


class StructLink(MetsElement):
    """Links between nodes of the structural maps."""

    links: list[SmLink] = []
