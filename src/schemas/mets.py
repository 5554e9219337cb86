"""Root METS document schema."""

from .common import MetsElement
from .file_sec import FileSec
from .header import MetsHdr
from .md_sec import AmdSec, MdSec
from .struct_link import StructLink
from .struct_map import StructMap


class Mets(MetsElement):
    """A METS document.

    A written document always contains at least one structMap; one is
    added to ``struct_maps`` when the list is empty at write time.

    Attributes:
        objid: ``@OBJID``
        label: ``@LABEL``
        type: ``@TYPE``
        profile: ``@PROFILE``
        mets_hdr: The ``metsHdr`` section
        dmd_secs: ``dmdSec`` sections
        amd_secs: ``amdSec`` sections
        file_sec: The ``fileSec`` section
        struct_maps: ``structMap`` sections
        struct_link: The ``structLink`` section
        behavior_secs: ``behaviorSec`` elements, kept as serialized XML
            and passed through untouched
    """

    objid: str | None = None
    label: str | None = None
    type: str | None = None
    profile: str | None = None
    mets_hdr: MetsHdr | None = None
    dmd_secs: list[MdSec] = []
    amd_secs: list[AmdSec] = []
    file_sec: FileSec | None = None
    struct_maps: list[StructMap] = []
    struct_link: StructLink | None = None
    behavior_secs: list[str] = []
