"""File inventory schemas (``mets:fileSec``).

Both file groups and files nest recursively. A written fileSec always
holds at least one fileGrp.
"""

from .common import Locator, MetsElement, Timestamp
from .enums import ChecksumType, FileBeType, TransformType


class FLocat(Locator):
    """Location of a file's content."""

    use: str | None = None


class FContent(MetsElement):
    """File content embedded in the document.

    Attributes:
        use: ``@USE``
        xml_data: Serialized XML fragments carried inside ``xmlData``
    """

    use: str | None = None
    xml_data: list[str] = []


class Stream(MetsElement):
    """A component stream inside a file (e.g. the audio track of a video)."""

    stream_type: str | None = None
    owner_id: str | None = None
    admid: list[str] = []
    dmdid: list[str] = []
    begin: str | None = None
    end: str | None = None
    betype: FileBeType | None = None


class TransformFile(MetsElement):
    """One step needed to recover a file's original form.

    Attributes:
        transform_type: ``@TRANSFORMTYPE``
        transform_algorithm: ``@TRANSFORMALGORITHM``
        transform_key: ``@TRANSFORMKEY``
        transform_behavior: IDREF to a behaviorSec (``@TRANSFORMBEHAVIOR``)
        transform_order: ``@TRANSFORMORDER``
    """

    transform_type: TransformType | None = None
    transform_algorithm: str | None = None
    transform_key: str | None = None
    transform_behavior: str | None = None
    transform_order: int | None = None


class File(MetsElement):
    """A content file, optionally containing sub-files."""

    seq: int | None = None
    owner_id: str | None = None
    use: str | None = None
    group_id: str | None = None
    admid: list[str] = []
    dmdid: list[str] = []
    begin: str | None = None
    end: str | None = None
    betype: FileBeType | None = None
    mimetype: str | None = None
    size: int | None = None
    checksum: str | None = None
    checksum_type: ChecksumType | None = None
    created: Timestamp | None = None
    flocats: list[FLocat] = []
    fcontent: FContent | None = None
    streams: list[Stream] = []
    transform_files: list[TransformFile] = []
    files: list["File"] = []


class FileGrp(MetsElement):
    """A group of files, optionally containing sub-groups."""

    versdate: Timestamp | None = None
    use: str | None = None
    file_grps: list["FileGrp"] = []
    files: list[File] = []


class FileSec(MetsElement):
    """The file inventory."""

    file_grps: list[FileGrp] = []
