"""METS header schemas (``mets:metsHdr``)."""

from .common import MetsElement, Timestamp
from .enums import AgentRole, AgentType


class Agent(MetsElement):
    """An agent responsible for the METS document.

    Role and name are required by the schema, so an Agent cannot be built
    without them.

    Attributes:
        role: ``@ROLE``
        name: Text of the ``name`` child
        other_role: ``@OTHERROLE``, used with ``AgentRole.OTHER``
        type: ``@TYPE``
        other_type: ``@OTHERTYPE``, used with ``AgentType.OTHER``
        notes: Text of each ``note`` child, in order
    """

    role: AgentRole
    name: str
    other_role: str | None = None
    type: AgentType | None = None
    other_type: str | None = None
    notes: list[str] = []


class RecordID(MetsElement):
    """An identifier for the record (``altRecordID`` or ``metsDocumentID``).

    Attributes:
        identifier: Element text
        type: ``@TYPE``
    """

    identifier: str
    type: str | None = None


class MetsHdr(MetsElement):
    """Metadata about the METS document itself.

    ``last_mod_date`` is overwritten with the current time whenever the
    document is written; ``create_date`` is set at write time only if it
    is still unset.

    Attributes:
        admid: IDREFs to administrative metadata (``@ADMID``)
        create_date: ``@CREATEDATE``
        last_mod_date: ``@LASTMODDATE``
        record_status: ``@RECORDSTATUS``
        agents: ``agent`` children
        alt_record_ids: ``altRecordID`` children
        mets_document_id: The ``metsDocumentID`` child
    """

    admid: list[str] = []
    create_date: Timestamp | None = None
    last_mod_date: Timestamp | None = None
    record_status: str | None = None
    agents: list[Agent] = []
    alt_record_ids: list[RecordID] = []
    mets_document_id: RecordID | None = None
