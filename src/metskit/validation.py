"""Consistency checks over a METS entity tree.

The marshal and unmarshal engines never look at cross-references; this
module is the place to ask whether a document's IDREFs actually resolve.
Nothing here modifies the tree.
"""

import logging
from collections import Counter
from collections.abc import Iterator

from pydantic import BaseModel

from schemas.common import MetsElement
from schemas.md_sec import MdSec
from schemas.mets import Mets

logger = logging.getLogger(__name__)

IDREFS_FIELDS = {
    "admid": "ADMID",
    "dmdid": "DMDID",
}
IDREF_FIELDS = {
    "file_id": "FILEID",
}


def iter_elements(element: BaseModel) -> Iterator[MetsElement]:
    """Yield *element* and every entity below it, depth first in document order."""
    if isinstance(element, MetsElement):
        yield element

    for name in type(element).model_fields:
        value = getattr(element, name)
        if isinstance(value, BaseModel):
            yield from iter_elements(value)
        elif isinstance(value, list):
            for item in value:
                if isinstance(item, BaseModel):
                    yield from iter_elements(item)


def build_id_index(mets: Mets) -> dict[str, MetsElement]:
    """Map every ``ID`` in *mets* to the entity carrying it.

    When an ID occurs more than once the first occurrence wins.
    """
    index: dict[str, MetsElement] = {}
    for element in iter_elements(mets):
        if element.id is not None and element.id not in index:
            index[element.id] = element
    return index


def validate(mets: Mets) -> list[str]:
    """Check *mets* for broken references and ill-formed sections.

    Args:
        mets: Document to check

    Returns:
        Human-readable problem descriptions, empty when none were found
    """
    problems = []
    elements = list(iter_elements(mets))
    index = build_id_index(mets)

    counts = Counter(element.id for element in elements if element.id is not None)
    for element_id, count in counts.items():
        if count > 1:
            problems.append(f"Duplicate ID {element_id!r} ({count} occurrences)")

    for element in elements:
        kind = type(element).__name__

        for field, attribute in IDREFS_FIELDS.items():
            for ref in getattr(element, field, None) or []:
                if ref not in index:
                    problems.append(f"{kind} {attribute} {ref!r} does not resolve")

        for field, attribute in IDREF_FIELDS.items():
            ref = getattr(element, field, None)
            if ref is not None and ref not in index:
                problems.append(f"{kind} {attribute} {ref!r} does not resolve")

        if isinstance(element, MdSec):
            where = f" {element.id!r}" if element.id else ""
            if element.md_ref is None and element.md_wrap is None:
                problems.append(f"MdSec{where} has neither mdRef nor mdWrap")
            elif element.md_ref is not None and element.md_wrap is not None:
                problems.append(f"MdSec{where} has both mdRef and mdWrap")

    logger.debug(f"Validation found {len(problems)} problem(s) in {len(elements)} elements")
    return problems
