"""Thin lxml layer used by the marshal and unmarshal engines.

Holds the namespace constants, qualified-name helpers, parsing and
serialisation of whole documents, and the handling of opaque XML
fragments (``xmlData`` payloads and ``behaviorSec`` elements) which are
carried as serialized strings.
"""

import copy
import re

from lxml import etree

from .exceptions import MalformedInputError

METS_NS = "http://www.loc.gov/METS/"
XLINK_NS = "http://www.w3.org/1999/xlink"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"

METS_SCHEMA_LOCATION = f"{METS_NS} http://www.loc.gov/standards/mets/mets.xsd"

NSMAP = {
    "mets": METS_NS,
    "xlink": XLINK_NS,
    "xsi": XSI_NS,
}

_QNAME_VALUE_RE = re.compile(r"([A-Za-z_][A-Za-z0-9_.-]*):[A-Za-z_][A-Za-z0-9_.-]*")


def mets_tag(local: str) -> str:
    return f"{{{METS_NS}}}{local}"


def xlink_attr(local: str) -> str:
    return f"{{{XLINK_NS}}}{local}"


def xsi_attr(local: str) -> str:
    return f"{{{XSI_NS}}}{local}"


def local_name(element: etree._Element) -> str:
    """Return the tag of *element* without its namespace."""
    return etree.QName(element).localname


def child_elements(element: etree._Element) -> list[etree._Element]:
    """Return the child elements of *element* in document order.

    Comments and processing instructions are skipped.
    """
    return [child for child in element if isinstance(child.tag, str)]


def make_parser(remove_blank_text: bool = True, huge_tree: bool = False) -> etree.XMLParser:
    """Build a parser that never touches the network or expands entities."""
    return etree.XMLParser(
        remove_blank_text=remove_blank_text,
        resolve_entities=False,
        no_network=True,
        huge_tree=huge_tree,
    )


def parse_xml(data: bytes, parser: etree.XMLParser | None = None) -> etree._Element:
    """Parse *data* into an element tree and return its root.

    Raises:
        MalformedInputError: If *data* is not well-formed XML
    """
    try:
        return etree.fromstring(data, parser=parser or make_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        raise MalformedInputError(f"Invalid XML: {e}") from e


def serialize_xml(
    root: etree._Element,
    pretty_print: bool = True,
    xml_declaration: bool = True,
    encoding: str = "UTF-8",
) -> bytes:
    return etree.tostring(
        root,
        xml_declaration=xml_declaration,
        encoding=encoding,
        pretty_print=pretty_print,
    )


def serialize_fragment(element: etree._Element) -> str:
    """Serialize *element* as a standalone fragment.

    The element is copied out of its document and written in exclusive
    canonical form, so the result does not depend on namespace
    declarations made by its ancestors and is stable across re-reads.
    Only declarations the fragment uses are written, plus the prefixes
    named in QName-valued attributes such as ``xsi:type``.
    """
    fragment = copy.deepcopy(element)
    fragment.tail = None
    data = etree.tostring(
        fragment,
        method="c14n",
        exclusive=True,
        with_comments=True,
        inclusive_ns_prefixes=_qname_prefixes(fragment) or None,
    )
    return data.decode("utf-8")


def _qname_prefixes(element: etree._Element) -> list[str]:
    """Return the bound prefixes used in QName-shaped attribute values."""
    prefixes = set()
    for node in element.iter(etree.Element):
        for value in node.attrib.values():
            match = _QNAME_VALUE_RE.fullmatch(value.strip())
            if match and match.group(1) in node.nsmap:
                prefixes.add(match.group(1))
    return sorted(prefixes)


def parse_fragment(fragment: str) -> etree._Element:
    """Parse a fragment produced by :func:`serialize_fragment`.

    Raises:
        MalformedInputError: If *fragment* is not well-formed XML
    """
    try:
        return etree.fromstring(fragment, parser=make_parser())
    except (etree.XMLSyntaxError, ValueError) as e:
        raise MalformedInputError(f"Invalid XML fragment: {e}") from e
