"""
Convert E-utilities XML into plain dicts.

Flattening rules:
  - attributes become keys with no prefix
  - an element with attributes or child elements keeps its text under "text"
  - an element with neither collapses to its text ("" when empty)
  - repeated child tags collect into a list, in document order
"""

import xml.etree.ElementTree as ET
from typing import Any

from ncbi_toolkit.constants import XML_TEXT_KEY


def parse_xml(xml_text: str) -> dict[str, Any]:
    """Parse an XML document into ``{root_tag: value}``.

    Raises ``xml.etree.ElementTree.ParseError`` on malformed input.
    """
    root = ET.fromstring(xml_text)
    return {root.tag: element_to_dict(root)}


def element_to_dict(elem: ET.Element) -> Any:
    node: dict[str, Any] = {}
    text_parts = [elem.text.strip()] if elem.text and elem.text.strip() else []

    for child in elem:
        value = element_to_dict(child)
        if child.tag in node:
            existing = node[child.tag]
            if isinstance(existing, list):
                existing.append(value)
            else:
                node[child.tag] = [existing, value]
        else:
            node[child.tag] = value
        if child.tail and child.tail.strip():
            text_parts.append(child.tail.strip())

    text = "".join(text_parts)
    if not node and not elem.attrib:
        return text

    if text:
        node[XML_TEXT_KEY] = text
    for name, value in elem.attrib.items():
        node[name] = value
    return node
