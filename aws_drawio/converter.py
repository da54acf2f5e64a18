"""
Convert the graph library's native XML dialect into the draw.io dialect.

    <Cell id="2" vertex="1"><Geometry _x="50" .../><Object fillColor="#FF9900" as="style"/></Cell>

becomes

    <mxCell id="2" vertex="1" style="fillColor=#FF9900;"><mxGeometry x="50" ... /></mxCell>

The result is a fragment meant to sit inside the ``mxGraphModel`` of an
envelope (see ``envelope.wrap``).
"""

import xml.etree.ElementTree as ET
from typing import Union

from .graph_model import CELL_TAG, GEOMETRY_TAG, STYLE_TAG, WRAPPER_TAG

DRAWIO_CELL_TAG = "mxCell"
DRAWIO_GEOMETRY_TAG = "mxGeometry"

GEOMETRY_PREFIX = "_"
PREFIXED_GEOMETRY_ATTRS = ("_x", "_y", "_width", "_height")


def is_style_descriptor(elem: ET.Element) -> bool:
    return elem.tag == STYLE_TAG and elem.get("as") == "style"


def flatten_style(elem: ET.Element) -> str:
    """Render a style descriptor as ``key=value;...;`` in source attribute order.

    Values are written bare, without quotes.
    """
    pairs = [f"{k}={v}" for k, v in elem.attrib.items() if k != "as"]
    if not pairs:
        return ""
    return ";".join(pairs) + ";"


def convert_geometry(elem: ET.Element) -> None:
    elem.tag = DRAWIO_GEOMETRY_TAG
    attrs = {}
    for name, value in elem.attrib.items():
        if name in PREFIXED_GEOMETRY_ATTRS:
            name = name[len(GEOMETRY_PREFIX):]
        attrs[name] = value
    elem.attrib.clear()
    elem.attrib.update(attrs)


def convert_cell(elem: ET.Element) -> None:
    elem.tag = DRAWIO_CELL_TAG
    styles = []
    for child in list(elem):
        if is_style_descriptor(child):
            styles.append(flatten_style(child))
            elem.remove(child)
    style = "".join(styles)
    if style:
        elem.set("style", style)


def convert_element(elem: ET.Element) -> ET.Element:
    """Rewrite ``elem`` and its descendants in place."""
    # Collect first: convert_cell removes style descriptors while walking.
    for node in list(elem.iter()):
        if node.tag == CELL_TAG:
            convert_cell(node)
        elif node.tag == GEOMETRY_TAG:
            convert_geometry(node)
    return elem


def convert_to_drawio(native: Union[str, ET.Element, ET.ElementTree]) -> str:
    """
    Convert a native graph model document into a draw.io fragment.

    Accepts the serialized XML or an already parsed element. When the
    document is wrapped in a ``GraphDataModel`` container, the container's
    tags are dropped and its children are returned concatenated.
    """
    if isinstance(native, ET.ElementTree):
        native = native.getroot()
    if isinstance(native, ET.Element):
        # Work on a copy; callers keep their tree.
        root = ET.fromstring(ET.tostring(native, encoding="unicode"))
    else:
        root = ET.fromstring(native)

    convert_element(root)

    if root.tag == WRAPPER_TAG:
        return "".join(ET.tostring(child, encoding="unicode") for child in root)
    return ET.tostring(root, encoding="unicode")
