"""
Test fixtures for the draw.io exporter tests.

Provides:
- Hand-written native documents (as the graph model emits them)
- A three-vertex, two-edge model
- The full AWS architecture diagram
"""

import os
import sys
import xml.etree.ElementTree as ET

import pytest

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from aws_drawio.architecture import AWSArchitectureDiagram  # noqa: E402
from aws_drawio.graph_model import GraphModel  # noqa: E402


# ============================================================================
# Sample native documents
# ============================================================================

NATIVE_STYLED_CELL = (
    '<GraphDataModel><root>'
    '<Cell id="2" value="Lambda" vertex="1" parent="1">'
    '<Geometry _x="250" _y="100" _width="120" _height="80" as="geometry"/>'
    '<Object fillColor="#FF9900" rounded="true" as="style"/>'
    '</Cell>'
    '</root></GraphDataModel>'
)

NATIVE_UNSTYLED_CELL = (
    '<GraphDataModel>'
    '<Cell id="7" value="Title" vertex="1" parent="1">'
    '<Geometry _x="200" _y="20" _width="200" _height="30" as="geometry"/>'
    '</Cell>'
    '</GraphDataModel>'
)


@pytest.fixture
def native_styled_cell() -> str:
    return NATIVE_STYLED_CELL


@pytest.fixture
def native_unstyled_cell() -> str:
    return NATIVE_UNSTYLED_CELL


@pytest.fixture
def chain_model() -> GraphModel:
    """Three vertices A -> B -> C with labelled edges"""
    model = GraphModel()
    with model.batch_update():
        a = model.insert_vertex(position=(0, 0), size=(10, 10), value="A", id="A")
        b = model.insert_vertex(position=(50, 0), size=(10, 10), value="B", id="B")
        c = model.insert_vertex(position=(100, 0), size=(10, 10), value="C", id="C")
        model.insert_edge(a, b, value="a to b")
        model.insert_edge(b, c, value="b to c")
    return model


@pytest.fixture
def aws_diagram() -> AWSArchitectureDiagram:
    diagram = AWSArchitectureDiagram()
    diagram.create_diagram()
    return diagram


@pytest.fixture
def parse_fragment():
    """Parse a converter fragment (siblings, no root) under a dummy root"""
    def _parse(fragment: str) -> ET.Element:
        return ET.fromstring(f"<fragment>{fragment}</fragment>")
    return _parse
