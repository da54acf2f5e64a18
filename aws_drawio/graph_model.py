"""
Headless graph model: cells, geometries and styles as plain records.

The model serializes itself to the graph library's native XML dialect
(``GraphDataModel`` / ``root`` / ``Cell``), which ``converter`` turns into
the draw.io dialect.
"""

import logging
import xml.etree.ElementTree as ET
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

WRAPPER_TAG = "GraphDataModel"
CELL_TAG = "Cell"
GEOMETRY_TAG = "Geometry"
STYLE_TAG = "Object"


class GraphModelError(ValueError):
    """Raised for invalid operations on a GraphModel."""


def style_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


@dataclass
class Geometry:
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    relative: bool = False

    def to_element(self) -> ET.Element:
        # Native dialect: position and size carry an underscore prefix.
        if self.relative:
            return ET.Element(GEOMETRY_TAG, {"relative": "1", "as": "geometry"})
        return ET.Element(GEOMETRY_TAG, {
            "_x": style_value(self.x),
            "_y": style_value(self.y),
            "_width": style_value(self.width),
            "_height": style_value(self.height),
            "as": "geometry",
        })


@dataclass
class Cell:
    id: str
    value: Optional[str] = None
    style: Dict[str, object] = field(default_factory=dict)
    geometry: Optional[Geometry] = None
    vertex: bool = False
    edge: bool = False
    parent: Optional[str] = None
    source: Optional[str] = None
    target: Optional[str] = None

    def to_element(self) -> ET.Element:
        attrs = {"id": self.id}
        if self.value is not None:
            attrs["value"] = self.value
        if self.vertex:
            attrs["vertex"] = "1"
        if self.edge:
            attrs["edge"] = "1"
        if self.parent is not None:
            attrs["parent"] = self.parent
        if self.source is not None:
            attrs["source"] = self.source
        if self.target is not None:
            attrs["target"] = self.target

        elem = ET.Element(CELL_TAG, attrs)
        if self.geometry is not None:
            elem.append(self.geometry.to_element())
        style_attrs = {k: style_value(v) for k, v in self.style.items()}
        style_attrs["as"] = "style"
        ET.SubElement(elem, STYLE_TAG, style_attrs)
        return elem


class GraphModel:
    """
    In-memory graph of vertices and edges.

    Cells "0" (model root) and "1" (default layer) always exist; inserted
    cells get sequential ids starting at "2" unless one is given.
    """

    def __init__(self):
        self._cells: Dict[str, Cell] = {}
        self._next_id = 0
        self._batch_depth = 0
        self._add(Cell(id=self._new_id()))
        self._add(Cell(id=self._new_id(), parent="0"))

    def _new_id(self) -> str:
        while str(self._next_id) in self._cells:
            self._next_id += 1
        cell_id = str(self._next_id)
        self._next_id += 1
        return cell_id

    def _add(self, cell: Cell) -> Cell:
        if cell.id in self._cells:
            raise GraphModelError(f"Duplicate cell id: {cell.id}")
        self._cells[cell.id] = cell
        return cell

    def _resolve(self, ref, role: str) -> str:
        cell_id = ref.id if isinstance(ref, Cell) else str(ref)
        if cell_id not in self._cells:
            raise GraphModelError(f"Unknown {role} cell: {cell_id}")
        return cell_id

    @property
    def cells(self) -> List[Cell]:
        return list(self._cells.values())

    def get_cell(self, cell_id: str) -> Optional[Cell]:
        return self._cells.get(cell_id)

    def get_default_parent(self) -> Cell:
        return self._cells["1"]

    def vertices(self) -> List[Cell]:
        return [c for c in self._cells.values() if c.vertex]

    def edges(self) -> List[Cell]:
        return [c for c in self._cells.values() if c.edge]

    @contextmanager
    def batch_update(self) -> Iterator["GraphModel"]:
        """Group insertions; logs a summary once the outermost batch ends."""
        self._batch_depth += 1
        try:
            yield self
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0:
                logger.debug("Batch update done: %d vertices, %d edges",
                             len(self.vertices()), len(self.edges()))

    def insert_vertex(self, position: Tuple[float, float], size: Tuple[float, float],
                      value: Optional[str] = None, style: Optional[Dict[str, object]] = None,
                      parent=None, id: Optional[str] = None) -> Cell:
        parent_id = self._resolve(parent if parent is not None else self.get_default_parent(), "parent")
        cell = Cell(
            id=id if id is not None else self._new_id(),
            value=value,
            style=dict(style or {}),
            geometry=Geometry(position[0], position[1], size[0], size[1]),
            vertex=True,
            parent=parent_id,
        )
        return self._add(cell)

    def insert_edge(self, source, target, value: Optional[str] = None,
                    style: Optional[Dict[str, object]] = None,
                    parent=None, id: Optional[str] = None) -> Cell:
        source_id = self._resolve(source, "source")
        target_id = self._resolve(target, "target")
        parent_id = self._resolve(parent if parent is not None else self.get_default_parent(), "parent")
        cell = Cell(
            id=id if id is not None else self._new_id(),
            value=value,
            style=dict(style or {}),
            geometry=Geometry(relative=True),
            edge=True,
            parent=parent_id,
            source=source_id,
            target=target_id,
        )
        return self._add(cell)

    def to_element(self) -> ET.Element:
        wrapper = ET.Element(WRAPPER_TAG)
        root = ET.SubElement(wrapper, "root")
        for cell in self._cells.values():
            root.append(cell.to_element())
        return wrapper

    def write_graph_model(self) -> str:
        """Serialize the model to the native XML dialect."""
        return ET.tostring(self.to_element(), encoding="unicode")
