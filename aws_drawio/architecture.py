"""
The serverless AWS architecture: API Gateway -> Lambda -> DynamoDB.

    diagram = AWSArchitectureDiagram()
    diagram.create_diagram()
    diagram.export_to_drawio("aws-architecture.drawio")
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .export import DEFAULT_FILENAME, export_to_drawio
from .graph_model import Cell, GraphModel

logger = logging.getLogger(__name__)


@dataclass
class AWSComponent:
    id: str
    label: str
    x: float
    y: float
    width: float
    height: float
    fill_color: str
    stroke_color: str
    shape: str


COMPONENTS: List[AWSComponent] = [
    AWSComponent("api-gateway", "API Gateway\nREST API", 50, 100, 120, 80,
                 "#FF9900", "#FF6600", "rectangle"),
    AWSComponent("lambda", "AWS Lambda\nFunction", 250, 100, 120, 80,
                 "#FF9900", "#FF6600", "rectangle"),
    AWSComponent("dynamodb", "DynamoDB\nTable", 450, 100, 120, 80,
                 "#3F48CC", "#232F3E", "rectangle"),
]

# (source component id, target component id, label)
CONNECTIONS = [
    ("api-gateway", "lambda", "HTTP Request"),
    ("lambda", "dynamodb", "Query/Put"),
]

TITLE = "AWS Serverless Architecture"


def component_style(component: AWSComponent) -> dict:
    return {
        "fillColor": component.fill_color,
        "strokeColor": component.stroke_color,
        "shape": component.shape,
        "fontSize": 12,
        "fontColor": "#000000",
        "verticalAlign": "middle",
        "align": "center",
        "rounded": True,
        "strokeWidth": 2,
    }


CONNECTION_STYLE = {
    "strokeColor": "#666666",
    "strokeWidth": 2,
    "edgeStyle": "orthogonalEdgeStyle",
    "rounded": True,
    "endArrow": "classic",
    "endSize": 8,
}

TITLE_STYLE = {
    "fillColor": "transparent",
    "strokeColor": "transparent",
    "fontSize": 16,
    "fontStyle": 1,  # bold
    "fontColor": "#232F3E",
    "align": "center",
}


class AWSArchitectureDiagram:
    def __init__(self, model: Optional[GraphModel] = None):
        self.model = model if model is not None else GraphModel()
        self.parent = self.model.get_default_parent()

    def create_component(self, component: AWSComponent) -> Cell:
        return self.model.insert_vertex(
            parent=self.parent,
            position=(component.x, component.y),
            size=(component.width, component.height),
            value=component.label,
            style=component_style(component),
        )

    def create_connection(self, source: Cell, target: Cell, label: str = "") -> Cell:
        return self.model.insert_edge(
            parent=self.parent,
            source=source,
            target=target,
            value=label,
            style=CONNECTION_STYLE,
        )

    def create_diagram(self) -> None:
        with self.model.batch_update():
            vertices = {c.id: self.create_component(c) for c in COMPONENTS}
            for source, target, label in CONNECTIONS:
                self.create_connection(vertices[source], vertices[target], label)

            self.model.insert_vertex(
                parent=self.parent,
                position=(200, 20),
                size=(200, 30),
                value=TITLE,
                style=TITLE_STYLE,
            )
        logger.info("Created %d components and %d connections",
                    len(COMPONENTS), len(CONNECTIONS))

    def export_to_drawio(self, filename: str = DEFAULT_FILENAME,
                         base_dir: Optional[Path] = None) -> Path:
        return export_to_drawio(self.model, filename, base_dir)

    def get_graph_info(self) -> str:
        return (f"Graph created with {len(self.model.vertices())} vertices "
                f"and {len(self.model.edges())} edges")
