"""Build an AWS architecture graph and export it as a draw.io diagram."""

from .architecture import AWSArchitectureDiagram, AWSComponent
from .converter import convert_to_drawio
from .envelope import wrap
from .export import export_to_drawio, render_drawio
from .graph_model import Cell, Geometry, GraphModel, GraphModelError

__all__ = [
    "AWSArchitectureDiagram",
    "AWSComponent",
    "Cell",
    "Geometry",
    "GraphModel",
    "GraphModelError",
    "convert_to_drawio",
    "export_to_drawio",
    "render_drawio",
    "wrap",
]
