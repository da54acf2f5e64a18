"""
Render an SVG preview of a graph model using Graphviz.

Usage:
    python -m aws_drawio.preview    # aws_drawio/out/aws_architecture.svg
"""

from pathlib import Path
from graphviz import Digraph

from .graph_model import GraphModel


def ensure_out_dir() -> Path:
    out_dir = Path(__file__).parent / "out"
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir


def build_digraph(model: GraphModel, path: Path, name: str = "aws_architecture") -> Digraph:
    dot = Digraph(name, filename=str(path / name), format="svg")
    dot.attr(rankdir="LR", fontsize="10", fontname="Inter,Helvetica,Arial,sans-serif")

    for cell in model.vertices():
        fill = cell.style.get("fillColor", "white")
        if fill == "transparent":
            # Titles become the graph label rather than a node.
            dot.attr(label=cell.value or "", labelloc="t")
            continue
        dot.node(cell.id, cell.value or "", shape="box", style="rounded,filled",
                 fillcolor=str(fill), color=str(cell.style.get("strokeColor", "black")))

    for cell in model.edges():
        dot.edge(cell.source, cell.target, label=cell.value or "",
                 color=str(cell.style.get("strokeColor", "#555555")))

    return dot


def generate_preview(model: GraphModel, path: Path) -> Path:
    return Path(build_digraph(model, path).render(cleanup=True))


if __name__ == "__main__":
    from .architecture import AWSArchitectureDiagram

    diagram = AWSArchitectureDiagram()
    diagram.create_diagram()
    out = ensure_out_dir()
    out_file = generate_preview(diagram.model, out)
    print(f"Wrote {out_file}")
