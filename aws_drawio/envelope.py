"""
draw.io file envelope: mxfile -> diagram -> mxGraphModel -> converted cells.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional
from xml.sax.saxutils import quoteattr

HOST = "maxgraph-aws-diagram"
AGENT = "maxGraph AWS Diagram Generator"
VERSION = "1.0.0"
DIAGRAM_ID = "aws-architecture"
DIAGRAM_NAME = "AWS Architecture"

CANVAS_SETTINGS = {
    "dx": "800",
    "dy": "600",
    "grid": "1",
    "gridSize": "10",
    "guides": "1",
    "tooltips": "1",
    "connect": "1",
    "arrows": "1",
    "fold": "1",
    "page": "1",
    "pageScale": "1",
    "pageWidth": "827",
    "pageHeight": "1169",
    "math": "0",
    "shadow": "0",
}


def new_etag() -> str:
    return uuid.uuid4().hex[:8]


def format_modified(modified: datetime) -> str:
    """UTC, millisecond precision, ``Z`` suffix: ``2024-01-01T00:00:00.000Z``."""
    utc = modified.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _attrs(values: dict) -> str:
    return " ".join(f"{k}={quoteattr(v)}" for k, v in values.items())


def wrap(fragment: str, modified: Optional[datetime] = None, etag: Optional[str] = None) -> str:
    """Embed a converted cell fragment in a complete draw.io document."""
    if modified is None:
        modified = datetime.now(timezone.utc)
    if etag is None:
        etag = new_etag()

    mxfile = _attrs({
        "host": HOST,
        "modified": format_modified(modified),
        "agent": AGENT,
        "version": VERSION,
        "etag": etag,
        "type": "device",
    })
    diagram = _attrs({"id": DIAGRAM_ID, "name": DIAGRAM_NAME})

    return (
        f"<mxfile {mxfile}>\n"
        f"  <diagram {diagram}>\n"
        f"    <mxGraphModel {_attrs(CANVAS_SETTINGS)}>\n"
        f"      {fragment}\n"
        f"    </mxGraphModel>\n"
        f"  </diagram>\n"
        f"</mxfile>"
    )
