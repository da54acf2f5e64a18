"""
Write a graph model to a .drawio file.
"""

import logging
from pathlib import Path
from typing import Optional

from .converter import convert_to_drawio
from .envelope import wrap
from .graph_model import GraphModel

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "aws-architecture.drawio"


def render_drawio(model: GraphModel, **envelope_kwargs) -> str:
    native = model.write_graph_model()
    logger.debug("Native graph model: %d bytes", len(native))
    return wrap(convert_to_drawio(native), **envelope_kwargs)


def export_to_drawio(model: GraphModel, filename: str = DEFAULT_FILENAME,
                     base_dir: Optional[Path] = None) -> Path:
    """Render ``model`` and write it to ``base_dir / filename`` (cwd by default)."""
    content = render_drawio(model)
    out_path = Path(base_dir if base_dir is not None else Path.cwd()) / filename
    try:
        out_path.write_text(content, encoding="utf-8")
    except OSError:
        logger.exception("Error exporting diagram to %s", out_path)
        raise
    logger.info("Exported draw.io diagram to %s", out_path)
    return out_path
