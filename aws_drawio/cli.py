"""
Generate the AWS serverless architecture diagram as a draw.io file.

Usage:
    aws-drawio                           # ./aws-architecture.drawio
    aws-drawio my.drawio --output-dir docs --preview
    python -m aws_drawio
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .architecture import AWSArchitectureDiagram
from .export import DEFAULT_FILENAME
from .preview import generate_preview

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate an AWS architecture diagram in draw.io format",
        epilog="Open the result at https://app.diagrams.net/ (File > Open)",
    )
    parser.add_argument("filename", nargs="?", default=DEFAULT_FILENAME,
                        help=f"Output file name (default: {DEFAULT_FILENAME})")
    parser.add_argument("--output-dir", type=Path, default=None,
                        help="Directory for the output file (default: current directory)")
    parser.add_argument("--preview", action="store_true",
                        help="Also render an SVG preview with Graphviz")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers.
    logging.getLogger().setLevel(level)

    out_dir = args.output_dir if args.output_dir is not None else Path.cwd()
    try:
        diagram = AWSArchitectureDiagram()
        diagram.create_diagram()
        logger.info(diagram.get_graph_info())
        out_file = diagram.export_to_drawio(args.filename, out_dir)
        print(f"Wrote {out_file}")

        if args.preview:
            print(f"Wrote {generate_preview(diagram.model, out_dir)}")
    except Exception:
        logger.exception("Error generating diagram")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
