"""
HTML table parser — library entry points and CLI.

Usage:
    python parser.py <html_file> [--output <output.json>] [--auto-width] [--workers N]

Loads an HTML document, resolves every ``<table>`` into an absolute
spreadsheet grid (spans, cascaded styles, typed cell content) and writes
the result as a single JSON file.

Defaults for the options come from the environment (``.env`` is loaded):
``COMPUTE_AUTO_WIDTH`` and ``PARSE_MAX_WORKERS``.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Union

import dotenv

from dto.config import ParseConfig
from dto.output import DocumentResult
from dto.table import Table
from extractors.table import TableExtractor
from utils.element import Element
from utils.html import load_document, load_document_file

dotenv.load_dotenv()

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Library API
# -------------------------------------------------------------------


def parse_tables(root: Element, config: Optional[ParseConfig] = None) -> List[Table]:
    """
    Resolve every ``<table>`` under *root*, in document order.

    With ``config.max_workers > 1`` the tables are resolved concurrently.
    Each table gets its own occupancy tracker and style cache.  Any error
    aborts the whole document; there are no partial results.
    """
    config = config or ParseConfig()
    table_elements = root.find_all("table")

    def _extract(table_element: Element) -> Table:
        return TableExtractor(config).extract(table_element)

    if config.max_workers > 1 and len(table_elements) > 1:
        with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
            # map() yields in submission order and re-raises worker errors
            return list(pool.map(_extract, table_elements))
    return [_extract(t) for t in table_elements]


def parse_html(html: Union[str, bytes], config: Optional[ParseConfig] = None) -> List[Table]:
    """Parse an HTML string and return all of its tables."""
    logger.info("Start parsing html")
    start = time.perf_counter()
    tables = parse_tables(load_document(html), config)
    logger.info(
        "Complete html parsing: %d table(s), takes %d ms",
        len(tables),
        (time.perf_counter() - start) * 1000,
    )
    return tables


def parse_html_file(path: Union[str, Path], config: Optional[ParseConfig] = None) -> List[Table]:
    """
    Parse the HTML file at *path* and return all of its tables.

    ``OSError`` from reading the file propagates unchanged.
    """
    logger.info("Start parsing html file: %s", path)
    start = time.perf_counter()
    tables = parse_tables(load_document_file(path), config)
    logger.info(
        "Complete html file parsing: %d table(s), takes %d ms",
        len(tables),
        (time.perf_counter() - start) * 1000,
    )
    return tables


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------


def main(argv: Optional[List[str]] = None) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    parser = argparse.ArgumentParser(
        description="Resolve the tables of an HTML document into a spreadsheet grid (JSON).",
    )
    parser.add_argument(
        "html_file",
        help="Path to the .html file to parse",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output JSON file path (default: <input_name>_output.json)",
    )
    parser.add_argument(
        "--auto-width",
        action="store_true",
        default=None,
        help="Estimate column widths from cell text (default: $COMPUTE_AUTO_WIDTH)",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=None,
        help="Resolve up to N tables concurrently (default: $PARSE_MAX_WORKERS or 1)",
    )
    args = parser.parse_args(argv)

    html_path = args.html_file
    if not os.path.isfile(html_path):
        logger.error("File not found: %s", html_path)
        sys.exit(1)

    # CLI flags win over the environment
    settings = ParseConfig.from_env().model_dump()
    if args.auto_width is not None:
        settings["compute_auto_width"] = args.auto_width
    if args.workers is not None:
        settings["max_workers"] = args.workers
    config = ParseConfig.model_validate(settings)

    # Determine output path
    if args.output:
        output_path = args.output
    else:
        stem = Path(html_path).stem
        output_path = f"{stem}_output.json"

    tables = parse_html_file(html_path, config)
    result = DocumentResult(file_name=Path(html_path).name, tables=tables)

    # Serialize to JSON
    json_str = result.model_dump_json(indent=2, exclude_none=True)

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(json_str)

    logger.info("Output written to %s", output_path)


if __name__ == "__main__":
    main()
