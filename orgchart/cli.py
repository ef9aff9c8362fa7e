"""
Command-line entry point.

Reads already-extracted text (CSV, flattened tables, outlines or plain
text) and prints or writes the inferred structure:

    orgchart parse staff.csv --format csv --output structure.csv
    orgchart parse deck.txt --source-type presentation --language russian -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from orgchart.classify.profiles import ProfileRegistry
from orgchart.core.config import ParserConfig
from orgchart.core.errors import OrgChartError
from orgchart.core.models import Modality
from orgchart.exporters import ExporterRegistry
from orgchart.pipeline import SOURCE_TYPES, OrgStructureParser

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orgchart",
        description="Infer an organizational structure from document text.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse = subparsers.add_parser("parse", help="Parse a text file into a structure")
    parse.add_argument("file", type=Path, help="UTF-8 text file with extracted document content")
    parse.add_argument(
        "--modality",
        choices=[m.value for m in Modality],
        help="Force an input modality instead of detecting it",
    )
    parse.add_argument("--source-type", choices=SOURCE_TYPES, help="Kind of document the text came from")
    parse.add_argument(
        "--language",
        default=ParserConfig.language,
        choices=ProfileRegistry().available(),
        help="Pattern tables to use (default: %(default)s)",
    )
    parse.add_argument(
        "--format",
        default="json",
        choices=ExporterRegistry.available_exporters(),
        help="Output format (default: %(default)s)",
    )
    parse.add_argument("--output", type=Path, help="Write to this file instead of stdout")
    parse.add_argument("--manual", action="store_true",
                       help="Treat the file as manual input (JSON tree or text)")
    parse.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _run_parse(args: argparse.Namespace) -> int:
    try:
        text = args.file.read_text(encoding="utf-8-sig")
    except OSError as e:
        logger.error("Cannot read %s: %s", args.file, e)
        return 2

    parser = OrgStructureParser(ParserConfig(language=args.language))
    try:
        if args.manual:
            result = parser.parse_manual(text)
        else:
            result = parser.parse_text(text, modality=args.modality, source_type=args.source_type)
    except OrgChartError as e:
        logger.error("%s", e)
        return 2

    for warning in result.warnings:
        logger.debug("Warning: %s", warning)
    if not result.success:
        logger.error("%s", result.message)
        return 1
    logger.info("%s", result.message)

    kwargs = {"profile": parser.profile, "separator": parser.config.responsibility_separator}
    if args.output:
        path = ExporterRegistry.export(result.root, args.output, args.format, **kwargs)
        logger.info("Wrote %s", path)
    else:
        sys.stdout.write(ExporterRegistry.render(result.root, args.format, **kwargs))
        sys.stdout.write("\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if args.command == "parse":
        return _run_parse(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
