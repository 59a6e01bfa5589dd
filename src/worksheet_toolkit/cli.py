"""
Command-line entry point: paginate a JSON element list.

Examples:
  worksheet-paginate elements.json
  worksheet-paginate elements.json --preset LETTER --age-range 6-7 --render
  worksheet-paginate elements.json --fixed 4 --output pages.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from worksheet_toolkit import __version__
from worksheet_toolkit.common.thresholds import known_age_ranges
from worksheet_toolkit.controller import PaginationError, WorksheetPaginator, paginate_file
from worksheet_toolkit.core.models import ContentMode
from worksheet_toolkit.core.utils import result_to_json, write_result
from worksheet_toolkit.layout import PAGE_PRESETS, LayoutConfig
from worksheet_toolkit.measurement import render_text_block

logger = logging.getLogger("worksheet_toolkit.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="worksheet-paginate",
        description="Split a worksheet element list into pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Presets: {", ".join(PAGE_PRESETS)}
Age ranges: {", ".join(known_age_ranges())}

Without --render, each element's "measuredHeight" is used and missing
heights are estimated.
        """,
    )
    parser.add_argument("input", type=Path, help="JSON file with the element list")
    parser.add_argument(
        "--preset",
        default="A4",
        choices=sorted(PAGE_PRESETS),
        help="Page size preset (default: A4)",
    )
    parser.add_argument("--age-range", help="Audience age range, e.g. 6-7")
    parser.add_argument(
        "--mode",
        default=ContentMode.PDF.value,
        choices=[m.value for m in ContentMode],
        help="Content mode stamped on pages (default: pdf)",
    )
    parser.add_argument("--title", help="Title for every page (default: 'Page N')")
    parser.add_argument("--spacing", type=float, help="Gap between elements in px (default: 20)")
    parser.add_argument(
        "--render",
        action="store_true",
        help="Measure heights by drawing each element with the built-in renderer",
    )
    parser.add_argument(
        "--fixed",
        type=int,
        metavar="N",
        help="Place exactly N elements per page instead of fitting by height",
    )
    parser.add_argument("--strict", action="store_true", help="Validate input against the JSON schema")
    parser.add_argument("--output", "-o", type=Path, help="Write the result here instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )

    try:
        config = LayoutConfig.from_preset(args.preset)
        if args.spacing is not None:
            config = config.with_spacing(args.spacing)
    except ValueError as e:
        logger.error(f"Invalid page configuration: {e}")
        return 2

    paginator = WorksheetPaginator(config)
    paginator.set_age_range(args.age_range)
    paginator.set_content_mode(args.mode)

    try:
        result = paginate_file(
            args.input,
            paginator,
            render_into=render_text_block if args.render else None,
            page_title=args.title,
            strict=args.strict,
            per_page=args.fixed,
        )
    except PaginationError as e:
        logger.error(str(e))
        return 1
    except (OSError, ValueError) as e:
        logger.error(f"Pagination failed: {e}")
        return 1

    if args.output:
        write_result(result, args.output)
        logger.info(f"Wrote {result.total_pages} pages to {args.output}")
    else:
        print(result_to_json(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
