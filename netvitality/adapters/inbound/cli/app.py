"""
Node Vitality CLI

Reads graph descriptions of the form

    {[['A','B'],['B','C']],{'A':1,'B':1,'C':1}}

and prints the names of the nodes whose removal costs the least, e.g. ['B'].

Usage:
    analyze_vitality graph.txt
    analyze_vitality a.txt b.txt c.txt        # one prefixed line per file
    cat graph.txt | analyze_vitality          # read from stdin
    analyze_vitality graph.txt --scores       # per-node score table
    analyze_vitality graph.txt --json -o out/result.json
"""

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from netvitality.application.services import DisplayService, VitalityService
from netvitality.config import Settings
from netvitality.domain.models import VitalityResult
from netvitality.domain.services import InputFormatError

STDIN = "-"

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with clear grouping."""
    parser = argparse.ArgumentParser(
        prog="analyze_vitality",
        description="Find the nodes of a weighted graph whose removal fragments it the least.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  %(prog)s graph.txt                 Print minimum-vitality nodes
  %(prog)s a.txt b.txt               Analyze several graphs
  %(prog)s - < graph.txt             Read the graph from stdin
  %(prog)s graph.txt --scores        Also print every node's score
  %(prog)s graph.txt -o result.json  Export full results to JSON
""",
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Graph description files ('-' or none for stdin)",
    )

    # --- Output ---
    output = parser.add_argument_group("Output")
    output.add_argument("--scores", "-s", action="store_true", help="Print the per-node score table")
    output.add_argument("--json", action="store_true", help="Print results as JSON to stdout")
    output.add_argument("--output", "-o", metavar="FILE", help="Export results to JSON file")

    # --- Logging ---
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log errors")

    return parser


def configure_logging(args: argparse.Namespace, settings: Settings) -> None:
    log_level = (
        logging.DEBUG if args.verbose
        else logging.ERROR if args.quiet
        else settings.resolve_log_level()
    )
    logging.basicConfig(
        level=log_level,
        format=settings.log_format,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


# ---------------------------------------------------------------------------
# Analysis Logic
# ---------------------------------------------------------------------------

def analyze_source(service: VitalityService, source: str) -> VitalityResult:
    """Analyze one input; '-' means stdin."""
    if source == STDIN:
        return service.analyze_stream(sys.stdin)
    return service.analyze_file(source)


# ---------------------------------------------------------------------------
# Entry Point
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings.from_env()
    try:
        configure_logging(args, settings)
    except ValueError as exc:
        parser.error(str(exc))

    service = VitalityService(encoding=settings.encoding)
    # keep stdout a single JSON document under --json
    display = DisplayService(stream=sys.stderr if args.json else None)
    sources = args.files or [STDIN]
    prefixed = len(sources) > 1

    results: Dict[str, VitalityResult] = {}
    exit_code = 0

    for source in sources:
        prefix = f"{source}: " if prefixed else ""
        try:
            result = analyze_source(service, source)
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("%s: %s", source, exc)
            display.display_error(f"{source}: can't open file")
            exit_code = 1
            continue
        except InputFormatError as exc:
            logger.warning("%s: %s", source, exc)
            print(f"{prefix}{exc}", file=sys.stderr if args.json else sys.stdout)
            exit_code = 1
            continue

        results[source] = result
        if not args.json:
            print(f"{prefix}{result.format_line()}")
        if args.scores:
            display.display_scores(result, title=f"Vitality Scores: {source}")

    if args.json:
        print(json.dumps(_export_payload(results, prefixed), indent=2, default=str))

    if args.output and results:
        service.export_results(_export_payload(results, prefixed), args.output)

    return exit_code


def _export_payload(results: Dict[str, VitalityResult], keyed: bool) -> Dict:
    if keyed:
        return {source: result.to_dict() for source, result in results.items()}
    return next(iter(results.values())).to_dict() if results else {}


if __name__ == "__main__":
    sys.exit(main())
