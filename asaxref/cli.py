"""CLI entry point and orchestration logic."""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .analysis.engine import run_analysis
from .defaults import FORMATS, REPORTS
from .emitters.report import build_rows, render
from .options import AnalysisOptions
from .parser.extractors import extract_all
from .parser.tokenizer import tokenize
from .parser.tree import build_tree
from .util import OptionsError, setup_logging

log = logging.getLogger(__name__)

# CLI flag -> AnalysisOptions attribute
_OVERRIDES = {
    "acl": "inbound_acl",
    "outside_interface": "outside_interface",
    "report": "report",
    "format": "format",
    "name": "name_filter",
    "zone": "zone_filter",
    "category": "category_filter",
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="asaxref",
        description="Cross-reference objects, NAT, access-lists and VPNs in a Cisco ASA running-config.",
    )
    p.add_argument(
        "input", type=Path, nargs="?",
        help="Path to ASA 'show running-config' output",
    )
    p.add_argument("-r", "--report", choices=REPORTS, default=None,
                   help="Report to produce (default: summary)")
    p.add_argument("-f", "--format", choices=FORMATS, default=None,
                   help="Output format (default: table)")
    p.add_argument("-o", "--output", type=Path, default=None,
                   help="Write the report to this file instead of stdout")
    p.add_argument("--acl", default=None,
                   help="Inbound ACL for NAT reachability (default: ACL bound in on outside)")
    p.add_argument("--outside-interface", default=None,
                   help="nameif of the outside interface (default: outside)")
    p.add_argument("--name", default=None, help="Wildcard filter on row name")
    p.add_argument("--zone", default=None, help="Wildcard filter on zone / interface")
    p.add_argument("--category", default=None, help="Wildcard filter on category / match type")
    p.add_argument("--options", type=Path, default=None, help="Load options from a YAML file")
    p.add_argument("--write-options", type=Path, default=None,
                   help="Write the effective options to a YAML file")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    p.add_argument("--version", action="version", version=f"asaxref {__version__}")
    return p


def _load_options(args: argparse.Namespace) -> AnalysisOptions:
    options = AnalysisOptions()
    if args.options:
        if not args.options.exists():
            log.error(f"Options file not found: {args.options}")
            sys.exit(1)
        log.info(f"Loading options from: {args.options}")
        options = AnalysisOptions.from_yaml(args.options.read_text(encoding="utf-8"))

    for flag, attr in _OVERRIDES.items():
        value = getattr(args, flag)
        if value is not None:
            setattr(options, attr, value)
    return options


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.input is None and args.write_options is None:
        parser.error("an input file is required unless --write-options is given")

    try:
        options = _load_options(args)
    except OptionsError as e:
        log.error(f"Invalid options: {e}")
        for err in e.errors:
            log.error(f"  - {err}")
        sys.exit(1)

    if args.write_options:
        args.write_options.write_text(options.to_yaml(), encoding="utf-8")
        log.info(f"Options written to: {args.write_options}")
        if args.input is None:
            return

    # Validate input file
    if not args.input.exists():
        log.error(f"Input file not found: {args.input}")
        sys.exit(1)

    # === STEP 1: Parse ASA config ===
    log.info(f"Reading ASA config: {args.input}")
    raw_text = args.input.read_text(encoding="utf-8", errors="replace")
    tokens = tokenize(raw_text)
    log.info(f"Tokenized {len(tokens)} lines")

    tree = build_tree(tokens)
    log.debug(f"Built config tree with {len(tree)} top-level commands")

    # === STEP 2: Extract entity tables ===
    config = extract_all(tree)

    # === STEP 3: Resolve, classify, correlate ===
    result = run_analysis(config, options.inbound_acl, options.outside_interface)

    # === STEP 4: Filter and render ===
    rows = build_rows(result, options.report)
    row_filter = options.row_filter()
    if row_filter.active:
        before = len(rows)
        rows = row_filter.apply(rows)
        log.info(f"Filters kept {len(rows)} of {before} rows")

    output = render(rows, options.report, options.format)
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(output, encoding="utf-8")
        log.info(f"Report '{options.report}' written to: {args.output}")
    else:
        sys.stdout.write(output)
