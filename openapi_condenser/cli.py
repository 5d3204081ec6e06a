"""
Command-line interface: `openapi-condenser`.
"""
import argparse
import json
import logging
import sys
from dataclasses import asdict

from .config import DEFAULT_CONFIG_PATH, load_config, merge_with_command_line_args
from .exceptions import ConfigurationError
from .extractor import extract_openapi
from .options import ExtractorConfig, OutputConfig, OutputFormat, SourceConfig

logger = logging.getLogger(__name__)

VALID_FORMATS = [f.value for f in OutputFormat]


def build_parser():
    parser = argparse.ArgumentParser(
        prog='openapi-condenser',
        description="Extract and transform OpenAPI specifications",
    )
    parser.add_argument("-c", "--config", help="Path to configuration file (.json, .yaml, or .yml)")
    parser.add_argument("-s", "--source", help="Source file path")
    parser.add_argument("-f", "--format", help=f"Output format ({', '.join(VALID_FORMATS)})")
    parser.add_argument("-o", "--output", help="Output file path")
    parser.add_argument("--include-paths", help="Include paths by glob patterns (comma-separated)")
    parser.add_argument("--exclude-paths", help="Exclude paths by glob patterns (comma-separated)")
    parser.add_argument("--include-tags", help="Include endpoints by tag glob patterns (comma-separated)")
    parser.add_argument("--exclude-tags", help="Exclude endpoints by tag glob patterns (comma-separated)")
    parser.add_argument("--methods", help="Filter by HTTP methods (comma-separated)")
    parser.add_argument("--include-deprecated", action="store_true", help="Include deprecated endpoints")
    parser.add_argument("--exclude-schemas", action="store_true",
                        help="Exclude component schemas from the output")
    parser.add_argument("--exclude-request-bodies", action="store_true",
                        help="Exclude request bodies from the output")
    parser.add_argument("--exclude-responses", action="store_true",
                        help="Exclude responses from the output")
    parser.add_argument("--remove-examples", action="store_true", help="Strip example/examples fields")
    parser.add_argument("--remove-descriptions", action="store_true", help="Strip description fields")
    parser.add_argument("--remove-summaries", action="store_true", help="Strip summary fields")
    parser.add_argument("--max-depth", type=int, help="Truncate nested objects below this depth")
    parser.add_argument("--stats", action="store_true", help="Print before/after statistics to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show verbose output")
    return parser


def resolve_config(args):
    """Load the config file, or build a minimal one when only a source is given."""
    config_path = args.config or DEFAULT_CONFIG_PATH
    try:
        return load_config(config_path)
    except ConfigurationError:
        if not args.source:
            raise
        logger.debug("No usable config at %s, using defaults", config_path)
        return ExtractorConfig(
            source=SourceConfig(path=args.source),
            output=OutputConfig(format=OutputFormat.parse(args.format or 'json')),
        )


def print_stats(stats):
    before, after = stats['before'], stats['after']
    rows = [
        ('Paths', before.paths, after.paths),
        ('Operations', before.operations, after.operations),
        ('Schemas', before.schemas, after.schemas),
        ('Characters', before.char_count, after.char_count),
        ('Lines', before.line_count, after.line_count),
        ('Tokens (est.)', before.token_count, after.token_count),
    ]
    print(f"{'':<14}{'Before':>12}{'After':>12}", file=sys.stderr)
    for label, old, new in rows:
        print(f"{label:<14}{old:>12}{new:>12}", file=sys.stderr)


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = merge_with_command_line_args(resolve_config(args), args)
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if args.verbose:
        print("Using configuration:", file=sys.stderr)
        print(json.dumps(asdict(config), indent=2, default=str), file=sys.stderr)

    result = extract_openapi(config)
    if not result.success:
        print("Errors:", "\n".join(result.errors), file=sys.stderr)
        return 1

    if not config.output.destination:
        print(result.data)
    elif args.verbose:
        print(f"Output written to: {config.output.destination}", file=sys.stderr)

    if result.warnings:
        print("Warnings:", "\n".join(result.warnings), file=sys.stderr)
    if args.stats:
        print_stats(result.stats)

    return 0


if __name__ == "__main__":
    sys.exit(main())
