#!/usr/bin/env python3
"""
Header Cleaner CLI

A tool for finding redundant #include directives in C/C++ headers: direct
includes whose target is already reachable through another include of the
same file.
"""

import argparse
import logging
import sys
from pathlib import Path

from config import CleanerConfig, OUTPUT_FORMATS, load_config, split_list
from errors import HeaderCleanerError
from exporters import to_json, to_text
from graph.duplicates import find_redundant_includes
from logging_config import setup_logging
from scanner.builder import build_graph

logger = logging.getLogger(__name__)


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="header-cleaner",
        description="Report #include directives that are already reachable through another include.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  header-cleaner .                           # Scan current directory
  header-cleaner src -i "include|third_party" # Extra include search directories
  header-cleaner src -e "generated|vendor"   # Skip headers under these directories
  header-cleaner . --ext .h .hpp             # Scan .h and .hpp files
  header-cleaner . -f json -o report.json    # JSON output to file
        """,
    )

    # Positional arguments
    parser.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Directory to scan (default: current directory)",
    )

    parser.add_argument(
        "-p", "--path",
        dest="path",
        default=None,
        help="Directory to scan (alternative to the positional argument)",
    )

    # Scanning options
    parser.add_argument(
        "-i", "--include-dirs",
        action="append",
        default=None,
        help="Include search directories relative to the root, '|'-separated (repeatable)",
    )

    parser.add_argument(
        "-e", "--exclude-dirs",
        action="append",
        default=None,
        help="Relative directory prefixes to skip, '|'-separated (repeatable)",
    )

    parser.add_argument(
        "--ext",
        nargs="+",
        default=None,
        help="Header file extensions to scan (default: .h)",
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="YAML config file (default: .header-cleaner.yaml in the root, if present)",
    )

    # Output options
    parser.add_argument(
        "-f", "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: text)",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    # Logging options
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show debug logging on stderr",
    )
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log errors",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also append log records to this file",
    )

    return parser.parse_args(args)


def resolve_config(parsed, root: Path) -> CleanerConfig:
    """Merge the config file with command line overrides."""
    config_path = Path(parsed.config) if parsed.config else None
    config = load_config(path=config_path, root=root)
    return config.merge(
        include_dirs=split_list(parsed.include_dirs) if parsed.include_dirs else None,
        exclude_dirs=split_list(parsed.exclude_dirs) if parsed.exclude_dirs else None,
        extensions=parsed.ext,
        output_format=parsed.format,
    )


def run(root: Path, config: CleanerConfig) -> str:
    """
    Build the include graph under root and render the redundant includes.

    Raises:
        HeaderCleanerError: On a circular dependency or a bad scan root.
        OSError: If a header cannot be read.
    """
    graph = build_graph(
        root=root,
        include_dirs=config.include_dirs,
        exclude_dirs=config.exclude_dirs,
        extensions=set(config.extensions),
    )
    reports = find_redundant_includes(graph)
    logger.info("%d file(s) with redundant includes", len(reports))

    if config.output_format == "json":
        return to_json(reports, root=graph.scan_root) + "\n"
    return to_text(reports)


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)
    root = Path(parsed.path or parsed.root or ".")

    try:
        setup_logging(verbose=parsed.verbose, quiet=parsed.quiet, log_file=parsed.log_file)
        config = resolve_config(parsed, root)
        output = run(root, config)
    except (HeaderCleanerError, OSError) as e:
        logger.debug("Run aborted", exc_info=True)
        print(f"error : {e}", file=sys.stderr)
        return 1

    # Write output
    if parsed.output:
        try:
            output_path = Path(parsed.output)
            output_path.write_text(output, encoding="utf-8")
            print(f"Output written to: {output_path}", file=sys.stderr)
        except OSError as e:
            print(f"error : cannot write output: {e}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
