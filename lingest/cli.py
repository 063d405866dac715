"""
Lingest Command Line

Builds an IngestRequest from arguments and the project config file, runs the
ingest core, and writes (or previews) the artifact.
"""

import argparse
import os
import sys
from typing import Optional, Sequence

from lingest import __version__
from lingest.configs.constants import DEFAULT_OUTPUT_FILENAME, PROJECT_CONFIG_FILENAME
from lingest.configs.ignore_patterns import build_ignore_globs, parse_glob_list
from lingest.configs.logging import get_logger, setup_logging
from lingest.configs.yaml_config import create_default_config, get_config_path, load_yaml_config
from lingest.exceptions import LingestError
from lingest.ingest import process_directory
from lingest.models import IngestRequest
from lingest.output import format_dry_run_summary, format_output, write_output

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lingest",
        description="Bundle a directory tree and its file contents into one text file.",
    )
    parser.add_argument(
        "-C",
        "--cwd",
        default=".",
        help="Directory to ingest (default: current directory)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help=f"Output file name (default: {DEFAULT_OUTPUT_FILENAME})",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        default="",
        help="Comma-separated list of glob patterns to ignore (files or directories)",
    )
    parser.add_argument(
        "-n",
        "--include",
        default="",
        help="Comma-separated list of glob patterns to include. If set, only these files are processed",
    )
    parser.add_argument("-f", "--force", action="store_true", help="Overwrite existing output file")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress info logs")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show which files would be processed without reading or writing anything",
    )
    parser.add_argument("--no-tree", action="store_true", help="Skip directory tree section")
    parser.add_argument(
        "--no-default-ignores",
        action="store_true",
        help="Do not apply the built-in ignore globs",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help=f"Write a commented {PROJECT_CONFIG_FILENAME} template into the directory and exit",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_request(args: argparse.Namespace) -> IngestRequest:
    """
    Merge command line, .lingest.yaml and defaults into a request.

    Command-line values win over the config file; ignore and include lists
    from both sources are concatenated.
    """
    root = os.path.abspath(args.cwd)
    config = load_yaml_config(root)

    output_name = args.output or config.get("output") or DEFAULT_OUTPUT_FILENAME
    output_path = os.path.abspath(os.path.join(root, output_name))

    use_defaults = config.get("use_default_ignores", True) and not args.no_default_ignores
    user_ignore = config.get("ignore", []) + parse_glob_list(args.ignore)
    include = config.get("include", []) + parse_glob_list(args.include)

    return IngestRequest(
        root=root,
        output_path=output_path,
        ignore_patterns=build_ignore_globs(output_path, user_ignore, use_defaults=use_defaults),
        include_patterns=include,
        no_tree=args.no_tree or config.get("no_tree", False),
        dry_run=args.dry_run,
    )


def init_config(root: str) -> int:
    """Write the config template; an existing file is left alone."""
    if not create_default_config(root):
        logger.error(f"{get_config_path(root)} already exists.")
        return 1
    return 0


def run(args: argparse.Namespace) -> int:
    if args.init:
        return init_config(os.path.abspath(args.cwd))

    request = build_request(args)

    logger.info(f"Starting lingest in directory: {request.root}")
    logger.info(f"Output will be saved to: {request.output_path}")
    if request.include_patterns:
        logger.info(f"Including files matching: {', '.join(request.include_patterns)}")

    # Refuse early so a long run is not wasted
    if not args.force and not request.dry_run and os.path.exists(request.output_path):
        logger.error(f"Output file {request.output_path} exists. Use --force to overwrite.")
        return 1

    result = process_directory(request)

    if request.dry_run:
        print(format_dry_run_summary(result, request.output_path, no_tree=request.no_tree))
        return 0

    text = format_output(result, no_tree=request.no_tree)
    path = write_output(request.output_path, text, force=args.force)
    logger.info(f"Generated {os.path.relpath(path, request.root)} with {result.processed_count} file(s).")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the lingest command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(quiet=args.quiet)

    try:
        return run(args)
    except LingestError as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
