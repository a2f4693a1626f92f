#!/usr/bin/env python3
"""CLI interface for separate_snippets module."""

import argparse
from pathlib import Path

from rich.markup import escape

from common.env import env, with_leading_dot
from common.logger import error, setup_logging, success

from .exceptions import SnippetError
from .main import separate_all
from .models import DuplicatePolicy


def cmd_separate(args):
    """Separate snippets from all source files under the root directory.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    root = Path(args.root)
    if not root.is_dir():
        error(f"{root} is not a directory")
        return 1

    try:
        duplicate_policy = DuplicatePolicy(args.duplicates)
    except ValueError:
        choices = ", ".join(p.value for p in DuplicatePolicy)
        error(f"Invalid duplicates policy {args.duplicates!r} (expected one of: {choices})")
        return 1

    output_dir = Path(args.output_dir)
    if not output_dir.is_absolute():
        output_dir = root / output_dir

    try:
        results = separate_all(
            root,
            output_dir,
            extension=args.extension,
            exclude=args.exclude,
            duplicate_policy=duplicate_policy,
            dry_run=args.dry_run,
        )
    except SnippetError as e:
        error(escape(str(e)))
        return 1
    except OSError as e:
        error(escape(f"Filesystem error: {e}"))
        return 1

    total = sum(len(r.files) for r in results)
    verb = "Would write" if args.dry_run else "Wrote"
    success(f"{verb} {total} snippets from {len(results)} files to {output_dir}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Separate tagged snippets from source files into standalone files"
    )
    parser.add_argument(
        "--root",
        type=str,
        default=str(env.source_root()),
        help="Directory to scan for source files (default: SNIPPETS_ROOT or .)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=str(env.output_dir()),
        help="Output directory, relative to --root unless absolute (default: snippets)",
    )
    parser.add_argument(
        "--extension",
        type=with_leading_dot,
        default=env.extension(),
        help="Source file extension (default: .js)",
    )
    parser.add_argument(
        "--exclude",
        type=str,
        default=env.exclude(),
        help="Skip files under this path segment (default: node_modules)",
    )
    parser.add_argument(
        "--duplicates",
        choices=[p.value for p in DuplicatePolicy],
        default=env.duplicates(),
        help="Handling of a snippet name repeated within one file (default: error)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be written without writing files",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Also write log output to this file",
    )
    parser.set_defaults(func=cmd_separate)
    return parser


def main(argv=None):
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)
    setup_logging(level=env.log_level(), log_file=args.log_file)
    return args.func(args)


if __name__ == "__main__":
    exit(main())
