"""Command-line interface for dirtools.

This module provides the ``dirtools`` command, a thin front end over the recursive
filesystem operations: listing a tree, checking it is writable, removing its files and
removing it altogether.

Exit Codes:
    0: Successful completion (or a positive answer for ``writable``)
    1: Runtime error, or a negative answer (``writable`` printed "no", ``rmdir`` was
       given something that is not a directory, ``unlink`` failed with --ignore-errors)
    2: Command-line syntax error
    126: Permission denied
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (output closed early, e.g. when piping to `head`)

Example:
    # List a project, skipping dot-entries
    $ dirtools tree -H /path/to/project

    # Display version information
    $ dirtools --version
"""

import argparse
import logging
import os
import sys
from collections.abc import Mapping
from typing import List, Optional, Sequence

from dirtools.cli.argparser import create_parser, validate_args
from dirtools.exclusion_rules.base_rules import BaseExclusionRules
from dirtools.exclusion_rules.compiler import HIDE_DOT_ENTRIES, compile_exclusions
from dirtools.exclusion_rules.composite_rules import CompositeExclusionRules
from dirtools.exclusion_rules.git_rules import GitIgnoreExclusionRules
from dirtools.exclusion_rules.size_rules import SizeExclusionRules
from dirtools.file_system_tree.file_system_tree import FileSystemTree
from dirtools.filesystem import is_writable_recursive, rmdir_recursive, unlink_recursive

logger = logging.getLogger(__name__)

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr, at a level chosen by the number of -v flags."""
    level = LOG_LEVELS[min(verbosity, len(LOG_LEVELS) - 1)]
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping with ``directories`` and ``files`` counts.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    return "\n".join([f"Directories: {counts['directories']}", f"Files: {counts['files']}"])


def build_exclusion_rules(args: argparse.Namespace, git_rules: GitIgnoreExclusionRules) -> BaseExclusionRules:
    """Combine the exclusion options of a command into a single rules object.

    Args:
        args: Parsed command-line arguments.
        git_rules: The gitignore-style rules filled in while parsing -e/-g options.

    Returns:
        The name rules alone when nothing else was requested, otherwise a composite of
        every configured rule type.
    """
    patterns = args.ignore + [HIDE_DOT_ENTRIES] if args.hide_dot else args.ignore
    rules: List[BaseExclusionRules] = [compile_exclusions(patterns)]
    if git_rules.has_rules():
        rules.append(git_rules)
    if args.max_size:
        rules.append(SizeExclusionRules(args.max_size, base_path=args.directory))
    return rules[0] if len(rules) == 1 else CompositeExclusionRules(rules)


def run_tree(args: argparse.Namespace, exclusion_rules: BaseExclusionRules) -> int:
    tree = FileSystemTree(args.directory, exclusion_rules)
    try:
        if args.format == "tree":
            for line in tree.stream_tree_representation():
                print(line)
        else:
            for path in tree.get_directories() + tree.get_files():
                print(path)
    except FileNotFoundError as e:
        if not args.ignore_errors:
            raise
        logger.info("Ignoring error: %s", e)
        return 0

    if args.summary:
        counts = {"directories": tree.get_directory_count(), "files": tree.get_file_count()}
        print(format_counts(counts), file=sys.stderr)
    return 0


def run_writable(args: argparse.Namespace) -> int:
    writable = is_writable_recursive(
        args.directory, check_only_dirs=not args.all_files, ignore_errors=args.ignore_errors
    )
    print("yes" if writable else "no")
    return 0 if writable else 1


def run_unlink(args: argparse.Namespace, exclusion_rules: BaseExclusionRules) -> int:
    return 0 if unlink_recursive(args.directory, exclusion_rules, ignore_errors=args.ignore_errors) else 1


def run_rmdir(args: argparse.Namespace) -> int:
    if not rmdir_recursive(args.directory):
        print(f"Error: Not a directory: {args.directory}", file=sys.stderr)
        return 1
    return 0


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the dirtools command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Runtime error or negative answer
        2: Command-line syntax error
        126: Permission denied
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe
    """
    try:
        # Filled in by the -e/-g actions while parsing
        git_rules = GitIgnoreExclusionRules()
        parser = create_parser(git_rules)
        args = parser.parse_args(argv)

        validate_args(args)
        configure_logging(args.verbose)

        if args.command == "tree":
            code = run_tree(args, build_exclusion_rules(args, git_rules))
        elif args.command == "writable":
            code = run_writable(args)
        elif args.command == "unlink":
            code = run_unlink(args, build_exclusion_rules(args, git_rules))
        else:
            code = run_rmdir(args)

        sys.stdout.flush()
    except BrokenPipeError:
        # Python flushes stdout again at exit; point it at devnull so that doesn't fail
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except KeyboardInterrupt:
        sys.exit(130)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    sys.exit(code)


if __name__ == "__main__":
    main()
