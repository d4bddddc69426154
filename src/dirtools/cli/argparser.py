"""Command-line argument parsing for dirtools.

This module defines the command-line interface for dirtools, handling argument
parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from dirtools import __version__
from dirtools.exclusion_rules.base_rules import BaseExclusionRules


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling gitignore-style exclusion rules.

    The action updates the provided exclusion rules object as arguments are processed,
    which preserves the exact order of -e/--exclude files and -g/--gitignore patterns
    as they appear on the command line (later rules can negate earlier ones).

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                exclusion_rules.load_rules(Path(str(values)))
            else:  # -g/--gitignore
                exclusion_rules.add_rule(str(values))

            # Keep the raw values on the namespace as well
            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def _add_exclusion_arguments(parser: argparse.ArgumentParser, exclusion_action: Type[argparse.Action]) -> None:
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="NAME",
        action="append",
        default=[],
        help=(
            "Name or regular expression of files and directories to skip. A directory is skipped when "
            "NAME matches its whole name, a file when NAME matches any part of its name, so '.keep' also "
            "skips 'xkeep' (use '^\\.keep$' for an exact file name). '.' alone skips dot-entries, like -H. "
            "An excluded directory is skipped together with everything below it. Can be specified "
            "multiple times."
        ),
    )
    parser.add_argument(
        "-H",
        "--hide-dot",
        action="store_true",
        help="Skip dot-files and dot-directories (and everything below them).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=exclusion_action,
        help="Path to a .gitignore-style file of paths to skip (can be specified multiple times).",
    )
    parser.add_argument(
        "-g",
        "--gitignore",
        type=str,
        metavar="PATTERN",
        action=exclusion_action,
        help=(
            "Individual gitignore-style pattern of paths to skip, processed in command-line order "
            "together with -e/--exclude files (e.g. '*.log', 'build/', '!keep.log')."
        ),
    )
    parser.add_argument(
        "--max-size",
        metavar="SIZE",
        help="Skip files larger than SIZE (e.g. 500KB, 10MB, 1GiB).",
    )


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The gitignore-style rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with dirtools' commands and options.
    """
    description = """
    dirtools: walk, check and clean directory trees.

    Commands:
      tree      List the directories and files under a directory
      writable  Check that a directory tree is readable and writable
      unlink    Remove every file under a directory, keeping the directories
      rmdir     Remove a directory and everything in it
    """

    epilog = """
    Examples:
      # List directories, then files
      dirtools tree /path/to/project

      # Draw a tree, skipping dot-entries and anything called node_modules
      dirtools tree -H -i node_modules --format tree /path/to/project

      # Use .gitignore rules and skip big files
      dirtools tree -e .gitignore --max-size 1MB /path/to/project

      # Check every file too, not only directories
      dirtools writable --all-files /path/to/project

      # Empty a cache directory but keep its layout and its .keep files
      dirtools unlink -i .keep /path/to/cache
    """

    parser = argparse.ArgumentParser(
        prog="dirtools",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"dirtools {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log more details to stderr (-v for info, -vv for debug).",
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    tree_parser = subparsers.add_parser("tree", help="List the directories and files under a directory.")
    tree_parser.add_argument("directory", type=Path, help="The directory to walk.")
    _add_exclusion_arguments(tree_parser, ExclusionAction)
    tree_parser.add_argument(
        "-f",
        "--format",
        choices=["list", "tree"],
        default="list",
        help="Output format: sorted paths, directories first (list), or a drawing (tree). Default: list.",
    )
    tree_parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print directory and file counts to stderr.",
    )
    tree_parser.add_argument(
        "--ignore-errors",
        action="store_true",
        help="Print nothing, instead of failing, when the directory does not exist.",
    )

    writable_parser = subparsers.add_parser("writable", help="Check that a directory tree is readable and writable.")
    writable_parser.add_argument("directory", type=Path, help="The directory to check.")
    writable_parser.add_argument(
        "-a",
        "--all-files",
        action="store_true",
        help="Check files too, not only directories.",
    )
    writable_parser.add_argument(
        "--ignore-errors",
        action="store_true",
        help="Answer 'no', instead of failing, when the directory does not exist.",
    )

    unlink_parser = subparsers.add_parser("unlink", help="Remove every file, keeping the directories.")
    unlink_parser.add_argument("directory", type=Path, help="The directory to empty.")
    _add_exclusion_arguments(unlink_parser, ExclusionAction)
    unlink_parser.add_argument(
        "--ignore-errors",
        action="store_true",
        help="Exit with status 1, instead of printing an error, when something cannot be removed.",
    )

    rmdir_parser = subparsers.add_parser("rmdir", help="Remove a directory and everything in it.")
    rmdir_parser.add_argument("directory", type=Path, help="The directory to remove.")

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    for name in getattr(args, "ignore", None) or []:
        if not name:
            raise ValueError("-i/--ignore requires a non-empty name")
