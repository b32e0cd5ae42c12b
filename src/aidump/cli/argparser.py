"""Command-line argument parsing for aidump.

This module defines the command-line interface for aidump, handling argument
parsing, validation, and resolution of the positional arguments into a concrete
invocation.
"""

import argparse
from pathlib import Path
from typing import NamedTuple, Optional

from aidump import __version__
from aidump.exceptions import RootDirectoryError
from aidump.types import RenderMode


class Invocation(NamedTuple):
    """Everything needed to run once, resolved from the command line.

    Attributes:
        root_dir: Absolute path of the project root.
        output_path: Destination file, or None for standard output.
        mode: Dump or tree output.
        config_source: Explicit config file, or None to use ``<root_dir>/ai.json`` if present.
    """

    root_dir: Path
    output_path: Optional[Path]
    mode: RenderMode
    config_source: Optional[Path]


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with aidump's options.
    """
    description = """
    aidump: flatten a project into AI-ready text.

    Walks a project directory and writes either the contents of every included file,
    each framed with its relative path, or a tree of the included structure. The
    output is meant to be pasted into, or uploaded to, a Large Language Model.

    Which files are included is controlled by an ai.json file in the project root:

      {
        "exclude": {"extensions": [...], "folders": [...], "filenames": [...], "patterns": [...]},
        "include": {"extensions": [...], "folders": [...], "filenames": [...]}
      }

    Folder and filename rules starting with "/" only match that exact path from the
    project root. Exclude rules always win over include rules.
    """

    epilog = """
    Examples:
      # Dump the current directory to stdout
      aidump

      # Dump a project into a file
      aidump /path/to/project project.txt

      # Write the current directory's dump into a file
      aidump project.txt

      # Print the directory tree instead of file contents
      aidump --tree /path/to/project

      # Use a config file stored elsewhere
      aidump --config=ci/ai.json /path/to/project

      # Add gitignore-style exclusions on top of the config
      aidump -i "*.min.js" -i "generated/" /path/to/project

      # Fall back to the historical built-in exclusions when no ai.json exists
      aidump --builtin-defaults /path/to/project
    """

    parser = argparse.ArgumentParser(
        prog="aidump",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"aidump {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help=(
            "[rootDir] [outputPath]. With a single argument, it is the root directory if it is an "
            "existing directory and the output file otherwise. The root defaults to the current directory "
            "and the output to stdout."
        ),
    )
    parser.add_argument(
        "--tree",
        action="store_true",
        help="Print the directory tree instead of file contents.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        metavar="FILE",
        help="Path to the config file (default: <rootDir>/ai.json).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action="append",
        default=[],
        help="Gitignore-style pattern to exclude files and directories (can be specified multiple times).",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="warn",
        help="How to handle unreadable files and directories (default: warn).",
    )
    parser.add_argument(
        "--builtin-defaults",
        action="store_true",
        help="Apply the built-in exclusion lists when no config file is found.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log configuration and traversal details to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if len(args.paths) > 2:
        raise ValueError(f"Expected at most two paths ([rootDir] [outputPath]), got {len(args.paths)}")


def resolve_invocation(args: argparse.Namespace, cwd: Optional[Path] = None) -> Invocation:
    """Resolve parsed arguments into the root directory, output, mode and config source.

    Args:
        args: Parsed and validated command-line arguments.
        cwd: Directory used when no root is given. Defaults to the current working directory.

    Raises:
        RootDirectoryError: If the resolved root is not an existing directory.
    """
    cwd = cwd if cwd is not None else Path.cwd()
    paths = [Path(p) for p in args.paths]

    output_path: Optional[Path] = None
    if not paths:
        root_dir = cwd
    elif len(paths) == 1:
        if paths[0].is_dir():
            root_dir = paths[0]
        else:
            root_dir, output_path = cwd, paths[0]
    else:
        root_dir, output_path = paths[0], paths[1]

    if not root_dir.is_dir():
        raise RootDirectoryError(str(root_dir))

    mode = RenderMode.TREE if args.tree else RenderMode.DUMP
    return Invocation(root_dir.resolve(), output_path, mode, args.config)
