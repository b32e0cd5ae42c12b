"""Command-line interface for aidump.

This module provides the command-line entry point. It parses arguments, resolves
the project root, output sink and configuration, and streams the rendered output
while handling interruptions gracefully.

Exit Codes:
    0: Successful completion
    1: Runtime error (invalid root directory, unwritable output, malformed config)
    2: Command-line syntax error
    126: Permission denied with -P fail
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Dump the current directory
    $ aidump

    # Tree of a project written to a file
    $ aidump --tree /path/to/project tree.txt
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from aidump.aidump import AIDump
from aidump.cli.argparser import create_parser, resolve_invocation, validate_args
from aidump.cli.safe_writer import SafeWriter
from aidump.cli.signal_handler import setup_signal_handling, signal_handler
from aidump.config import resolve_config
from aidump.file_system_tree.permission_action import PermissionAction

logger = logging.getLogger(__name__)

PERMISSION_ACTIONS = {
    "ignore": PermissionAction.IGNORE,
    "warn": PermissionAction.WARN,
    "fail": PermissionAction.RAISE,
}


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG when verbose and WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def output_exclusions(root_dir: Path, output_path: Optional[Path]) -> List[str]:
    """Root-anchored filename rules that keep an output file inside the root out of its own walk.

    Example:
        >>> output_exclusions(Path("/work/shop"), Path("/work/shop/out/dump.txt"))
        ['/out/dump.txt']
        >>> output_exclusions(Path("/work/shop"), Path("/tmp/dump.txt"))
        []
    """
    if output_path is None:
        return []
    try:
        relative = output_path.resolve().relative_to(root_dir)
    except ValueError:
        return []
    return ["/" + relative.as_posix()]


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the aidump command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.
    """
    setup_signal_handling()

    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        validate_args(args)
        invocation = resolve_invocation(args)
        config = resolve_config(
            invocation.root_dir, invocation.config_source, use_builtin_defaults=args.builtin_defaults
        ).with_exclude_patterns(args.ignore)
        config = config.with_exclude_filenames(output_exclusions(invocation.root_dir, invocation.output_path))

        dump = AIDump(
            invocation.root_dir,
            config=config,
            mode=invocation.mode,
            permission_action=PERMISSION_ACTIONS[args.permission_action],
        )
        logger.debug("Rendering %s of %s", invocation.mode.value, invocation.root_dir)

        output = invocation.output_path if invocation.output_path else sys.stdout.fileno()
        with SafeWriter(output) as writer:
            try:
                for chunk in dump.stream():
                    writer.write(chunk)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

        if invocation.output_path and not signal_handler.interrupted():
            print(f"AI-ready output written to: {invocation.output_path}")

    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
