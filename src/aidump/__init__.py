"""Project flattening utilities for AI context.

This package walks a project directory and renders either the concatenated
contents of its included files or a box-drawing tree of its structure, in a
plain-text format suitable for use as Large Language Model (LLM) input.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("aidump")
except PackageNotFoundError:
    __version__ = "unknown"
