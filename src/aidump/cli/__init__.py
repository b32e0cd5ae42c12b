"""Command-line interface for aidump."""
