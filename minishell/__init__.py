"""String, buffer, formatting, list, environment and shell-state helpers for a small shell."""

__version__ = "0.1.0"