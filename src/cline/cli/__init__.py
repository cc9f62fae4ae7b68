"""
CLI module for the cline package.

Provides the prompt_toolkit completer and interactive loop for hosts, plus
the cline-demo entry point.
"""

from cline.cli._repl import DispatcherCompleter, cline_run

__all__ = [
    "DispatcherCompleter",
    "cline_run",
]
