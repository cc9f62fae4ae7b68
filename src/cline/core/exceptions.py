"""
Exception classes for the command tree.
"""

from __future__ import annotations


class ClineError(Exception):
    """Base exception for command tree errors."""


class InvalidRegistrationError(ClineError):
    """A command path or callback was rejected at registration."""


class DuplicateRegistrationError(InvalidRegistrationError):
    """Path is already registered and the duplicate policy is "error"."""


class NoMatchError(ClineError):
    """No registered command resolves from the given tokens."""

    def __init__(self, tokens: list[str], message: str | None = None):
        self.tokens = list(tokens)
        if message is None:
            if self.tokens:
                message = f"Unknown command: {' '.join(self.tokens)}"
            else:
                message = "No command given"
        super().__init__(message)
