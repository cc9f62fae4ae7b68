"""
Helper functions for turning input lines into tokens.
"""

from __future__ import annotations

from typing import Any, Sequence

from cline.core.exceptions import InvalidRegistrationError


def tokenize(line: str) -> list[str]:
    """Split a line on runs of whitespace.

    Leading and trailing whitespace is ignored, so an empty or blank line
    gives an empty list.
    """
    return line.split()


def tokenize_for_completion(line: str) -> list[str]:
    """Split a line for completion.

    Like tokenize(), but a trailing whitespace character starts a new, empty
    partial token: "foo " -> ["foo", ""], while "foo" -> ["foo"].
    """
    tokens = line.split()
    if tokens and line[-1].isspace():
        tokens.append("")
    return tokens


def _validate_path(path: Sequence[str] | Any) -> list[str]:
    """Check a registration path and return it as a list of tokens."""
    if isinstance(path, (str, bytes)):
        raise InvalidRegistrationError(
            f"Command path must be a sequence of tokens, not a string: {path!r}"
        )
    try:
        tokens = list(path)
    except TypeError:
        raise InvalidRegistrationError(f"Command path is not a sequence: {path!r}") from None

    if not tokens:
        raise InvalidRegistrationError("Command path must not be empty")

    for token in tokens:
        if not isinstance(token, str):
            raise InvalidRegistrationError(f"Token must be a string: {token!r}")
        if not token:
            raise InvalidRegistrationError(f"Empty token in command path: {tokens!r}")
        if token.split() != [token]:
            raise InvalidRegistrationError(f"Token contains whitespace: {token!r}")

    return tokens
