"""
Core module for the cline package.

Provides the command tree and related models for registering, completing
and resolving hierarchical commands.
"""

from cline.core.datamodels import CommandEntry, CommandNode, Resolution
from cline.core.exceptions import (
    ClineError,
    DuplicateRegistrationError,
    InvalidRegistrationError,
    NoMatchError,
)
from cline.core.helpers import tokenize, tokenize_for_completion
from cline.core.tree import CommandTree

__all__ = [
    # Tree
    "CommandTree",
    # Models
    "CommandNode",
    "CommandEntry",
    "Resolution",
    # Exceptions
    "ClineError",
    "InvalidRegistrationError",
    "DuplicateRegistrationError",
    "NoMatchError",
    # Helpers
    "tokenize",
    "tokenize_for_completion",
]
