"""
Data models for the command tree.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable

from pydantic import BaseModel, Field

Callback = Callable[[list[str]], Any]
Completer = Callable[[list[str]], Iterable[str]]


class CommandNode(BaseModel):
    """One token position in the command namespace.

    A node with a callback is a terminal (executable) command. A terminal
    node may still have children, e.g. "foo" and "foo bar" can both be
    registered.
    """
    token: str = ""
    children: dict[str, CommandNode] = Field(default_factory=dict)
    callback: Callback | None = Field(default=None, exclude=True)
    completer: Completer | None = Field(default=None, exclude=True)
    description: str | None = None

    model_config = {"arbitrary_types_allowed": True}

    @property
    def is_terminal(self) -> bool:
        return self.callback is not None

    def child(self, token: str) -> CommandNode | None:
        return self.children.get(token)


class Resolution(BaseModel):
    """Result of resolving a token sequence to a registered command."""
    path: list[str]
    args: list[str] = Field(default_factory=list)
    callback: Callback = Field(exclude=True)

    model_config = {"arbitrary_types_allowed": True}

    @property
    def name(self) -> str:
        return " ".join(self.path)


class CommandEntry(BaseModel):
    """Listing entry for a registered command."""
    path: list[str]
    description: str | None = None

    @property
    def name(self) -> str:
        return " ".join(self.path)
