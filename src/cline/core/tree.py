"""
Command tree for registering, completing and resolving command paths.
"""

from __future__ import annotations

import logging
from typing import Iterator, Literal, Sequence

from cline.core.datamodels import Callback, CommandEntry, CommandNode, Completer, Resolution
from cline.core.exceptions import (
    DuplicateRegistrationError,
    InvalidRegistrationError,
    NoMatchError,
)
from cline.core.helpers import _validate_path

logger = logging.getLogger(__name__)

DuplicatePolicy = Literal["overwrite", "error"]


class CommandTree:
    """Prefix tree of command tokens.

    Each node is owned by exactly one parent and siblings never share a
    token. Not thread-safe: guard with an external lock if registration and
    lookups happen on different threads.
    """

    def __init__(self):
        self._root = CommandNode()

    @property
    def root(self) -> CommandNode:
        return self._root

    def register(
        self,
        path: Sequence[str],
        callback: Callback,
        *,
        completer: Completer | None = None,
        description: str | None = None,
        on_duplicate: DuplicatePolicy = "overwrite",
    ) -> None:
        """Register a command path with an exec callback.

        Missing intermediate nodes are created. Registering a path that is
        already terminal replaces its callback, unless on_duplicate is
        "error".

        Args:
            path: Tokens of the command (e.g. ["list", "files"])
            callback: Called with the residual arguments on execution
            completer: Optional dynamic completion callback for this node
            description: Short help text
            on_duplicate: "overwrite" (last write wins) or "error"

        Raises:
            InvalidRegistrationError: Empty path, empty or blank token, or
                a callback that is not callable.
            DuplicateRegistrationError: Path already registered and
                on_duplicate is "error".
        """
        tokens = _validate_path(path)
        if not callable(callback):
            raise InvalidRegistrationError(f"Callback for {' '.join(tokens)!r} is not callable")
        if completer is not None and not callable(completer):
            raise InvalidRegistrationError(f"Completer for {' '.join(tokens)!r} is not callable")
        if on_duplicate not in ("overwrite", "error"):
            raise ValueError(f"Unknown duplicate policy: {on_duplicate}")

        existing = self.get(tokens)
        if existing is not None and existing.is_terminal:
            if on_duplicate == "error":
                raise DuplicateRegistrationError(f"Command already registered: {' '.join(tokens)}")
            logger.debug(f"Overwriting callback for command: {' '.join(tokens)}")

        node = self._root
        for token in tokens:
            child = node.child(token)
            if child is None:
                child = CommandNode(token=token)
                node.children[token] = child
            node = child

        node.callback = callback
        if completer is not None:
            node.completer = completer
        if description is not None:
            node.description = description
        logger.debug(f"Registered command: {' '.join(tokens)}")

    def get(self, path: Sequence[str]) -> CommandNode | None:
        """Get the node at an exact path, or None."""
        node = self._root
        for token in path:
            node = node.child(token)
            if node is None:
                return None
        return node

    def _walk(self, tokens: Sequence[str]) -> tuple[CommandNode, int]:
        """Follow exact matches from the root.

        Returns the deepest node reached and the number of tokens consumed.
        """
        node = self._root
        consumed = 0
        for token in tokens:
            child = node.child(token)
            if child is None:
                break
            node = child
            consumed += 1
        return node, consumed

    def complete(self, prefix_tokens: Sequence[str]) -> list[str]:
        """Return the sorted tokens that can follow or complete the prefix.

        All tokens but the last must match an existing path exactly; the
        last one is a partial token matched against the children of that
        path. An unknown path gives an empty list, unless the deepest node
        reached has a dynamic completer, which is then called with the
        unconsumed tokens.
        """
        tokens = list(prefix_tokens)
        if not tokens:
            return sorted(self._root.children)

        *path, partial = tokens
        node, consumed = self._walk(path)

        matches: set[str] = set()
        if consumed == len(path):
            matches.update(t for t in node.children if t.startswith(partial))

        if node.completer is not None:
            rest = tokens[consumed:]
            matches.update(s for s in node.completer(rest) if s.startswith(partial))

        return sorted(matches)

    def resolve(self, tokens: Sequence[str]) -> Resolution:
        """Find the command for a token sequence using the longest match.

        Raises:
            NoMatchError: The deepest matching node is not a registered
                command (or no tokens were given).
        """
        tokens = list(tokens)
        node, consumed = self._walk(tokens)

        if node.callback is None:
            raise NoMatchError(tokens)

        return Resolution(
            path=tokens[:consumed],
            args=tokens[consumed:],
            callback=node.callback,
        )

    def _iter_terminal(self, node: CommandNode, path: list[str]) -> Iterator[tuple[list[str], CommandNode]]:
        if node.is_terminal:
            yield path, node
        for token in sorted(node.children):
            yield from self._iter_terminal(node.children[token], path + [token])

    def commands(self) -> list[CommandEntry]:
        """Get all registered commands sorted by path."""
        return [
            CommandEntry(path=path, description=node.description)
            for path, node in self._iter_terminal(self._root, [])
        ]

    def __contains__(self, path: Sequence[str]) -> bool:
        if isinstance(path, str):
            return False
        node = self.get(path)
        return node is not None and node.is_terminal

    def __len__(self) -> int:
        return sum(1 for _ in self._iter_terminal(self._root, []))
