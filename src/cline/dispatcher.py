"""
Dispatcher facade used by host applications.

Tokenizes raw input lines and forwards them to the command tree.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from cline.config import Config
from cline.core.datamodels import Callback, CommandEntry, Completer, Resolution
from cline.core.helpers import tokenize, tokenize_for_completion
from cline.core.tree import CommandTree

logger = logging.getLogger(__name__)


class Dispatcher:
    """Registers commands, completes partial lines and executes full ones.

    Holds no state besides the command tree: every complete() and exec()
    call is independent of earlier ones.
    """

    def __init__(self, config: Config | None = None):
        self.config = config if config is not None else Config()
        self.tree = CommandTree()

    def register(
        self,
        path: Sequence[str],
        callback: Callback | None = None,
        *,
        complete: Completer | None = None,
        description: str | None = None,
    ) -> Callable:
        """
        Register a command. Can be used directly or as a decorator.

        Usage:
            cli.register(["foo", "bar"], lambda args: print(args))

            @cli.register(["foo", "baz"], description="Run baz")
            def foo_baz(args): ...

        Raises:
            InvalidRegistrationError: Invalid path or callback.
            DuplicateRegistrationError: Path already registered and the
                configured on_duplicate policy is "error".
        """
        def decorator(func: Callback) -> Callback:
            self.tree.register(
                path,
                func,
                completer=complete,
                description=description,
                on_duplicate=self.config.get("on_duplicate"),
            )
            return func

        if callback is not None:
            return decorator(callback)
        return decorator

    def register_dyn_complete(
        self,
        path: Sequence[str],
        callback: Callback,
        complete: Completer,
        *,
        description: str | None = None,
    ) -> Callback:
        """Register a command with an exec callback and a dynamic completer.

        The completer is called at completion time with the tokens typed
        after the command, so suggestions can depend on runtime data such
        as a list of active sessions.
        """
        return self.register(path, callback, complete=complete, description=description)

    def complete(self, line: str) -> list[str]:
        """Get sorted suggestions for a partial input line."""
        return self.tree.complete(tokenize_for_completion(line))

    def resolve(self, line: str) -> Resolution:
        """Resolve a line to its command without running it.

        Raises:
            NoMatchError: No registered command matches.
        """
        return self.tree.resolve(tokenize(line))

    def exec(self, line: str) -> None:
        """Run the command matching a line with its residual arguments.

        The callback runs synchronously. Its return value is discarded and
        its exceptions propagate to the caller unchanged.

        Raises:
            NoMatchError: No registered command matches; nothing is run.
        """
        resolution = self.resolve(line)
        logger.debug(f"Executing {resolution.name!r} with args {resolution.args}")
        resolution.callback(resolution.args)

    execute = exec

    def commands(self) -> list[CommandEntry]:
        """Get all registered commands sorted by path."""
        return self.tree.commands()

    def describe(self, path: Sequence[str]) -> str | None:
        """Get the description of the node at an exact path."""
        node = self.tree.get(path)
        return node.description if node is not None else None
