"""
REPL (Read-Eval-Print Loop) helpers using prompt_toolkit.

prompt_toolkit owns rendering, history and line editing; this module only
feeds it suggestions from a Dispatcher and runs submitted lines.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion

from cline.core.exceptions import NoMatchError
from cline.core.helpers import tokenize_for_completion
from cline.logging import configure_logging

if TYPE_CHECKING:
    from cline.config import Config
    from cline.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


# ANSI escape codes for grey text
GREY = "\033[90m"
RESET = "\033[0m"


def feedback(msg: str) -> None:
    """Print feedback message in grey to stderr."""
    print(f"{GREY}{msg}{RESET}", file=sys.stderr)


class DispatcherCompleter(Completer):
    """Completer for commands registered with a Dispatcher."""

    def __init__(self, dispatcher: Dispatcher):
        self.dispatcher = dispatcher

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        tokens = tokenize_for_completion(text)
        partial = tokens[-1] if tokens else ""

        # Description lookup needs the exact path the suggestion extends
        parent = tokens[:-1]
        for suggestion in self.dispatcher.complete(text):
            description = self.dispatcher.describe(parent + [suggestion])
            yield Completion(
                suggestion,
                start_position=-len(partial),
                display_meta=description or "",
            )


def cline_run(
    dispatcher: Dispatcher,
    config: Optional[Config] = None,
    session: Any = None,
) -> None:
    """Run an interactive loop over a Dispatcher.

    Tab completes from the registered commands, Enter executes the line.
    Unknown commands are reported in grey on stderr. Exceptions raised by
    a command callback propagate to the caller.

    Ctrl+C or Ctrl+D exits.

    Args:
        dispatcher: Dispatcher holding the registered commands.
        config: Settings for prompt and logging (default: dispatcher.config).
        session: Object with a prompt(message) method (default: a new
            PromptSession using DispatcherCompleter).
    """
    if config is None:
        config = dispatcher.config

    if config.get("verbose"):
        configure_logging(config.get("log_level"))

    if session is None:
        session = PromptSession(completer=DispatcherCompleter(dispatcher))

    prompt = config.get("prompt")

    while True:
        try:
            line = session.prompt(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line.strip():
            continue

        try:
            dispatcher.exec(line)
        except NoMatchError as e:
            logger.debug(f"No match for line: {line!r}")
            feedback(str(e))
