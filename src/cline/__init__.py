"""
cline - hierarchical command registration with completion and dispatch

Register commands as token paths bound to callbacks, then complete partial
input lines and execute full ones.

Example usage:
    from cline import Dispatcher

    cli = Dispatcher()

    @cli.register(["list", "files"], description="List files")
    def list_files(args):
        print("called with:", args)

    cli.complete("l")              # ["list"]
    cli.complete("list ")          # ["files"]
    cli.exec("list files -a")      # list_files(["-a"])

    # Interactive loop (requires prompt_toolkit)
    from cline import cline_run
    cline_run(cli)
"""

__version__ = "0.1.0"

from cline.core import (
    ClineError,
    CommandEntry,
    CommandNode,
    CommandTree,
    DuplicateRegistrationError,
    InvalidRegistrationError,
    NoMatchError,
    Resolution,
    tokenize,
    tokenize_for_completion,
)
from cline.dispatcher import Dispatcher


# Lazy import for the REPL helpers (pulls in prompt_toolkit)
def __getattr__(name):
    if name == "cline_run":
        from cline.cli import cline_run
        return cline_run
    if name == "DispatcherCompleter":
        from cline.cli import DispatcherCompleter
        return DispatcherCompleter
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",
    # Facade
    "Dispatcher",
    # Core
    "CommandTree",
    "CommandNode",
    "CommandEntry",
    "Resolution",
    "ClineError",
    "InvalidRegistrationError",
    "DuplicateRegistrationError",
    "NoMatchError",
    "tokenize",
    "tokenize_for_completion",
    # REPL (lazy loaded)
    "cline_run",
    "DispatcherCompleter",
]
