#!/usr/bin/env python3
"""
Interactive demo of cline (cline-demo command).

Registers a few nested commands and runs cline_run over them.
"""

from __future__ import annotations

import argparse
import sys

from cline.config import Config, get_config, get_config_manager
from cline.dispatcher import Dispatcher


def build_dispatcher(config: Config | None = None) -> Dispatcher:
    """Create a Dispatcher with the demo commands registered."""
    cli = Dispatcher(config)

    @cli.register(["help"], description="List commands")
    def cmd_help(args):
        for entry in cli.commands():
            desc = f"  {entry.description}" if entry.description else ""
            print(f"{entry.name:<20}{desc}")

    @cli.register(["echo"], description="Print the arguments")
    def cmd_echo(args):
        print(" ".join(args))

    @cli.register(["config", "show"], description="Show customized settings")
    def cmd_config_show(args):
        settings = get_config_manager().list_settings()
        if not settings:
            print("No customized settings.")
        for key, value in settings.items():
            print(f"{key} = {value}")

    def complete_config_key(args):
        return list(Config.model_fields)

    @cli.register(
        ["config", "set"],
        complete=complete_config_key,
        description="Set a config value: config set <key> <value>",
    )
    def cmd_config_set(args):
        if len(args) != 2:
            print("Usage: config set <key> <value>")
            return
        try:
            get_config_manager().set(args[0], args[1])
        except ValueError as e:
            print(f"Error: {e}")
            return
        print(f"{args[0]} = {args[1]}")

    @cli.register(
        ["config", "del"],
        complete=complete_config_key,
        description="Reset a config value: config del <key>",
    )
    def cmd_config_del(args):
        if len(args) != 1:
            print("Usage: config del <key>")
            return
        try:
            get_config_manager().unset(args[0])
        except ValueError as e:
            print(f"Error: {e}")
            return
        print(f"{args[0]} reset")

    return cli


def main():
    """Run the demo REPL."""
    parser = argparse.ArgumentParser(
        description="Interactive demo of cline command completion and dispatch",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log registration and dispatch to stderr",
    )
    args = parser.parse_args()

    from cline.cli._repl import cline_run

    config = get_config()
    if args.verbose:
        config = config.model_copy(update={"verbose": True})

    cli = build_dispatcher(config)
    print("Tab: completion | Ctrl+C / Ctrl+D: exit | help for commands")
    cline_run(cli, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
