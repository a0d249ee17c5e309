"""CLI shell over a Forgettable server.

Provides a stdin/stdout interface for reading and incrementing
distributions through a ForgettableClient.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from forgettable.errors import ForgettableError

if TYPE_CHECKING:
    from forgettable.client import ForgettableClient
    from forgettable.types import Distribution

logger = logging.getLogger(__name__)

HELP_TEXT = """
Forgettable CLI
===============
Commands:
  /dist <distribution>                 Show every field of a distribution
  /top <distribution> <n>              Show the n most probable fields
  /get <distribution> <field>          Show a single field
  /incr <distribution> <field> [n]     Increment a field by 1 (or n)
  /dbsize                              Show the number of stored distributions
  /help                                Show this help message
  /quit                                Exit the CLI
"""

USAGE = {
    "/dist": "Usage: /dist <distribution>",
    "/top": "Usage: /top <distribution> <n>",
    "/get": "Usage: /get <distribution> <field>",
    "/incr": "Usage: /incr <distribution> <field> [n]",
    "/dbsize": "Usage: /dbsize",
}


def _print_distribution(dist: Distribution) -> None:
    print(f"\n{dist.name} (Z={dist.z}, T={dist.time}, rate={dist.rate}, prune={dist.prune})")
    if not dist.values:
        print("  (no fields)")
    for v in dist.values:
        print(f"  {v.field:<24} count={v.count:<8} p={v.probability:.6g}")
    print()


def handle_command(client: ForgettableClient, line: str) -> bool:
    """Run a single command line. Returns False when the user asked to quit."""
    parts = line.split()
    if not parts:
        return True
    cmd, args = parts[0], parts[1:]

    if cmd == "/quit":
        print("Goodbye.")
        return False

    if cmd == "/help":
        print(HELP_TEXT)
        return True

    if cmd not in USAGE:
        print(f"Unknown command: {cmd}. Type /help for a list of commands.")
        return True

    try:
        if cmd == "/dist" and len(args) == 1:
            _print_distribution(client.distribution(args[0]).distribution)
        elif cmd == "/top" and len(args) == 2:
            _print_distribution(client.most_probable(args[0], int(args[1])).distribution)
        elif cmd == "/get" and len(args) == 2:
            _print_distribution(client.field(args[0], args[1]).distribution)
        elif cmd == "/incr" and len(args) in (2, 3):
            if len(args) == 3:
                client.increment_by_n(args[0], args[1], int(args[2]))
            else:
                client.increment(args[0], args[1])
            print("OK\n")
        elif cmd == "/dbsize" and not args:
            print(f"Database size: {client.database_size()}\n")
        else:
            print(USAGE[cmd])
    except ValueError:
        print(USAGE[cmd])
    except ForgettableError as e:
        logger.debug("%s failed", cmd, exc_info=True)
        print(f"Error: {e}\n")
    return True


def run_cli(client: ForgettableClient, stream: TextIO | None = None) -> None:
    """Run the interactive CLI loop until /quit or end of input.

    Args:
        client: Client used for every command.
        stream: Line source, stdin by default.
    """
    stream = stream or sys.stdin
    print(HELP_TEXT)
    print("Ready.\n")

    while True:
        try:
            line = stream.readline()
            if not line:
                break

            line = line.strip()
            if not line:
                continue

            if not handle_command(client, line):
                break

        except KeyboardInterrupt:
            print("\nGoodbye.")
            break
