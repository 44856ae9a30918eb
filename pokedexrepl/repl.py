"""The interactive read-eval-print loop of the Pokedex."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .client import ApiError, PokeApiClient
from .commands import CommandError, Config, get_commands

RED = "\033[31m"
YELLOW = "\033[38;5;226m"
RESET = "\033[0m"
PROMPT = f"{RED}Pokedex > {RESET}"

HTTP_TIMEOUT = 5.0
CACHE_TTL = 180.0


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into whitespace-separated words."""
    return text.lower().split()


def start_repl(
    config: Config, stdin: TextIO | None = None, stdout: TextIO | None = None
) -> None:
    """Read commands from ``stdin`` and run them until end of input."""
    stdin = stdin if stdin is not None else sys.stdin
    if stdout is not None:
        config.out = stdout
    out = config.out if config.out is not None else sys.stdout

    owned_client = None
    if config.client is None:
        owned_client = config.client = PokeApiClient(HTTP_TIMEOUT, CACHE_TTL)
    commands = get_commands()

    try:
        while True:
            out.write(PROMPT)
            out.flush()
            line = stdin.readline()
            if not line:
                out.write("\n")
                break

            words = clean_input(line)
            if not words:
                out.write("\n")
                continue
            if len(words) > 2:
                out.write("Too many inputs try again\n\n")
                continue

            name = words[0]
            param = words[1] if len(words) > 1 else ""
            command = commands.get(name)
            if command is None:
                out.write(f"{YELLOW}{name}{RESET} is an invalid command\n")
            else:
                try:
                    command.callback(config, param)
                except (CommandError, ApiError):
                    pass
            out.write("\n")
    finally:
        if owned_client is not None:
            owned_client.close()


def main(argv: list[str] | None = None) -> int:
    """Start an interactive Pokedex session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="pokedex", description="Explore the Pokemon world from a REPL."
    )
    parser.parse_args(argv)
    start_repl(Config())
    return 0