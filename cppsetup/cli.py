#!/usr/bin/env python3
"""cppsetup CLI - C++ project setup for CMake + Ninja on the Mac terminal."""

import typer
from rich.console import Console

from cppsetup.cli_setup_commands import register_setup_commands
from cppsetup.cli_utility_commands import register_utility_commands

app = typer.Typer(
    name="cppsetup",
    help="""cppsetup - C++ Project Setup Tool

Scaffolds a C++ project tree with a ready-to-run build script.

Quick start:
  cppsetup new          # Answer three prompts
  cd <name>/mac
  ./build.sh            # Link assets, configure CMake, build with Ninja
""",
    add_completion=False,
)

console = Console()

register_setup_commands(app, console)
register_utility_commands(app, console)

if __name__ == "__main__":
    app()
