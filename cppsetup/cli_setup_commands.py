"""Setup CLI commands - new."""
import dataclasses
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cppsetup.capture.answers import SeededReader, load_answers
from cppsetup.capture.prompts import console_reader
from cppsetup.cli_support import handle_setup_error, print_info, setup_file_logging
from cppsetup.core.config import get_settings
from cppsetup.core.errors import SetupError
from cppsetup.core.logger import set_verbose
from cppsetup.orchestrator import SetupOrchestrator

# Module-level console instance (will be set by register function)
console: Console = Console()


def new(
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o",
        help="Directory the project folder is created in (default: current directory)",
    ),
    answers: Optional[Path] = typer.Option(
        None, "--answers", "-a",
        help="YAML file with name/standard/exceptions answers",
    ),
    mock: bool = typer.Option(
        False, "--mock",
        help="Report package manager calls instead of running them",
    ),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also log to this file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug output"),
):
    """Create a new C++ project with a CMake + Ninja build for the Mac terminal.

    Checks brew, wget, cmake and ninja (installing missing tools), asks for
    the project settings, creates the directory tree and writes
    mac/build.sh and mac/CMakeLists.txt.

    Examples:
        cppsetup new                        # Prompt for everything
        cppsetup new -o ~/code              # Create the project under ~/code
        cppsetup new --answers foo.yml      # Pre-fill the prompts
    """
    set_verbose(verbose)
    if log_file:
        setup_file_logging(log_file=log_file, verbose=verbose)

    try:
        settings = get_settings()
        if mock and not settings.mock:
            settings = dataclasses.replace(settings, mock=True)
        if settings.mock:
            print_info(console, "Mock mode: package manager calls are reported, not run")

        reader = console_reader(console)
        if answers is not None:
            reader = SeededReader(load_answers(answers), reader, console)

        orchestrator = SetupOrchestrator(
            console,
            settings,
            output_dir=output_dir,
            reader=reader,
        )
        orchestrator.run()
    except SetupError as err:
        handle_setup_error(err, console, verbose=verbose, exit_code=err.exit_code)


def register_setup_commands(app: typer.Typer, shared_console: Console):
    """Register setup commands with the main Typer app.

    Args:
        app: Main Typer application
        shared_console: Shared Rich console instance
    """
    global console
    console = shared_console

    app.command()(new)
