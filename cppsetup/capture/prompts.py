"""Interactive prompt loops that capture a ProjectConfiguration."""
from typing import Any, Callable, Optional

from rich.console import Console

from cppsetup.capture.fields import FIELDS, Outcome, PromptField
from cppsetup.cli_support import print_warning
from cppsetup.core.logger import get_logger
from cppsetup.models.project import ProjectConfiguration

logger = get_logger(__name__)

# Reads one line for a field; returns None on end-of-input.
Reader = Callable[[PromptField], Optional[str]]


def console_reader(console: Console) -> Reader:
    """Build a reader that prompts on the given console."""
    def read(field: PromptField) -> Optional[str]:
        try:
            return console.input(field.label)
        except EOFError:
            return None

    return read


def capture_field(field: PromptField, read: Reader, console: Console) -> Any:
    """Prompt for one field until the input is accepted.

    There is no retry limit: end-of-input, empty, unsupported and
    unrecognized input all print a diagnostic and prompt again.
    """
    while True:
        result = field.classify(read(field))
        if result.accepted:
            logger.debug(f"Accepted {field.key}: {result.value!r}")
            return result.value

        if result.outcome is Outcome.END_OF_INPUT:
            # Keep the diagnostic off the unterminated prompt line
            console.print()
        logger.debug(f"Rejected {field.key} ({result.outcome.value})")
        print_warning(console, result.message)


def capture_configuration(read: Reader, console: Console) -> ProjectConfiguration:
    """Run the name, standard and exceptions prompts in order."""
    values = {field.key: capture_field(field, read, console) for field in FIELDS}
    return ProjectConfiguration(**values)
