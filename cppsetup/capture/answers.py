"""Answers files: pre-seeded responses for the setup prompts."""
from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cppsetup.capture.fields import FIELDS, PromptField
from cppsetup.capture.prompts import Reader
from cppsetup.core.errors import AnswersFileError
from cppsetup.core.logger import get_logger
from cppsetup.models.answers import Answers

logger = get_logger(__name__)


def load_answers(path: Path) -> Answers:
    """Load and validate an answers file.

    Example file:
        name: Foo
        standard: "17"
        exceptions: "n"

    Raises:
        AnswersFileError: If the file is missing, not YAML, or has unknown keys
    """
    path = Path(path)
    try:
        with open(path) as f:
            # BaseLoader keeps every scalar as the text written (007 stays "007")
            data = yaml.load(f, Loader=yaml.BaseLoader)
    except OSError as exc:
        raise AnswersFileError(f"Cannot read answers file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise AnswersFileError(f"Answers file {path} is not valid YAML: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise AnswersFileError(f"Answers file {path} must contain a mapping")

    try:
        answers = Answers.model_validate(data)
    except ValidationError as exc:
        raise AnswersFileError(f"Invalid answers in {path}: {exc}") from exc

    logger.debug(f"Loaded answers from {path}")
    return answers


class SeededReader:
    """Reader that answers each field once from an answers file.

    A seeded value goes through the normal classifier, so an invalid one is
    reported and the next read for that field falls through to `fallback`.
    """

    def __init__(self, answers: Answers, fallback: Reader, console: Console):
        self.fallback = fallback
        self.console = console
        self._pending: Dict[str, str] = {}
        for field in FIELDS:
            value = answers.for_field(field.key)
            if value is not None:
                self._pending[field.key] = value

    def __call__(self, field: PromptField) -> Optional[str]:
        if field.key in self._pending:
            value = self._pending.pop(field.key)
            self.console.print(f"{field.label}{escape(value)} [dim](answers file)[/dim]")
            return value
        return self.fallback(field)
