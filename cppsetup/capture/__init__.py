"""Configuration capture: prompts, classifiers and answers files."""

from .answers import SeededReader, load_answers
from .fields import FIELDS, Classification, Outcome, PromptField
from .prompts import capture_configuration, capture_field, console_reader

__all__ = [
    "FIELDS",
    "Classification",
    "Outcome",
    "PromptField",
    "SeededReader",
    "capture_configuration",
    "capture_field",
    "console_reader",
    "load_answers",
]
