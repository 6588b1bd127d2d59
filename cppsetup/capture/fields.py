"""Input classifiers for the three project settings.

Each classifier maps one line of raw input (None on end-of-input) to a
Classification. Classifiers never prompt or print; the prompt loop in
cppsetup.capture.prompts decides what to do with the result.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from cppsetup.models.project import ExceptionsFlag, LanguageStandard

NAME_INVALID = "Invalid string."
STANDARD_UNSUPPORTED = "This C++ version is not supported."
STANDARD_UNRECOGNIZED = "Unrecognized C++ version."
EXCEPTIONS_INVALID = "Invalid response."

UNSUPPORTED_STANDARDS = frozenset({"98", "03", "11"})
ACCEPTED_STANDARDS = {
    "14": LanguageStandard.CXX14,
    "17": LanguageStandard.CXX17,
    "20": LanguageStandard.CXX2A,
}

YES_TOKENS = frozenset({"y", "Y", "yes", "YES", "Yes"})
NO_TOKENS = frozenset({"n", "N", "no", "NO", "No"})


class Outcome(Enum):
    """What a line of input turned out to be."""
    ACCEPTED = "accepted"
    UNSUPPORTED = "unsupported"
    UNRECOGNIZED = "unrecognized"
    END_OF_INPUT = "end_of_input"
    EMPTY = "empty"


@dataclass(frozen=True)
class Classification:
    """Tagged result of validating one line of input."""
    outcome: Outcome
    value: Any = None
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.outcome is Outcome.ACCEPTED

    @classmethod
    def accept(cls, value: Any) -> "Classification":
        return cls(Outcome.ACCEPTED, value=value)

    @classmethod
    def reject(cls, outcome: Outcome, message: str) -> "Classification":
        return cls(outcome, message=message)


def classify_name(raw: Optional[str]) -> Classification:
    """Any non-empty string is a valid project name, kept exactly as typed."""
    if raw is None:
        return Classification.reject(Outcome.END_OF_INPUT, NAME_INVALID)
    if raw == "":
        return Classification.reject(Outcome.EMPTY, NAME_INVALID)
    return Classification.accept(raw)


def classify_standard(raw: Optional[str]) -> Classification:
    """Accept 14, 17 or 20; 20 is stored as clang's '2a' token."""
    if raw is None:
        return Classification.reject(Outcome.END_OF_INPUT, STANDARD_UNRECOGNIZED)

    token = raw.strip()
    if not token:
        return Classification.reject(Outcome.EMPTY, STANDARD_UNRECOGNIZED)
    if token in UNSUPPORTED_STANDARDS:
        return Classification.reject(Outcome.UNSUPPORTED, STANDARD_UNSUPPORTED)
    if token in ACCEPTED_STANDARDS:
        return Classification.accept(ACCEPTED_STANDARDS[token])
    return Classification.reject(Outcome.UNRECOGNIZED, STANDARD_UNRECOGNIZED)


def classify_exceptions(raw: Optional[str]) -> Classification:
    if raw is None:
        return Classification.reject(Outcome.END_OF_INPUT, EXCEPTIONS_INVALID)

    token = raw.strip()
    if not token:
        return Classification.reject(Outcome.EMPTY, EXCEPTIONS_INVALID)
    if token in YES_TOKENS:
        return Classification.accept(ExceptionsFlag.ENABLED)
    if token in NO_TOKENS:
        return Classification.accept(ExceptionsFlag.DISABLED)
    return Classification.reject(Outcome.UNRECOGNIZED, EXCEPTIONS_INVALID)


@dataclass(frozen=True)
class PromptField:
    """One prompted setting: its model key, prompt label and classifier."""
    key: str
    label: str
    classify: Callable[[Optional[str]], Classification]


NAME_FIELD = PromptField("name", "Project Name: ", classify_name)
STANDARD_FIELD = PromptField("standard", "C++ Standard: ", classify_standard)
EXCEPTIONS_FIELD = PromptField("exceptions", "Exceptions (y/n): ", classify_exceptions)

# Prompt order
FIELDS = (NAME_FIELD, STANDARD_FIELD, EXCEPTIONS_FIELD)
