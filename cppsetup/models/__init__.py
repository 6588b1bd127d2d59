"""Data models for cppsetup."""
from cppsetup.models.answers import Answers
from cppsetup.models.project import (
    ExceptionsFlag,
    LanguageStandard,
    ProjectConfiguration,
)

__all__ = [
    'Answers',
    'ExceptionsFlag',
    'LanguageStandard',
    'ProjectConfiguration',
]
