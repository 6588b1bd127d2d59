"""Project configuration captured from the user."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LanguageStandard(str, Enum):
    """Supported C++ standard versions, spelled as the compiler expects."""
    CXX14 = "14"
    CXX17 = "17"
    CXX2A = "2a"  # clang's spelling of the incomplete C++20 mode


class ExceptionsFlag(str, Enum):
    """Whether C++ exceptions are compiled in."""
    ENABLED = "enabled"
    DISABLED = "disabled"

    @property
    def compiler_flag(self) -> str:
        return "-fexceptions" if self is ExceptionsFlag.ENABLED else "-fno-exceptions"


class ProjectConfiguration(BaseModel):
    """Settings that drive the directory tree and both generated files.

    Frozen once built: nothing downstream may change a captured value.
    """

    model_config = ConfigDict(extra='forbid', frozen=True)

    name: str = Field(..., description="Top-level directory, CMake project and executable name")
    standard: LanguageStandard = Field(..., description="C++ standard token passed to -std=c++")
    exceptions: ExceptionsFlag = Field(..., description="Exceptions on or off")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        """Only emptiness is rejected; the name is otherwise used verbatim."""
        if not v:
            raise ValueError("Project name must not be empty")
        return v

    @property
    def std_flag(self) -> str:
        return f"-std=c++{self.standard.value}"

    @property
    def exceptions_flag(self) -> str:
        return self.exceptions.compiler_flag

    @property
    def compiler_flags(self) -> str:
        """Flags appended to CMAKE_CXX_FLAGS."""
        return f"{self.std_flag} {self.exceptions_flag}"
