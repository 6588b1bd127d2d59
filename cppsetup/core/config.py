"""cppsetup runtime settings."""
import os
from dataclasses import dataclass, field
from typing import Optional, Tuple

from cppsetup.core.errors import SettingsError

DEFAULT_TOOLS = ("wget", "cmake", "ninja")
DEFAULT_AUTHOR = "Alexander Gibbons (@alex)"
MAX_AUTHOR_LENGTH = 69


@dataclass
class SetupSettings:
    """Runtime settings for a setup run.

    Attributes:
        package_manager: Executable used to query and install tools (default: brew)
        required_tools: Tools that must be installed, checked in order
        author: Author line written into generated file headers
        mock: Report package manager calls instead of running them
    """

    package_manager: str = "brew"
    required_tools: Tuple[str, ...] = field(default_factory=lambda: DEFAULT_TOOLS)
    author: str = DEFAULT_AUTHOR
    mock: bool = False

    def __post_init__(self):
        # "# Author: <author>#" has to fit one 80-column framed header line
        if len(self.author) > MAX_AUTHOR_LENGTH:
            raise SettingsError(
                f"Author is {len(self.author)} characters long; "
                f"generated headers allow at most {MAX_AUTHOR_LENGTH}."
            )

    @classmethod
    def from_env(cls) -> "SetupSettings":
        """Create settings from environment variables.

        Environment variables:
            CPPSETUP_PACKAGE_MANAGER: Package manager executable
            CPPSETUP_TOOLS: Comma-separated list of required tools
            CPPSETUP_AUTHOR: Author for generated file headers
            CPPSETUP_MOCK: Set to 1 to skip real package manager calls

        Returns:
            SetupSettings instance with values from environment or defaults
        """
        tools = os.getenv("CPPSETUP_TOOLS")
        return cls(
            package_manager=os.getenv("CPPSETUP_PACKAGE_MANAGER", "brew"),
            required_tools=(
                tuple(t.strip() for t in tools.split(",") if t.strip())
                if tools is not None else DEFAULT_TOOLS
            ),
            author=os.getenv("CPPSETUP_AUTHOR", DEFAULT_AUTHOR),
            mock=os.getenv("CPPSETUP_MOCK") == "1",
        )


# Global settings instance (can be overridden)
_settings: Optional[SetupSettings] = None


def get_settings() -> SetupSettings:
    """Get the global settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = SetupSettings.from_env()
    return _settings


def set_settings(settings: Optional[SetupSettings]):
    """Replace the global settings (None re-reads the environment next time)."""
    global _settings
    _settings = settings
