"""Fatal setup errors and the process exit codes they map to.

Every stage raises one of these at the point of failure; the CLI is the
only place that turns them into an exit status.
"""
from pathlib import Path


class SetupError(Exception):
    """Base class for errors that abort a setup run."""
    exit_code = 1


class PackageManagerMissingError(SetupError):
    """Raised when the package manager itself is not available."""
    exit_code = 1

    def __init__(self, manager: str):
        self.manager = manager
        super().__init__(
            f"{manager} is required for this tool. Install separately and try again."
        )


class DependencyInstallError(SetupError):
    """Raised when a required tool cannot be installed."""
    exit_code = 2

    def __init__(self, tool: str):
        self.tool = tool
        super().__init__(
            f"{tool} failed to install properly. Unable to configure project."
        )


class DirectoryCreationError(SetupError):
    """Raised when a directory of the project tree cannot be created."""
    exit_code = 3

    def __init__(self, path: Path, reason: str = ""):
        self.path = path
        message = f"Cannot create directory {path}."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ArtifactWriteError(SetupError):
    """Raised when a generated file cannot be written."""
    exit_code = 7

    def __init__(self, path: Path, reason: str = ""):
        self.path = path
        message = f"Cannot write {path}."
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class AnswersFileError(SetupError):
    """Raised when a pre-seeded answers file is unreadable or malformed."""
    exit_code = 8


class SettingsError(SetupError):
    """Raised when runtime settings cannot produce valid output."""
    exit_code = 9
