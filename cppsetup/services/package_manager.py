"""Homebrew access for checking and installing build tools."""
import subprocess

from cppsetup.core.logger import get_logger

logger = get_logger(__name__)


class PackageManager:
    """Thin wrapper around the `brew` command line.

    Only exit statuses are consulted; output of queries is discarded and
    install output is streamed straight to the terminal.
    """

    def __init__(self, executable: str = "brew", mock: bool = False):
        self.executable = executable
        self.mock = mock

    def is_available(self) -> bool:
        """Return True if the package manager can be run from $PATH."""
        if self.mock:
            logger.info(f"MOCK: Would check that {self.executable} is on $PATH")
            return True

        try:
            result = subprocess.run(
                [self.executable, '--version'],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except FileNotFoundError:
            return False
        return result.returncode == 0

    def is_installed(self, tool: str) -> bool:
        """Return True if `tool` is already installed."""
        if self.mock:
            logger.info(f"MOCK: Would check whether {tool} is installed")
            return True

        result = subprocess.run(
            [self.executable, 'ls', '--versions', tool],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
        return result.returncode == 0

    def install(self, tool: str) -> bool:
        """Install `tool`, returning True on success."""
        if self.mock:
            logger.info(f"MOCK: Would run {self.executable} install {tool}")
            return True

        try:
            result = subprocess.run([self.executable, 'install', tool], check=False)
        except OSError as exc:
            logger.error(f"Failed to run {self.executable} install {tool}: {exc}")
            return False
        return result.returncode == 0
