"""Dependency checks run before any project files are touched."""
from typing import Iterable, List

from cppsetup.core.errors import DependencyInstallError, PackageManagerMissingError
from cppsetup.core.logger import get_logger
from cppsetup.services.package_manager import PackageManager

logger = get_logger(__name__)


class DependencyVerifier:
    """Makes sure the package manager and every required tool are present.

    Missing tools are installed through the package manager, so running the
    verifier may install software on the host.
    """

    def __init__(self, package_manager: PackageManager, tools: Iterable[str]):
        self.package_manager = package_manager
        self.tools = list(tools)

    def verify(self) -> List[str]:
        """Check the package manager, then each tool in order.

        Returns:
            Names of the tools that had to be installed

        Raises:
            PackageManagerMissingError: If the package manager is not on $PATH
            DependencyInstallError: If a missing tool fails to install
        """
        self.check_package_manager()

        installed = []
        for tool in self.tools:
            if self.ensure_available(tool):
                installed.append(tool)
        return installed

    def check_package_manager(self) -> None:
        manager = self.package_manager.executable
        if not self.package_manager.is_available():
            logger.error(f"Querying dependency '{manager}'... Missing.")
            raise PackageManagerMissingError(manager)
        logger.info(f"Querying dependency '{manager}'... Found.")

    def ensure_available(self, tool: str) -> bool:
        """Install `tool` if needed; returns True if an install happened."""
        if self.package_manager.is_installed(tool):
            logger.info(f"Querying dependency '{tool}'... Found.")
            return False

        logger.info(f"Querying dependency '{tool}'... Missing.")
        logger.info(f"{tool} will be installed via {self.package_manager.executable}.")
        if not self.package_manager.install(tool):
            logger.error(f"{tool} failed to install properly.")
            raise DependencyInstallError(tool)

        logger.info(f"Dependency '{tool}' installed.")
        return True
