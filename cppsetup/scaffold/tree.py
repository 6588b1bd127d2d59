"""Project directory layout and the builder that creates it.

    <root>/
      |--assets/      raw asset data
      |--src/         C++ headers and sources
      |--3rdParty/    static or dynamic libraries
      |--mac/         platform scripts for the target
        |--bin/       executable and asset link
        |--build/     CMake internals

Each platform target gets its own directory next to src/; all targets build
the same sources.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import List

from cppsetup.core.errors import DirectoryCreationError
from cppsetup.core.logger import get_logger

logger = get_logger(__name__)

SHARED_DIRECTORIES = ("assets", "src", "3rdParty")


@dataclass(frozen=True)
class Target:
    """A platform the project can be built for."""
    name: str                # directory under the project root
    description: str         # used in the build script header
    cmake_description: str   # used in the CMakeLists.txt header
    bin_dir: str = "bin"
    build_dir: str = "build"


MAC_TARGET = Target(
    name="mac",
    description="MacOSX Terminal",
    cmake_description="MacOS command-line",
)


@dataclass(frozen=True)
class ProjectLayout:
    """Where everything for one project lives on disk."""
    root: Path
    target: Target = MAC_TARGET

    @property
    def target_dir(self) -> Path:
        return self.root / self.target.name

    @property
    def build_script(self) -> Path:
        return self.target_dir / "build.sh"

    @property
    def cmake_lists(self) -> Path:
        return self.target_dir / "CMakeLists.txt"

    def directories(self) -> List[Path]:
        """Every directory to create, parents before children."""
        return [
            self.root,
            *(self.root / name for name in SHARED_DIRECTORIES),
            self.target_dir,
            self.target_dir / self.target.bin_dir,
            self.target_dir / self.target.build_dir,
        ]


class TreeBuilder:
    """Creates a ProjectLayout's directories, stopping at the first failure."""

    def build(self, layout: ProjectLayout) -> List[Path]:
        """Create every directory in order.

        Existing directories are fine. Directories created before a failure
        are left in place.

        Raises:
            DirectoryCreationError: On the first directory that cannot be created
        """
        created = []
        for path in layout.directories():
            self.create(path)
            created.append(path)
        return created

    def create(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error(f"Creating {path}... Cannot create directory {path}.")
            raise DirectoryCreationError(path, exc.strerror or str(exc)) from exc
        logger.info(f"Creating {path}... Done")
