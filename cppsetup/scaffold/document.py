"""In-memory generated files, written to disk in a single pass."""
from pathlib import Path
from typing import Iterable, List

from cppsetup.core.errors import ArtifactWriteError
from cppsetup.core.logger import get_logger

logger = get_logger(__name__)


class Document:
    """Ordered lines of a generated file.

    Lines are collected first and written once; an existing file is always
    truncated, never appended to.
    """

    def __init__(self, path: Path, executable: bool = False):
        self.path = Path(path)
        self.executable = executable
        self.lines: List[str] = []

    def add(self, *lines: str) -> "Document":
        self.lines.extend(lines)
        return self

    def extend(self, lines: Iterable[str]) -> "Document":
        self.lines.extend(lines)
        return self

    def render(self) -> str:
        return "\n".join(self.lines) + "\n"

    def write(self) -> Path:
        """Write the document, replacing any previous contents.

        Raises:
            ArtifactWriteError: If the file cannot be written or made executable
        """
        try:
            self.path.write_text(self.render())
            if self.executable:
                self.path.chmod(0o755)
        except OSError as exc:
            logger.error(f"Cannot write {self.path}: {exc}")
            raise ArtifactWriteError(self.path, exc.strerror or str(exc)) from exc

        logger.info(f"Writing {self.path}... Done")
        return self.path
