"""Generation of the target's CMakeLists.txt."""
from pathlib import Path
from typing import List

from cppsetup.models.project import ProjectConfiguration
from cppsetup.scaffold.document import Document
from cppsetup.scaffold.formatting import GENERATED_NOTICE, TOOL_TAG, FormattingContext
from cppsetup.scaffold.tree import MAC_TARGET, Target

MIN_CMAKE_VERSION = "3.4.1"
SOURCE_DIR = "../src/"
HEADER_EXTENSION = "h"
SOURCE_EXTENSION = "cpp"


class CMakeListsGenerator:
    """Renders CMakeLists.txt from a captured ProjectConfiguration.

    The descriptor lives in the target directory, builds every .h/.cpp file
    under ../src/ into one executable named after the project, and sends the
    binary to the target's bin/ directory.
    """

    def __init__(
        self,
        config: ProjectConfiguration,
        ctx: FormattingContext,
        author: str,
        target: Target = MAC_TARGET,
    ):
        self.config = config
        self.ctx = ctx
        self.author = author
        self.target = target

    def header_lines(self) -> List[str]:
        rule = self.ctx.separator * (self.ctx.width - 1)
        return [
            "#[[",
            "CMakeLists.txt",
            "",
            f"Sets up CMake for the {self.target.cmake_description} target.",
            "",
            rule,
            "",
            *GENERATED_NOTICE,
            "",
            rule,
            "",
            f"Author: {self.author}",
            f"Date: {self.ctx.date_long}",
            "",
            "Changelog:",
            f"    {TOOL_TAG} ({self.ctx.date_short}) - Generated file.",
            "]]",
        ]

    def command_lines(self) -> List[str]:
        name = self.config.name
        return [
            f"cmake_minimum_required(VERSION {MIN_CMAKE_VERSION})",
            f'project("{name}")',
            f'set(CMAKE_CXX_FLAGS "${{CMAKE_CXX_FLAGS}} {self.config.compiler_flags}")',
            "set(CMAKE_RUNTIME_OUTPUT_DIRECTORY "
            f"${{CMAKE_CURRENT_SOURCE_DIR}}/{self.target.bin_dir}/)",
            f'set(SRC_DIR "{SOURCE_DIR}")',
            f"file(GLOB_RECURSE CPP_HEADERS ${{SRC_DIR}}/*.{HEADER_EXTENSION})",
            f"file(GLOB_RECURSE CPP_SOURCES ${{SRC_DIR}}/*.{SOURCE_EXTENSION})",
            f"add_executable({name} ${{CPP_HEADERS}} ${{CPP_SOURCES}})",
        ]

    def document(self, path: Path) -> Document:
        doc = Document(path)
        doc.extend(self.header_lines())
        doc.extend(self.command_lines())
        return doc

    def write(self, path: Path) -> Path:
        return self.document(path).write()
