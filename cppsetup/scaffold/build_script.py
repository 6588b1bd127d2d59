"""Generation of the target's build.sh.

The script links ../assets/ into bin/, configures CMake with the Ninja
generator and runs ninja, exiting with a distinct code for each failure.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence, Tuple

from cppsetup.scaffold.document import Document
from cppsetup.scaffold.formatting import (
    GENERATED_NOTICE,
    TOOL_TAG,
    FormattingContext,
    annotate,
)
from cppsetup.scaffold.tree import MAC_TARGET, Target

# Exit codes of the generated script
ASSET_LINK_FAILED = 4
CMAKE_CONFIG_FAILED = 5
BUILD_FAILED = 6

USAGE_UNDERLINE = 20


@dataclass
class ShellFunction:
    """A generated shell function: comment header plus annotated body."""
    name: str
    description: Sequence[str]
    body: List[Tuple[str, str]] = field(default_factory=list)

    def render(self) -> List[str]:
        lines = ["#", f"# [{self.name}]", "#"]
        lines.extend(f"# {line}" for line in self.description)
        lines.append("#")
        lines.append(annotate(f"function {self.name}() {{"))
        lines.extend(annotate(code, comment) for code, comment in self.body)
        lines.append(annotate("}"))
        lines.append("")
        return lines


def ensure_assets(target: Target) -> ShellFunction:
    return ShellFunction(
        name="ensure_assets",
        description=(
            f"Checks if there exists a syslink in {target.bin_dir}/ to",
            "../assets/; if not, one is created. Should that",
            f"fail, the script exits with code [{ASSET_LINK_FAILED}].",
        ),
        body=[
            (f"    pushd {target.bin_dir}/ >/dev/null", "Quietly change directory"),
            ('        echo -n "Querying assets... "', ""),
            ('        if [ ! -d "assets" ]; then', "! syslink exist?"),
            ("            ln -s ../../assets/ assets", f"Extra .. since in {target.bin_dir}/"),
            ("            if [ $? == 0 ]; then", ""),
            ('                echo "Link created"', "Successful link"),
            ("            else", ""),
            ('                echo -e "Error\\n\\nBuild Failed"', "Notify and"),
            (f"                exit {ASSET_LINK_FAILED}", "abort build"),
            ("            fi", ""),
            ("        else", ""),
            ('            echo "Found"', "Link exists"),
            ("        fi", ""),
            ("    popd >/dev/null", "Quietly go back"),
        ],
    )


def cfg_cmake(target: Target) -> ShellFunction:
    return ShellFunction(
        name="cfg_cmake",
        description=(
            "Sets up [cmake] to use [ninja] and the",
            "CMakeLists.txt file located at ../; if any error",
            f"occurs, the script exits with error code [{CMAKE_CONFIG_FAILED}].",
        ),
        body=[
            (f"    pushd {target.build_dir}/ >/dev/null", "Quietly change directory"),
            ("        cmake -G Ninja ..", "Configure [cmake]"),
            ("        if [[ $? -ne 0 ]]; then", ""),
            ('            echo -e "ERROR\\n\\nBuild Failed"', ""),
            (f"            exit {CMAKE_CONFIG_FAILED}", "Bad setup"),
            ("        else", ""),
            ('            echo -e "CMake configured."', "Good setup"),
            ("        fi", ""),
            ("    popd >/dev/null", "Quietly go back"),
        ],
    )


def run_ninja(target: Target) -> ShellFunction:
    return ShellFunction(
        name="run_ninja",
        description=(
            "Attempts to execute [ninja] using the current",
            "[cmake] configuration. The return code is checked",
            "to determine success; upon failure, the script",
            f"exits with error code [{BUILD_FAILED}].",
        ),
        body=[
            (f"    pushd {target.build_dir}/ >/dev/null", "Quietly change directory"),
            ("        ninja", "Try [ninja]"),
            ("        if [[ $? -ne 0 ]]; then", ""),
            ('            echo -e "ERROR\\n\\nBuild Failed."', ""),
            (f"            exit {BUILD_FAILED}", "Error compiling"),
            ("        else", ""),
            ('            echo -e "OK\\n\\nBuild Succeeded."', "Good to run"),
            ("        fi", ""),
            ("    popd >/dev/null", "Quietly go back"),
        ],
    )


class BuildScriptGenerator:
    """Renders build.sh for one target."""

    def __init__(self, ctx: FormattingContext, author: str, target: Target = MAC_TARGET):
        self.ctx = ctx
        self.author = author
        self.target = target

    def functions(self) -> List[ShellFunction]:
        """Script functions, in the order they are called."""
        return [
            ensure_assets(self.target),
            cfg_cmake(self.target),
            run_ninja(self.target),
        ]

    def header_lines(self) -> List[str]:
        ctx = self.ctx
        h = ctx.border
        return [
            ctx.rule(),
            ctx.framed(f"{h} build.sh", right=f"{h} Usage: ./build.sh {h}"),
            ctx.framed(h, right=ctx.rule(USAGE_UNDERLINE) + h),
            ctx.framed(f"{h} Preps and compiles the C++ codebase found in ../src/,"),
            ctx.framed(
                f"{h} targeting the {self.target.description}. "
                "Ensures ../assets/ is available"
            ),
            ctx.framed(
                f"{h} in {self.target.bin_dir}/ via a syslink. The existence of "
                f"{self.target.bin_dir}/ and {self.target.build_dir}/ is assumed."
            ),
            ctx.blank_line(),
            ctx.section_break(),
            ctx.blank_line(),
            *(ctx.framed(f"{h} {line}") for line in GENERATED_NOTICE),
            ctx.blank_line(),
            ctx.section_break(),
            ctx.blank_line(),
            ctx.framed(f"{h} Author: {self.author}"),
            ctx.date_line(),
            ctx.blank_line(),
            ctx.framed(f"{h} Changelog:"),
            ctx.framed(f"{h}     {TOOL_TAG} ({ctx.date_short}) - Generated build script."),
            ctx.blank_line(),
            ctx.framed(f"{h} Bugs:"),
            ctx.framed(f"{h}     N/A"),
            ctx.blank_line(),
            ctx.rule(),
        ]

    def body_lines(self) -> List[str]:
        functions = self.functions()
        lines = []
        for function in functions:
            lines.extend(function.render())
        # Calls run unconditionally; each function exits on its own failure
        lines.extend(annotate(function.name) for function in functions)
        return lines

    def document(self, path: Path) -> Document:
        doc = Document(path, executable=True)
        doc.add("#!/bin/bash", "")
        doc.extend(self.header_lines())
        doc.add("")
        doc.extend(self.body_lines())
        return doc

    def write(self, path: Path) -> Path:
        return self.document(path).write()
