"""Runs the five setup stages in order.

1. Dependency Checks  - package manager and build tools
2. User Settings      - name, C++ standard, exceptions
3. Directory Tree     - project directories
4. Scripts            - <target>/build.sh
5. CMake              - <target>/CMakeLists.txt

A stage that fails raises a SetupError and no later stage runs.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape

from cppsetup.capture.prompts import Reader, capture_configuration, console_reader
from cppsetup.cli_support import print_ok, print_step, print_success
from cppsetup.core.config import SetupSettings
from cppsetup.core.logger import get_logger
from cppsetup.models.project import ProjectConfiguration
from cppsetup.scaffold.core import ScaffoldManager
from cppsetup.scaffold.formatting import FormattingContext
from cppsetup.scaffold.tree import ProjectLayout
from cppsetup.services.dependencies import DependencyVerifier
from cppsetup.services.package_manager import PackageManager

logger = get_logger(__name__)

TOTAL_STAGES = 5


@dataclass
class SetupResult:
    """What a completed run produced."""
    config: ProjectConfiguration
    layout: ProjectLayout
    installed_tools: List[str] = field(default_factory=list)

    @property
    def artifacts(self) -> List[Path]:
        return [self.layout.build_script, self.layout.cmake_lists]


class SetupOrchestrator:
    """Sequences dependency checks, prompts, tree creation and file generation."""

    def __init__(
        self,
        console: Console,
        settings: SetupSettings,
        output_dir: Optional[Path] = None,
        reader: Optional[Reader] = None,
        package_manager: Optional[PackageManager] = None,
        scaffold: Optional[ScaffoldManager] = None,
        context_factory: Callable[[], FormattingContext] = FormattingContext.now,
    ):
        self.console = console
        self.settings = settings
        self.reader = reader or console_reader(console)
        self.package_manager = package_manager or PackageManager(
            settings.package_manager, mock=settings.mock
        )
        self.scaffold = scaffold or ScaffoldManager(settings.author, output_dir=output_dir)
        self.context_factory = context_factory

    def run(self) -> SetupResult:
        """Run every stage.

        Raises:
            SetupError: From the first stage that fails
        """
        self.console.print("[bold]C++ Project Setup Tool[/bold]\n")

        installed = self._stage(1, "Dependency Checks", self.check_dependencies)
        config = self._stage(2, "User Settings", self.capture_settings)
        layout = self.scaffold.layout_for(config)
        self._stage(3, "Directory Tree", self.scaffold.build_tree, layout)

        # One timestamp for both generated files
        ctx = self.context_factory()
        self._stage(4, "Scripts", self.scaffold.write_build_script, layout, ctx)
        self._stage(5, "CMake", self.scaffold.write_cmake_lists, layout, config, ctx)

        print_success(self.console, f"Project ready at {escape(str(layout.root))}")
        self.console.print(
            f"  Add sources to {escape(str(layout.root / 'src'))}, then run "
            f"./build.sh from {escape(str(layout.target_dir))}"
        )
        return SetupResult(config=config, layout=layout, installed_tools=installed)

    def check_dependencies(self) -> List[str]:
        verifier = DependencyVerifier(self.package_manager, self.settings.required_tools)
        return verifier.verify()

    def capture_settings(self) -> ProjectConfiguration:
        self.console.print("Please enter the following information.")
        config = capture_configuration(self.reader, self.console)
        logger.debug(f"Captured configuration: {config.model_dump()}")
        return config

    def _stage(self, index: int, title: str, action: Callable, *args):
        print_step(self.console, title, index, TOTAL_STAGES)
        result = action(*args)
        print_ok(self.console)
        return result
