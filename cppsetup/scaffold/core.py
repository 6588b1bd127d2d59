"""Core scaffolding for C++ projects: directory tree plus generated files."""
from pathlib import Path
from typing import List, Optional

from cppsetup.core.logger import get_logger
from cppsetup.models.project import ProjectConfiguration
from cppsetup.scaffold.build_script import BuildScriptGenerator
from cppsetup.scaffold.cmake import CMakeListsGenerator
from cppsetup.scaffold.formatting import FormattingContext
from cppsetup.scaffold.tree import MAC_TARGET, ProjectLayout, Target, TreeBuilder

logger = get_logger(__name__)


class ScaffoldManager:
    """Creates the project tree and writes build.sh and CMakeLists.txt."""

    def __init__(
        self,
        author: str,
        output_dir: Optional[Path] = None,
        target: Target = MAC_TARGET,
        tree_builder: Optional[TreeBuilder] = None,
    ):
        self.author = author
        self.output_dir = Path(output_dir) if output_dir else Path.cwd()
        self.target = target
        self.tree_builder = tree_builder or TreeBuilder()

    def layout_for(self, config: ProjectConfiguration) -> ProjectLayout:
        layout = ProjectLayout(root=self.output_dir / config.name, target=self.target)
        logger.debug(f"Project {config.name} laid out under {layout.root}")
        return layout

    def build_tree(self, layout: ProjectLayout) -> List[Path]:
        """Create the directory tree (see TreeBuilder.build)."""
        return self.tree_builder.build(layout)

    def write_build_script(self, layout: ProjectLayout, ctx: FormattingContext) -> Path:
        """Write (or rewrite) the executable build script."""
        generator = BuildScriptGenerator(ctx, self.author, self.target)
        return generator.write(layout.build_script)

    def write_cmake_lists(
        self,
        layout: ProjectLayout,
        config: ProjectConfiguration,
        ctx: FormattingContext,
    ) -> Path:
        """Write (or rewrite) CMakeLists.txt for `config`."""
        generator = CMakeListsGenerator(config, ctx, self.author, self.target)
        return generator.write(layout.cmake_lists)
