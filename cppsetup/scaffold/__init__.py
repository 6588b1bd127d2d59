"""C++ project scaffolding: directory tree, build.sh and CMakeLists.txt."""

from .build_script import BuildScriptGenerator
from .cmake import CMakeListsGenerator
from .core import ScaffoldManager
from .formatting import FormattingContext
from .tree import MAC_TARGET, ProjectLayout, Target, TreeBuilder

__all__ = [
    "BuildScriptGenerator",
    "CMakeListsGenerator",
    "FormattingContext",
    "MAC_TARGET",
    "ProjectLayout",
    "ScaffoldManager",
    "Target",
    "TreeBuilder",
]
