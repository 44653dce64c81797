"""appforge scaffolder -- creates the app layout inside an existing project.

Quick usage::

    from appforge.config import Config, ScaffoldOptions
    from appforge.scaffolder import ProjectScaffolder

    scaffolder = ProjectScaffolder(Config())
    app_dir = scaffolder.create("./MyProject", ScaffoldOptions(testapp="ui/tableview"))
"""

from .errors import (
    DestinationExistsError,
    OperationFailedError,
    PathNotFoundError,
    PluginInstallError,
    ScaffoldError,
)
from .generator import ProjectScaffolder
from .paths import DerivedPaths, ResolvedPaths, derive_paths, resolve_paths
from .plugins import DirectoryPluginInstaller, PluginInstaller
from .templates import TemplateRenderer

__all__ = [
    "DerivedPaths",
    "DestinationExistsError",
    "DirectoryPluginInstaller",
    "OperationFailedError",
    "PathNotFoundError",
    "PluginInstallError",
    "PluginInstaller",
    "ProjectScaffolder",
    "ResolvedPaths",
    "ScaffoldError",
    "TemplateRenderer",
    "derive_paths",
    "resolve_paths",
]
