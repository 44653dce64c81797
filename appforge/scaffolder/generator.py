"""Main scaffolding orchestrator.

Turns a classic project (a directory with a ``Resources/`` tree) into an app
project: creates ``app/`` with its standard folders, migrates the
platform-specific resource folders into ``app/assets``, registers the build
plugin and lays the chosen template (or sample app) over the result.

The work is an ordered list of named steps. Later steps rely on directories
created by earlier ones, so the first failing step stops the run.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from jinja2 import TemplateError

from ..config import Config, ScaffoldOptions
from ..utils import (
    copy_file,
    copy_tree,
    ensure_dir,
    exclude_top_level,
    find_icons,
    print_step,
    print_success,
    print_warning,
    remove_tree,
)
from .errors import DestinationExistsError, OperationFailedError
from .paths import DerivedPaths, ResolvedPaths, derive_paths, resolve_paths
from .plugins import DirectoryPluginInstaller, PluginInstaller
from .templates import TemplateRenderer

# Left behind by earlier builds of a sample app; never part of a new project.
GENERATED_DIR = "_generated"


@dataclass(frozen=True)
class Step:
    """A single named, fallible scaffolding step."""

    name: str
    run: Callable[[], object]


class ProjectScaffolder:
    """Create the app layout inside an existing project.

    Usage::

        scaffolder = ProjectScaffolder(Config())
        app_dir = scaffolder.create("./MyProject", ScaffoldOptions(force=True))
    """

    def __init__(
        self,
        config: Config | None = None,
        installer: PluginInstaller | None = None,
    ) -> None:
        self.config = config or Config()
        self.installer = installer or DirectoryPluginInstaller(self.config.plugin_name)
        self.renderer = TemplateRenderer(self.config.template_dir)

    # -- Public API --------------------------------------------------------

    def create(self, project_root: str | Path, options: ScaffoldOptions) -> Path:
        """Resolve paths for *project_root* and scaffold it.

        Returns:
            Path to the generated ``app`` directory.
        """
        paths = resolve_paths(
            project_root,
            template_name=options.template_name,
            testapp=options.testapp,
            config=self.config,
        )
        return self.scaffold(paths, options)

    def scaffold(self, paths: ResolvedPaths, options: ScaffoldOptions) -> Path:
        """Run every step against already validated *paths*.

        Raises:
            DestinationExistsError: ``app/`` exists and ``options.force`` is
                unset. Raised before anything is touched.
            OperationFailedError: A file-system operation failed. Steps that
                already ran are not rolled back.
            PluginInstallError: The plugin installer rejected the project.
        """
        derived = derive_paths(paths)
        if derived.app.exists():
            if not options.force:
                raise DestinationExistsError(derived.app)
            print_warning(f'Replacing existing "app" directory in {paths.project}')

        steps = self._build_steps(paths, derived, options)
        for index, step in enumerate(steps, start=1):
            print_step(index, len(steps), step.name)
            try:
                step.run()
            except (OSError, TemplateError) as exc:
                raise OperationFailedError(step.name, str(exc)) from exc

        print_success(f"Generated new project at: {derived.app}")
        return derived.app

    # -- Pipeline ----------------------------------------------------------

    def _build_steps(
        self,
        paths: ResolvedPaths,
        derived: DerivedPaths,
        options: ScaffoldOptions,
    ) -> list[Step]:
        cfg = self.config
        mode = cfg.dir_mode
        app = derived.app

        steps = [
            Step("remove existing app directory", lambda: remove_tree(app)),
            Step("create app directory", lambda: ensure_dir(app, mode)),
            Step(
                "copy platform resources to assets",
                lambda: self._copy_platform_resources(paths, derived.assets),
            ),
            Step("create app folders", lambda: self._create_app_dirs(app)),
            Step(
                "copy alloy.js",
                lambda: copy_file(paths.template / "alloy.js", app / "alloy.js"),
            ),
            Step(
                "install build plugin",
                lambda: self.installer.install(cfg.plugin_dir, paths.project, derived.plugins),
            ),
            Step(
                f"copy {cfg.global_style}",
                lambda: copy_file(
                    paths.template / cfg.global_style,
                    app / "styles" / cfg.global_style,
                ),
            ),
            Step("copy default icons", lambda: self._copy_icons(paths.project)),
            Step(
                "copy .gitignore",
                lambda: copy_file(paths.template / "gitignore.txt", paths.project / ".gitignore"),
            ),
            Step(
                "refresh platform resources",
                lambda: self._copy_platform_resources(paths, derived.assets),
            ),
            Step("copy platform project files", lambda: self._copy_platform_projects(paths)),
            Step("copy app template", lambda: self._copy_template(paths, app, options)),
            Step("write README", lambda: self._write_readme(paths, app, options)),
        ]
        if options.is_testapp:
            steps.append(Step("install test harness", lambda: self._install_harness(paths, app)))
        steps.append(Step("remove build directory", lambda: remove_tree(paths.build)))
        return steps

    # -- Steps ---------------------------------------------------------------

    def _copy_platform_resources(self, paths: ResolvedPaths, dest_root: Path) -> None:
        """Copy ``Resources/<platform>`` folders that exist into *dest_root*.

        File attributes (mode, timestamps) are kept on every pass.
        """
        for folder in self.config.platform_folders:
            src = paths.resources / folder
            if not src.is_dir():
                continue
            dest = ensure_dir(dest_root / folder, self.config.dir_mode)
            copy_tree(src, dest)

    def _create_app_dirs(self, app: Path) -> None:
        for name in self.config.app_dirs:
            ensure_dir(app / name, self.config.dir_mode)

    def _copy_icons(self, project: Path) -> None:
        for icon in find_icons(self.config.templates_dir):
            copy_file(icon, project / icon.name)

    def _copy_platform_projects(self, paths: ResolvedPaths) -> None:
        for platform in self.config.platforms:
            copy_tree(self.config.platforms_dir / platform / "project", paths.project)

    def _copy_template(self, paths: ResolvedPaths, app: Path, options: ScaffoldOptions) -> None:
        if options.is_testapp:
            src = paths.project_template
            copy_tree(src, app, ignore=exclude_top_level(src, GENERATED_DIR))
        else:
            copy_tree(paths.project_template / "app", app)

    def _write_readme(self, paths: ResolvedPaths, app: Path, options: ScaffoldOptions) -> None:
        context = {
            "project_name": paths.project.name,
            "template_name": options.testapp or options.template_name,
        }
        self.renderer.render_to_file(paths.readme.name, app / "README", context)

    def _install_harness(self, paths: ResolvedPaths, app: Path) -> None:
        remove_tree(app / GENERATED_DIR)
        if (paths.project_template / "specs").is_dir():
            lib = ensure_dir(app / "lib", self.config.dir_mode)
            copy_tree(self.config.test_lib_dir, lib)
