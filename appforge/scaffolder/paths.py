"""Path resolution for ``appforge new``.

Paths come in two groups. ``ResolvedPaths`` holds everything that must be
known (and, except for ``resources`` and ``build``, must exist) before any
mutation happens. ``DerivedPaths`` holds the destinations inside the project
that are computed afterwards because they usually do not exist yet.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from ..config import Config
from .errors import PathNotFoundError


class ResolvedPaths(BaseModel):
    """Validated source and project paths."""

    model_config = ConfigDict(frozen=True)

    install_root: Path
    template: Path
    readme: Path
    project_template: Path
    project: Path
    resources: Path
    build: Path


class DerivedPaths(BaseModel):
    """Destination paths inside the project, computed after validation."""

    model_config = ConfigDict(frozen=True)

    app: Path
    assets: Path
    plugins: Path


def resolve_paths(
    project_root: str | Path = ".",
    template_name: str = "default",
    testapp: str | None = None,
    config: Config | None = None,
) -> ResolvedPaths:
    """Compute and validate the paths needed to scaffold *project_root*.

    Args:
        project_root: Existing project directory (relative paths are resolved
            against the current working directory).
        template_name: Name of a directory under the installation's
            ``templates/`` folder.
        testapp: Name of a sample app under ``samples/apps``. When given it
            replaces *template_name* as the template source.
        config: Installation layout; defaults to ``Config()``.

    Returns:
        A frozen ``ResolvedPaths``.

    Raises:
        PathNotFoundError: If the project root, the installation tree, the
            default template files, or the chosen template/test app is missing.
    """
    config = config or Config()
    project = Path(project_root).expanduser().resolve()

    if testapp:
        container = config.sample_apps_dir
        project_template = container / testapp
        label = f'Test app "{testapp}"'
    else:
        container = config.templates_dir
        project_template = container / template_name
        label = f'Project template "{template_name}"'

    paths = ResolvedPaths(
        install_root=config.install_root,
        template=config.template_dir,
        readme=config.template_dir / "README",
        project_template=project_template,
        project=project,
        resources=project / "Resources",
        build=project / "build",
    )

    if not paths.project.is_dir():
        raise PathNotFoundError(
            paths.project, f'Project path not found at "{paths.project}"'
        )
    for required in (paths.install_root, paths.template, paths.readme):
        if not required.exists():
            raise PathNotFoundError(required)
    # Names may contain "/" (ui/tableview) but must stay inside their folder.
    resolved_template = project_template.resolve()
    if resolved_template == container.resolve() or not resolved_template.is_relative_to(
        container.resolve()
    ):
        raise PathNotFoundError(project_template, f'{label} is outside "{container}"')
    if not paths.project_template.is_dir():
        raise PathNotFoundError(
            paths.project_template, f'{label} not found at "{paths.project_template}"'
        )

    return paths


def derive_paths(paths: ResolvedPaths) -> DerivedPaths:
    """Return the app, assets and plugins destinations for *paths*."""
    app = paths.project / "app"
    return DerivedPaths(
        app=app,
        assets=app / "assets",
        plugins=paths.project / "plugins",
    )
