"""appforge configuration.

Typed configuration for the scaffolder. All settings use Pydantic v2 models so
they can be validated at construction time and overridden from environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

_DEFAULT_INSTALL_ROOT = Path(__file__).parent / "resources"

KNOWN_PLATFORMS: tuple[str, ...] = ("android", "ios", "mobileweb")


class ScaffoldOptions(BaseModel):
    """Per-invocation options for ``appforge new``."""

    force: bool = Field(default=False, description="Overwrite an existing app directory")
    testapp: str | None = Field(
        default=None, description="Sample app to use as the template source"
    )
    template_name: str = Field(default="default", min_length=1)

    @property
    def is_testapp(self) -> bool:
        return bool(self.testapp)


class Config(BaseModel):
    """Global appforge configuration.

    Describes where the installation tree lives and which platforms and
    folders the scaffolder knows about. Instances are typically created once
    by the CLI entry point and passed to ``ProjectScaffolder``.
    """

    install_root: Path = Field(default=_DEFAULT_INSTALL_ROOT)
    platforms: list[str] = Field(default_factory=lambda: list(KNOWN_PLATFORMS))

    # Legacy ``Resources/`` folder names, ``iphone`` holds iOS assets.
    platform_folders: list[str] = Field(
        default_factory=lambda: ["android", "iphone", "mobileweb"]
    )
    app_dirs: list[str] = Field(
        default_factory=lambda: ["controllers", "styles", "views", "models", "assets"]
    )
    global_style: str = Field(default="app.tss")
    plugin_name: str = Field(default="ti.alloy")
    dir_mode: int = Field(default=0o755, ge=0, le=0o777)

    @field_validator("platforms")
    @classmethod
    def _check_platforms(cls, value: list[str]) -> list[str]:
        unknown = [p for p in value if p not in KNOWN_PLATFORMS]
        if unknown:
            raise ValueError(f"Unknown platform(s): {', '.join(unknown)}")
        return value

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def template_dir(self) -> Path:
        """Default files copied into every project (``alloy.js``, ``app.tss``...)."""
        return self.install_root / "template"

    @property
    def templates_dir(self) -> Path:
        """Named project templates and the ``DefaultIcon*.png`` images."""
        return self.install_root / "templates"

    @property
    def platforms_dir(self) -> Path:
        return self.install_root / "platforms"

    @property
    def sample_apps_dir(self) -> Path:
        """Sample ("test") apps selectable with ``--testapp``."""
        return self.install_root / "samples" / "apps"

    @property
    def test_lib_dir(self) -> Path:
        """Shared test harness copied into test apps that ship specs."""
        return self.install_root / "samples" / "lib"

    @property
    def plugin_dir(self) -> Path:
        """Source tree of the build plugin registered in new projects."""
        return self.install_root / "plugin" / self.plugin_name

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            APPFORGE_INSTALL_ROOT, APPFORGE_PLATFORMS.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("APPFORGE_INSTALL_ROOT"):
            kwargs["install_root"] = Path(os.environ["APPFORGE_INSTALL_ROOT"])
        if os.environ.get("APPFORGE_PLATFORMS"):
            raw = os.environ["APPFORGE_PLATFORMS"]
            kwargs["platforms"] = [p.strip() for p in raw.split(",") if p.strip()]
        return cls(**kwargs)
