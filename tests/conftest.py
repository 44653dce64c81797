"""Shared pytest fixtures for the appforge test suite.

Provides reusable fixtures for:
- A fake installation tree (templates, platforms, sample apps, plugin)
- A classic project with a ``Resources/`` directory and stale build output
- A ``Config`` / ``ProjectScaffolder`` wired to the fake installation
- A tree snapshot helper for byte-level comparisons
"""

from __future__ import annotations

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from appforge.config import Config
from appforge.scaffolder import ProjectScaffolder

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16

TIAPP_XML = textwrap.dedent(
    """\
    <?xml version="1.0" encoding="UTF-8"?>
    <ti:app xmlns:ti="http://ti.appcelerator.org">
    \t<id>com.example.legacy</id>
    \t<name>legacy</name>
    \t<plugins>
    \t\t<plugin version="1.0">ti.alloy-legacy</plugin>
    \t</plugins>
    </ti:app>
    """
)


def _write(path: Path, content: str | bytes = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Installation tree
# ---------------------------------------------------------------------------


@pytest.fixture
def install_root(tmp_path: Path) -> Path:
    """A minimal but complete installation tree."""
    root = tmp_path / "install"

    _write(root / "template" / "alloy.js", "// alloy.js\n")
    _write(root / "template" / "app.tss", '"Window": { backgroundColor: "#fff" }\n')
    _write(root / "template" / "gitignore.txt", "/build\n/Resources\n")
    _write(root / "template" / "README", "{{ project_name }} ({{ template_name }})\n")

    _write(root / "templates" / "default" / "app" / "controllers" / "index.js", "$.index.open();\n")
    _write(root / "templates" / "default" / "app" / "views" / "index.xml", "<Alloy/>\n")
    _write(root / "templates" / "default" / "unused.txt", "outside app/\n")
    _write(root / "templates" / "DefaultIcon.png", PNG_BYTES)
    _write(root / "templates" / "DefaultIcon-ios.png", PNG_BYTES)
    _write(root / "templates" / "NotAnIcon.png", PNG_BYTES)
    _write(root / "templates" / "DefaultIcon-ios.jpg", PNG_BYTES)

    for platform in ("android", "ios", "mobileweb"):
        _write(
            root / "platforms" / platform / "project" / "platform" / platform / "marker.txt",
            f"{platform}\n",
        )

    tableview = root / "samples" / "apps" / "ui" / "tableview"
    _write(tableview / "views" / "index.xml", "<Alloy><TableView/></Alloy>\n")
    _write(tableview / "specs" / "index.js", "require('harness');\n")
    _write(tableview / "_generated" / "stale.js", "// stale build output\n")
    _write(tableview / "widgets" / "_generated" / "keep.js", "// nested, kept\n")

    _write(root / "samples" / "apps" / "basics" / "views" / "index.xml", "<Alloy/>\n")
    _write(root / "samples" / "lib" / "harness.js", "exports.run = function() {};\n")

    _write(root / "plugin" / "ti.alloy" / "plugin.py", "def compile(config):\n    pass\n")
    return root


@pytest.fixture
def config(install_root: Path) -> Config:
    return Config(install_root=install_root)


@pytest.fixture
def scaffolder(config: Config) -> ProjectScaffolder:
    return ProjectScaffolder(config)


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


@pytest.fixture
def legacy_project(tmp_path: Path) -> Path:
    """A classic project with android and iphone resources and a stale build."""
    project = tmp_path / "legacy"
    _write(project / "Resources" / "app.js", "Ti.UI.createWindow().open();\n")
    _write(project / "Resources" / "android" / "appicon.png", PNG_BYTES)
    _write(project / "Resources" / "android" / "images" / "splash.png", PNG_BYTES)
    _write(project / "Resources" / "iphone" / "Default.png", PNG_BYTES)
    _write(project / "build" / "android" / "stale.txt", "old build\n")
    _write(project / "tiapp.xml", TIAPP_XML)
    return project


@pytest.fixture
def empty_project(tmp_path: Path) -> Path:
    """An existing but empty project directory."""
    project = tmp_path / "empty"
    project.mkdir()
    return project


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def snapshot() -> Callable[[Path], dict[str, bytes]]:
    """Return a function mapping every file under a root to its bytes."""

    def _snapshot(root: Path) -> dict[str, bytes]:
        return {
            p.relative_to(root).as_posix(): p.read_bytes()
            for p in sorted(root.rglob("*"))
            if p.is_file()
        }

    return _snapshot
