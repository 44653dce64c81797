"""Build plugin registration.

The scaffolder only depends on the ``PluginInstaller`` protocol. The default
``DirectoryPluginInstaller`` copies the plugin into ``<project>/plugins`` and
lists it in the project's ``tiapp.xml`` so the next build picks it up.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol

from ..utils import copy_tree
from .errors import PluginInstallError

_PLUGIN_ENTRY = "<plugin>{name}</plugin>"
_PLUGINS_CLOSE = re.compile(r"</plugins\s*>")
_PLUGINS_EMPTY = re.compile(r"<plugins\s*/>")
_ROOT_CLOSE = re.compile(r"</(?:ti:)?app\s*>\s*$")


class PluginInstaller(Protocol):
    """Registers a build plugin with a project."""

    def install(
        self, plugin_dir: Path, project_dir: Path, plugins_dir: Path | None = None
    ) -> None: ...


class DirectoryPluginInstaller:
    """Install a plugin by copying its directory and updating ``tiapp.xml``."""

    def __init__(self, plugin_name: str = "ti.alloy") -> None:
        self.plugin_name = plugin_name

    def install(
        self, plugin_dir: Path, project_dir: Path, plugins_dir: Path | None = None
    ) -> None:
        """Copy *plugin_dir* into *plugins_dir* (default ``<project>/plugins``)."""
        if not plugin_dir.is_dir():
            raise PluginInstallError(f'Plugin source not found at "{plugin_dir}"')

        dest = (plugins_dir or project_dir / "plugins") / self.plugin_name
        copy_tree(plugin_dir, dest)

        tiapp = project_dir / "tiapp.xml"
        if tiapp.is_file():
            self._register(tiapp)

    def _register(self, tiapp: Path) -> None:
        try:
            xml = tiapp.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise PluginInstallError(f'Unable to read "{tiapp}": {exc}') from exc
        entry = _PLUGIN_ENTRY.format(name=self.plugin_name)
        if re.search(rf"<plugin\b[^>]*>\s*{re.escape(self.plugin_name)}\s*</plugin>", xml):
            return

        root_close = _ROOT_CLOSE.search(xml)
        if _PLUGINS_CLOSE.search(xml):
            updated = _PLUGINS_CLOSE.sub(f"\t{entry}\n\t</plugins>", xml, count=1)
        elif _PLUGINS_EMPTY.search(xml):
            updated = _PLUGINS_EMPTY.sub(f"<plugins>\n\t\t{entry}\n\t</plugins>", xml, count=1)
        elif root_close is not None:
            block = f"\t<plugins>\n\t\t{entry}\n\t</plugins>\n"
            updated = xml[: root_close.start()] + block + xml[root_close.start():]
        else:
            raise PluginInstallError(f'Unable to register plugin in "{tiapp}"')

        tiapp.write_text(updated, encoding="utf-8")
