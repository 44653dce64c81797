"""Shared utility functions for appforge.

Provides the file-system helpers the scaffolder is built from (directory
creation, file and tree copies, recursive removal, icon discovery) and
Rich-based console reporting.
"""

from __future__ import annotations

import re
import shutil
from collections.abc import Callable, Iterable
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()

IgnoreFunc = Callable[[str, list[str]], Iterable[str]]

# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path, mode: int = 0o755) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.
        mode: Permission bits for newly created directories (the process
            umask still applies).

    Returns:
        The ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(mode=mode, parents=True, exist_ok=True)
    return dir_path


def copy_file(src: str | Path, dest: str | Path) -> Path:
    """Copy a single file, overwriting *dest* if it exists.

    Raises:
        FileNotFoundError: If *src* does not exist.
    """
    return Path(shutil.copyfile(src, dest))


def copy_tree(
    src: str | Path,
    dest: str | Path,
    *,
    ignore: IgnoreFunc | None = None,
) -> Path:
    """Recursively copy the contents of *src* into *dest*.

    *dest* may already exist; existing files are overwritten and files not
    present in *src* are left alone. Permission bits and timestamps are kept.

    Args:
        src: Source directory.
        dest: Destination directory.
        ignore: Optional ``shutil.copytree`` ignore callable.

    Raises:
        FileNotFoundError: If *src* does not exist.
    """
    return Path(
        shutil.copytree(
            src,
            dest,
            dirs_exist_ok=True,
            copy_function=shutil.copy2,
            ignore=ignore,
        )
    )


def remove_tree(path: str | Path) -> bool:
    """Recursively delete *path* if it exists.

    Returns:
        ``True`` if something was removed, ``False`` if *path* was absent.
    """
    target = Path(path)
    if not target.exists() and not target.is_symlink():
        return False
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    else:
        target.unlink()
    return True


def exclude_top_level(src: str | Path, *names: str) -> IgnoreFunc:
    """Build a ``copytree`` ignore callable that skips *names* directly under *src*.

    Unlike ``shutil.ignore_patterns`` nested entries with the same name are
    still copied.
    """
    root = Path(src)
    excluded = set(names)

    def _ignore(directory: str, entries: list[str]) -> set[str]:
        if Path(directory) != root:
            return set()
        return excluded.intersection(entries)

    return _ignore


ICON_PATTERN = re.compile(r"^DefaultIcon(-\w+)?\.png$")


def find_icons(directory: str | Path, pattern: re.Pattern[str] = ICON_PATTERN) -> list[Path]:
    """Return files directly inside *directory* whose name matches *pattern*.

    Results are sorted by name so callers copy them in a stable order.
    """
    return sorted(
        p for p in Path(directory).iterdir() if p.is_file() and pattern.match(p.name)
    )


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_step(index: int, total: int, description: str) -> None:
    """Print a dim progress line for a pipeline step."""
    console.print(f"[dim]\\[{index}/{total}][/dim] {description}")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
