"""Target directory preparation and boilerplate overlay."""

from __future__ import annotations

import shutil
from pathlib import Path

from .errors import AlreadyExistsError, SourceNotFoundError


def prepare_target(path: Path) -> Path:
    """Create the project directory, refusing to reuse an existing path.

    Args:
        path: Directory to create. Its parent must already exist.

    Returns:
        The created path.

    Raises:
        AlreadyExistsError: ``path`` exists (file or directory); nothing is
            modified.
    """
    if path.exists() or path.is_symlink():
        raise AlreadyExistsError(
            f'folder "{path.name}" already exists: {path}',
            recovery_hint="choose another project name or remove the existing folder",
        )
    path.mkdir()
    return path


def stage_boilerplate(source: Path, target: Path) -> list[Path]:
    """Merge-copy every file under ``source`` into ``target``.

    Files with the same relative path are overwritten by the boilerplate
    version; files that exist only in ``target`` are left untouched.

    Returns:
        Relative paths of the copied files, sorted.

    Raises:
        SourceNotFoundError: ``source`` is not an existing directory.
    """
    if not source.is_dir():
        raise SourceNotFoundError(
            f"boilerplate folder not found: {source}",
            recovery_hint="the installation is incomplete; reinstall next-starter",
        )
    shutil.copytree(source, target, dirs_exist_ok=True)
    return sorted(
        candidate.relative_to(source)
        for candidate in source.rglob("*")
        if candidate.is_file()
    )
