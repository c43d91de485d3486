"""Destination directory checks."""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import PathConflictError

__all__ = ["IGNORED_FILES", "prepare_directory"]


LOGGER = logging.getLogger(__name__)

# Files the operating system drops into folders on its own.
IGNORED_FILES = frozenset({".DS_Store", "Thumbs.db"})


def prepare_directory(path: str | Path) -> bool:
    """Make sure ``path`` is an empty directory, creating it when missing.

    Returns ``True`` when the directory was created and ``False`` when an
    existing empty directory is reused. Raises :class:`PathConflictError`
    without touching the filesystem when ``path`` is not a directory or holds
    anything besides :data:`IGNORED_FILES`.

    The existence check and the creation are separate filesystem calls, so a
    process creating the same path in between is not detected.
    """

    path = Path(path)

    try:
        exists = path.exists()
    except OSError as exc:
        raise PathConflictError(f"{path} could not be read: {exc.strerror or exc}") from exc

    if not exists:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise PathConflictError(f"{path} could not be created: {exc.strerror or exc}") from exc
        LOGGER.debug("created directory %s", path)
        return True

    try:
        if not path.is_dir():
            raise PathConflictError(f"{path} is not a directory.")
        entries = [entry.name for entry in path.iterdir() if entry.name not in IGNORED_FILES]
    except OSError as exc:
        raise PathConflictError(f"{path} could not be read: {exc.strerror or exc}") from exc

    if entries:
        LOGGER.debug("directory %s already contains %s", path, sorted(entries))
        raise PathConflictError(f"{path} is not an empty directory.")

    LOGGER.debug("reusing empty directory %s", path)
    return False
