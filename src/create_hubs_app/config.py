"""Configuration shared by the initialization sequence and the CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Mapping

MANIFEST_FILENAME = "package.json"
MANIFEST_VERSION = "0.1.0"
MANIFEST_SCRIPTS: Mapping[str, str] = {
    "login": "hubs login",
    "start": "hubs start",
    "deploy": "hubs deploy",
    "logout": "hubs logout",
}

NPM_EXECUTABLE = "npm"
DEFAULT_PACKAGES: tuple[str, ...] = ("hubs-sdk",)
INSTALL_FLAGS: tuple[str, ...] = ("--save", "--save-exact", "--loglevel", "error")

DOCS_URL = "https://hubs.mozilla.com/docs"


@dataclass(frozen=True, slots=True)
class ProjectRequest:
    """Identifiers derived from the ``project-path`` argument.

    Attributes
    ----------
    raw_path:
        The path as typed by the user, with surrounding whitespace removed.
    resolved_path:
        The absolute destination directory.
    project_name:
        The last segment of :attr:`resolved_path`. It becomes the ``name`` of
        the generated manifest and therefore has to be a valid npm package
        name.
    """

    raw_path: str
    resolved_path: Path
    project_name: str

    @classmethod
    def from_path(cls, raw_path: str | os.PathLike[str]) -> "ProjectRequest":
        """Build a :class:`ProjectRequest` from a user supplied path."""

        cleaned = os.fspath(raw_path).strip()
        if not cleaned:
            raise ValueError("project path must not be empty")

        resolved = Path(os.path.abspath(os.path.expanduser(cleaned)))
        return cls(raw_path=cleaned, resolved_path=resolved, project_name=resolved.name)


@dataclass(frozen=True, slots=True)
class InstallSpec:
    """Arguments for a single package manager invocation."""

    working_directory: Path
    packages: tuple[str, ...] = DEFAULT_PACKAGES
    flags: tuple[str, ...] = INSTALL_FLAGS

    @classmethod
    def for_directory(
        cls,
        directory: str | Path,
        packages: Iterable[str] | None = None,
    ) -> "InstallSpec":
        selected = tuple(packages) if packages is not None else DEFAULT_PACKAGES
        return cls(working_directory=Path(directory), packages=selected)

    def arguments(self) -> list[str]:
        """Return the ``install`` command line, without the executable."""

        return ["install", *self.flags, *self.packages]


__all__ = [
    "DEFAULT_PACKAGES",
    "DOCS_URL",
    "INSTALL_FLAGS",
    "InstallSpec",
    "MANIFEST_FILENAME",
    "MANIFEST_SCRIPTS",
    "MANIFEST_VERSION",
    "NPM_EXECUTABLE",
    "ProjectRequest",
]
