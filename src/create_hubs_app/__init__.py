"""Scaffold new Hubs Cloud app projects.

The package validates the project name, prepares an empty destination
directory, copies the bundled starter template, writes ``package.json`` and
installs ``hubs-sdk`` with npm. :class:`InitSequence` runs those steps in
order and is used both programmatically and by the ``create-hubs-app``
command.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import InstallSpec, ProjectRequest
from .directory import IGNORED_FILES, prepare_directory
from .errors import (
    CopyError,
    InitError,
    InstallError,
    InvalidNameError,
    ManifestWriteError,
    PathConflictError,
)
from .install import PackageInstaller
from .manifest import Manifest, write_manifest
from .naming import ValidationResult, validate_package_name
from .scaffold import InitReport, InitSequence, InitState
from .template import TEMPLATE_DIR, TemplateMaterializer

__all__ = [
    "CopyError",
    "IGNORED_FILES",
    "InitError",
    "InitReport",
    "InitSequence",
    "InitState",
    "InstallError",
    "InstallSpec",
    "InvalidNameError",
    "Manifest",
    "ManifestWriteError",
    "PackageInstaller",
    "PathConflictError",
    "ProjectRequest",
    "TEMPLATE_DIR",
    "TemplateMaterializer",
    "ValidationResult",
    "prepare_directory",
    "validate_package_name",
    "write_manifest",
]
