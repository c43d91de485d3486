"""Exception types raised while initializing a new Hubs app."""

from __future__ import annotations

from typing import Sequence


class InitError(RuntimeError):
    """Raised when a step of the initialization sequence cannot complete."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class InvalidNameError(InitError):
    """Raised when the project name is not a valid npm package name."""

    def __init__(self, reasons: Sequence[str]) -> None:
        self.reasons = tuple(reasons)
        message = "Invalid project name."
        if self.reasons:
            message = f"{message} {self.reasons[0]}"
        super().__init__(message)


class PathConflictError(InitError):
    """Raised when the destination is a file or a non-empty directory."""


class CopyError(InitError):
    """Raised when the template tree cannot be copied into the destination."""


class ManifestWriteError(InitError):
    """Raised when ``package.json`` cannot be written."""


class InstallError(InitError):
    """Raised when the package manager fails or cannot be started."""

    def __init__(self, message: str, *, returncode: int | None = None) -> None:
        self.returncode = returncode
        super().__init__(message)


__all__ = [
    "CopyError",
    "InitError",
    "InstallError",
    "InvalidNameError",
    "ManifestWriteError",
    "PathConflictError",
]
