"""Run the package manager inside a freshly scaffolded project."""

from __future__ import annotations

import logging
import os
import shutil
import subprocess

from .config import NPM_EXECUTABLE, InstallSpec
from .errors import InstallError

__all__ = ["PackageInstaller"]


LOGGER = logging.getLogger(__name__)


def _resolve_argv(argv: list[str]) -> list[str]:
    """Resolve ``argv[0]`` on ``PATH``.

    On Windows ``npm`` is a ``.cmd`` shim which ``subprocess`` cannot execute
    directly, so it is launched through ``cmd.exe /c``.
    """

    command = argv[0]
    if any(sep and sep in command for sep in ("/", "\\", os.path.sep, os.path.altsep)):
        return argv

    resolved = shutil.which(command)
    if resolved is None:
        return argv

    if os.name == "nt" and os.path.splitext(resolved)[1].lower() in {".cmd", ".bat"}:
        comspec = os.environ.get("ComSpec", "cmd.exe")
        return [comspec, "/d", "/c", resolved, *argv[1:]]

    return [resolved, *argv[1:]]


class PackageInstaller:
    """Install npm packages into a project directory.

    The child process shares this process's standard streams so npm's own
    progress and error output reach the terminal as it happens. There is no
    timeout.
    """

    def __init__(self, executable: str = NPM_EXECUTABLE) -> None:
        self.executable = executable

    def command(self, spec: InstallSpec) -> list[str]:
        return [self.executable, *spec.arguments()]

    def install(self, spec: InstallSpec) -> None:
        argv = self.command(spec)
        LOGGER.info("running %s in %s", " ".join(argv), spec.working_directory)
        try:
            result = subprocess.run(
                _resolve_argv(argv),
                cwd=str(spec.working_directory),
                check=False,
            )
        except FileNotFoundError as exc:
            raise InstallError(f"Error running {self.executable} install: command not found") from exc
        except OSError as exc:
            raise InstallError(f"Error running {self.executable} install: {exc.strerror or exc}") from exc

        if result.returncode != 0:
            LOGGER.debug("%s exited with status %s", self.executable, result.returncode)
            raise InstallError(f"Error running {self.executable} install", returncode=result.returncode)
