"""The project initialization sequence."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .config import InstallSpec, ProjectRequest
from .directory import prepare_directory
from .errors import InitError, InvalidNameError
from .install import PackageInstaller
from .manifest import write_manifest
from .naming import validate_package_name
from .template import TemplateMaterializer

__all__ = ["InitReport", "InitSequence", "InitState", "StepCallback"]


LOGGER = logging.getLogger(__name__)


class InitState(str, Enum):
    """Steps of :class:`InitSequence`, in execution order, plus its outcomes."""

    VALIDATING_NAME = "validating_name"
    PREPARING_DIRECTORY = "preparing_directory"
    MATERIALIZING_TEMPLATE = "materializing_template"
    WRITING_MANIFEST = "writing_manifest"
    INSTALLING_PACKAGES = "installing_packages"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


StepCallback = Callable[[InitState, ProjectRequest], None]


@dataclass(frozen=True, slots=True)
class InitReport:
    """Result of running :class:`InitSequence` once.

    ``failed_step`` names the step that raised when :attr:`state` is
    :attr:`InitState.FAILED`.
    """

    request: ProjectRequest
    state: InitState
    error: InitError | None = None
    failed_step: InitState | None = None

    @property
    def succeeded(self) -> bool:
        return self.state is InitState.SUCCEEDED


class InitSequence:
    """Validate, create, populate and install a new Hubs app.

    Steps run strictly in order and the first failure ends the run. Nothing
    that already happened is undone: a failed template copy or install leaves
    the destination as it was at that moment.
    """

    def __init__(
        self,
        *,
        materializer: TemplateMaterializer | None = None,
        installer: PackageInstaller | None = None,
        on_step: StepCallback | None = None,
    ) -> None:
        self.materializer = materializer or TemplateMaterializer()
        self.installer = installer or PackageInstaller()
        self.on_step = on_step

    def run(self, request: ProjectRequest) -> InitReport:
        """Run every step for ``request`` and report how far it got."""

        steps: list[tuple[InitState, Callable[[ProjectRequest], object]]] = [
            (InitState.VALIDATING_NAME, self._validate_name),
            (InitState.PREPARING_DIRECTORY, self._prepare_directory),
            (InitState.MATERIALIZING_TEMPLATE, self._materialize_template),
            (InitState.WRITING_MANIFEST, self._write_manifest),
            (InitState.INSTALLING_PACKAGES, self._install_packages),
        ]

        for state, step in steps:
            LOGGER.info("%s: %s", state.value, request.resolved_path)
            if self.on_step is not None:
                self.on_step(state, request)
            try:
                step(request)
            except InitError as exc:
                LOGGER.warning("%s failed: %s", state.value, exc)
                return InitReport(request, InitState.FAILED, error=exc, failed_step=state)

        LOGGER.info("created %s at %s", request.project_name, request.resolved_path)
        return InitReport(request, InitState.SUCCEEDED)

    def _validate_name(self, request: ProjectRequest) -> None:
        result = validate_package_name(request.project_name)
        if not result.acceptable:
            raise InvalidNameError(result.errors)

    def _prepare_directory(self, request: ProjectRequest) -> None:
        prepare_directory(request.resolved_path)

    def _materialize_template(self, request: ProjectRequest) -> None:
        self.materializer.materialize(request.resolved_path)

    def _write_manifest(self, request: ProjectRequest) -> None:
        write_manifest(request.resolved_path, request.project_name)

    def _install_packages(self, request: ProjectRequest) -> None:
        self.installer.install(InstallSpec.for_directory(request.resolved_path))
