from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from create_hubs_app.config import ProjectRequest
from create_hubs_app.errors import (
    CopyError,
    InstallError,
    InvalidNameError,
    ManifestWriteError,
    PathConflictError,
)
from create_hubs_app.scaffold import InitSequence, InitState
from create_hubs_app.template import TemplateMaterializer


@pytest.fixture()
def template_dir(tmp_path: Path) -> Path:
    root = tmp_path / "template"
    (root / "src").mkdir(parents=True)
    (root / "README.md").write_text("# Hubs App\n", encoding="utf-8")
    (root / "src" / "index.js").write_text("export {};\n", encoding="utf-8")
    return root


@pytest.fixture()
def sequence(template_dir: Path) -> InitSequence:
    return InitSequence(materializer=TemplateMaterializer(template_dir))


def test_successful_run_creates_project(tmp_path: Path, sequence: InitSequence, fake_npm):
    request = ProjectRequest.from_path(tmp_path / "my-app")

    report = sequence.run(request)

    assert report.succeeded
    assert report.state is InitState.SUCCEEDED
    assert report.error is None
    assert (request.resolved_path / "README.md").read_text(encoding="utf-8") == "# Hubs App\n"
    assert (request.resolved_path / "src" / "index.js").exists()
    manifest = json.loads((request.resolved_path / "package.json").read_text(encoding="utf-8"))
    assert manifest == {
        "name": "my-app",
        "version": "0.1.0",
        "scripts": {
            "login": "hubs login",
            "start": "hubs start",
            "deploy": "hubs deploy",
            "logout": "hubs logout",
        },
    }
    assert fake_npm.calls[0]["cwd"] == str(request.resolved_path)


def test_steps_are_announced_in_order(tmp_path: Path, template_dir: Path):
    seen: list[InitState] = []
    sequence = InitSequence(
        materializer=TemplateMaterializer(template_dir),
        on_step=lambda state, request: seen.append(state),
    )

    sequence.run(ProjectRequest.from_path(tmp_path / "my-app"))

    assert seen == [
        InitState.VALIDATING_NAME,
        InitState.PREPARING_DIRECTORY,
        InitState.MATERIALIZING_TEMPLATE,
        InitState.WRITING_MANIFEST,
        InitState.INSTALLING_PACKAGES,
    ]


def test_invalid_name_fails_before_touching_disk(tmp_path: Path, sequence: InitSequence, fake_npm):
    request = ProjectRequest.from_path(tmp_path / "My-App")

    report = sequence.run(request)

    assert report.state is InitState.FAILED
    assert report.failed_step is InitState.VALIDATING_NAME
    assert isinstance(report.error, InvalidNameError)
    assert str(report.error) == "Invalid project name. name can no longer contain capital letters"
    assert not request.resolved_path.exists()
    assert fake_npm.calls == []


def test_install_failure_is_reported_and_cwd_is_unchanged(
    tmp_path: Path, sequence: InitSequence, fake_npm
):
    fake_npm.returncode = 1
    cwd = os.getcwd()
    request = ProjectRequest.from_path(tmp_path / "my-app")

    report = sequence.run(request)

    assert report.state is InitState.FAILED
    assert report.failed_step is InitState.INSTALLING_PACKAGES
    assert isinstance(report.error, InstallError)
    assert os.getcwd() == cwd
    assert (request.resolved_path / "package.json").exists()


def test_second_run_conflicts_with_first(tmp_path: Path, sequence: InitSequence, fake_npm):
    request = ProjectRequest.from_path(tmp_path / "my-app")
    assert sequence.run(request).succeeded

    report = sequence.run(request)

    assert report.failed_step is InitState.PREPARING_DIRECTORY
    assert isinstance(report.error, PathConflictError)
    assert len(fake_npm.calls) == 1


def test_existing_file_conflicts(tmp_path: Path, sequence: InitSequence):
    target = tmp_path / "my-app"
    target.write_text("", encoding="utf-8")

    report = sequence.run(ProjectRequest.from_path(target))

    assert isinstance(report.error, PathConflictError)
    assert target.is_file()


def test_copy_failure_skips_manifest_and_install(tmp_path: Path, fake_npm):
    sequence = InitSequence(materializer=TemplateMaterializer(tmp_path / "missing"))
    request = ProjectRequest.from_path(tmp_path / "my-app")

    report = sequence.run(request)

    assert report.failed_step is InitState.MATERIALIZING_TEMPLATE
    assert isinstance(report.error, CopyError)
    assert not (request.resolved_path / "package.json").exists()
    assert fake_npm.calls == []


def test_manifest_failure_skips_install(tmp_path: Path, template_dir: Path, fake_npm):
    (template_dir / "package.json").mkdir()
    sequence = InitSequence(materializer=TemplateMaterializer(template_dir))

    report = sequence.run(ProjectRequest.from_path(tmp_path / "my-app"))

    assert report.failed_step is InitState.WRITING_MANIFEST
    assert isinstance(report.error, ManifestWriteError)
    assert fake_npm.calls == []
