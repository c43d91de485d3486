"""The ``package.json`` written into every new project."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from .config import MANIFEST_FILENAME, MANIFEST_SCRIPTS, MANIFEST_VERSION
from .errors import ManifestWriteError

__all__ = ["Manifest", "render_manifest", "write_manifest"]


LOGGER = logging.getLogger(__name__)


class Manifest(BaseModel):
    """Initial npm manifest for a generated project."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., description="Package name, taken from the project directory.")
    version: str = Field(MANIFEST_VERSION, description="Initial package version.")
    scripts: Dict[str, str] = Field(
        default_factory=lambda: dict(MANIFEST_SCRIPTS),
        description="npm run aliases for the hubs command line tool.",
    )

    @classmethod
    def for_project(cls, name: str) -> "Manifest":
        return cls(name=name)


def render_manifest(manifest: Manifest) -> str:
    """Serialise ``manifest`` the way ``npm init`` formats ``package.json``."""

    return json.dumps(manifest.model_dump(mode="json"), indent=2) + os.linesep


def write_manifest(directory: str | Path, project_name: str) -> Path:
    """Write the manifest for ``project_name`` at the root of ``directory``."""

    target = Path(directory) / MANIFEST_FILENAME
    text = render_manifest(Manifest.for_project(project_name))
    try:
        target.write_text(text, encoding="utf-8", newline="")
    except OSError as exc:
        raise ManifestWriteError(f"could not write {target}: {exc.strerror or exc}") from exc

    LOGGER.debug("wrote manifest %s", target)
    return target
