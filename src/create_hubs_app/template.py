"""Copy the bundled starter files into a new project."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from .errors import CopyError

__all__ = ["TEMPLATE_DIR", "TemplateMaterializer"]


LOGGER = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent / "template"


@dataclass(slots=True)
class TemplateMaterializer:
    """Copy a static template tree verbatim into a destination directory."""

    source: Path = field(default=TEMPLATE_DIR)

    def __post_init__(self) -> None:
        self.source = Path(self.source)

    def files(self) -> list[Path]:
        """Return the template files relative to :attr:`source`."""

        return sorted(
            path.relative_to(self.source) for path in self.source.rglob("*") if path.is_file()
        )

    def materialize(self, destination: str | Path) -> Path:
        """Copy every file below :attr:`source` into ``destination``.

        File contents and relative paths are preserved. A failure part way
        leaves whatever was already copied in place.
        """

        destination = Path(destination)
        if not self.source.is_dir():
            raise CopyError(f"template directory {self.source} does not exist.")

        LOGGER.debug("copying template %s to %s", self.source, destination)
        try:
            shutil.copytree(self.source, destination, dirs_exist_ok=True)
        except shutil.Error as exc:
            failures = exc.args[0] if exc.args else []
            if isinstance(failures, list) and failures:
                source, _, reason = failures[0]
                raise CopyError(f"could not copy {source}: {reason}") from exc
            raise CopyError(f"could not copy template into {destination}.") from exc
        except OSError as exc:
            raise CopyError(f"could not copy template into {destination}: {exc.strerror or exc}") from exc

        for relative in self.files():
            LOGGER.debug("copied %s", destination / relative)
        return destination
