from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@dataclass
class FakeNpm:
    """Stand-in for ``subprocess.run`` that records npm invocations."""

    returncode: int = 0
    error: OSError | None = None
    calls: list[dict[str, Any]] = field(default_factory=list)

    def __call__(self, argv, **kwargs) -> subprocess.CompletedProcess:
        self.calls.append({"argv": list(argv), **kwargs})
        if self.error is not None:
            raise self.error
        return subprocess.CompletedProcess(argv, self.returncode)


@pytest.fixture(autouse=True)
def fake_npm(monkeypatch: pytest.MonkeyPatch) -> FakeNpm:
    """Keep tests from spawning the real package manager."""

    fake = FakeNpm()
    monkeypatch.setattr("create_hubs_app.install.subprocess.run", fake)
    monkeypatch.setattr("create_hubs_app.install.shutil.which", lambda command: None)
    return fake
