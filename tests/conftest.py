from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Scripted existence probes for evaluator tests.
3. An on-disk index layout shared by integration tests.
"""

import os
import sys
from pathlib import Path
from typing import Callable, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from filereq.domain.requirement_models import (  # noqa: E402
    PROBE_EXISTS,
    PROBE_MISSING,
    ProbeResult,
    probe_error,
)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
class ScriptedProbe:
    """
    In-memory existence probe.

    Paths listed in `present` exist, paths in `errors` fail with the given
    cause and everything else is missing. Every probed path is recorded.
    """

    def __init__(self, present=(), errors=None) -> None:
        self.present = {str(p) for p in present}
        self.errors: Dict[str, str] = {str(k): v for k, v in (errors or {}).items()}
        self.calls: List[str] = []

    def __call__(self, path: Path) -> ProbeResult:
        key = str(path)
        self.calls.append(key)
        if key in self.errors:
            return probe_error(self.errors[key])
        if key in self.present:
            return PROBE_EXISTS
        return PROBE_MISSING


@pytest.fixture
def scripted_probe() -> Callable[..., ScriptedProbe]:
    """Factory fixture building ScriptedProbe instances."""
    return ScriptedProbe


@pytest.fixture
def index_base(tmp_path: Path) -> Path:
    """
    Return the base path of an on-disk index inside a temporary directory.

    No file is created; tests materialize the layout they need through
    the `index_file` fixture (e.g. idx.ctab, idx.ssi.mphf).
    """
    return tmp_path / "idx"


@pytest.fixture
def index_file(index_base: Path) -> Callable[[str], Path]:
    """Return a helper mapping an extension (dots allowed) to `<index_base>.<ext>`."""
    def _sibling(extension: str) -> Path:
        return index_base.parent / f"{index_base.name}.{extension}"
    return _sibling
