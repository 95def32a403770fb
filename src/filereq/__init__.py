from __future__ import annotations

from .core.builder import GroupBuilder, RequirementBuilder
from .core.evaluator import check, ensure_satisfied
from .core.formatter import render_requirement, render_requirement_tree
from .core.manifest import build_from_manifest, load_manifest
from .domain.check_models import CheckResult
from .domain.errors import (
    DuplicateFileError,
    EmptyGroupError,
    ManifestError,
    RequirementBuildError,
    RequirementCheckError,
)
from .domain.requirement_models import (
    AllOf,
    AnyOf,
    FileTerm,
    Probe,
    ProbeResult,
    ProbeStatus,
    Requirement,
)
from .infra.fs import filesystem_probe, make_filesystem_probe, probe_path

__version__ = "0.1.0"

__all__ = [
    "AllOf",
    "AnyOf",
    "CheckResult",
    "DuplicateFileError",
    "EmptyGroupError",
    "FileTerm",
    "GroupBuilder",
    "ManifestError",
    "Probe",
    "ProbeResult",
    "ProbeStatus",
    "Requirement",
    "RequirementBuildError",
    "RequirementBuilder",
    "RequirementCheckError",
    "build_from_manifest",
    "check",
    "ensure_satisfied",
    "filesystem_probe",
    "load_manifest",
    "make_filesystem_probe",
    "probe_path",
    "render_requirement",
    "render_requirement_tree",
]
