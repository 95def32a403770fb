from __future__ import annotations

"""
Requirement Expression Data Models.

Defines the closed set of node types forming a file requirement tree
(a single file term, a conjunction and a disjunction), together with the
tri-state outcome returned by existence probes.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# EXPRESSION TREE NODES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileTerm:
    """
    Leaf of the requirement tree: a single path that must exist.

    Attributes:
        path: Filesystem path of the required file.
    """
    path: Path


@dataclass(frozen=True)
class AllOf:
    """
    Conjunction node. Satisfied iff every child is satisfied.

    Attributes:
        children: Child expressions in insertion order.
    """
    children: Tuple["Requirement", ...]


@dataclass(frozen=True)
class AnyOf:
    """
    Disjunction node. Satisfied iff at least one child is satisfied.

    Children are tried in insertion order and the first satisfied one wins.

    Attributes:
        children: Child expressions in insertion order.
    """
    children: Tuple["Requirement", ...]


Requirement = Union[FileTerm, AllOf, AnyOf]

# -----------------------------------------------------------------------------
# PROBE OUTCOMES
# -----------------------------------------------------------------------------

class ProbeStatus(Enum):
    """Answer of an existence probe for one path."""
    EXISTS = "exists"
    MISSING = "missing"
    ERROR = "error"


@dataclass(frozen=True)
class ProbeResult:
    """
    Outcome of probing a single path.

    Attributes:
        status: Whether the path exists, is missing, or could not be checked.
        cause: Display text of the failure, only set when status is ERROR.
    """
    status: ProbeStatus
    cause: Optional[str] = None


PROBE_EXISTS = ProbeResult(ProbeStatus.EXISTS)
PROBE_MISSING = ProbeResult(ProbeStatus.MISSING)


def probe_error(cause: object) -> ProbeResult:
    """Build an ERROR outcome from any displayable cause (usually an OSError)."""
    return ProbeResult(ProbeStatus.ERROR, cause=str(cause))


Probe = Callable[[Path], ProbeResult]
