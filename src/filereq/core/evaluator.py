from __future__ import annotations

"""
Requirement Evaluator.

Checks a requirement tree against an existence probe and aggregates every
diagnostic into a single deterministic report.

Conjunctions evaluate all of their children so the report lists every
failure. Disjunctions try their children in insertion order, each with an
isolated context: the first satisfied child ends the walk and the other
branches' diagnostics are dropped. When no child is satisfied, all branch
diagnostics are merged upwards together with the rendering of the group.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Set

from filereq.core.formatter import format_check_message, render_requirement
from filereq.domain.check_models import (
    CheckResult,
    create_error_result,
    create_success_result,
)
from filereq.domain.errors import RequirementCheckError
from filereq.domain.requirement_models import (
    AllOf,
    AnyOf,
    FileTerm,
    Probe,
    ProbeResult,
    ProbeStatus,
    Requirement,
)
from filereq.infra.fs import filesystem_probe

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# CHECK CONTEXT
# -----------------------------------------------------------------------------

@dataclass
class CheckContext:
    """
    Transient accumulator of diagnostics for one evaluation.

    Attributes:
        missing_files: Display paths of terms that do not exist.
        io_errors: "path (cause)" entries of terms whose probe failed.
        unsatisfied_disjunctions: Renderings of OR groups with no satisfied child.
    """
    missing_files: Set[str] = field(default_factory=set)
    io_errors: Set[str] = field(default_factory=set)
    unsatisfied_disjunctions: Set[str] = field(default_factory=set)

    def merge(self, other: CheckContext) -> None:
        """Union another context's diagnostics into this one."""
        self.missing_files |= other.missing_files
        self.io_errors |= other.io_errors
        self.unsatisfied_disjunctions |= other.unsatisfied_disjunctions

    def to_error(self) -> RequirementCheckError:
        """Build the aggregated, sorted failure report."""
        message = format_check_message(
            self.missing_files, self.io_errors, self.unsatisfied_disjunctions
        )
        return RequirementCheckError(
            message,
            missing_files=self.missing_files,
            io_errors=self.io_errors,
            unsatisfied_disjunctions=self.unsatisfied_disjunctions,
        )

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def check(requirement: Requirement, probe: Optional[Probe] = None) -> CheckResult:
    """
    Validate a requirement tree against an existence probe.

    Args:
        requirement: The built requirement expression.
        probe: Existence probe; defaults to the local filesystem.

    Returns:
        CheckResult: ok, or the aggregated RequirementCheckError.
    """
    active_probe = probe if probe is not None else filesystem_probe
    ctx = CheckContext()

    if _evaluate(requirement, ctx, active_probe):
        logger.debug("Requirement satisfied.")
        return create_success_result()

    error = ctx.to_error()
    logger.debug(f"Requirement unsatisfied: {error}")
    return create_error_result(error)


def ensure_satisfied(requirement: Requirement, probe: Optional[Probe] = None) -> None:
    """
    Raise the aggregated RequirementCheckError if the requirement is unsatisfied.

    Raises:
        RequirementCheckError: When the check fails.
    """
    check(requirement, probe).raise_for_error()

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _evaluate(node: Requirement, ctx: CheckContext, probe: Probe) -> bool:
    """Evaluate one node, recording diagnostics into ctx."""
    if isinstance(node, FileTerm):
        return _evaluate_file(node, ctx, probe)

    if isinstance(node, AllOf):
        all_ok = True
        for child in node.children:
            if not _evaluate(child, ctx, probe):
                all_ok = False
        return all_ok

    if isinstance(node, AnyOf):
        branch_contexts: List[CheckContext] = []
        for child in node.children:
            branch_ctx = CheckContext()
            if _evaluate(child, branch_ctx, probe):
                return True
            branch_contexts.append(branch_ctx)

        for branch_ctx in branch_contexts:
            ctx.merge(branch_ctx)
        ctx.unsatisfied_disjunctions.add(render_requirement(node))
        return False

    raise TypeError(f"Unsupported requirement node: {type(node).__name__}")


def _evaluate_file(node: FileTerm, ctx: CheckContext, probe: Probe) -> bool:
    """Probe a single file term."""
    result = probe(node.path)
    if not isinstance(result, ProbeResult):
        raise TypeError(
            f"Probe returned {type(result).__name__} for '{node.path}', expected ProbeResult."
        )

    display = str(node.path)
    if result.status is ProbeStatus.EXISTS:
        return True
    if result.status is ProbeStatus.MISSING:
        ctx.missing_files.add(display)
        return False

    ctx.io_errors.add(f"{display} ({result.cause})")
    return False
