from __future__ import annotations

"""
Error Taxonomy.

Build-time errors are raised while assembling a requirement tree.
Check-time failures are carried as values by RequirementCheckError, which
is still an Exception so callers may choose to raise it.
"""

from typing import Iterable, Tuple

# -----------------------------------------------------------------------------
# BUILD-TIME ERRORS
# -----------------------------------------------------------------------------

class RequirementBuildError(Exception):
    """Base class for errors raised while building a requirement tree."""


class DuplicateFileError(RequirementBuildError):
    """A file term was inserted more than once anywhere in the tree."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"File term `{path}` was inserted more than once. "
            f"Each file can appear in at most one clause."
        )


class EmptyGroupError(RequirementBuildError):
    """An AND/OR group was closed without any child."""

    def __init__(self, group: str) -> None:
        self.group = group
        super().__init__(f"Cannot create an empty `{group}` group.")

# -----------------------------------------------------------------------------
# CHECK-TIME ERRORS
# -----------------------------------------------------------------------------

class RequirementCheckError(Exception):
    """
    Aggregated report of an unsatisfied requirement tree.

    Attributes:
        missing_files: Sorted paths that do not exist.
        io_errors: Sorted "path (cause)" entries for failed probes.
        unsatisfied_disjunctions: Sorted renderings of failed OR groups.
    """

    def __init__(
            self,
            message: str,
            missing_files: Iterable[str] = (),
            io_errors: Iterable[str] = (),
            unsatisfied_disjunctions: Iterable[str] = (),
    ) -> None:
        super().__init__(message)
        self.message = message
        self.missing_files: Tuple[str, ...] = tuple(sorted(set(missing_files)))
        self.io_errors: Tuple[str, ...] = tuple(sorted(set(io_errors)))
        self.unsatisfied_disjunctions: Tuple[str, ...] = tuple(
            sorted(set(unsatisfied_disjunctions))
        )

    def __str__(self) -> str:
        return self.message


class ManifestError(ValueError):
    """A requirement manifest could not be read or is structurally invalid."""
