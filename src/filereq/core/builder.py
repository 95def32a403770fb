from __future__ import annotations

"""
Requirement Tree Builder.

Assembles a requirement expression incrementally while enforcing the two
tree-wide invariants: a path may appear in at most one file term, and no
AND/OR group may be empty. Nested groups are populated through a scoped
GroupBuilder handed to a caller-supplied callback.
"""

import logging
import os
from pathlib import Path
from typing import Any, Callable, List, Set, Type, Union

from filereq.domain.errors import DuplicateFileError, EmptyGroupError
from filereq.domain.requirement_models import AllOf, AnyOf, FileTerm, Requirement

logger = logging.getLogger(__name__)

PathArg = Union[str, "os.PathLike[str]"]
GroupCallback = Callable[["GroupBuilder"], Any]

AND_GROUP = "AND"
OR_GROUP = "OR"

# -----------------------------------------------------------------------------
# NESTED GROUP BUILDER
# -----------------------------------------------------------------------------

class GroupBuilder:
    """
    Scoped handle used to populate one AND/OR group.

    All handles of one tree share the same set of seen paths, so uniqueness
    is enforced across every branch. A handle passed to a callback is closed
    once the callback returns, and a handle stays locked while one of its
    nested groups is being configured.
    """

    def __init__(self, target: List[Requirement], seen_terms: Set[Path]) -> None:
        self._target = target
        self._seen_terms = seen_terms
        self._closed = False
        self._busy = False

    def require_file(self, path: PathArg) -> GroupBuilder:
        """
        Add a required file term to this group.

        Args:
            path: Path of the file that must exist.

        Returns:
            GroupBuilder: This handle, for chaining.

        Raises:
            ValueError: If the path is empty.
            DuplicateFileError: If the path is already part of the tree.
        """
        self._ensure_open()
        raw = os.fspath(path)
        if not raw:
            raise ValueError("File requirement path must not be empty.")
        term = Path(raw)
        if term in self._seen_terms:
            logger.debug(f"Rejected duplicate file term: {term}")
            raise DuplicateFileError(str(term))
        self._seen_terms.add(term)
        self._target.append(FileTerm(term))
        return self

    def require_all(self, configure: GroupCallback) -> GroupBuilder:
        """Add a nested conjunction populated by `configure`."""
        return self._require_group(configure, AllOf, AND_GROUP)

    def require_any(self, configure: GroupCallback) -> GroupBuilder:
        """Add a nested disjunction populated by `configure`."""
        return self._require_group(configure, AnyOf, OR_GROUP)

    def _require_group(
            self,
            configure: GroupCallback,
            node_type: Union[Type[AllOf], Type[AnyOf]],
            group: str,
    ) -> GroupBuilder:
        """
        Open a child group, let the callback fill it, then validate and append.

        Exceptions raised by the callback propagate and nothing is appended.
        """
        self._ensure_open()
        child_terms: List[Requirement] = []
        nested = GroupBuilder(child_terms, self._seen_terms)
        self._busy = True
        try:
            configure(nested)
        finally:
            nested._closed = True
            self._busy = False

        if not child_terms:
            logger.debug(f"Rejected empty {group} group.")
            raise EmptyGroupError(group)

        self._target.append(node_type(tuple(child_terms)))
        return self

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("Group builder used outside of its configuration callback.")
        if self._busy:
            raise RuntimeError("Group builder used while one of its nested groups is being configured.")

# -----------------------------------------------------------------------------
# ROOT BUILDER
# -----------------------------------------------------------------------------

class RequirementBuilder:
    """
    Builder for composable file requirements.

    The root group is an implicit AND group. Calls can be chained:

        req = (
            RequirementBuilder()
            .require_file("idx.ctab")
            .require_any(lambda g: g.require_file("idx.sshash").require_all(
                lambda a: a.require_file("idx.ssi").require_file("idx.ssi.mphf")
            ))
            .build()
        )
    """

    def __init__(self) -> None:
        self._root_terms: List[Requirement] = []
        self._seen_terms: Set[Path] = set()
        self._root = GroupBuilder(self._root_terms, self._seen_terms)
        self._built = False

    def require_file(self, path: PathArg) -> RequirementBuilder:
        """Add a required file to the root conjunction."""
        self._root_group().require_file(path)
        return self

    def require_all(self, configure: GroupCallback) -> RequirementBuilder:
        """Add a nested conjunction to the root conjunction."""
        self._root_group().require_all(configure)
        return self

    def require_any(self, configure: GroupCallback) -> RequirementBuilder:
        """Add a nested disjunction to the root conjunction."""
        self._root_group().require_any(configure)
        return self

    def build(self) -> AllOf:
        """
        Consume the builder and return the finished requirement.

        The result is always an AllOf wrapping the root terms, even when
        there is a single term.

        Returns:
            AllOf: The immutable requirement tree.
        """
        self._root_group()._ensure_open()
        self._built = True
        self._root._closed = True
        requirement = AllOf(tuple(self._root_terms))
        self._root_terms.clear()
        self._seen_terms.clear()
        logger.debug(f"Built requirement with {len(requirement.children)} root term(s).")
        return requirement

    def _root_group(self) -> GroupBuilder:
        if self._built:
            raise RuntimeError("Requirement builder was already consumed by build().")
        return self._root
