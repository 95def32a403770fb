from __future__ import annotations

"""
Requirement and Report Formatter.

Renders requirement expressions to their canonical one-line form, to an
ASCII tree for terminal display, and assembles the aggregated failure
message of a check.
"""

from typing import Iterable, List

from filereq.domain.requirement_models import AllOf, AnyOf, FileTerm, Requirement

CHECK_FAILURE_SUMMARY = "Required input files were missing or incomplete"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_requirement(node: Requirement) -> str:
    """
    Render a requirement to its canonical string.

    Leaves render as their path; groups render as their children joined by
    " AND " / " OR " and wrapped in parentheses.

    Args:
        node: Requirement expression to render.

    Returns:
        str: Deterministic rendering, also used as a deduplication key.
    """
    if isinstance(node, FileTerm):
        return str(node.path)
    if isinstance(node, AllOf):
        return "(" + " AND ".join(render_requirement(c) for c in node.children) + ")"
    if isinstance(node, AnyOf):
        return "(" + " OR ".join(render_requirement(c) for c in node.children) + ")"
    raise TypeError(f"Unsupported requirement node: {type(node).__name__}")


def render_requirement_tree(node: Requirement, lines: List[str], prefix: str = "") -> None:
    """
    Render a requirement as ASCII tree lines.

    The node itself is appended first (ALL, ANY or its path), then its
    children with standard connectors (├──, └──) in insertion order.

    Args:
        node: Requirement expression to render.
        lines: Accumulator list for output strings.
        prefix: Indentation put before every emitted line, used to embed
                the tree inside a larger listing.
    """
    lines.append(f"{prefix}{_node_label(node)}")
    if not isinstance(node, FileTerm):
        _render_children(node, lines, prefix=prefix)


def format_check_message(
        missing_files: Iterable[str],
        io_errors: Iterable[str],
        unsatisfied_disjunctions: Iterable[str],
) -> str:
    """
    Assemble the user-facing message of a failed check.

    Each non-empty set becomes one section, sorted and comma-joined.

    Returns:
        str: Single summary sentence listing every section.
    """
    sections: List[str] = []
    for label, entries in (
            ("missing files", missing_files),
            ("path check errors", io_errors),
            ("unsatisfied disjunction(s)", unsatisfied_disjunctions),
    ):
        ordered = sorted(set(entries))
        if ordered:
            sections.append(f"{label}: {', '.join(ordered)}")
    return f"{CHECK_FAILURE_SUMMARY} ({'; '.join(sections)})"

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _render_children(node: Requirement, lines: List[str], prefix: str) -> None:
    """Render the children of a group below its already emitted label."""
    total = len(node.children)
    for i, child in enumerate(node.children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{_node_label(child)}")

        # Groups recurse with a deeper indentation prefix
        if not isinstance(child, FileTerm):
            new_prefix = prefix + ("    " if is_last else "│   ")
            _render_children(child, lines, new_prefix)


def _node_label(node: Requirement) -> str:
    if isinstance(node, FileTerm):
        return str(node.path)
    if isinstance(node, AllOf):
        return "ALL"
    if isinstance(node, AnyOf):
        return "ANY"
    raise TypeError(f"Unsupported requirement node: {type(node).__name__}")
