from __future__ import annotations

"""
Requirement Manifest Loader.

Reads a JSON description of a requirement tree and replays it through the
RequirementBuilder, so duplicate terms and empty groups are rejected
exactly as they are for programmatic construction.

Format:
    {
      "base_dir": "optional/dir",
      "require": ["idx.ctab", {"any": ["idx.sshash", {"all": ["idx.ssi", "idx.ssi.mphf"]}]}]
    }
"""

import json
import logging
import os
from typing import Any, Dict, Optional, Union

from filereq.core.builder import GroupBuilder, RequirementBuilder
from filereq.domain.errors import ManifestError
from filereq.domain.requirement_models import AllOf
from filereq.infra.fs import resolve_against

logger = logging.getLogger(__name__)

MANIFEST_KEYS = ("base_dir", "require")
GROUP_KEYS = ("all", "any")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_manifest(path: Union[str, "os.PathLike[str]"], base_dir: Optional[str] = None) -> AllOf:
    """
    Load a manifest file and build its requirement tree.

    Relative terms are anchored to base_dir when given, otherwise to the
    manifest's own "base_dir" (relative to the manifest file), otherwise to
    the directory holding the manifest.

    Args:
        path: Location of the JSON manifest.
        base_dir: Optional override for the anchor directory.

    Returns:
        AllOf: The built requirement.

    Raises:
        ManifestError: If the file cannot be read or is malformed.
        RequirementBuildError: If the described tree violates build invariants.
    """
    manifest_path = os.path.abspath(os.fspath(path))
    try:
        with open(manifest_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ManifestError(f"Cannot read manifest '{manifest_path}': {e}") from e
    except json.JSONDecodeError as e:
        raise ManifestError(f"Invalid JSON in manifest '{manifest_path}': {e}") from e

    manifest_dir = os.path.dirname(manifest_path)
    if base_dir is None:
        declared = _declared_base_dir(data)
        base_dir = os.path.join(manifest_dir, declared) if declared else manifest_dir

    logger.debug(f"Loading manifest '{manifest_path}' (base directory: {base_dir})")
    return build_from_manifest(data, base_dir=base_dir)


def build_from_manifest(data: Any, base_dir: Optional[str] = None) -> AllOf:
    """
    Build a requirement tree from already-parsed manifest data.

    Args:
        data: Parsed manifest (a dict with a "require" list).
        base_dir: Anchor for relative terms; defaults to the manifest's
                  "base_dir" entry, if any.

    Returns:
        AllOf: The built requirement.
    """
    if not isinstance(data, dict):
        raise ManifestError(
            f"Manifest must be a JSON object, received {type(data).__name__}."
        )

    unknown = sorted(k for k in data if k not in MANIFEST_KEYS)
    if unknown:
        raise ManifestError(f"Unknown manifest key(s): {', '.join(unknown)}.")

    if base_dir is None:
        base_dir = _declared_base_dir(data)

    entries = data.get("require", [])
    if not isinstance(entries, list):
        raise ManifestError(
            f"require: expected a list, received {type(entries).__name__}."
        )

    builder = RequirementBuilder()
    for i, entry in enumerate(entries):
        _add_entry(builder, entry, f"require[{i}]", base_dir)
    return builder.build()

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _declared_base_dir(data: Any) -> Optional[str]:
    """Extract and type-check the manifest's own base_dir entry."""
    if not isinstance(data, dict) or data.get("base_dir") is None:
        return None
    declared = data["base_dir"]
    if not isinstance(declared, str):
        raise ManifestError(
            f"base_dir: expected str, received {type(declared).__name__}."
        )
    return declared.strip() or None


def _add_entry(
        group: Union[RequirementBuilder, GroupBuilder],
        entry: Any,
        location: str,
        base_dir: Optional[str],
) -> None:
    """Replay one manifest entry onto a builder group."""
    if isinstance(entry, str):
        if not entry.strip():
            raise ManifestError(f"{location}: file term must be a non-empty string.")
        group.require_file(resolve_against(entry, base_dir))
        return

    if isinstance(entry, dict):
        key = _group_key(entry, location)
        children = entry[key]
        if not isinstance(children, list):
            raise ManifestError(
                f"{location}.{key}: expected a list, received {type(children).__name__}."
            )

        def _configure(nested: GroupBuilder) -> None:
            for i, child in enumerate(children):
                _add_entry(nested, child, f"{location}.{key}[{i}]", base_dir)

        if key == "all":
            group.require_all(_configure)
        else:
            group.require_any(_configure)
        return

    raise ManifestError(
        f"{location}: expected a path string or an 'all'/'any' object, "
        f"received {type(entry).__name__}."
    )


def _group_key(entry: Dict[str, Any], location: str) -> str:
    """Return the single group key of an object entry."""
    keys = list(entry)
    if len(keys) != 1 or keys[0] not in GROUP_KEYS:
        raise ManifestError(
            f"{location}: group objects need exactly one key, 'all' or 'any' "
            f"(found: {', '.join(keys) or 'none'})."
        )
    return keys[0]
