from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the default existence probe used by the evaluator and the path
normalization helpers shared by the manifest loader and the CLI. Acts as
the only place where the library touches the real filesystem.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

from filereq.domain.requirement_models import (
    PROBE_EXISTS,
    PROBE_MISSING,
    Probe,
    ProbeResult,
    probe_error,
)

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a directory path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)


def resolve_against(path: Union[str, "os.PathLike[str]"], base_dir: Optional[str]) -> Path:
    """
    Join a relative path onto a base directory; absolute paths are kept.

    Args:
        path: Path to resolve.
        base_dir: Directory relative paths are anchored to, if any.

    Returns:
        Path: The resolved (not canonicalized) path.
    """
    p = Path(os.fspath(path))
    if base_dir and not p.is_absolute():
        return Path(base_dir) / p
    return p

# -----------------------------------------------------------------------------
# EXISTENCE PROBE API
# -----------------------------------------------------------------------------

def probe_path(path: Union[str, "os.PathLike[str]"], follow_symlinks: bool = True) -> ProbeResult:
    """
    Check whether a path exists, keeping probe failures distinct from absence.

    Only FileNotFoundError means "missing". Any other OSError (permission
    denied, not a directory, too many symlink levels...) is reported as an
    ERROR outcome carrying the OS error text, and so is a path the OS
    rejects outright (embedded NUL byte).

    Args:
        path: Path to probe.
        follow_symlinks: When False, a symlink counts as existing even if
                         its target does not.

    Returns:
        ProbeResult: EXISTS, MISSING or ERROR(cause).
    """
    try:
        os.stat(path, follow_symlinks=follow_symlinks)
    except FileNotFoundError:
        return PROBE_MISSING
    except OSError as e:
        logger.debug(f"Existence probe failed for '{path}': {e}")
        return probe_error(e.strerror or e)
    except ValueError as e:
        logger.debug(f"Path rejected by the OS: {path!r}: {e}")
        return probe_error(e)
    return PROBE_EXISTS


def make_filesystem_probe(
        base_dir: Optional[str] = None,
        follow_symlinks: bool = True,
) -> Probe:
    """
    Create a filesystem probe bound to a base directory and symlink policy.

    Relative term paths are probed under base_dir while diagnostics keep
    the term's own display form.

    Args:
        base_dir: Directory relative terms are resolved against.
        follow_symlinks: Symlink policy forwarded to probe_path.

    Returns:
        Probe: Callable mapping a path to its ProbeResult.
    """
    def _probe(path: Path) -> ProbeResult:
        return probe_path(resolve_against(path, base_dir), follow_symlinks=follow_symlinks)

    return _probe


def filesystem_probe(path: Path) -> ProbeResult:
    """Default probe: follows symlinks, paths resolved against the CWD."""
    return probe_path(path)
