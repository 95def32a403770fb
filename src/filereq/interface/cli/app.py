from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
and validation, requirement construction (from a manifest or inline
flags), the check itself and result rendering.

Exit codes: 0 satisfied, 1 unsatisfied, 2 usage, manifest or build error.
"""

import json
import sys
from typing import Any, Callable, Dict, List, Optional

from filereq.core.builder import GroupBuilder, RequirementBuilder
from filereq.core.evaluator import check
from filereq.core.formatter import render_requirement, render_requirement_tree
from filereq.core.manifest import load_manifest
from filereq.core.validator import validate_config
from filereq.domain.check_models import CheckResult
from filereq.domain.config import get_default_config
from filereq.domain.errors import ManifestError, RequirementBuildError
from filereq.domain.requirement_models import AllOf
from filereq.infra.fs import make_filesystem_probe
from filereq.infra.logging import configure_logging, get_logger, logging_config_from
from filereq.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_UNSATISFIED = 1
EXIT_USAGE = 2

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration merge and validation
    raw_conf = _merge_config(get_default_config(), cli_args.args_to_overrides(args))
    config, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (stderr, plus the rotating file when requested)
    configure_logging(logging_config_from(config))
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    inline_requested = bool(args.files or args.any_groups)
    if args.manifest and inline_requested:
        return _usage_error("a manifest cannot be combined with --file/--any.")
    if not args.manifest and not inline_requested:
        return _usage_error("no requirements given (pass a manifest or --file/--any).")

    # 4. Requirement construction phase
    try:
        if args.manifest:
            manifest_base = config["base_dir"] if args.base_dir else None
            requirement = load_manifest(args.manifest, base_dir=manifest_base)
        else:
            requirement = _build_inline(args.files, cli_args.args_to_any_groups(args))
    except (ManifestError, RequirementBuildError, ValueError) as e:
        logger.debug("Requirement construction failed.", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_USAGE

    if config["print_tree"]:
        lines: List[str] = []
        render_requirement_tree(requirement, lines)
        print("\n".join(lines))

    # 5. Check phase
    probe = make_filesystem_probe(config["base_dir"], follow_symlinks=config["follow_symlinks"])
    result = check(requirement, probe)

    # 6. Output rendering phase
    if config["json_output"]:
        print(json.dumps(result_to_dict(result, requirement), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return EXIT_OK if result.ok else EXIT_UNSATISFIED

# -----------------------------------------------------------------------------
# REQUIREMENT CONSTRUCTION
# -----------------------------------------------------------------------------

def _build_inline(files: List[str], any_groups: List[List[str]]) -> AllOf:
    """Build the root conjunction described by --file and --any flags."""
    builder = RequirementBuilder()
    for path in files:
        builder.require_file(path)
    for alternatives in any_groups:
        builder.require_any(_require_each(alternatives))
    return builder.build()


def _require_each(paths: List[str]) -> Callable[[GroupBuilder], None]:
    def _configure(group: GroupBuilder) -> None:
        for path in paths:
            group.require_file(path)
    return _configure

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of known, non-None override values into the base config.
    """
    out = dict(base)
    for k in base:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def result_to_dict(result: CheckResult, requirement: AllOf) -> Dict[str, Any]:
    """
    Convert a check result into a JSON-serializable payload.

    Args:
        result: Outcome of the check.
        requirement: The requirement that was checked.

    Returns:
        Dict[str, Any]: Flat payload with sorted diagnostic lists.
    """
    error = result.error
    return {
        "ok": result.ok,
        "error": result.message,
        "missing_files": list(error.missing_files) if error else [],
        "io_errors": list(error.io_errors) if error else [],
        "unsatisfied_disjunctions": list(error.unsatisfied_disjunctions) if error else [],
        "requirement": render_requirement(requirement),
    }


def _print_human_summary(result: CheckResult) -> None:
    if result.ok:
        print("OK: all required files are present.")
        return
    print(f"ERROR: {result.message}", file=sys.stderr)


def _usage_error(msg: str) -> int:
    logger.debug(f"Usage error: {msg}")
    print(f"ERROR: {msg}", file=sys.stderr)
    return EXIT_USAGE

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
