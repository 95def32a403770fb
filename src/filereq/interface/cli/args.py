from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides and inline requirements.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the filereq CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="filereq",
        description="Check that a set of required input files is present, "
                    "with AND/OR alternatives between file layouts.",
    )

    # --- Requirement Sources ---
    p.add_argument(
        "manifest",
        nargs="?",
        default=None,
        help="JSON manifest describing the requirement tree.",
    )
    p.add_argument(
        "-f", "--file",
        dest="files",
        action="append",
        default=[],
        metavar="PATH",
        help="Require a file at the root level (repeatable).",
    )
    p.add_argument(
        "--any",
        dest="any_groups",
        action="append",
        default=[],
        metavar="A,B,...",
        help="Require at least one of the comma-separated files (repeatable).",
    )

    # --- Path Resolution ---
    p.add_argument(
        "-b", "--base-dir",
        dest="base_dir",
        default=None,
        help="Directory relative paths are resolved against.",
    )
    p.add_argument(
        "--no-follow-symlinks",
        action="store_true",
        help="Accept dangling symlinks as present.",
    )

    # --- Output ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the requirement tree before checking it.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the check result as JSON.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        metavar="PATH",
        help="Also write log records to a rotating log file.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["base_dir"] = args.base_dir
    overrides["log_file"] = args.log_file

    if args.no_follow_symlinks:
        overrides["follow_symlinks"] = False
    if args.print_tree:
        overrides["print_tree"] = True
    if args.json_output:
        overrides["json_output"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides


def args_to_any_groups(args: argparse.Namespace) -> List[List[str]]:
    """
    Split every --any value into its list of alternative files.

    Returns:
        List[List[str]]: One list per --any flag, empty lists included.
    """
    return [_split_csv(value) or [] for value in args.any_groups]

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
