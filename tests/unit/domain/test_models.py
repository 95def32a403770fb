from __future__ import annotations

"""
Unit tests for Domain Models.

Verifies:
1. CheckResult factories and truthiness.
2. Sorting and deduplication performed by RequirementCheckError.
3. Probe outcome helpers and immutability of tree nodes.
"""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from filereq.domain.check_models import CheckResult, create_error_result, create_success_result
from filereq.domain.errors import RequirementCheckError
from filereq.domain.requirement_models import (
    PROBE_EXISTS,
    PROBE_MISSING,
    FileTerm,
    ProbeStatus,
    probe_error,
)


def test_create_success_result() -> None:
    result = create_success_result()

    assert isinstance(result, CheckResult)
    assert result.ok is True
    assert result.error is None
    assert result.message == ""
    result.raise_for_error()


def test_create_error_result() -> None:
    error = RequirementCheckError("boom", missing_files=["a"])
    result = create_error_result(error)

    assert not result
    assert result.error is error
    assert result.message == "boom"
    with pytest.raises(RequirementCheckError):
        result.raise_for_error()


def test_check_error_sorts_and_deduplicates() -> None:
    error = RequirementCheckError(
        "msg",
        missing_files=["c", "a", "c"],
        io_errors={"z (x)", "b (y)"},
        unsatisfied_disjunctions=["(b OR a)", "(a OR b)"],
    )

    assert error.missing_files == ("a", "c")
    assert error.io_errors == ("b (y)", "z (x)")
    assert error.unsatisfied_disjunctions == ("(a OR b)", "(b OR a)")
    assert str(error) == "msg"


def test_probe_outcome_helpers() -> None:
    assert PROBE_EXISTS.status is ProbeStatus.EXISTS
    assert PROBE_MISSING.status is ProbeStatus.MISSING

    err = probe_error(OSError("disk on fire"))
    assert err.status is ProbeStatus.ERROR
    assert err.cause == "disk on fire"


def test_file_term_is_frozen_and_hashable() -> None:
    term = FileTerm(Path("a"))

    with pytest.raises(FrozenInstanceError):
        term.path = Path("b")  # type: ignore[misc]
    assert {term, FileTerm(Path("a"))} == {term}
