"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from susstatistics.core.result import Result


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


def _result(**kwargs):
    defaults = dict(
        params=FakeParams(value=1.0),
        info={},
        timing=None,
        backend_name="cpu",
    )
    defaults.update(kwargs)
    return Result(**defaults)


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:

    def test_basic_creation(self):
        result = _result(
            params=FakeParams(value=42.0),
            info={"test_kind": "independent_t", "n_groups": 2},
            timing={"total_seconds": 0.01},
            backend_name="cpu_hypothesis",
        )
        assert result.params.value == 42.0
        assert result.info["n_groups"] == 2
        assert result.timing["total_seconds"] == 0.01
        assert result.backend_name == "cpu_hypothesis"

    def test_timing_none(self):
        assert _result().timing is None

    def test_warnings_default_empty(self):
        result = _result()
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)


# ═══════════════════════════════════════════════════════════════════════
# Immutability
# ═══════════════════════════════════════════════════════════════════════


class TestImmutability:
    """Result is frozen: no attribute mutation allowed."""

    def test_cannot_set_params(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_warnings(self):
        result = _result()
        with pytest.raises(FrozenInstanceError):
            result.warnings = ("new warning",)


# ═══════════════════════════════════════════════════════════════════════
# has_warning
# ═══════════════════════════════════════════════════════════════════════


class TestHasWarning:

    def test_substring_match(self):
        result = _result(warnings=("data are essentially constant",))
        assert result.has_warning("constant")
        assert result.has_warning("data are essentially constant")

    def test_no_match(self):
        result = _result(warnings=("ties among absolute differences",))
        assert not result.has_warning("constant")

    def test_no_warnings(self):
        assert not _result().has_warning("anything")
