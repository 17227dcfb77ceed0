"""
Generic result container for all SUS Statistics computations.

The Result class provides a standardized envelope that every test and
assumption check uses. This gives shared handling of timing, warnings
and provenance while letting each test family define its own payload.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (test kind, group count)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The test-specific parameter payload type

    Attributes:
        params: Test-specific values (statistic, p-value, effect size, ...)
        info: Structured metadata (test kind, number of groups)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=TestParams(...),
        ...     info={'test_kind': 'independent_t', 'n_groups': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_hypothesis'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
