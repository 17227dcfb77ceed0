"""
Core infrastructure for SUS Statistics.

This module provides shared abstractions and utilities used by all
domain-specific submodules (ingest, descriptive, session, hypothesis,
reporting).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Argument validators for the numeric entry points
    constants: Questionnaire layout and inference thresholds
    compute: Timing
"""

from susstatistics.core.result import Result
from susstatistics.core.exceptions import (
    SUSStatisticsError,
    ValidationError,
    EmptyInputError,
    MissingHeaderOrDataError,
    InvalidHeaderError,
    MalformedRowError,
    InvalidRatingError,
    MissingSystemLabelError,
    InsufficientGroupsError,
    DesignError,
    UnsupportedDesignError,
    DesignNotSetError,
    SampleSizeMismatchError,
    InsufficientObservationsError,
    InvalidArgumentError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "SUSStatisticsError",
    "ValidationError",
    "EmptyInputError",
    "MissingHeaderOrDataError",
    "InvalidHeaderError",
    "MalformedRowError",
    "InvalidRatingError",
    "MissingSystemLabelError",
    "InsufficientGroupsError",
    "DesignError",
    "UnsupportedDesignError",
    "DesignNotSetError",
    "SampleSizeMismatchError",
    "InsufficientObservationsError",
    "InvalidArgumentError",
]
