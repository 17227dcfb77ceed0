"""
Exception hierarchy for SUS Statistics.

All exceptions inherit from SUSStatisticsError to allow catching any
library-specific error. Three families sit below it:

    ValidationError       - the raw questionnaire content is unusable
    DesignError           - the analyst's study design cannot be tested
    InvalidArgumentError  - a computation entry point was called with data
                            that should never have passed validation

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are the user-facing wording, surfaced verbatim
    - Never catch and re-raise with less information
"""

from __future__ import annotations


class SUSStatisticsError(Exception):
    """Base exception for all SUS Statistics errors."""
    pass


# =====================================================================
# Content validation
# =====================================================================


class ValidationError(SUSStatisticsError):
    """
    Input validation failed.

    Raised when the questionnaire content fails validation checks.
    Recoverable: the message is meant to be shown to the analyst.
    """
    pass


class EmptyInputError(ValidationError):
    """The content has no lines at all."""

    def __init__(self, message: str = "The provided .csv file is empty."):
        super().__init__(message)


class MissingHeaderOrDataError(ValidationError):
    """The content lacks a header line or any data line."""

    def __init__(
        self,
        message: str = (
            "The provided file must contain a header and at least one row of data."
        ),
    ):
        super().__init__(message)


class InvalidHeaderError(ValidationError):
    """
    The header line is not the expected 11-column SUS header.

    Attributes:
        header: The offending header line
    """

    def __init__(self, message: str | None = None, header: str | None = None):
        if message is None:
            message = (
                "The header appears to be incorrect or missing. Expected is that "
                "the first row are 11 columns ranging from 'Question 1' to "
                "'Question 10' and ending with the 'System' variable."
            )
        super().__init__(message)
        self.header = header


class MalformedRowError(ValidationError):
    """
    A data row does not split into exactly 11 fields.

    Attributes:
        row: 1-based line number in the content
        n_fields: Number of fields actually found
    """

    def __init__(self, row: int, n_fields: int | None = None):
        super().__init__(
            f"There appears to be a problem with the data format. The data in "
            f"row {row} does not have exactly 11 columns."
        )
        self.row = row
        self.n_fields = n_fields


class InvalidRatingError(ValidationError):
    """
    An item rating is not an integer between 1 and 5.

    Attributes:
        row: 1-based line number in the content
        question: 1-based question number
        value: The raw field text that failed to parse
    """

    def __init__(self, row: int, question: int, value: str):
        super().__init__(
            f"There appears to be at least one invalid item score. In row {row} "
            f"for question {question}, the value \"{value}\" was found. Only "
            f"items scores between 1 and 5 are allowed."
        )
        self.row = row
        self.question = question
        self.value = value


class MissingSystemLabelError(ValidationError):
    """
    The System/Variable column of a data row is blank.

    Attributes:
        row: 1-based line number in the content
    """

    def __init__(self, row: int):
        super().__init__(
            f"The System/Variable column is empty in row {row}. Please provide "
            f"system/variable names so the data can be associated to a variable."
        )
        self.row = row


class InsufficientGroupsError(ValidationError):
    """
    Fewer than two distinct systems/variables are available.

    Attributes:
        n_groups: Number of distinct groups found
    """

    def __init__(self, n_groups: int, message: str | None = None):
        if message is None:
            message = (
                "There must be at least two unique systems/variables in the "
                "provided data set to perform inferential statistics."
            )
        super().__init__(message)
        self.n_groups = n_groups


# =====================================================================
# Study design
# =====================================================================


class DesignError(SUSStatisticsError):
    """
    The selected study design cannot be analysed.

    Base class for problems with the analyst's design decisions, as opposed
    to problems with the data itself.
    """
    pass


class UnsupportedDesignError(DesignError):
    """
    The design maps to a test this library does not implement.

    Raised by the test router for repeated-measures ANOVA, Kruskal-Wallis
    and Friedman designs. Test execution must not proceed.

    Attributes:
        test: The UnsupportedTest member naming the missing test
        n_groups: Number of active groups in the design
    """

    def __init__(self, message: str, test, n_groups: int):
        super().__init__(message)
        self.test = test
        self.n_groups = n_groups


class DesignNotSetError(DesignError):
    """
    A test was requested before both design decisions were made.

    Attributes:
        missing: Names of the decisions still unset
    """

    def __init__(self, missing: tuple[str, ...]):
        super().__init__(
            f"Study design incomplete: {', '.join(missing)} not set."
        )
        self.missing = missing


class SampleSizeMismatchError(DesignError):
    """
    A dependent (paired) design was chosen for groups of unequal size.

    Attributes:
        sizes: {study name: sample size} for the active studies
    """

    def __init__(self, sizes: dict[str, int]):
        details = ", ".join(f"{name}={n}" for name, n in sizes.items())
        super().__init__(
            f"Different sample sizes were detected ({details}). A dependent "
            f"sample comparison requires the same number of data points for "
            f"each system/variable."
        )
        self.sizes = sizes


class InsufficientObservationsError(DesignError):
    """
    The active studies hold too few respondents for the routed test.

    Raised when no variance can be estimated: a paired t-test needs at
    least two pairs, an independent t-test or one-way ANOVA needs more
    respondents than groups.

    Attributes:
        test: Name of the routed test
        sizes: {study name: sample size} for the active studies
    """

    def __init__(self, test: str, sizes: dict[str, int], requirement: str):
        details = ", ".join(f"{name}={n}" for name, n in sizes.items())
        super().__init__(
            f"Too few data points for the {test} ({details}): {requirement}."
        )
        self.test = test
        self.sizes = sizes


# =====================================================================
# Programming contract
# =====================================================================


class InvalidArgumentError(SUSStatisticsError, ValueError):
    """
    A computation entry point received null, empty or ill-shaped data.

    Indicates the caller skipped validation. Not user-recoverable.
    """
    pass
