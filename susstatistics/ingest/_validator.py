"""
Validation of raw SUS questionnaire content.

The content is ';'-delimited text: a header line

    Question 1;Question 2;...;Question 10;System

followed by one line per respondent with ten integer ratings in [1, 5]
and a non-empty system/variable label. Blank lines are allowed anywhere.

Only fields 0 and 9 of the header are checked verbatim. Row numbers in
error messages are 1-based line numbers of the content.
"""

from __future__ import annotations

from susstatistics.core.constants import (
    DELIMITER,
    HEADER_FIRST_PREFIX,
    HEADER_LAST_QUESTION,
    N_FIELDS,
    N_ITEMS,
    RATING_MAX,
    RATING_MIN,
)
from susstatistics.core.exceptions import (
    EmptyInputError,
    InsufficientGroupsError,
    InvalidHeaderError,
    InvalidRatingError,
    MalformedRowError,
    MissingHeaderOrDataError,
    MissingSystemLabelError,
    ValidationError,
)


def iter_data_rows(lines: list[str]):
    """
    Yield (row_number, fields) for every non-blank data line.

    Skips the header (line 0) and blank lines. Lines are stripped before
    splitting so CRLF content behaves like LF content.
    """
    for i in range(1, len(lines)):
        line = lines[i].strip()
        if not line:
            continue
        yield i + 1, line.split(DELIMITER)


def _parse_rating(field: str) -> int | None:
    """Integer rating in [RATING_MIN, RATING_MAX], or None."""
    try:
        rating = int(field)
    except ValueError:
        return None
    if rating < RATING_MIN or rating > RATING_MAX:
        return None
    return rating


def check_header(header_line: str) -> None:
    """
    Verify the header has 11 fields running from 'Question 1' to 'Question 10'.

    Raises:
        InvalidHeaderError: If the header does not match
    """
    headers = header_line.strip().split(DELIMITER)
    if (
        len(headers) != N_FIELDS
        or not headers[0].startswith(HEADER_FIRST_PREFIX)
        or headers[N_ITEMS - 1] != HEADER_LAST_QUESTION
    ):
        raise InvalidHeaderError(header=header_line)


def check_row(row: int, fields: list[str]) -> None:
    """
    Verify one data row: 11 fields, ten valid ratings, a system label.

    Args:
        row: 1-based line number (for error messages)
        fields: The line split on the delimiter

    Raises:
        MalformedRowError, InvalidRatingError, MissingSystemLabelError
    """
    if len(fields) != N_FIELDS:
        raise MalformedRowError(row, n_fields=len(fields))

    for j in range(N_ITEMS):
        if _parse_rating(fields[j]) is None:
            raise InvalidRatingError(row, j + 1, fields[j])

    if not fields[N_ITEMS].strip():
        raise MissingSystemLabelError(row)


def check_content(content: str | None) -> None:
    """
    Validate questionnaire content, failing on the first problem found.

    Checks run in this order: empty content, header plus data present,
    header layout, every data row, at least two distinct systems.

    Args:
        content: The entire file content (header included)

    Raises:
        ValidationError: One of its subclasses, naming the problem
    """
    if not content:
        raise EmptyInputError()

    lines = content.split('\n')

    if len(lines) < 3:
        raise MissingHeaderOrDataError()

    check_header(lines[0])

    systems: list[str] = []
    for row, fields in iter_data_rows(lines):
        check_row(row, fields)
        label = fields[N_ITEMS]
        if label not in systems:
            systems.append(label)

    if len(systems) < 2:
        raise InsufficientGroupsError(len(systems))


def validate_content(content: str | None) -> tuple[bool, str]:
    """
    Validate questionnaire content and report the outcome as a tuple.

    Args:
        content: The entire file content (header included)

    Returns:
        (is_valid, message). The message is empty iff the content is valid,
        otherwise it is the user-facing description of the first problem.

    Examples:
        >>> validate_content("")
        (False, 'The provided .csv file is empty.')
    """
    try:
        check_content(content)
    except ValidationError as e:
        return False, str(e)
    return True, ""
