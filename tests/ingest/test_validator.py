"""
Tests for questionnaire content validation.

Row numbers in messages are 1-based line numbers: the header is row 1,
the first data line row 2.
"""

import pytest

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
from susstatistics.ingest import check_content, validate_content
from susstatistics.ingest._validator import check_header, check_row, iter_data_rows


VALID = [3] * 10


class TestValidContent:

    def test_three_systems(self, three_system_content):
        check_content(three_system_content)
        assert validate_content(three_system_content) == (True, "")

    def test_crlf_line_endings(self, build_content):
        content = build_content(
            [(VALID, "A"), (VALID, "B")], newline="\r\n",
        )
        assert validate_content(content) == (True, "")

    def test_blank_lines_anywhere(self, header):
        content = "\n".join([
            header,
            "",
            "3;3;3;3;3;3;3;3;3;3;A",
            "   ",
            "3;3;3;3;3;3;3;3;3;3;B",
            "",
        ])
        assert validate_content(content) == (True, "")

    def test_header_first_field_prefix(self, build_content):
        header = ";".join(
            ["Question 1 (I would use this often)"]
            + [f"Question {i}" for i in range(2, 11)]
            + ["System"]
        )
        content = build_content([(VALID, "A"), (VALID, "B")], header=header)
        assert validate_content(content)[0]

    def test_label_with_spaces(self, build_content):
        content = build_content([(VALID, "My App v2"), (VALID, "Old App")])
        assert validate_content(content)[0]


class TestEmptyAndShort:

    @pytest.mark.parametrize("content", ["", None])
    def test_empty(self, content):
        with pytest.raises(EmptyInputError):
            check_content(content)
        assert validate_content(content) == (
            False, "The provided .csv file is empty.",
        )

    def test_header_only(self, header):
        with pytest.raises(MissingHeaderOrDataError):
            check_content(header)

    def test_header_and_one_row(self, build_content):
        content = build_content([(VALID, "A")])
        valid, message = validate_content(content)
        assert not valid
        assert message == (
            "The provided file must contain a header and at least one row of data."
        )

    def test_header_one_row_trailing_newline(self, build_content):
        # Three lines after splitting; fails later, on the single system
        content = build_content([(VALID, "A")]) + "\n"
        with pytest.raises(InsufficientGroupsError):
            check_content(content)


class TestHeader:

    @pytest.mark.parametrize("bad_header", [
        "Q1;Q2;Q3;Q4;Q5;Q6;Q7;Q8;Q9;Q10;System",
        ";".join(f"Question {i}" for i in range(1, 11)),
        ";".join([f"Question {i}" for i in range(1, 10)] + ["Question ten", "System"]),
        ";".join([f"Question {i}" for i in range(1, 11)] + ["System", "Extra"]),
    ])
    def test_invalid_header(self, build_content, bad_header):
        content = build_content([(VALID, "A"), (VALID, "B")], header=bad_header)
        with pytest.raises(InvalidHeaderError) as exc_info:
            check_content(content)
        assert exc_info.value.header == bad_header
        assert "header appears to be incorrect" in str(exc_info.value)

    def test_check_header_direct(self, header):
        check_header(header)
        with pytest.raises(InvalidHeaderError):
            check_header("System;Question 1")


class TestRows:

    def test_wrong_field_count(self, header):
        content = "\n".join([
            header,
            "3;3;3;3;3;3;3;3;3;3;A",
            "3;3;3;3;3;3;3;3;3;B",
        ])
        with pytest.raises(MalformedRowError) as exc_info:
            check_content(content)
        assert exc_info.value.row == 3
        assert exc_info.value.n_fields == 10
        assert "row 3 does not have exactly 11 columns" in str(exc_info.value)

    @pytest.mark.parametrize("value", ["6", "0", "abc", "3.5", ""])
    def test_invalid_rating(self, header, value):
        fields = ["3"] * 10
        fields[3] = value
        content = "\n".join([
            header,
            ";".join(fields + ["A"]),
            "3;3;3;3;3;3;3;3;3;3;B",
        ])
        with pytest.raises(InvalidRatingError) as exc_info:
            check_content(content)
        e = exc_info.value
        assert (e.row, e.question, e.value) == (2, 4, value)
        assert f'In row 2 for question 4, the value "{value}" was found' in str(e)

    def test_rating_checked_before_label(self):
        with pytest.raises(InvalidRatingError):
            check_row(2, ["9"] + ["3"] * 9 + [""])

    def test_missing_label(self, header):
        content = "\n".join([
            header,
            "3;3;3;3;3;3;3;3;3;3;A",
            "3;3;3;3;3;3;3;3;3;3;",
        ])
        with pytest.raises(MissingSystemLabelError) as exc_info:
            check_content(content)
        assert exc_info.value.row == 3

    def test_row_numbers_count_blank_lines(self, header):
        content = "\n".join([
            header,
            "",
            "3;3;3;3;3;3;3;3;3;3;A",
            "",
            "3;3;3;3;3;3;3;3;3;7;B",
        ])
        valid, message = validate_content(content)
        assert not valid
        assert "In row 5 for question 10" in message

    def test_first_problem_wins(self, header):
        content = "\n".join([
            header,
            "3;3;3;3;3;3;3;3;3;A",
            "3;3;3;3;3;3;3;3;3;3;",
        ])
        with pytest.raises(MalformedRowError):
            check_content(content)


class TestGroups:

    def test_single_system(self, build_content):
        content = build_content([(VALID, "A"), (VALID, "A"), (VALID, "A")])
        with pytest.raises(InsufficientGroupsError) as exc_info:
            check_content(content)
        assert exc_info.value.n_groups == 1

    def test_all_errors_are_validation_errors(self, build_content):
        content = build_content([(VALID, "A"), (VALID, "A")])
        with pytest.raises(ValidationError):
            check_content(content)


class TestIterDataRows:

    def test_skips_header_and_blanks(self):
        lines = ["header", "a;b", "", "c;d\r"]
        assert list(iter_data_rows(lines)) == [(2, ["a", "b"]), (4, ["c", "d"])]
