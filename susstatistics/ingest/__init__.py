"""
Ingestion of raw SUS questionnaire content.

Public API:
    read_content(path)        - read a file under the size ceiling (or None)
    check_content(content)    - validate, raising a ValidationError subclass
    validate_content(content) - validate, returning (is_valid, message)
    group_rows(content)       - {system label: [ratings per respondent]}
"""

from susstatistics.ingest._validator import check_content, validate_content
from susstatistics.ingest._parser import group_rows
from susstatistics.ingest.reader import read_content

__all__ = [
    "check_content",
    "validate_content",
    "group_rows",
    "read_content",
]
