"""
pytest configuration and shared fixtures.

Rating patterns used below and their SUS scores:

    [5, 1] * 5 -> 100.0     [4, 2] * 5 -> 75.0     [3] * 10   -> 50.0
    [5, 2] * 5 -> 87.5      [3, 2] * 5 -> 62.5     [4, 3] * 5 -> 62.5
    [2, 3] * 5 -> 37.5      [1, 5] * 5 -> 0.0
"""

import numpy as np
import pytest


HEADER = ";".join([f"Question {i}" for i in range(1, 11)] + ["System"])


def make_line(ratings, label):
    return ";".join([str(r) for r in ratings] + [label])


def make_content(rows, header=HEADER, newline="\n"):
    """Build questionnaire text from (ratings, label) pairs."""
    return newline.join([header] + [make_line(r, lbl) for r, lbl in rows])


# System A: 75, 87.5, 62.5, 75    -> mean 75.0
# System B: 50, 37.5, 62.5, 50    -> mean 50.0
# System C: 100, 87.5, 75, 87.5   -> mean 87.5
THREE_SYSTEM_ROWS = [
    ([4, 2] * 5, "System A"),
    ([3] * 10, "System B"),
    ([5, 2] * 5, "System A"),
    ([5, 1] * 5, "System C"),
    ([2, 3] * 5, "System B"),
    ([3, 2] * 5, "System A"),
    ([5, 2] * 5, "System C"),
    ([4, 3] * 5, "System B"),
    ([4, 2] * 5, "System C"),
    ([4, 2] * 5, "System A"),
    ([3] * 10, "System B"),
    ([5, 2] * 5, "System C"),
]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def three_system_content():
    return make_content(THREE_SYSTEM_ROWS)


@pytest.fixture
def two_system_content():
    """System A and System B only, four respondents each."""
    rows = [r for r in THREE_SYSTEM_ROWS if r[1] != "System C"]
    return make_content(rows)


@pytest.fixture
def unequal_content():
    """System A with four respondents, System B with two."""
    rows = [r for r in THREE_SYSTEM_ROWS if r[1] == "System A"]
    rows += [([3] * 10, "System B"), ([2, 3] * 5, "System B")]
    return make_content(rows)


@pytest.fixture
def single_respondent_content():
    """System A with three respondents (75, 87.5, 62.5), System B with one (50)."""
    rows = [r for r in THREE_SYSTEM_ROWS if r[1] == "System A"][:3]
    rows.append(([3] * 10, "System B"))
    return make_content(rows)


@pytest.fixture
def sus_samples(rng):
    """Three independent samples of SUS-like scores (multiples of 2.5)."""
    def draw(loc, n):
        raw = rng.normal(loc, 12.0, size=n)
        return np.clip(np.round(raw / 2.5) * 2.5, 0.0, 100.0)
    return [draw(68.0, 20), draw(75.0, 18), draw(60.0, 22)]


@pytest.fixture
def build_content():
    """The make_content() helper, for tests that need custom rows."""
    return make_content


@pytest.fixture
def header():
    return HEADER
