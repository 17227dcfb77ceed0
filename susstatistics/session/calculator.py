"""
Calculator: the analysis session.

Owns every Study built from one questionnaire file, the analyst's active
subset of them and the two design decisions. State changes only through
the transition methods (set_active, toggle, select, set_sample_dependence,
set_parametric, reset_design). One Calculator per analysis; nothing is
shared between sessions.
"""

from __future__ import annotations

from typing import Iterable

from susstatistics.core.exceptions import (
    DesignNotSetError,
    InvalidArgumentError,
    SampleSizeMismatchError,
)
from susstatistics.descriptive.study import Study
from susstatistics.hypothesis._common import (
    DesignChoice,
    HTestKind,
    Parametric,
    SampleDependence,
    UnsupportedTest,
)
from susstatistics.hypothesis.router import select_test, unsupported_test
from susstatistics.hypothesis.solution import HTestSolution
from susstatistics.hypothesis.solvers import run_test
from susstatistics.ingest import check_content, group_rows


class Calculator:
    """
    Aggregate root of an analysis session.

    Attributes:
        studies: Every study, in first-seen order of its system label
        active_studies: The analyst's selection, always a subsequence of
            studies in the same relative order
        sample_dependence: Independent/dependent samples, or None if unset
        parametric: Parametric/non-parametric test, or None if unset

    Examples:
        >>> calc = Calculator.from_content(text)
        >>> calc.set_active("System C", False)
        >>> calc.set_sample_dependence(SampleDependence.INDEPENDENT)
        >>> calc.set_parametric(Parametric.PARAMETRIC)
        >>> result = calc.run_test()
        >>> print(result.summary())
    """

    def __init__(self, studies: Iterable[Study]):
        self._studies: tuple[Study, ...] = tuple(studies)
        if not self._studies:
            raise InvalidArgumentError("Calculator needs at least one study")

        names = [s.name for s in self._studies]
        if len(set(names)) != len(names):
            raise InvalidArgumentError(f"Duplicate study names: {names}")

        self._index = {s.name: i for i, s in enumerate(self._studies)}
        self._active: list[int] = list(range(len(self._studies)))
        self._sample_dependence: SampleDependence | None = None
        self._parametric: Parametric | None = None

    @classmethod
    def from_content(cls, content: str) -> Calculator:
        """
        Validate questionnaire content and build one Study per system.

        Raises:
            ValidationError: If the content fails validation
        """
        check_content(content)
        groups = group_rows(content)
        return cls(Study.from_rows(name, rows) for name, rows in groups.items())

    # --- Studies ---

    @property
    def studies(self) -> tuple[Study, ...]:
        return self._studies

    @property
    def active_studies(self) -> tuple[Study, ...]:
        return tuple(self._studies[i] for i in self._active)

    @property
    def active_indices(self) -> tuple[int, ...]:
        """Indices of the active studies into studies (strictly increasing)."""
        return tuple(self._active)

    def study(self, name: str) -> Study:
        return self._studies[self._resolve(name)]

    def _resolve(self, study: Study | str) -> int:
        name = study.name if isinstance(study, Study) else study
        try:
            return self._index[name]
        except KeyError:
            raise InvalidArgumentError(
                f"Unknown study {name!r}; known: {list(self._index)}"
            ) from None

    def is_active(self, study: Study | str) -> bool:
        return self._resolve(study) in self._active

    def set_active(self, study: Study | str, active: bool) -> None:
        """Add a study to or remove it from the active selection."""
        idx = self._resolve(study)
        if active and idx not in self._active:
            self._active.append(idx)
        elif not active and idx in self._active:
            self._active.remove(idx)
        # Keep the selection in the order of studies
        self._active.sort()

    def toggle(self, study: Study | str) -> bool:
        """Flip a study's selection; returns the new state."""
        active = not self.is_active(study)
        self.set_active(study, active)
        return active

    def select(self, names: Iterable[Study | str]) -> None:
        """Make exactly the given studies active."""
        self._active = sorted({self._resolve(n) for n in names})

    # --- Design decisions ---

    @property
    def sample_dependence(self) -> SampleDependence | None:
        return self._sample_dependence

    @property
    def parametric(self) -> Parametric | None:
        return self._parametric

    def set_sample_dependence(self, dependence: SampleDependence) -> None:
        """
        Record whether the active studies are independent or paired samples.

        Raises:
            SampleSizeMismatchError: For DEPENDENT when the active studies
                differ in sample size; nothing is recorded
        """
        if not isinstance(dependence, SampleDependence):
            raise InvalidArgumentError(f"Not a SampleDependence: {dependence!r}")

        if dependence is SampleDependence.DEPENDENT:
            self._check_equal_sizes()

        self._sample_dependence = dependence

    def set_parametric(self, parametric: Parametric) -> None:
        if not isinstance(parametric, Parametric):
            raise InvalidArgumentError(f"Not a Parametric choice: {parametric!r}")
        self._parametric = parametric

    def reset_design(self) -> None:
        self._sample_dependence = None
        self._parametric = None

    @property
    def design(self) -> DesignChoice | None:
        """The resolved design, or None while either decision is unset."""
        if self._sample_dependence is None or self._parametric is None:
            return None
        return DesignChoice(self._sample_dependence, self._parametric)

    def _require_design(self) -> DesignChoice:
        design = self.design
        if design is None:
            missing = tuple(
                label for label, value in (
                    ("sample dependence", self._sample_dependence),
                    ("parametric choice", self._parametric),
                ) if value is None
            )
            raise DesignNotSetError(missing)
        # The selection may have changed since the decision was recorded
        if design.dependence is SampleDependence.DEPENDENT:
            self._check_equal_sizes()
        return design

    def _check_equal_sizes(self) -> None:
        sizes = {s.name: s.n for s in self.active_studies}
        if len(set(sizes.values())) > 1:
            raise SampleSizeMismatchError(sizes)

    # --- Testing ---

    def unsupported_test(self) -> UnsupportedTest | None:
        """The unsupported test the current design would need, if any."""
        return unsupported_test(len(self._active), self._require_design())

    def select_test(self) -> HTestKind:
        """
        Route the current state to a test.

        Raises:
            DesignNotSetError: If a design decision is missing
            InsufficientGroupsError: If fewer than two studies are active
            SampleSizeMismatchError: If the design is DEPENDENT but the active
                studies now differ in sample size
            UnsupportedDesignError: If the design needs an unsupported test
        """
        return select_test(len(self._active), self._require_design())

    def run_test(self) -> HTestSolution:
        """Route the current state and run the test on the active studies."""
        kind = self.select_test()
        active = self.active_studies
        return run_test(
            kind,
            [s.sus_scores for s in active],
            [s.name for s in active],
        )

    def __repr__(self) -> str:
        return (
            f"Calculator(studies={len(self._studies)}, "
            f"active={len(self._active)}, design={self.design})"
        )
