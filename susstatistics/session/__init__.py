"""
Analysis sessions.

Public API:
    Calculator        - studies, active selection and design decisions
    SampleDependence  - INDEPENDENT / DEPENDENT
    Parametric        - PARAMETRIC / NON_PARAMETRIC
    DesignChoice      - both decisions, resolved
"""

from susstatistics.hypothesis._common import DesignChoice, Parametric, SampleDependence
from susstatistics.session.calculator import Calculator

__all__ = [
    "Calculator",
    "DesignChoice",
    "Parametric",
    "SampleDependence",
]
