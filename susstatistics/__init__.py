"""
SUS Statistics: inferential statistics for System Usability Scale studies.

Turns raw SUS questionnaire rows into SUS scores, per-system descriptive
statistics, the appropriate hypothesis test with effect sizes, and
APA-style narrative text.

Submodules:
    ingest: Content validation, grouping and file reading
    descriptive: SUS scoring, quartiles, outliers, Study
    session: Calculator (active studies and design decisions)
    hypothesis: Test routing, execution and assumption checks
    reporting: APA-style narratives
"""

__version__ = "0.1.0"

from susstatistics import ingest
from susstatistics import descriptive
from susstatistics import hypothesis
from susstatistics import reporting
from susstatistics import session
from susstatistics.session import Calculator, Parametric, SampleDependence

__all__ = [
    "__version__",
    "ingest",
    "descriptive",
    "hypothesis",
    "reporting",
    "session",
    "Calculator",
    "Parametric",
    "SampleDependence",
]
