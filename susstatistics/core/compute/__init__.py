"""
Compute utilities shared by the test backends.
"""

from susstatistics.core.compute.timing import Timer, timed

__all__ = ["Timer", "timed"]
