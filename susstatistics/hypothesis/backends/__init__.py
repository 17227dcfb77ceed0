"""
Backends for hypothesis tests.
"""

from susstatistics.hypothesis.backends.cpu import CPUHypothesisBackend

__all__ = ["CPUHypothesisBackend"]
