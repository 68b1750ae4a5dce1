"""
Exceptions raised by PySATL extremes.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DomainViolationError(ValueError):
    """
    A value lies outside the mathematical domain it is required to be in.

    Raised both for parameters breaking a parametrization constraint
    (e.g. non-positive scale) and for arguments outside the domain of a
    characteristic (e.g. a probability outside [0, 1] passed to the
    quantile function).
    """


__all__ = ["DomainViolationError"]
