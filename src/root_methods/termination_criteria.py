"""
Termination criteria for iterative root-finding methods.
"""
from typing import Union

import numpy as np

# constants

TOL = 1e-3

Iterate = Union[float, np.ndarray]

# classes


class TerminationCriterion:

    """Base class for termination criteria."""

    tol: float

    def __init__(self, tol: float = TOL):
        """
        :param tol: the tolerance for declaring convergence.
        """
        self.tol = tol

    def __call__(self, *args) -> bool:
        """Evaluate the termination criterion."""
        raise NotImplementedError("Termination criteria must implement __call__!")


class IntervalWidth(TerminationCriterion):

    """Termination criterion based on the width of a bracketing interval."""

    def __call__(self, left: float, right: float) -> bool:
        """Determine if the bracket [left, right] is narrower than self.tol."""
        return bool(right - left < self.tol)


class StepLength(TerminationCriterion):

    """Termination criterion based on the length of the most recent step."""

    def __call__(self, w: Iterate, w_prev: Iterate) -> bool:
        """Determine if the largest component of the last step is small enough (according to self.tol)
        to deduce that the method has converged. A NaN step never converges.
        """
        return bool(np.max(np.abs(w - w_prev)) <= self.tol)


class Residual(TerminationCriterion):

    """Termination criterion based on the magnitude of the function value."""

    def __call__(self, f_val: Iterate) -> bool:
        """Determine if the residual is strictly below self.tol."""
        return bool(np.max(np.abs(f_val)) < self.tol)
