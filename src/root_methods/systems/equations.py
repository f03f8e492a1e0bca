"""
Two-unknown nonlinear systems, packaged with what each system solver needs to evaluate them.
"""
from typing import Callable

import numpy as np

Fn2D = Callable[[float, float], float]


class EquationSystem:

    """The system F1(x, y) = 0, F2(x, y) = 0 together with its Jacobian."""

    def __init__(
        self,
        f_1: Fn2D,
        f_2: Fn2D,
        jacobian: Callable[[float, float], np.ndarray],
    ):
        """
        :param f_1: left-hand side of the first equation.
        :param f_2: left-hand side of the second equation.
        :param jacobian: a function returning the 2x2 matrix of partial derivatives
            [[dF1/dx, dF1/dy], [dF2/dx, dF2/dy]] at (x, y).
        """
        self.f_1 = f_1
        self.f_2 = f_2
        self._jacobian = jacobian

    def __call__(self, x: float, y: float) -> np.ndarray:
        """Evaluate (F1, F2) at (x, y)."""
        return np.array([self.f_1(x, y), self.f_2(x, y)], dtype=float)

    def jacobian(self, x: float, y: float) -> np.ndarray:
        """Evaluate the Jacobian at (x, y) as a 2x2 array."""
        return np.asarray(self._jacobian(x, y), dtype=float).reshape(2, 2)


class FixedPointSystem:

    """The same kind of system rearranged as x = phi_x(x, y), y = phi_y(x, y).

    Solvers evaluate 'phi_y' with the freshly updated x.
    """

    def __init__(self, phi_x: Fn2D, phi_y: Fn2D):
        self.phi_x = phi_x
        self.phi_y = phi_y
