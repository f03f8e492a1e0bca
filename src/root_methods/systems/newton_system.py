"""
Newton's method for systems of two nonlinear equations.
"""
from typing import Tuple, Dict, Any, Sequence

import numpy as np

from root_methods.termination_criteria import StepLength
from root_methods.systems.equations import EquationSystem

# constants

TOL = 1e-4
MAX_ITERS = 1000
W_0 = (0.8, 0.8)


# solvers


def _newton_step(system: EquationSystem, w: np.ndarray) -> np.ndarray:
    """Take one Newton step by inverting the 2x2 Jacobian in closed form."""
    x, y = w
    f_1, f_2 = system(x, y)
    (j_11, j_12), (j_21, j_22) = system.jacobian(x, y)

    det = j_11 * j_22 - j_12 * j_21

    return np.array(
        [
            x - 1 / det * (j_22 * f_1 - j_12 * f_2),
            y - 1 / det * (-j_21 * f_1 + j_11 * f_2),
        ]
    )


def newton_system(
    system: EquationSystem,
    w_0: Sequence[float] = W_0,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
) -> Tuple[np.ndarray, Dict[str, Any]]:
    """Solve F1(x, y) = 0, F2(x, y) = 0 with Newton's method.
    The stopping rule is checked after each step, so at least one step is always taken.
    A singular Jacobian is not guarded against; the resulting inf/NaN iterates never
    satisfy the stopping rule and the solver exits unsuccessfully after 'max_iters' steps.
    :param system: the equations and their Jacobian.
    :param w_0: (optional) initial guess (x, y).
    :param tol: (optional) the method stops once max(|dx|, |dy|) <= tol.
    :param max_iters: (optional) the maximum number of Newton steps to take.
    :returns: (w, exit_status) -- the solution array [x, y] and the status of the solver.
    """
    success = False
    criterion = StepLength(tol)

    # setup
    i = 0
    w = np.array(w_0, dtype=float)

    while i < max_iters:
        w_prev = w
        w = _newton_step(system, w_prev)
        i += 1

        if criterion(w, w_prev):
            success = True
            break

    exit_status = {"success": success, "n_iters": i}

    return w, exit_status
