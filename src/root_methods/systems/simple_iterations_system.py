"""
Fixed-point iteration for systems of two nonlinear equations.
"""
from typing import Tuple, Dict, Any, Sequence

import numpy as np

from root_methods.termination_criteria import StepLength
from root_methods.systems.equations import FixedPointSystem

# constants

TOL = 1e-4
MAX_ITERS = 1000
W_0 = (0.8, 0.8)


# solvers


def simple_iterations_system(
    system: FixedPointSystem,
    w_0: Sequence[float] = W_0,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
) -> Tuple[np.ndarray, Dict[str, Any]]:
    """Solve x = phi_x(x, y), y = phi_y(x, y) by fixed-point iteration.
    Updates are sequential (Gauss-Seidel style): the new y is computed from the new x.
    :param system: the fixed-point maps.
    :param w_0: (optional) initial guess (x, y).
    :param tol: (optional) the method stops once max(|dx|, |dy|) <= tol.
    :param max_iters: (optional) the maximum number of sweeps to perform.
    :returns: (w, exit_status) -- the solution array [x, y] and the status of the solver.
    """
    success = False
    criterion = StepLength(tol)

    # setup
    i = 0
    w = np.array(w_0, dtype=float)

    while i < max_iters:
        w_prev = w
        x = system.phi_x(w_prev[0], w_prev[1])
        y = system.phi_y(x, w_prev[1])
        w = np.array([x, y], dtype=float)
        i += 1

        if criterion(w, w_prev):
            success = True
            break

    exit_status = {"success": success, "n_iters": i}

    return w, exit_status
