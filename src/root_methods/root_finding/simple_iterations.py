"""
Simple (fixed-point) iteration for scalar equations written as x = phi(x).
"""
from typing import Callable, Tuple, Dict, Any

from root_methods.termination_criteria import StepLength

# constants

TOL = 1e-3
MAX_ITERS = 1000


# root-finders


def simple_iterations(
    phi: Callable[[float], float],
    x_0: float,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
) -> Tuple[float, Dict[str, Any]]:
    """Find a fixed point of 'phi' by iterating x_{n+1} = phi(x_n).
    Convergence requires 'phi' to be a contraction near the fixed point. Nothing checks
    for divergence; a non-contractive map simply runs until 'max_iters'.
    :param phi: the fixed-point form of the equation.
    :param x_0: initial guess.
    :param tol: (optional) the method stops once |x_{n+1} - x_n| <= tol.
    :param max_iters: (optional) the maximum number of non-terminal updates.
    :returns: (x, exit_status) -- the final iterate and the status of the solver.
        "n_iters" counts the updates which did not meet the stopping rule, so 'phi'
        is evaluated n_iters + 1 times.
    """
    success = False
    criterion = StepLength(tol)

    # setup
    i = 0
    x_prev = x_0

    while True:
        x = phi(x_prev)
        if criterion(x, x_prev):
            success = True
            break

        if i >= max_iters:
            break

        x_prev = x
        i += 1

    exit_status = {"success": success, "n_iters": i}

    return x, exit_status
