"""
Newton's method for computing roots of differentiable scalar functions.
"""
from typing import Callable, Tuple, Dict, Any

from root_methods.termination_criteria import Residual

# constants

TOL = 1e-3
MAX_ITERS = 1000


# root-finders


def newton(
    obj_fn: Callable[[float], float],
    grad_fn: Callable[[float], float],
    x_0: float,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
) -> Tuple[float, Dict[str, Any]]:
    """Find a root of 'obj_fn' using Newton's method,
        x <- x - f(x) / f'(x).
    The stopping rule is checked after each update, so at least one step is always taken.
    A vanishing derivative is not guarded against: plain floats raise ZeroDivisionError
    while NumPy scalars produce inf/NaN iterates and an unsuccessful exit.
    :param obj_fn: a function that returns the objective when called at x.
    :param grad_fn: a function that returns the derivative of the objective at x.
    :param x_0: initial guess for the root.
    :param tol: (optional) the method stops once |f(x)| < tol.
    :param max_iters: (optional) the maximum number of Newton steps to take.
    :returns: (x, exit_status) -- the final iterate and the status of the solver.
    """
    success = False
    criterion = Residual(tol)

    # setup
    i = 0
    x = x_0

    while i < max_iters:
        x = x - obj_fn(x) / grad_fn(x)
        i += 1

        if criterion(obj_fn(x)):
            success = True
            break

    exit_status = {"success": success, "n_iters": i}

    return x, exit_status
