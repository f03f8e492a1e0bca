"""
Bisection method for computing roots of continuous scalar functions.
"""
from typing import Callable, Tuple, Dict, Any

from root_methods.termination_criteria import IntervalWidth

# constants

TOL = 1e-3
MAX_ITERS = 1000


# root-finders


def bisection(
    obj_fn: Callable[[float], float],
    left: float,
    right: float,
    tol: float = TOL,
    max_iters: int = MAX_ITERS,
) -> Tuple[float, Dict[str, Any]]:
    """Find a root of 'obj_fn' by repeatedly halving the bracket [left, right].
    The bracket is assumed to contain a sign change; this is not checked. Without one,
    the method still terminates, but the returned point need not be a root.
    :param obj_fn: the scalar function whose root is sought.
    :param left: lower end of the bracketing interval.
    :param right: upper end of the bracketing interval.
    :param tol: (optional) the method stops once right - left < tol.
    :param max_iters: (optional) the maximum number of halvings to perform.
    :returns: (root, exit_status) -- the last midpoint and the status of the solver.
        The status also records the final bracket under "bracket".
    """
    success = False
    criterion = IntervalWidth(tol)

    # setup
    i = 0
    w = left

    while i < max_iters:
        if criterion(left, right):
            success = True
            break

        w = (left + right) / 2

        # a zero product means the midpoint (or left end) is a root.
        if obj_fn(left) * obj_fn(w) <= 0:
            right = w
        else:
            left = w

        i += 1
    else:
        success = criterion(left, right)

    exit_status = {"success": success, "n_iters": i, "bracket": (left, right)}

    return w, exit_status
