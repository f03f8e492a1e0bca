"""
Convenience functions for running the worked root-finding exercises.
"""
import logging
from typing import Optional, Dict, Any, Tuple

from root_methods import problems
from root_methods.root_finding import bisection, simple_iterations, newton
from root_methods.systems import newton_system, simple_iterations_system

# Constants #

BISECTION = "bisection"
SIMPLE_ITERATIONS = "simple_iterations"
NEWTON = "newton"
NEWTON_SYSTEM = "newton_system"
SIMPLE_ITERATIONS_SYSTEM = "simple_iterations_system"

# exposed methods
METHODS = [BISECTION, SIMPLE_ITERATIONS, NEWTON, NEWTON_SYSTEM, SIMPLE_ITERATIONS_SYSTEM]

# keys which may be overridden for each method
SOLVER_OPTIONS = ["tol", "max_iters"]


# ========================
# ==== Logging Helper ====
# ========================


def _get_logger(
    name: str, verbose: bool = False, debug: bool = False, log_file: str = None
) -> logging.Logger:
    """Construct a logging.Logger instance with an appropriate configuration.
    The root logger is configured through logging.basicConfig, so the chosen level and
    log file also apply to any other loggers in the process.
    :param name: name for the Logger instance.
    :param verbose: (optional) whether or not the logger should print verbosely (ie. at the INFO level).
        Defaults to False.
    :param debug: (optional) whether or not the logger should print in debug mode (ie. at the DEBUG level).
        Defaults to False.
    :param log_file: (optional) path to a file where the log should be stored. The log is printed to stderr when 'None'.
    :returns: instance of logging.Logger.
    """

    level = logging.WARNING
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO

    logging.basicConfig(level=level, filename=log_file)
    logger = logging.getLogger(name)
    logging.root.setLevel(level)
    logger.setLevel(level)
    return logger


# ==========================
# ==== Config Handling  ====
# ==========================


def _solver_options(config: Optional[Dict[str, Any]], method: str) -> Dict[str, Any]:
    """Extract the keyword arguments for 'method' from a demo configuration.
    :param config: mapping from method names to {"tol": ..., "max_iters": ...} overrides.
    :param method: the name of the method.
    :returns: keyword arguments for the solver.
    """
    if config is None:
        return {}

    options = config.get(method, {})
    unknown = [key for key in options if key not in SOLVER_OPTIONS]
    if len(unknown) > 0:
        raise ValueError(f"Options {unknown} not recognized for method {method}!")

    return dict(options)


def _check_config(config: Optional[Dict[str, Any]]):
    if config is None:
        return

    for method in config:
        if method not in METHODS:
            raise ValueError(f"Method {method} not recognized!")


# ========================
# ==== Console Output ====
# ========================


def _report(
    logger: logging.Logger,
    method: str,
    label: str,
    solution: Any,
    exit_status: Dict[str, Any],
):
    logger.debug(f"{method} exit status: {exit_status}")
    if not exit_status["success"]:
        logger.warning(
            f"{method} did not converge within {exit_status['n_iters']} iterations."
        )

    print(label)
    if method in [NEWTON_SYSTEM, SIMPLE_ITERATIONS_SYSTEM]:
        print(f"Root(1): {solution[0]}")
        print(f"Root(2): {solution[1]}")
    else:
        print(f"Root: {solution}")
    print(f"Iterations: {exit_status['n_iters']}")


# ===============
# ==== Tasks ====
# ===============


def task_1(
    logger: logging.Logger, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Tuple[Any, Dict[str, Any]]]:
    print("Task 1.")
    left, right = problems.TASK_1_BRACKET
    logger.info(f"Running bisection on [{left}, {right}].")
    root, exit_status = bisection(
        problems.task_1_obj, left, right, **_solver_options(config, BISECTION)
    )
    _report(logger, BISECTION, "Bisection method:", root, exit_status)

    return {BISECTION: (root, exit_status)}


def task_2(
    logger: logging.Logger, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Tuple[Any, Dict[str, Any]]]:
    print("Task 2.")
    logger.info(f"Running simple iterations from x_0 = {problems.TASK_2_X_0}.")
    x_si, si_status = simple_iterations(
        problems.task_2_phi,
        problems.TASK_2_X_0,
        **_solver_options(config, SIMPLE_ITERATIONS),
    )
    _report(logger, SIMPLE_ITERATIONS, "Simple iteration method:", x_si, si_status)

    logger.info(f"Running Newton's method from x_0 = {problems.TASK_2_X_0}.")
    x_newton, newton_status = newton(
        problems.task_2_obj,
        problems.task_2_grad,
        problems.TASK_2_X_0,
        **_solver_options(config, NEWTON),
    )
    _report(logger, NEWTON, "Newton's method:", x_newton, newton_status)

    return {
        SIMPLE_ITERATIONS: (x_si, si_status),
        NEWTON: (x_newton, newton_status),
    }


def task_4(
    logger: logging.Logger, config: Optional[Dict[str, Any]] = None
) -> Dict[str, Tuple[Any, Dict[str, Any]]]:
    print("Task 4.")
    logger.info(f"Running Newton's method for the system from {problems.TASK_4_W_0}.")
    w_newton, newton_status = newton_system(
        problems.TASK_4_SYSTEM,
        problems.TASK_4_W_0,
        **_solver_options(config, NEWTON_SYSTEM),
    )
    _report(
        logger,
        NEWTON_SYSTEM,
        "Newton's method for the system:",
        w_newton,
        newton_status,
    )

    logger.info(f"Running simple iterations for the system from {problems.TASK_4_W_0}.")
    w_si, si_status = simple_iterations_system(
        problems.TASK_4_FIXED_POINT_SYSTEM,
        problems.TASK_4_W_0,
        **_solver_options(config, SIMPLE_ITERATIONS_SYSTEM),
    )
    _report(
        logger,
        SIMPLE_ITERATIONS_SYSTEM,
        "Simple iteration method for the system:",
        w_si,
        si_status,
    )

    return {
        NEWTON_SYSTEM: (w_newton, newton_status),
        SIMPLE_ITERATIONS_SYSTEM: (w_si, si_status),
    }


def run_demo(
    config: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
    verbose: bool = False,
    debug: bool = False,
    log_file: Optional[str] = None,
) -> Dict[str, Tuple[Any, Dict[str, Any]]]:
    """Run the worked exercises (tasks 1, 2 and 4) and print their results.
    :param config: (optional) mapping from method names to {"tol": ..., "max_iters": ...} overrides.
        The defaults reproduce the reference results.
    :param logger: (optional) a logging instance to use.
    :param verbose: (optional) log progress at the INFO level.
    :param debug: (optional) log solver exit statuses at the DEBUG level.
    :param log_file: (optional) path to a file where the log should be stored.
    :returns: dictionary mapping method names to (solution, exit_status) pairs.
    """
    _check_config(config)

    if logger is None:
        logger = _get_logger("root_methods", verbose, debug, log_file)

    results = {}
    for task in [task_1, task_2, task_4]:
        results.update(task(logger, config))

    return results
