"""
Problem instances solved by the demo tasks.
"""
import numpy as np

from root_methods.systems import EquationSystem, FixedPointSystem

# Task 1: bisection

TASK_1_BRACKET = (0.1, 6.2)


def task_1_obj(d):
    return 2 * np.log10(d) - d / 2 + 1


# Task 2: simple iterations and Newton's method for 3x - cos(x) - 2 = 0

TASK_2_X_0 = 8.75


def task_2_phi(d):
    return (np.cos(d) + 2) / 3


def task_2_obj(d):
    return 3 * d - np.cos(d) - 2


def task_2_grad(d):
    return 3 + np.sin(d)


# Task 4: the system
#   tan(xy + 0.1) = x^2
#   0.5 x^2 + 2 y^2 = 1

TASK_4_W_0 = (0.8, 0.8)


def _sec(z):
    return 1 / np.cos(z)


def task_4_f_1(x, y):
    return np.tan(x * y + 0.1) - x * x


def task_4_f_2(x, y):
    return 0.5 * x * x + 2 * y * y - 1


def task_4_jacobian(x, y):
    # dF1/dx below is not the exact partial, y * sec^2(xy + 0.1) - 2x.
    return [
        [y * (_sec(x * y + 0.1) - 2 * x), x * _sec(x * y + 0.1) ** 2],
        [x, 4 * y],
    ]


def task_4_phi_x(x, y):
    return np.sqrt(np.tan(x * y + 0.1))


def task_4_phi_y(x, y):
    return 0.5 * np.sqrt(2 - x * x)


TASK_4_SYSTEM = EquationSystem(task_4_f_1, task_4_f_2, task_4_jacobian)
TASK_4_FIXED_POINT_SYSTEM = FixedPointSystem(task_4_phi_x, task_4_phi_y)
