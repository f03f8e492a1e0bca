"""
Tests for solving 2x2 nonlinear systems by fixed-point iteration.
"""

import unittest

import numpy as np
from parameterized import parameterized_class  # type: ignore

from root_methods import problems
from root_methods.systems import FixedPointSystem
from root_methods.systems.newton_system import newton_system
from root_methods.systems.simple_iterations_system import (
    simple_iterations_system,
    TOL,
)


@parameterized_class(
    [{"tol": TOL, "residual_bound": 1e-4}, {"tol": 1e-8, "residual_bound": 1e-7}]
)
class TestSimpleIterationsSystem(unittest.TestCase):
    """Test fixed-point iteration for systems of two equations."""

    tol: float
    residual_bound: float

    def test_linear_system(self):
        """Test the contractive linear maps x = y / 2, y = x / 2 + 1."""

        system = FixedPointSystem(lambda x, y: 0.5 * y, lambda x, y: 0.5 * x + 1)
        w, exit_status = simple_iterations_system(system, (0.0, 0.0), tol=self.tol)

        self.assertTrue(exit_status["success"], "Fixed-point solver reported failure!")
        self.assertTrue(np.allclose(w, [2.0 / 3.0, 4.0 / 3.0], atol=self.tol))

    def test_task_4(self):
        """Test the worked system."""

        w, exit_status = simple_iterations_system(
            problems.TASK_4_FIXED_POINT_SYSTEM, tol=self.tol
        )

        self.assertTrue(exit_status["success"], "Fixed-point solver reported failure!")
        self.assertTrue(
            np.max(np.abs(problems.TASK_4_SYSTEM(*w))) < self.residual_bound,
            "Fixed-point solution does not satisfy the equations.",
        )

        w_newton, _ = newton_system(problems.TASK_4_SYSTEM, tol=self.tol)
        self.assertTrue(
            np.allclose(w, w_newton, atol=1e-2),
            "Fixed-point and Newton solutions disagree.",
        )

    def test_tight_termination(self):
        """Test that one fewer sweep does not satisfy the stopping rule."""

        _, exit_status = simple_iterations_system(
            problems.TASK_4_FIXED_POINT_SYSTEM, tol=self.tol
        )
        n_iters = exit_status["n_iters"]

        _, exit_status = simple_iterations_system(
            problems.TASK_4_FIXED_POINT_SYSTEM, tol=self.tol, max_iters=n_iters - 1
        )
        self.assertFalse(exit_status["success"])


class TestSimpleIterationsSystemScenarios(unittest.TestCase):
    """Test update ordering, determinism and divergence."""

    def test_sequential_updates(self):
        """Test that the new y is computed from the new x."""

        seen_x = []

        def phi_y(x, y):
            seen_x.append(x)
            return 0.5 * x + 1

        system = FixedPointSystem(lambda x, y: 0.5 * y, phi_y)
        w, exit_status = simple_iterations_system(system, (0.0, 4.0), max_iters=1)

        self.assertEqual(seen_x, [2.0])
        self.assertTrue(np.array_equal(w, [2.0, 2.0]))
        self.assertEqual(exit_status["n_iters"], 1)

    def test_deterministic(self):
        """Test that repeated solves return identical results."""

        w_1, status_1 = simple_iterations_system(problems.TASK_4_FIXED_POINT_SYSTEM)
        w_2, status_2 = simple_iterations_system(problems.TASK_4_FIXED_POINT_SYSTEM)

        self.assertTrue(np.array_equal(w_1, w_2))
        self.assertEqual(status_1, status_2)

    def test_divergent_maps(self):
        """Test that non-contractive maps stop at the iteration cap."""

        system = FixedPointSystem(lambda x, y: 2 * y, lambda x, y: 2 * x + 1)
        w, exit_status = simple_iterations_system(system, (1.0, 1.0), max_iters=20)

        self.assertFalse(exit_status["success"])
        self.assertEqual(exit_status["n_iters"], 20)


if __name__ == "__main__":
    unittest.main()
