"""
`root_methods`: classical root-finding methods for scalar equations and 2x2 nonlinear systems.
"""

from root_methods.root_finding import bisection, simple_iterations, newton
from root_methods.systems import (
    EquationSystem,
    FixedPointSystem,
    newton_system,
    simple_iterations_system,
)
from root_methods.wrappers import run_demo

__all__ = [
    "bisection",
    "simple_iterations",
    "newton",
    "EquationSystem",
    "FixedPointSystem",
    "newton_system",
    "simple_iterations_system",
    "run_demo",
]
