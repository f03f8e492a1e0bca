"""
Solvers for systems of two nonlinear equations.
"""

from .equations import EquationSystem, FixedPointSystem
from .newton_system import newton_system
from .simple_iterations_system import simple_iterations_system

__all__ = [
    "EquationSystem",
    "FixedPointSystem",
    "newton_system",
    "simple_iterations_system",
]
