"""
Root-finding methods for scalar equations.
"""

from .bisection import bisection
from .simple_iterations import simple_iterations
from .newton import newton

__all__ = ["bisection", "simple_iterations", "newton"]
