"""
CLI module for the operator e2e test utilities.

Provides the ``e2e-testutils`` console script entry point.
"""

from .commands import main

__all__ = ["main"]
