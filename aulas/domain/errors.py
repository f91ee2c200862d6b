"""
Domain errors shared by every course component.

The library has a single failure category: an argument outside the
documented domain of the function it was passed to.
"""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised at function entry when a precondition is violated."""
