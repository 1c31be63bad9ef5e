"""
Remote API clients.
"""

from .matches import MatchesClient

__all__ = ["MatchesClient"]
