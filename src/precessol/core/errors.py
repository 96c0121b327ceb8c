from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import SeasonEvent


class PrecessolError(Exception):
    """Base error."""

class DomainError(PrecessolError, ValueError):
    """Raised when an input lies outside an algorithm's numeric domain."""

class ConvergenceError(PrecessolError):
    """
    Raised when an iterative refinement exhausts its iteration cap.

    The best available estimate is kept on ``event`` (with ``converged=False``).
    """

    def __init__(self, message: str, event: "SeasonEvent"):
        super().__init__(message)
        self.event = event

class DependencyError(PrecessolError):
    """Raised when an optional dependency or injected collaborator is unusable."""

class EphemerisUnavailableError(DependencyError):
    """Raised when an ephemeris cannot answer for the requested instant."""
