from __future__ import annotations
from dataclasses import dataclass

from .errors import DomainError

@dataclass(frozen=True)
class FinderSettings:
    """
    Tuning of the iterative equinox/solstice refinement.

    tolerance        angular convergence threshold (radians); 1e-7 rad is about
                     half a second of time at the Sun's mean rate.
    max_iterations   hard cap on refinement steps.
    days_per_radian  longitude error -> time step factor (Meeus 27.1 uses 58 days).
    strict_range     raise DomainError for years outside -1000..3000 instead of
                     only logging a warning.
    """
    tolerance: float = 1e-7
    max_iterations: int = 6
    days_per_radian: float = 58.0
    strict_range: bool = False

    def __post_init__(self):
        if not self.tolerance > 0:
            raise DomainError("tolerance must be positive")
        if self.max_iterations < 1:
            raise DomainError("max_iterations must be >= 1")
        if not self.days_per_radian > 0:
            raise DomainError("days_per_radian must be positive")

DEFAULT_SETTINGS = FinderSettings()
