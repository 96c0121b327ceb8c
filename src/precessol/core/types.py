from __future__ import annotations
import math
from dataclasses import dataclass
from enum import Enum
from typing import Literal

@dataclass(frozen=True)
class Equatorial:
    """Right ascension and declination (radians)."""
    ra: float
    dec: float

@dataclass(frozen=True)
class Ecliptic:
    """Ecliptic longitude and latitude (radians)."""
    lon: float
    lat: float

@dataclass(frozen=True)
class Elements:
    """Orientation of an orbit: inclination, argument of perihelion, ascending node (radians)."""
    inc: float
    peri: float
    node: float

@dataclass(frozen=True)
class HeliocentricPosition:
    """Heliocentric ecliptic longitude, latitude (radians) and radius vector (AU)."""
    lon: float
    lat: float
    range: float

class Season(Enum):
    MARCH = 0
    JUNE = 1
    SEPTEMBER = 2
    DECEMBER = 3

    @property
    def target_lon(self) -> float:
        """Apparent solar longitude (radians) reached at the event."""
        return self.value * 0.5 * math.pi

@dataclass(frozen=True)
class SeasonEvent:
    season: Season
    year: int
    jde: float
    converged: bool = True
    iterations: int = 0
    method: Literal["low", "high"] = "low"
