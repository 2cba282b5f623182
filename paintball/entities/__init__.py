from .base import Entity
from .unit import BEATS, UNIT_PROFILES, Unit, UnitProfile, beats
from .bunker import Bunker

__all__ = [
    "Entity",
    "Unit",
    "UnitProfile",
    "UNIT_PROFILES",
    "BEATS",
    "beats",
    "Bunker",
]
