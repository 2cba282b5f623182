from .field import Cell, Field, FieldMap
from .team import Team

__all__ = ["Cell", "Field", "FieldMap", "Team"]
