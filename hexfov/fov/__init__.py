"""
FOV module - algorytm pola widzenia.

Zawiera:
- PolarPoint: Pozycja na pierścieniu hexagonalnym
- Sector: Łuk pierścienia o wspólnej nieprzezroczystości
- HexFov: Leniwy iterator widocznych pól
"""

from .polar_point import PolarPoint
from .sector import Sector
from .hex_fov import HexFov, OpacityPredicate, visible_set

__all__ = ["PolarPoint", "Sector", "HexFov", "OpacityPredicate", "visible_set"]
