"""
HexFov - pole widzenia na siatce hexagonalnej.

Zawiera:
- core: współrzędne, kierunki, RNG, konfiguracja YAML, scenariusze
- fov: algorytm HexFov (pierścienie, sektory, narożniki)
- memory: pamięć pól widzianych / zapamiętanych
"""

from .core import Coordinate, HexDirection, hex_dist
from .fov import HexFov, visible_set
from .memory import FovMemory, FovStatus

__all__ = [
    "Coordinate", "HexDirection", "hex_dist",
    "HexFov", "visible_set",
    "FovMemory", "FovStatus",
]
