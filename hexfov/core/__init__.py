"""
Core module - podstawowe komponenty.

Zawiera:
- Coordinate: Współrzędne siatki hexagonalnej i metryka hex_dist
- HexDirection: Sześć kierunków z arytmetyką modulo 6
- GameRNG: Deterministyczny generator losowości
- ConfigLoader: Wczytywanie konfiguracji z defaults
- Scenario: Mapa ścian dla pola widzenia
"""

from .hex_coord import Coordinate, ORIGIN, hex_dist, coordinate_from_pair
from .direction import HexDirection
from .rng import GameRNG
from .scenario import Scenario
from .config_loader import ConfigLoader

__all__ = [
    "Coordinate", "ORIGIN", "hex_dist", "coordinate_from_pair",
    "HexDirection", "GameRNG", "Scenario", "ConfigLoader",
]
