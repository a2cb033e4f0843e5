"""
Scenariusz - prostokątna mapa ścian z pozycją obserwatora.

Scenariusze są wczytywane z data/scenarios.yaml przez ConfigLoader
albo generowane losowo przez GameRNG.scatter. Dostarczają predykat
nieprzezroczystości dla HexFov / FovMemory.

Format definicji (po merge z fov_defaults):

    corridor:
        width: 10
        height: 6
        range: 6              # opcjonalne, domyślnie z defaults
        corner_extension: true
        rows:                 # '#' = ściana, '@' = obserwator
            - "##########"
            - "#@.......#"
            - "##########"

    albo zamiast rows:
        origin: [1, 1]
        walls: [[0, 0], [1, 0]]
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Optional

from .hex_coord import Coordinate, coordinate_from_pair


WALL_CHAR = "#"
ORIGIN_CHAR = "@"


@dataclass(frozen=True)
class Scenario:
    """
    Mapa testowa dla pola widzenia.

    Attributes:
        id (str): Identyfikator scenariusza
        width (int): Szerokość mapy (x w [0, width))
        height (int): Wysokość mapy (y w [0, height))
        origin (Coordinate): Pozycja obserwatora
        range (int): Promień widzenia
        corner_extension (bool): Czy włączyć regułę narożników
        walls (FrozenSet[Coordinate]): Pola ścian

    Note:
        Pola poza mapą są traktowane jak ściany.
    """
    id: str
    width: int
    height: int
    origin: Coordinate
    range: int
    corner_extension: bool
    walls: FrozenSet[Coordinate]

    def in_bounds(self, pos: Coordinate) -> bool:
        """Czy pole leży w granicach mapy."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_opaque(self, pos: Coordinate) -> bool:
        """Predykat nieprzezroczystości we współrzędnych mapy."""
        return pos in self.walls or not self.in_bounds(pos)

    # ─────────────────────────────────────────────────────────────────────────
    # TWORZENIE Z KONFIGURACJI
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_config(cls, data: Dict[str, Any]) -> Scenario:
        """
        Tworzy scenariusz ze słownika (wynik ConfigLoader.load_scenario).

        Args:
            data: Definicja scenariusza z uzupełnionymi defaults

        Returns:
            Scenario: Nowy scenariusz

        Raises:
            ValueError: Jeśli definicja jest niepoprawna
        """
        scenario_id = str(data.get("id", "scenario"))
        fov_range = int(data.get("range", 0))
        if fov_range < 0:
            raise ValueError(f"Scenario '{scenario_id}': range must be non-negative")

        origin: Optional[Coordinate] = None
        if "rows" in data:
            width, height, walls, origin = _parse_rows(scenario_id, data["rows"])
        else:
            if "width" not in data or "height" not in data:
                raise ValueError(f"Scenario '{scenario_id}': width and height are required without rows")
            width = int(data["width"])
            height = int(data["height"])
            walls = frozenset(coordinate_from_pair(p) for p in data.get("walls", []))

        if "origin" in data:
            origin = coordinate_from_pair(data["origin"])
        if origin is None:
            origin = Coordinate(width // 2, height // 2)

        if width <= 0 or height <= 0:
            raise ValueError(f"Scenario '{scenario_id}': size must be positive")

        return cls(
            id=scenario_id,
            width=width,
            height=height,
            origin=origin,
            range=fov_range,
            corner_extension=bool(data.get("corner_extension", False)),
            walls=walls,
        )


def _parse_rows(scenario_id: str, rows: List[str]):
    """
    Parsuje mapę zapisaną wierszami tekstu.

    Wiersz to współrzędna y, znak w wierszu to współrzędna x.

    Raises:
        ValueError: Jeśli wiersze nie są listą napisów równej długości
    """
    if not isinstance(rows, list) or not rows or not all(isinstance(r, str) for r in rows):
        raise ValueError(f"Scenario '{scenario_id}': rows must be a list of strings")
    width = len(rows[0])
    if any(len(r) != width for r in rows):
        raise ValueError(f"Scenario '{scenario_id}': rows must have equal length")

    walls = set()
    origin = None
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            if char == WALL_CHAR:
                walls.add(Coordinate(x, y))
            elif char == ORIGIN_CHAR:
                origin = Coordinate(x, y)
    return width, len(rows), frozenset(walls), origin
