"""
Kierunki siatki hexagonalnej (HexDirection).

Sześć kierunków w stałej kolejności, zgodnie z zegarem od N:

    Kierunek     wartość   wektor
    ───────────────────────────────
    NORTH          0       (-1, -1)
    NORTH_EAST     1       ( 0, -1)
    SOUTH_EAST     2       (+1,  0)
    SOUTH          3       (+1, +1)
    SOUTH_WEST     4       ( 0, +1)
    NORTH_WEST     5       (-1,  0)

Arytmetyka kierunków jest zawsze modulo 6 (floor-modulo, nigdy
wartość ujemna):

    >>> HexDirection.NORTH - 1
    <HexDirection.NORTH_WEST: 5>
    >>> HexDirection.SOUTH + 3
    <HexDirection.NORTH: 0>

Mapowanie dowolnego wektora na kierunek (from_vector):

           *0*       *1*
              \\ 14 15 | 00 01
              13\\     |      02
                  \\   |
            12      \\ |        03
        *5* ----------O-X------- *2*
            11        Y \\      04
                      |   \\
              10      |     \\05
                09 08 | 07 06 \\
                     *4*       *3*

    Kąt wektora jest zaokrąglany do jednego z 16 hexadecantów (00-15),
    a hexadecant przypisywany jest kierunkowi, którego wektor leży
    najbliżej.
"""

from __future__ import annotations
from enum import Enum
from typing import Dict, List

import numpy as np

from .hex_coord import Coordinate


class HexDirection(Enum):
    """Jeden z sześciu kierunków siatki hexagonalnej."""

    NORTH = 0
    NORTH_EAST = 1
    SOUTH_EAST = 2
    SOUTH = 3
    SOUTH_WEST = 4
    NORTH_WEST = 5

    # ─────────────────────────────────────────────────────────────────────────
    # KONWERSJE
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_int(cls, i: int) -> HexDirection:
        """
        Konwertuje liczbę całkowitą na kierunek (modulo 6).

        Args:
            i: Dowolna liczba całkowita, także ujemna

        Returns:
            HexDirection: Kierunek o indeksie i mod 6
        """
        return _DIRS[i % 6]

    @classmethod
    def from_vector(cls, v: Coordinate) -> HexDirection:
        """
        Zwraca kierunek najbliższy podanemu wektorowi.

        Algorytm:
        1. Kąt = atan2(x, -y), znormalizowany do [0, 2π)
           (pojedyncza precyzja, jak pozycje w PolarPoint)
        2. Hexadecant = floor(kąt / (π/8)), wartość 0-15
        3. Hexadecant -> kierunek według stałej tabeli

        Args:
            v: Wektor (nie musi być jednostkowy)

        Returns:
            HexDirection: Najbliższy kierunek

        Example:
            >>> HexDirection.from_vector(Coordinate(20, -21))
            <HexDirection.NORTH_EAST: 1>
        """
        pi = np.float32(np.pi)
        width = pi / np.float32(8.0)
        radian = np.arctan2(np.float32(v.x), np.float32(-v.y))
        if radian < 0.0:
            radian += np.float32(2.0) * pi
        hexadecant = int(np.floor(radian / width))

        assert hexadecant in _HEXADECANT_TO_DIR, f"Bad hexadecant {hexadecant}"
        return cls.from_int(_HEXADECANT_TO_DIR[hexadecant])

    def to_vector(self) -> Coordinate:
        """
        Wektor jednostkowy kierunku.

        Returns:
            Coordinate: Przesunięcie do sąsiada w tym kierunku
        """
        return _VECTORS[self.value]

    # ─────────────────────────────────────────────────────────────────────────
    # ARYTMETYKA
    # ─────────────────────────────────────────────────────────────────────────

    def __add__(self, other: int) -> HexDirection:
        return HexDirection.from_int(self.value + other)

    def __sub__(self, other: int) -> HexDirection:
        return HexDirection.from_int(self.value - other)

    def __neg__(self) -> HexDirection:
        """Kierunek przeciwny."""
        return self + 3


_DIRS: List[HexDirection] = list(HexDirection)

_VECTORS: List[Coordinate] = [
    Coordinate(-1, -1),  # N
    Coordinate(0, -1),   # NE
    Coordinate(1, 0),    # SE
    Coordinate(1, 1),    # S
    Coordinate(0, 1),    # SW
    Coordinate(-1, 0),   # NW
]

# Hexadecant (0-15) -> indeks kierunku
_HEXADECANT_TO_DIR: Dict[int, int] = {
    13: 0, 14: 0,
    15: 1, 0: 1, 1: 1,
    2: 2, 3: 2, 4: 2,
    5: 3, 6: 3,
    7: 4, 8: 4, 9: 4,
    10: 5, 11: 5, 12: 5,
}
