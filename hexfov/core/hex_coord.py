"""
System współrzędnych siatki hexagonalnej (Offset-style Coordinates).

Używamy par całkowitych (x, y), gdzie oś x biegnie w prawo-w dół,
a oś y w lewo-w dół. Sześciu sąsiadów pola (0, 0):

    Kierunek   (dx, dy)
    ─────────────────────
    N          (-1, -1)
    NE         ( 0, -1)
    SE         (+1,  0)
    S          (+1, +1)
    SW         ( 0, +1)
    NW         (-1,  0)

Odległość hexagonalna wektora (x, y):
    - jeśli x i y mają ten sam znak (lub któryś jest zerem):
          distance = max(|x|, |y|)
    - w przeciwnym wypadku:
          distance = |x| + |y|

    Odległość jest równa promieniowi pierścienia, na którym leży pole.

Przykład użycia:
    >>> Coordinate(2, 1).hex_dist()
    2
    >>> Coordinate(1, -1).hex_dist()
    2
    >>> Coordinate(1, 0) + Coordinate(0, 1)
    Coordinate(x=1, y=1)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


def _sign(value: int) -> int:
    """Znak liczby: -1, 0 lub 1."""
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Coordinate:
    """
    Współrzędna pola siatki hexagonalnej.

    Klasa jest niemutowalna (frozen=True), może być kluczem
    w słowniku lub elementem zbioru.

    Attributes:
        x (int): Współrzędna na osi x
        y (int): Współrzędna na osi y
    """
    x: int
    y: int

    # ─────────────────────────────────────────────────────────────────────────
    # WŁAŚCIWOŚCI
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def pair(self) -> Tuple[int, int]:
        """
        Współrzędne jako krotka.

        Returns:
            Tuple[int, int]: Krotka (x, y)
        """
        return (self.x, self.y)

    # ─────────────────────────────────────────────────────────────────────────
    # ODLEGŁOŚĆ
    # ─────────────────────────────────────────────────────────────────────────

    def hex_dist(self) -> int:
        """
        Odległość hexagonalna reprezentowana przez ten wektor.

        Returns:
            int: Liczba kroków od origin, czyli promień pierścienia

        Example:
            >>> Coordinate(-3, -1).hex_dist()
            3
            >>> Coordinate(-3, 1).hex_dist()
            4
        """
        if _sign(self.x) == _sign(self.y):
            return max(abs(self.x), abs(self.y))
        return abs(self.x) + abs(self.y)

    def distance(self, other: Coordinate) -> int:
        """
        Odległość hexagonalna między dwoma polami.

        Args:
            other: Druga współrzędna

        Returns:
            int: Odległość w liczbie kroków
        """
        return (other - self).hex_dist()

    # ─────────────────────────────────────────────────────────────────────────
    # OPERATORY ARYTMETYCZNE
    # ─────────────────────────────────────────────────────────────────────────

    def __add__(self, other: Coordinate) -> Coordinate:
        """Dodawanie współrzędnych."""
        return Coordinate(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coordinate) -> Coordinate:
        """Odejmowanie współrzędnych."""
        return Coordinate(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: int) -> Coordinate:
        """Mnożenie przez skalar."""
        return Coordinate(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Coordinate:
        """Negacja (punkt przeciwny względem origin)."""
        return Coordinate(-self.x, -self.y)

    # ─────────────────────────────────────────────────────────────────────────
    # REPREZENTACJA
    # ─────────────────────────────────────────────────────────────────────────

    def __repr__(self) -> str:
        return f"Coordinate(x={self.x}, y={self.y})"

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


ORIGIN = Coordinate(0, 0)


def hex_dist(v: Coordinate) -> int:
    """Odległość hexagonalna wektora (skrót dla Coordinate.hex_dist)."""
    return v.hex_dist()


def coordinate_from_pair(pair) -> Coordinate:
    """
    Tworzy Coordinate z pary [x, y] (np. z YAML lub JSON).

    Args:
        pair: Sekwencja dwóch liczb całkowitych

    Returns:
        Coordinate: Nowa współrzędna

    Raises:
        ValueError: Jeśli pair nie jest parą liczb całkowitych
    """
    if isinstance(pair, Coordinate):
        return pair
    try:
        x, y = pair
    except (TypeError, ValueError):
        raise ValueError(f"Invalid coordinate pair: {pair!r}")
    if isinstance(x, bool) or isinstance(y, bool) or not isinstance(x, int) or not isinstance(y, int):
        raise ValueError(f"Invalid coordinate pair: {pair!r}")
    return Coordinate(x, y)
