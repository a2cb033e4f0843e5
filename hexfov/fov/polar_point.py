"""
Punkty na pierścieniach siatki hexagonalnej we współrzędnych biegunowych.

PolarPoint(pos, radius) opisuje ciągłą pozycję kątową na pierścieniu
o danym promieniu. Pierścień o promieniu r ma 6r pól, a pole o indeksie
k zajmuje przedział pos ∈ [k - 0.5, k + 0.5).

    Pierścień r=1 (indeksy pól):

            0   1
          5   O   2
            4   3

    pos = 0.0  -> środek pola 0
    pos = 0.5  -> lewa krawędź pola 1 (reprezentant pola 1)
    pos = 6.0  -> środek pola 6 ≡ pole 0

Promień 0 oznacza origin, niezależnie od pos.

Pozycja jest liczbą pojedynczej precyzji (numpy.float32), a każdy wynik
further/next jest do niej zaokrąglany. Rozstrzygnięcia na granicach .5
zależą od tego zaokrąglenia:

    >>> p = PolarPoint(0.5, 3)
    >>> for _ in range(6):
    ...     p = p.further()
    >>> p.winding_index()   # 1.4999999, w double byłoby 1.5000000000000002
    1

Przejście na następny pierścień (further) zachowuje ułamkową pozycję
kątową, dzięki czemu promienie widzenia pozostają wyrównane między
pierścieniami:

    >>> PolarPoint(1.5, 1).further()
    PolarPoint(pos=3.0, radius=2)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..core.hex_coord import Coordinate, ORIGIN
from ..core.direction import HexDirection


_DIAGONAL = Coordinate(1, 1)
_SIDE = Coordinate(1, 0)
_HALF = np.float32(0.5)


@dataclass(frozen=True)
class PolarPoint:
    """
    Punkt na pierścieniu hexagonalnym.

    Attributes:
        pos (np.float32): Pozycja kątowa mierzona w polach pierścienia
        radius (int): Promień pierścienia (>= 0)
    """
    pos: np.float32
    radius: int

    def __post_init__(self):
        object.__setattr__(self, "pos", np.float32(self.pos))

    # ─────────────────────────────────────────────────────────────────────────
    # INDEKSY
    # ─────────────────────────────────────────────────────────────────────────

    def winding_index(self) -> int:
        """Indeks dyskretnego pola pierścienia odpowiadającego punktowi."""
        return int(np.floor(self.pos + _HALF))

    def end_index(self) -> int:
        """Wyłączna granica indeksów, gdy punkt jest końcem sektora."""
        return int(np.ceil(self.pos + _HALF))

    def is_below(self, other: PolarPoint) -> bool:
        """
        Czy punkt leży jeszcze przed końcem sektora `other`.

        Args:
            other: Koniec sektora

        Returns:
            bool: True jeśli winding_index < other.end_index
        """
        return self.winding_index() < other.end_index()

    # ─────────────────────────────────────────────────────────────────────────
    # KONWERSJA
    # ─────────────────────────────────────────────────────────────────────────

    def to_coordinate(self) -> Coordinate:
        """
        Konwertuje punkt na współrzędną siatki.

        Pierścień dzieli się na 6 boków po `radius` pól. Bok `sector`
        zaczyna się w wierzchołku HexDirection(sector) * radius
        i biegnie w kierunku HexDirection(sector + 2).

        Returns:
            Coordinate: Pole siatki (origin dla radius == 0)
        """
        if self.radius == 0:
            return ORIGIN
        index = self.winding_index() % (self.radius * 6)
        sector = index // self.radius
        offset = index % self.radius
        rod = HexDirection.from_int(sector).to_vector() * self.radius
        tangent = HexDirection.from_int((sector + 2) % 6).to_vector() * offset
        return rod + tangent

    # ─────────────────────────────────────────────────────────────────────────
    # RUCH PO PIERŚCIENIACH
    # ─────────────────────────────────────────────────────────────────────────

    def further(self) -> PolarPoint:
        """
        Odpowiadający punkt na pierścieniu o promieniu o 1 większym.

        Raises:
            ValueError: Dla radius == 0 (origin nie ma kierunku)
        """
        if self.radius == 0:
            raise ValueError("Cannot project the origin to the next ring")
        return PolarPoint(
            self.pos * np.float32(self.radius + 1) / np.float32(self.radius),
            self.radius + 1,
        )

    def next(self) -> PolarPoint:
        """Reprezentant następnego pola na tym samym pierścieniu."""
        return PolarPoint(np.floor(self.pos + _HALF) + _HALF, self.radius)

    def side_point(self) -> Optional[Coordinate]:
        """
        Pole na zewnątrz pierścienia we wklęsłym narożniku między
        tym punktem a następnym.

        Jeśli bieżące i następne pole sąsiadują po przekątnej (oś xy),
        zwraca pole leżące między nimi po zewnętrznej stronie:

            - w dół prawej krawędzi (+1, +1): pole (x + 1, y)
            - w górę lewej krawędzi (-1, -1): pole (x - 1, y)

        Returns:
            Optional[Coordinate]: Pole narożnika albo None
        """
        current = self.to_coordinate()
        following = self.next().to_coordinate()

        if following == current + _DIAGONAL:
            return current + _SIDE
        if following == current - _DIAGONAL:
            return current - _SIDE
        return None

    def __repr__(self) -> str:
        return f"PolarPoint(pos={self.pos}, radius={self.radius})"
