"""
Sektor - ciągły łuk jednego pierścienia o wspólnej nieprzezroczystości.
"""

from __future__ import annotations
from dataclasses import dataclass, replace

from .polar_point import PolarPoint


@dataclass(frozen=True)
class Sector:
    """
    Fragment pierścienia skanowany od `current` do `end`.

    Attributes:
        begin (PolarPoint): Początek sektora, używany przy rozszerzaniu
            na kolejny pierścień
        current (PolarPoint): Aktualnie przetwarzany punkt
        end (PolarPoint): Koniec sektora (włącznie z polem końca)
        opaque (bool): Czy sektor składa się z pól blokujących widok
    """
    begin: PolarPoint
    current: PolarPoint
    end: PolarPoint
    opaque: bool

    @classmethod
    def starting_at(cls, begin: PolarPoint, end: PolarPoint, opaque: bool) -> Sector:
        """Nowy sektor ze skanowaniem od początku."""
        return cls(begin=begin, current=begin, end=end, opaque=opaque)

    @property
    def radius(self) -> int:
        return self.begin.radius

    def in_progress(self) -> bool:
        """Czy bieżący punkt leży jeszcze w sektorze."""
        return self.current.is_below(self.end)

    def advanced(self) -> Sector:
        """Kopia sektora przesunięta o jedno pole dalej."""
        return replace(self, current=self.current.next())
