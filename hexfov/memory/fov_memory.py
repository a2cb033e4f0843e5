"""
Pamięć pola widzenia (FovMemory).

Zapamiętuje, które pola są aktualnie widoczne (SEEN) oraz które były
kiedykolwiek widziane (REMEMBERED). Typowe użycie w pętli gry:

    1. Po ruchu obserwatora wywołaj look() (albo update() z wynikiem
       HexFov)
    2. Renderer rysuje pola SEEN normalnie, a REMEMBERED przygaszone
    3. Pola bez statusu (None) są nieznane

Przykład użycia:
    >>> memory = FovMemory()
    >>> memory.look(lambda c: False, origin=Coordinate(5, 5), range=1)
    >>> memory.status(Coordinate(5, 5))
    <FovStatus.SEEN: 1>
    >>> memory.look(lambda c: False, origin=Coordinate(9, 9), range=1)
    >>> memory.status(Coordinate(5, 5))
    <FovStatus.REMEMBERED: 2>
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, FrozenSet, Iterable, Optional, Set

from ..core.hex_coord import Coordinate
from ..fov.hex_fov import HexFov, OpacityPredicate

logger = logging.getLogger(__name__)


class FovStatus(Enum):
    """Status pola w pamięci widoku."""
    SEEN = auto()
    REMEMBERED = auto()


DEFAULT_GLYPHS: Dict[str, str] = {
    "seen": ".",
    "remembered": ",",
    "unknown": " ",
    "wall": "#",
    "origin": "@",
}


@dataclass
class FovMemory:
    """
    Zbiór pól widocznych teraz i widzianych kiedykolwiek.

    Attributes:
        _seen (Set[Coordinate]): Pola widoczne po ostatniej aktualizacji
        _remembered (Set[Coordinate]): Wszystkie pola kiedykolwiek widziane
    """
    _seen: Set[Coordinate] = field(default_factory=set, repr=False)
    _remembered: Set[Coordinate] = field(default_factory=set, repr=False)

    # ─────────────────────────────────────────────────────────────────────────
    # AKTUALIZACJA
    # ─────────────────────────────────────────────────────────────────────────

    def update(self, visible: Iterable[Coordinate]) -> None:
        """
        Zastępuje zbiór widocznych pól nowym widokiem.

        Pola z poprzedniego widoku pozostają zapamiętane.

        Args:
            visible: Pola widoczne teraz (np. iterator HexFov)
        """
        self._seen = set(visible)
        self._remembered |= self._seen
        logger.debug(
            "FOV memory updated: %d seen, %d remembered",
            len(self._seen), len(self._remembered),
        )

    def look(
        self,
        is_opaque: OpacityPredicate,
        origin: Coordinate,
        range: int,
        corner_extension: bool = False,
    ) -> None:
        """
        Uruchamia HexFov z punktu `origin` i aktualizuje pamięć.

        Predykat dostaje współrzędne bezwzględne - przesunięcie względem
        origin jest obsługiwane tutaj.

        Args:
            is_opaque: Predykat nieprzezroczystości (współrzędne mapy)
            origin: Pozycja obserwatora
            range: Promień widzenia
            corner_extension: Czy włączyć regułę narożników
        """
        fov = HexFov(lambda offset: is_opaque(origin + offset), range)
        if corner_extension:
            fov = fov.with_corner_extension()
        self.update(origin + offset for offset in fov)

    def forget(self) -> None:
        """Czyści całą pamięć."""
        self._seen.clear()
        self._remembered.clear()

    # ─────────────────────────────────────────────────────────────────────────
    # ZAPYTANIA
    # ─────────────────────────────────────────────────────────────────────────

    def status(self, pos: Coordinate) -> Optional[FovStatus]:
        """
        Status pola.

        Returns:
            Optional[FovStatus]: SEEN, REMEMBERED albo None (nieznane)
        """
        if pos in self._seen:
            return FovStatus.SEEN
        if pos in self._remembered:
            return FovStatus.REMEMBERED
        return None

    def is_seen(self, pos: Coordinate) -> bool:
        return pos in self._seen

    def is_remembered(self, pos: Coordinate) -> bool:
        return pos in self._remembered

    @property
    def seen(self) -> FrozenSet[Coordinate]:
        return frozenset(self._seen)

    @property
    def remembered(self) -> FrozenSet[Coordinate]:
        return frozenset(self._remembered)

    # ─────────────────────────────────────────────────────────────────────────
    # DEBUG / WIZUALIZACJA
    # ─────────────────────────────────────────────────────────────────────────

    def render(
        self,
        width: int,
        height: int,
        walls: Iterable[Coordinate] = (),
        origin: Optional[Coordinate] = None,
        glyphs: Optional[Dict[str, str]] = None,
    ) -> str:
        """
        Zwraca tekstową mapę pamięci do debugowania.

        Wiersze są przesunięte o pół pola, tak jak w widoku
        izometrycznym: pole (x, y) trafia do wiersza x + y, a sąsiedzi
        SE/SW leżą pół pola w prawo/lewo niżej.

        Legenda (domyślna):
            @ = obserwator
            # = ściana (widoczna lub zapamiętana)
            . = pole widoczne
            , = pole zapamiętane
              = pole nieznane

        Args:
            width, height: Rozmiar mapy (x w [0, width), y w [0, height))
            walls: Pola ścian
            origin: Pozycja obserwatora
            glyphs: Nadpisania znaków legendy

        Returns:
            str: Tekstowa wizualizacja
        """
        legend = dict(DEFAULT_GLYPHS)
        if glyphs:
            legend.update(glyphs)
        wall_set = set(walls)

        lines = []
        for row in range(width + height - 1):
            cells = []
            for x in range(width):
                y = row - x
                if not 0 <= y < height:
                    continue
                cells.append((x - y, self._glyph(Coordinate(x, y), wall_set, origin, legend)))
            if not cells:
                continue
            # Kolumna ekranowa: x - y, przesunięta do nieujemnych
            line = [" "] * (width + height)
            for column, glyph in cells:
                line[column + height - 1] = glyph
            lines.append("".join(line).rstrip())
        return "\n".join(lines)

    def _glyph(
        self,
        pos: Coordinate,
        walls: Set[Coordinate],
        origin: Optional[Coordinate],
        legend: Dict[str, str],
    ) -> str:
        if origin is not None and pos == origin:
            return legend["origin"]
        status = self.status(pos)
        if status is None:
            return legend["unknown"]
        if pos in walls:
            return legend["wall"]
        if status is FovStatus.SEEN:
            return legend["seen"]
        return legend["remembered"]
