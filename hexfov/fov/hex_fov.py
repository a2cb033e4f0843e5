"""
Pole widzenia (Field of View) na siatce hexagonalnej.

HexFov to leniwy iterator zwracający pola widoczne z origin (0, 0)
do zadanego promienia. Nieprzezroczystość pól określa predykat
przekazany przez wywołującego (True = pole blokuje widok).

ALGORYTM:
═══════════════════════════════════════════════════════════════════

    Pierścienie są skanowane sektorami - ciągłymi łukami pól o tej
    samej nieprzezroczystości. Stos (LIFO) trzyma sektory do
    przetworzenia; na starcie jest na nim cały pierścień r=1.

    Krok iteratora:
    1. Jeśli kanał boczny (side channel) nie jest pusty -> zwróć z niego
       pole (na starcie zawiera origin)
    2. Zdejmij sektor ze stosu:
       a) Pole bieżące ma tę samą nieprzezroczystość co sektor:
          zwróć je i przesuń sektor o jedno pole
       b) Nieprzezroczystość się zmieniła: resztę łuku odłóż jako nowy
          sektor (pole graniczne zostanie przetworzone ponownie), a
          jeśli dotychczasowy łuk był przezroczysty - odłóż jego
          rzut na następny pierścień
       c) Koniec sektora: przezroczysty sektor rzutuj w całości na
          następny pierścień
    3. Kroki (b) i (c) niczego nie zwracają - pętla trwa, dopóki nie
       pojawi się pole lub stos i kanał boczny nie będą puste

    Sektory rzutowane są tylko dopóki begin.radius < range, więc
    iteracja zawsze się kończy.

NAROŻNIKI "FAKE ISOMETRIC":
═══════════════════════════════════════════════════════════════════

    Opcjonalnie (with_corner_extension) w ostrych narożnikach ścian
    widoczne staje się też pole ściany leżące na zewnątrz pierścienia,
    między dwoma nieprzezroczystymi polami. Dzięki temu pełny prostokąt
    ścian pokoju rysowanego izometrycznie jest widoczny.

    Heurystyka nie odróżnia cienkich ścian od pełnych bloków - zostaje
    w tej postaci.

Przykład użycia:
    >>> walls = {Coordinate(1, 0), Coordinate(1, 1)}
    >>> fov = HexFov(lambda c: c in walls, 3)
    >>> next(fov)
    Coordinate(x=0, y=0)
    >>> visible = set(HexFov(lambda c: c in walls, 3).with_corner_extension())

Predykat musi być czystą funkcją: może zostać wywołany kilka razy dla
tego samego pola i musi zwracać to samo. Wyjątek rzucony przez
predykat jest naruszeniem warunków wstępnych i przechodzi dalej bez
obsługi.
"""

from __future__ import annotations
import logging
from typing import Callable, Iterator, List, Optional, Set

import numpy as np

from ..core.hex_coord import Coordinate, ORIGIN
from ..core.direction import HexDirection
from .polar_point import PolarPoint
from .sector import Sector

logger = logging.getLogger(__name__)

OpacityPredicate = Callable[[Coordinate], bool]


class HexFov:
    """
    Iterator pola widzenia dla mapy hexagonalnej.

    Attributes:
        is_opaque (OpacityPredicate): Czy pole blokuje widok
        range (int): Maksymalny promień widzenia
        corner_extension (bool): Czy włączona jest reguła narożników
        _stack (List[Sector]): Sektory do przetworzenia (LIFO)
        _side_channel (List[Coordinate]): Pola do zwrócenia poza kolejnością
        _emitted (Set[Coordinate]): Pola już zwrócone

    Note:
        Sektory sąsiadujące po rzutowaniu dzielą pole graniczne, a pełny
        pierścień kończy się na swoim polu startowym. Pole zwrócone raz
        nie jest zwracane ponownie.
    """

    def __init__(self, is_opaque: OpacityPredicate, range: int):
        """
        Tworzy iterator FOV.

        Args:
            is_opaque: Predykat nieprzezroczystości pól
            range: Maksymalny promień (>= 0)

        Raises:
            ValueError: Jeśli range < 0
        """
        if range < 0:
            raise ValueError(f"FOV range must be non-negative, got {range}")

        self.is_opaque = is_opaque
        self.range = range
        self.corner_extension = False
        self._stack: List[Sector] = []
        # Origin nie jest generowany przez skanowanie pierścieni.
        self._side_channel: List[Coordinate] = [ORIGIN]
        self._emitted: Set[Coordinate] = set()
        self._started = False

        if range > 0:
            init_opaque = is_opaque(HexDirection.from_int(0).to_vector())
            self._stack.append(Sector.starting_at(
                PolarPoint(np.float32(0.0), 1),
                PolarPoint(np.float32(6.0), 1),
                init_opaque,
            ))

    def with_corner_extension(self) -> HexFov:
        """
        Włącza widoczność pól ścian w ostrych narożnikach.

        Returns:
            HexFov: Ten sam iterator (do łańcuchowania)
        """
        self.corner_extension = True
        return self

    # ─────────────────────────────────────────────────────────────────────────
    # PROTOKÓŁ ITERATORA
    # ─────────────────────────────────────────────────────────────────────────

    def __iter__(self) -> Iterator[Coordinate]:
        return self

    def __next__(self) -> Coordinate:
        if not self._started:
            self._started = True
            logger.debug(
                "FOV started: range=%d, corner_extension=%s",
                self.range, self.corner_extension,
            )
        while True:
            pos = self._step()
            if pos is None:
                logger.debug("FOV finished: %d cells visible", len(self._emitted))
                raise StopIteration
            if pos not in self._emitted:
                self._emitted.add(pos)
                return pos

    def _step(self) -> Optional[Coordinate]:
        """
        Zwraca następne pole traversalu (z możliwymi powtórzeniami)
        albo None, gdy nie ma już nic do przetworzenia.
        """
        while True:
            if self._side_channel:
                return self._side_channel.pop()

            if not self._stack:
                return None

            current = self._stack.pop()

            if not current.in_progress():
                # Koniec sektora - przezroczysty rzutujemy dalej.
                if not current.opaque and current.radius < self.range:
                    self._stack.append(self._further_sector(current, current.end.further()))
                continue

            pos = current.current.to_coordinate()
            current_opaque = self.is_opaque(pos)

            if current_opaque != current.opaque:
                # Nieprzezroczystość się zmieniła, rozgałęziamy.
                self._stack.append(Sector(
                    begin=current.current,
                    current=current.current,
                    end=current.end,
                    opaque=current_opaque,
                ))
                if not current.opaque and current.radius < self.range:
                    self._stack.append(
                        self._further_sector(current, current.current.further())
                    )
                continue

            if self.corner_extension:
                self._check_corner(current)

            self._stack.append(current.advanced())
            return pos

    def _further_sector(self, sector: Sector, end: PolarPoint) -> Sector:
        """Rzut sektora na następny pierścień, kończący się w `end`."""
        begin = sector.begin.further()
        return Sector.starting_at(begin, end, self.is_opaque(begin.to_coordinate()))

    def _check_corner(self, sector: Sector) -> None:
        """
        Dodaje do kanału bocznego pole narożnika, jeśli bieżące pole,
        następne pole i samo pole narożnika są nieprzezroczyste.
        """
        side = sector.current.side_point()
        if side is None:
            return
        following = sector.current.next()
        if (
            following.is_below(sector.end)
            and sector.opaque
            and sector.radius < self.range
            and self.is_opaque(following.to_coordinate())
            and self.is_opaque(side)
        ):
            self._side_channel.append(side)


def visible_set(
    is_opaque: OpacityPredicate,
    range: int,
    corner_extension: bool = False,
) -> Set[Coordinate]:
    """
    Zbiera wszystkie pola widoczne z origin.

    Args:
        is_opaque: Predykat nieprzezroczystości
        range: Maksymalny promień
        corner_extension: Czy włączyć regułę narożników

    Returns:
        Set[Coordinate]: Widoczne pola (zawsze zawiera origin)
    """
    fov = HexFov(is_opaque, range)
    if corner_extension:
        fov = fov.with_corner_extension()
    return set(fov)
