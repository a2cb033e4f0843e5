"""
Deterministyczny generator liczb losowych (RNG).

Losowe scenariusze FOV muszą być powtarzalne - ten sam seed daje
zawsze tę samą mapę. To pozwala na:
- Odtwarzanie ciekawych przypadków z CLI (--random --seed N)
- Debugowanie
- Testy jednostkowe z losowymi mapami

GameRNG opakowuje Pythonowy random.Random z metodami przydatnymi
przy budowaniu map hexagonalnych.

Przykład użycia:
    >>> rng = GameRNG(seed=12345)
    >>> rng.random_direction() in list(HexDirection)
    True
    >>> walls = rng.scatter(20, 20, density=0.2)

Ważne:
    NIGDY nie używaj random.random() bezpośrednio!
    Zawsze używaj własnej instancji GameRNG.
"""

from __future__ import annotations
import random
from typing import FrozenSet, Iterable, List, Sequence, TypeVar

from .hex_coord import Coordinate
from .direction import HexDirection

T = TypeVar('T')


class GameRNG:
    """
    Deterministyczny generator losowości.

    Attributes:
        seed (int): Ziarno użyte do inicjalizacji
        _rng (random.Random): Wewnętrzny generator

    Example:
        >>> rng1 = GameRNG(42)
        >>> rng2 = GameRNG(42)
        >>> rng1.random() == rng2.random()  # ten sam seed = te same wyniki
        True
    """

    def __init__(self, seed: int):
        """
        Tworzy nowy generator z podanym seedem.

        Args:
            seed: Ziarno losowości. Ten sam seed = te same wyniki.
        """
        self.seed = seed
        self._rng = random.Random(seed)

    # ─────────────────────────────────────────────────────────────────────────
    # PODSTAWOWE METODY
    # ─────────────────────────────────────────────────────────────────────────

    def random(self) -> float:
        """Losowa liczba z przedziału [0.0, 1.0)."""
        return self._rng.random()

    def randint(self, a: int, b: int) -> int:
        """
        Zwraca losową liczbę całkowitą z przedziału [a, b] (włącznie).

        Args:
            a: Dolna granica (włącznie)
            b: Górna granica (włącznie)
        """
        return self._rng.randint(a, b)

    def choice(self, seq: Sequence[T]) -> T:
        """
        Wybiera losowy element z sekwencji.

        Raises:
            IndexError: Jeśli sekwencja jest pusta
        """
        return self._rng.choice(seq)

    def shuffle(self, seq: List[T]) -> None:
        """Tasuje listę w miejscu (modyfikuje oryginalną)."""
        self._rng.shuffle(seq)

    # ─────────────────────────────────────────────────────────────────────────
    # METODY SPECYFICZNE DLA MAPY
    # ─────────────────────────────────────────────────────────────────────────

    def roll_chance(self, chance: float) -> bool:
        """
        Rzuca kością na szansę (0.0 - 1.0).

        Args:
            chance: Szansa na sukces (0.0 = 0%, 1.0 = 100%)

        Returns:
            bool: True jeśli sukces
        """
        return self.random() < chance

    def random_direction(self) -> HexDirection:
        """Losowy kierunek hexagonalny."""
        return HexDirection.from_int(self.randint(0, 5))

    def scatter(
        self,
        width: int,
        height: int,
        density: float,
        keep_clear: Iterable[Coordinate] = (),
    ) -> FrozenSet[Coordinate]:
        """
        Losuje ściany na prostokątnej mapie.

        Każde pole (x, y) z [0, width) x [0, height) staje się ścianą
        z prawdopodobieństwem `density`. Pola w `keep_clear` (np.
        pozycja obserwatora) zawsze zostają puste.

        Args:
            width, height: Rozmiar mapy
            density: Szansa na ścianę (0.0 - 1.0)
            keep_clear: Pola, które nie mogą być ścianą

        Returns:
            FrozenSet[Coordinate]: Pola ścian
        """
        clear = set(keep_clear)
        walls = set()
        for y in range(height):
            for x in range(width):
                pos = Coordinate(x, y)
                if self.roll_chance(density) and pos not in clear:
                    walls.add(pos)
        return frozenset(walls)

    # ─────────────────────────────────────────────────────────────────────────
    # STAN
    # ─────────────────────────────────────────────────────────────────────────

    def fork(self) -> "GameRNG":
        """
        Tworzy nowy RNG z seedem bazowanym na aktualnym stanie.

        Przydatne, gdy pod-generator (np. dla kolejnej mapy) nie może
        wpływać na główną sekwencję losowości.
        """
        new_seed = self.randint(0, 2**31 - 1)
        return GameRNG(new_seed)

    def __repr__(self) -> str:
        return f"GameRNG(seed={self.seed})"
