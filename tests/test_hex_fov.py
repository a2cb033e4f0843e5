"""
Testy dla algorytmu pola widzenia HexFov.

Testuje:
- Pełną widoczność na pustej mapie
- Blokowanie przez pierścień ścian
- Determinizm i ograniczenie liczby pól
- Regułę narożników (corner extension)
- Kontrakt iteratora
- Zgodność z obliczeniami w pojedynczej precyzji (wartości wzorcowe)
"""

import logging
import numpy as np
import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexfov.core.config_loader import ConfigLoader
from hexfov.core.hex_coord import Coordinate, hex_dist
from hexfov.core.rng import GameRNG
from hexfov.fov.hex_fov import HexFov, visible_set


ORIGIN = Coordinate(0, 0)
DATA_PATH = Path(__file__).parent.parent / "data"


# ═══════════════════════════════════════════════════════════════════════════
# HELPERY
# ═══════════════════════════════════════════════════════════════════════════

def disk(radius: int) -> set:
    """Wszystkie pola w odległości <= radius od origin."""
    return {
        Coordinate(x, y)
        for x in range(-radius, radius + 1)
        for y in range(-radius, radius + 1)
        if hex_dist(Coordinate(x, y)) <= radius
    }


def disk_size(radius: int) -> int:
    return 1 + 3 * radius * (radius + 1)


def random_walls(seed: int, radius: int, density: float) -> frozenset:
    """Losowe ściany w kwadracie wokół origin (origin zawsze pusty)."""
    rng = GameRNG(seed)
    size = 2 * radius + 3
    shift = Coordinate(radius + 1, radius + 1)
    walls = rng.scatter(size, size, density, keep_clear=[shift])
    return frozenset(w - shift for w in walls)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: PUSTA MAPA
# ═══════════════════════════════════════════════════════════════════════════

def test_disk_helper_size():
    for r in range(6):
        assert len(disk(r)) == disk_size(r)


@pytest.mark.parametrize("radius", [1, 2, 3, 5, 9])
def test_transparent_field_sees_whole_disk(radius):
    """Bez ścian widoczne jest dokładnie całe koło, każde pole raz."""
    result = list(HexFov(lambda c: False, radius))

    assert result[0] == ORIGIN
    assert len(result) == len(set(result))
    assert set(result) == disk(radius)


def test_range_zero_yields_only_origin():
    assert list(HexFov(lambda c: False, 0)) == [ORIGIN]


def test_origin_first_even_if_opaque():
    """Origin jest zawsze widoczny, predykat nie jest dla niego pytany."""
    result = list(HexFov(lambda c: True, 3))
    assert result[0] == ORIGIN
    assert set(result) == disk(1)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: BLOKOWANIE
# ═══════════════════════════════════════════════════════════════════════════

@pytest.mark.parametrize("radius", [2, 3, 6])
def test_opaque_ring_blocks_expansion(radius):
    """Pierścień ścian w odległości 1 zasłania wszystko dalej."""
    result = list(HexFov(lambda c: hex_dist(c) == 1, radius))
    assert set(result) == disk(1)
    assert len(result) == 7


def test_single_wall_casts_shadow():
    """Ściana SE zasłania pole dokładnie za nią."""
    wall = Coordinate(1, 0)
    visible = visible_set(lambda c: c == wall, 4)

    assert wall in visible
    assert Coordinate(2, 0) not in visible
    assert Coordinate(3, 0) not in visible
    # Przeciwna strona pozostaje widoczna
    assert Coordinate(-4, 0) in visible


def test_opaque_cells_on_edge_are_visible():
    """Ściany, które widać, są zwracane (blokują widok za sobą)."""
    walls = {Coordinate(0, -2), Coordinate(2, 0)}
    visible = visible_set(lambda c: c in walls, 3)
    assert walls <= visible


# ═══════════════════════════════════════════════════════════════════════════
# TEST: DETERMINIZM I OGRANICZENIA
# ═══════════════════════════════════════════════════════════════════════════

def test_determinism():
    """Dwa iteratory z tym samym predykatem dają tę samą sekwencję."""
    walls = random_walls(seed=7, radius=8, density=0.25)
    first = list(HexFov(lambda c: c in walls, 8))
    second = list(HexFov(lambda c: c in walls, 8))
    assert first == second


@pytest.mark.parametrize("seed", range(12))
@pytest.mark.parametrize("corner", [False, True])
def test_termination_bound(seed, corner):
    """Liczba pól nie przekracza rozmiaru koła, pola nie powtarzają się."""
    radius = 6
    walls = random_walls(seed=seed, radius=radius, density=0.3)
    result = list(visible_set(lambda c: c in walls, radius, corner_extension=corner))
    fov = HexFov(lambda c: c in walls, radius)
    if corner:
        fov = fov.with_corner_extension()
    ordered = list(fov)

    assert len(ordered) <= disk_size(radius)
    assert len(ordered) == len(set(ordered))
    assert set(ordered) == set(result)
    assert all(hex_dist(c) <= radius for c in ordered)


def test_negative_range_raises():
    with pytest.raises(ValueError):
        HexFov(lambda c: False, -1)


# ═══════════════════════════════════════════════════════════════════════════
# TEST: NAROŻNIKI
# ═══════════════════════════════════════════════════════════════════════════

# NE (0, -1) i SE (1, 0) tworzą wklęsły narożnik, (1, -1) leży w nim
# na zewnątrz pierścienia r=1.
NOTCH = Coordinate(1, -1)
CORNER_WALLS = frozenset({Coordinate(0, -1), Coordinate(1, 0), NOTCH})


def test_notch_hidden_without_corner_extension():
    result = list(HexFov(lambda c: c in CORNER_WALLS, 3))
    assert NOTCH not in result


def test_notch_visible_with_corner_extension():
    result = list(HexFov(lambda c: c in CORNER_WALLS, 3).with_corner_extension())
    assert result.count(NOTCH) == 1


def test_corner_extension_follows_wall_cell():
    """Pole narożnika jest zwracane zaraz po polu, które je wykryło."""
    result = list(HexFov(lambda c: c in CORNER_WALLS, 3).with_corner_extension())
    index = result.index(NOTCH)
    assert result[index - 1] == Coordinate(0, -1)


def test_corner_extension_needs_range():
    """Narożnik leży na pierścieniu 2 - przy range 1 nie jest dodawany."""
    result = list(HexFov(lambda c: c in CORNER_WALLS, 1).with_corner_extension())
    assert NOTCH not in result


def test_corner_extension_needs_opaque_notch():
    """Przezroczyste pole narożnika zostaje w cieniu."""
    walls = CORNER_WALLS - {NOTCH}
    result = list(HexFov(lambda c: c in walls, 3).with_corner_extension())
    assert NOTCH not in result


def test_corner_extension_does_not_change_open_field():
    plain = list(HexFov(lambda c: False, 4))
    extended = list(HexFov(lambda c: False, 4).with_corner_extension())
    assert plain == extended


# ═══════════════════════════════════════════════════════════════════════════
# TEST: KONTRAKT ITERATORA
# ═══════════════════════════════════════════════════════════════════════════

def test_iterator_is_not_restartable():
    fov = HexFov(lambda c: False, 2)
    assert len(list(fov)) == disk_size(2)
    assert list(fov) == []
    with pytest.raises(StopIteration):
        next(fov)


def test_partial_consumption():
    """Częściowo skonsumowany iterator można po prostu porzucić."""
    fov = HexFov(lambda c: False, 50)
    first = [next(fov) for _ in range(10)]
    assert first[0] == ORIGIN
    assert len(set(first)) == 10


def test_with_corner_extension_returns_same_iterator():
    fov = HexFov(lambda c: False, 2)
    assert fov.with_corner_extension() is fov
    assert fov.corner_extension


def test_predicate_errors_propagate():
    """Wyjątek z predykatu przechodzi do wywołującego."""
    def boom(pos):
        if hex_dist(pos) >= 2:
            raise RuntimeError("no terrain here")
        return False

    fov = HexFov(boom, 3)
    with pytest.raises(RuntimeError):
        list(fov)


def test_predicate_called_only_within_range_plus_corner():
    """Predykat jest pytany tylko o pola w zasięgu."""
    asked = []

    def is_opaque(pos):
        asked.append(pos)
        return pos in CORNER_WALLS

    list(HexFov(is_opaque, 3).with_corner_extension())
    assert all(hex_dist(c) <= 3 for c in asked)


def test_start_is_logged_on_first_step(caplog):
    """Log startu widzi ustawienia z with_corner_extension()."""
    with caplog.at_level(logging.DEBUG, logger="hexfov.fov.hex_fov"):
        fov = HexFov(lambda c: False, 2).with_corner_extension()
        assert not caplog.records
        list(fov)

    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "FOV started: range=2, corner_extension=True"
    assert messages[-1] == "FOV finished: 19 cells visible"


# ═══════════════════════════════════════════════════════════════════════════
# TEST: WARTOŚCI WZORCOWE (POJEDYNCZA PRECYZJA)
# ═══════════════════════════════════════════════════════════════════════════

F32 = np.float32
HALF = F32(0.5)
RING_STEPS = [(-1, -1), (0, -1), (1, 0), (1, 1), (0, 1), (-1, 0)]


def ring_cell(pos, radius: int) -> Coordinate:
    index = int(np.floor(pos + HALF)) % (6 * radius)
    side, offset = divmod(index, radius)
    vx, vy = RING_STEPS[side]
    tx, ty = RING_STEPS[(side + 2) % 6]
    return Coordinate(vx * radius + tx * offset, vy * radius + ty * offset)


def reference_visible(is_opaque, fov_range: int) -> set:
    """
    Niezależny zapis skanowania sektorami na krotkach
    (begin, current, end, radius, opaque) w float32, bez usuwania
    powtórzeń i bez reguły narożników.
    """
    def further(pos, radius):
        return pos * F32(radius + 1) / F32(radius)

    def projected(begin, end, radius):
        b = further(begin, radius)
        return (b, b, further(end, radius), radius + 1, is_opaque(ring_cell(b, radius + 1)))

    seen = {ORIGIN}
    stack = [(F32(0.0), F32(0.0), F32(6.0), 1, is_opaque(ring_cell(F32(0.0), 1)))]
    while stack:
        begin, current, end, radius, opaque = stack.pop()
        if np.floor(current + HALF) >= np.ceil(end + HALF):
            if not opaque and radius < fov_range:
                stack.append(projected(begin, end, radius))
            continue
        pos = ring_cell(current, radius)
        blocked = is_opaque(pos)
        if blocked != opaque:
            stack.append((current, current, end, radius, blocked))
            if not opaque and radius < fov_range:
                stack.append(projected(begin, current, radius))
            continue
        seen.add(pos)
        stack.append((begin, np.floor(current + HALF) + HALF, end, radius, opaque))
    return seen


def test_single_wall_shadow_rounded_in_single_precision():
    """
    Ściana (-3, -3) na r=3. Początek łuku 0.5 rzutowany do r=9 daje
    1.4999999, więc pole (-8, -9) jest widoczne; koniec łuku 17.5 daje
    52.499996, więc (-9, -8) zostaje w cieniu.
    """
    wall = Coordinate(-3, -3)
    visible = visible_set(lambda c: c == wall, 9)

    hidden = {Coordinate(-r, -r) for r in range(4, 10)} | {Coordinate(-9, -8)}
    assert visible == disk(9) - hidden
    assert len(visible) == 264
    assert Coordinate(-8, -9) in visible


def test_corridor_scenario_golden():
    """Korytarz: widać pierścień 1, dwa pola na zachód i pas 3 pól na wschód."""
    scenario = ConfigLoader(str(DATA_PATH)).load_scenario("corridor")
    assert scenario.range == 12

    offsets = visible_set(
        lambda c: scenario.is_opaque(scenario.origin + c), scenario.range
    )

    expected = {ORIGIN} | {
        Coordinate(x, y)
        for x, y in [
            (-1, -1), (0, -1), (1, 0), (1, 1), (0, 1), (-1, 0),
            (-1, 1), (-2, 0), (-2, -1),
            (-2, 1), (-3, 0), (-3, -1),
        ]
    }
    for r in range(2, 13):
        expected |= {Coordinate(r - 1, -1), Coordinate(r, 0), Coordinate(r, 1)}

    assert offsets == expected
    assert len(offsets) == 46
    assert offsets == reference_visible(
        lambda c: scenario.is_opaque(scenario.origin + c), scenario.range
    )


@pytest.mark.parametrize("fov_range", [5, 9, 12])
def test_pillars_scenario_matches_reference(fov_range):
    scenario = ConfigLoader(str(DATA_PATH)).load_scenario("pillars")

    def is_opaque(c):
        return scenario.is_opaque(scenario.origin + c)

    visible = visible_set(is_opaque, fov_range)
    # Filar S (2, 2) zasłania pola dokładnie za sobą
    assert Coordinate(2, 2) in visible
    assert Coordinate(3, 3) not in visible
    assert Coordinate(4, 4) not in visible
    assert visible == reference_visible(is_opaque, fov_range)


@pytest.mark.parametrize("seed", range(30))
def test_random_maps_match_reference(seed):
    """Asymetryczne losowe mapy, range 12."""
    walls = random_walls(seed=seed, radius=12, density=0.2)
    is_opaque = lambda c: c in walls
    assert visible_set(is_opaque, 12) == reference_visible(is_opaque, 12)


def test_reference_reproduces_single_wall_golden():
    wall = Coordinate(-3, -3)
    hidden = {Coordinate(-r, -r) for r in range(4, 10)} | {Coordinate(-9, -8)}
    assert reference_visible(lambda c: c == wall, 9) == disk(9) - hidden
