"""
Testy dla pamięci pola widzenia (SEEN / REMEMBERED).
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from hexfov.core.hex_coord import Coordinate
from hexfov.memory.fov_memory import FovMemory, FovStatus


# ═══════════════════════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def memory():
    """Pusta pamięć widoku."""
    return FovMemory()


def open_map(pos: Coordinate) -> bool:
    return False


# ═══════════════════════════════════════════════════════════════════════════
# TEST: STATUS
# ═══════════════════════════════════════════════════════════════════════════

def test_unknown_before_update(memory):
    assert memory.status(Coordinate(0, 0)) is None
    assert not memory.is_seen(Coordinate(0, 0))
    assert not memory.is_remembered(Coordinate(0, 0))


def test_update_marks_seen_and_remembered(memory):
    memory.update([Coordinate(0, 0), Coordinate(1, 0)])

    assert memory.status(Coordinate(1, 0)) == FovStatus.SEEN
    assert memory.is_remembered(Coordinate(1, 0))
    assert memory.seen == frozenset({Coordinate(0, 0), Coordinate(1, 0)})


def test_previous_view_is_remembered(memory):
    memory.update([Coordinate(0, 0)])
    memory.update([Coordinate(5, 5)])

    assert memory.status(Coordinate(0, 0)) == FovStatus.REMEMBERED
    assert memory.status(Coordinate(5, 5)) == FovStatus.SEEN
    assert memory.remembered == frozenset({Coordinate(0, 0), Coordinate(5, 5)})


def test_forget_clears_everything(memory):
    memory.update([Coordinate(0, 0)])
    memory.forget()
    assert memory.status(Coordinate(0, 0)) is None
    assert memory.seen == frozenset()
    assert memory.remembered == frozenset()


# ═══════════════════════════════════════════════════════════════════════════
# TEST: LOOK
# ═══════════════════════════════════════════════════════════════════════════

def test_look_translates_to_origin(memory):
    origin = Coordinate(5, 5)
    memory.look(open_map, origin=origin, range=1)

    expected = {origin} | {
        origin + offset
        for offset in [
            Coordinate(-1, -1), Coordinate(0, -1), Coordinate(1, 0),
            Coordinate(1, 1), Coordinate(0, 1), Coordinate(-1, 0),
        ]
    }
    assert memory.seen == frozenset(expected)


def test_look_uses_map_coordinates(memory):
    """Predykat dostaje współrzędne mapy, nie przesunięcia."""
    origin = Coordinate(10, 10)
    wall = Coordinate(11, 10)
    memory.look(lambda c: c == wall, origin=origin, range=3)

    assert memory.is_seen(wall)
    assert not memory.is_seen(Coordinate(12, 10))


def test_look_then_move(memory):
    memory.look(open_map, origin=Coordinate(0, 0), range=2)
    memory.look(open_map, origin=Coordinate(20, 20), range=2)

    assert memory.status(Coordinate(0, 0)) == FovStatus.REMEMBERED
    assert memory.status(Coordinate(20, 20)) == FovStatus.SEEN
    assert len(memory.seen) == 19
    assert len(memory.remembered) == 38


def test_look_with_corner_extension(memory):
    walls = {Coordinate(0, -1), Coordinate(1, 0), Coordinate(1, -1)}
    memory.look(lambda c: c in walls, origin=Coordinate(0, 0), range=3)
    assert not memory.is_seen(Coordinate(1, -1))

    memory.look(lambda c: c in walls, origin=Coordinate(0, 0), range=3, corner_extension=True)
    assert memory.is_seen(Coordinate(1, -1))


# ═══════════════════════════════════════════════════════════════════════════
# TEST: RENDER
# ═══════════════════════════════════════════════════════════════════════════

def test_render_small_map(memory):
    memory.update([Coordinate(0, 0), Coordinate(1, 0)])
    assert memory.render(2, 1, origin=Coordinate(0, 0)) == "@\n ."


def test_render_walls_and_unknown(memory):
    memory.update([Coordinate(0, 0), Coordinate(0, 1)])
    text = memory.render(1, 3, walls=[Coordinate(0, 1), Coordinate(0, 2)])
    # Wiersz x + y, kolumna x - y przesunięta o height - 1
    assert text.split("\n") == ["  .", " #", ""]


def test_render_remembered_and_custom_glyphs(memory):
    memory.update([Coordinate(0, 0)])
    memory.update([Coordinate(1, 0)])
    text = memory.render(2, 1, glyphs={"remembered": "~"})
    assert text == "~\n ."
