"""
FOV router - pole widzenia dla mapy przesłanej w żądaniu.
"""

from fastapi import APIRouter
from pydantic import BaseModel, Field
from typing import Callable, List, Optional, Tuple

from hexfov.core.hex_coord import Coordinate
from hexfov.fov.hex_fov import HexFov


router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════
# REQUEST/RESPONSE MODELS
# ═══════════════════════════════════════════════════════════════════════════

class FovRequest(BaseModel):
    """Request do obliczenia pola widzenia."""
    origin: Tuple[int, int] = (0, 0)  # [x, y]
    range: int = Field(ge=0, le=64)
    walls: List[Tuple[int, int]] = []  # [[x, y], ...]
    width: Optional[int] = Field(default=None, gt=0)
    height: Optional[int] = Field(default=None, gt=0)
    corner_extension: bool = False


class FovResponse(BaseModel):
    """Widoczne pola w kolejności traversalu."""
    origin: List[int]
    range: int
    count: int
    visible: List[List[int]]


# ═══════════════════════════════════════════════════════════════════════════
# HELPERS
# ═══════════════════════════════════════════════════════════════════════════

def compute_fov(
    is_opaque: Callable[[Coordinate], bool],
    origin: Coordinate,
    fov_range: int,
    corner_extension: bool,
) -> FovResponse:
    """Uruchamia HexFov z punktu origin (predykat we współrzędnych mapy)."""
    fov = HexFov(lambda offset: is_opaque(origin + offset), fov_range)
    if corner_extension:
        fov = fov.with_corner_extension()
    visible = [list((origin + offset).pair) for offset in fov]
    return FovResponse(
        origin=list(origin.pair),
        range=fov_range,
        count=len(visible),
        visible=visible,
    )


# ═══════════════════════════════════════════════════════════════════════════
# ENDPOINTS
# ═══════════════════════════════════════════════════════════════════════════

@router.post("/fov", response_model=FovResponse)
async def calculate_fov(request: FovRequest) -> FovResponse:
    """
    Liczy pole widzenia dla podanej mapy.

    Ściany to lista pól. Jeśli podano width i height, pola poza
    prostokątem [0, width) x [0, height) też blokują widok.
    """
    walls = {Coordinate(x, y) for x, y in request.walls}
    bounded = request.width is not None and request.height is not None

    def is_opaque(pos: Coordinate) -> bool:
        if pos in walls:
            return True
        if bounded:
            return not (0 <= pos.x < request.width and 0 <= pos.y < request.height)
        return False

    origin = Coordinate(request.origin[0], request.origin[1])
    return compute_fov(is_opaque, origin, request.range, request.corner_extension)
