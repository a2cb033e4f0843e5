"""
Scenarios router - lista scenariuszy i pole widzenia dla scenariusza.
"""

from fastapi import APIRouter, HTTPException
from typing import List, Dict, Any
from pathlib import Path

from hexfov.core.config_loader import ConfigLoader
from api.routers.fov import FovResponse, compute_fov


router = APIRouter()

# Initialize config loader
DATA_PATH = Path(__file__).parent.parent.parent / "data"
_loader = ConfigLoader(str(DATA_PATH))


@router.get("/scenarios")
async def get_scenarios() -> List[Dict[str, Any]]:
    """
    Zwraca listę wszystkich scenariuszy.

    Returns:
        Lista scenariuszy z rozmiarem, pozycją obserwatora i promieniem.
    """
    result = []
    for scenario_id, scenario in _loader.load_all_scenarios().items():
        result.append({
            "id": scenario_id,
            "width": scenario.width,
            "height": scenario.height,
            "origin": list(scenario.origin.pair),
            "range": scenario.range,
            "corner_extension": scenario.corner_extension,
        })
    return result


@router.get("/scenarios/{scenario_id}/fov", response_model=FovResponse)
async def get_scenario_fov(scenario_id: str) -> FovResponse:
    """
    Liczy pole widzenia dla zapisanego scenariusza.

    Args:
        scenario_id: ID scenariusza

    Returns:
        Widoczne pola w kolejności traversalu
    """
    try:
        scenario = _loader.load_scenario(scenario_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Scenario '{scenario_id}' not found")

    return compute_fov(
        scenario.is_opaque,
        scenario.origin,
        scenario.range,
        scenario.corner_extension,
    )
