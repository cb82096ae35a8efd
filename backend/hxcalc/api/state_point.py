"""
API routes for state point calculation.
"""

import math

from fastapi import APIRouter, HTTPException, Query

from hxcalc.engine.state import construct_state, saturation_pressure
from hxcalc.engine.processes.utils import ensure_finite
from hxcalc.models.air_state import AirState, StateInput

router = APIRouter(prefix="/api/v1", tags=["state-point"])


@router.post("/state-point", response_model=AirState)
async def create_state_point(data: StateInput) -> AirState:
    """
    Calculate the full state of humid air from temperature and moisture content.

    Returns t and x unchanged together with the derived enthalpy h and
    relative humidity phi.
    """
    try:
        state = construct_state(data.t, data.x)
        ensure_finite(state, "requested")
        return state
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")


@router.get("/saturation-pressure")
async def get_saturation_pressure(
    t: float = Query(..., description="Dry-bulb temperature (°C)"),
) -> dict:
    """
    Saturation vapour pressure (Pa) at dry-bulb temperature t (Magnus formula).
    """
    if not math.isfinite(t):
        raise HTTPException(status_code=422, detail=f"t must be a finite number, got {t}")

    p_s = saturation_pressure(t)
    if not math.isfinite(p_s):
        raise HTTPException(
            status_code=422,
            detail=f"Saturation pressure is not finite at t={t}",
        )
    return {"t": t, "p_s": round(p_s, 6)}
