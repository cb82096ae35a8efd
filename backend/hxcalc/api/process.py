"""
API routes for air-handling process calculations.
"""

from fastapi import APIRouter, HTTPException

from hxcalc.models.process import ProcessInput, ProcessOutput, ProcessType
from hxcalc.engine.processes.heating import HeatingSolver
from hxcalc.engine.processes.cooling_dehum import CoolingDehumSolver
from hxcalc.engine.processes.mixing import MixingSolver
from hxcalc.engine.processes.humidification import (
    SteamHumidificationSolver,
    WaterHumidificationSolver,
)

router = APIRouter(prefix="/api/v1", tags=["process"])

# Solver dispatch table — maps process types to solver instances
_SOLVERS = {
    ProcessType.HEATING: HeatingSolver(),
    ProcessType.COOLING_DEHUMIDIFICATION: CoolingDehumSolver(),
    ProcessType.STEAM_HUMIDIFICATION: SteamHumidificationSolver(),
    ProcessType.WATER_HUMIDIFICATION: WaterHumidificationSolver(),
    ProcessType.ADIABATIC_MIXING: MixingSolver(),
}


@router.post("/process", response_model=ProcessOutput)
async def calculate_process(data: ProcessInput) -> ProcessOutput:
    """
    Calculate an air-handling process.

    Dispatches to the appropriate solver based on process_type.
    Returns start state, end state, q, dw, display strings, metadata and
    any warnings.
    """
    solver = _SOLVERS.get(data.process_type)
    if solver is None:
        raise HTTPException(
            status_code=422,
            detail=f"Process type '{data.process_type}' is not yet implemented.",
        )

    try:
        return solver.solve(data)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Calculation error: {str(e)}")
