"""
Pydantic models for air-handling process input/output.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from hxcalc.models.air_state import AirState, StateInput


class ProcessType(str, Enum):
    HEATING = "heating"
    COOLING_DEHUMIDIFICATION = "cooling_dehumidification"
    STEAM_HUMIDIFICATION = "steam_humidification"
    WATER_HUMIDIFICATION = "water_humidification"
    ADIABATIC_MIXING = "adiabatic_mixing"


class ProcessInput(BaseModel):
    """Input for an air-handling process calculation."""

    model_config = ConfigDict(allow_inf_nan=False)

    process_type: ProcessType

    # Entering air (outdoor air for every process, stream 1 for mixing)
    start_point: StateInput

    # Heating and cooling/dehumidification
    target_t: Optional[float] = None  # °C
    # Cooling/dehumidification
    target_phi: Optional[float] = None  # %
    # Steam and water humidification
    target_x: Optional[float] = None  # g/kg

    # Adiabatic mixing: second stream (e.g. room air) and flow shares
    stream2_point: Optional[StateInput] = None
    share_1: Optional[float] = None
    share_2: Optional[float] = None


class ProcessOutput(BaseModel):
    """Result of a process calculation."""

    process_type: ProcessType

    start_point: AirState
    end_point: AirState
    stream2_point: Optional[AirState] = None

    q: float = Field(..., description="Specific energy change (kJ/kg dry air)")
    dw: float = Field(..., description="Specific moisture change (g/kg dry air)")

    display: dict[str, str] = Field(default_factory=dict)
    metadata: dict = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
