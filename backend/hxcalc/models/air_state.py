"""
Pydantic models for humid-air state points.
"""

import math

from pydantic import BaseModel, ConfigDict, Field


class StateInput(BaseModel):
    """Input model for a state point given by temperature and moisture content."""

    model_config = ConfigDict(allow_inf_nan=False)

    t: float = Field(
        ...,
        description="Dry-bulb temperature (°C)",
        examples=[20.0, -10.0],
    )
    x: float = Field(
        ...,
        description="Moisture content (g water per kg dry air)",
        examples=[10.0, 2.0],
    )


class AirState(BaseModel):
    """
    Thermodynamic state of humid air.

    Only ``t`` and ``x`` are independent; ``h`` and ``phi`` are derived from
    them when the state is constructed. Instances are frozen, so a process
    always produces a new state instead of altering its input. Fields may
    hold NaN or infinity for singular inputs.
    """

    model_config = ConfigDict(frozen=True)

    t: float = Field(..., description="Dry-bulb temperature (°C)")
    x: float = Field(..., description="Moisture content (g/kg dry air)")
    h: float = Field(..., description="Specific enthalpy (kJ/kg dry air)")
    phi: float = Field(..., description="Relative humidity (%), not clamped")

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in (self.t, self.x, self.h, self.phi))
