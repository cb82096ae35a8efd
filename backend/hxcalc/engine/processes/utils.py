"""
Shared utility functions for the air-handling process solvers.

The enthalpy inversion lives here because adiabatic humidification and
adiabatic mixing both recover a temperature from (h, x); keeping a single
implementation stops the two call sites from drifting apart.
"""

import logging

import numpy as np

from hxcalc.config import CP_AIR, L0, CP_VAPOR, GRAMS_PER_KG, DISPLAY_DECIMALS
from hxcalc.models.air_state import AirState

logger = logging.getLogger(__name__)


def temperature_from_enthalpy(h: float, x: float) -> float:
    """
    Dry-bulb temperature (°C) of air with enthalpy h (kJ/kg) and moisture x (g/kg).

    The enthalpy model is affine in t for fixed x:
        h = CP_AIR * t + x_kg * (L0 + CP_VAPOR * t)
    so the inverse is closed-form:
        t = (h - x_kg * L0) / (CP_AIR + x_kg * CP_VAPOR)
    """
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        x_kg = np.float64(x) / GRAMS_PER_KG
        return float((np.float64(h) - x_kg * L0) / (CP_AIR + x_kg * CP_VAPOR))


def specific_energy_change(before: AirState, after: AirState) -> float:
    """Specific energy change q = after.h - before.h (kJ/kg dry air)."""
    return after.h - before.h


def specific_moisture_change(before: AirState, after: AirState) -> float:
    """Specific moisture change dw = after.x - before.x (g/kg dry air)."""
    return after.x - before.x


def format_display(state: AirState, q: float, dw: float) -> dict[str, str]:
    """Fixed-precision strings for the result fields of a process."""
    values = {"t": state.t, "x": state.x, "h": state.h, "phi": state.phi, "q": q, "dw": dw}
    return {
        key: f"{value:.{DISPLAY_DECIMALS[key]}f}"
        for key, value in values.items()
    }


def ensure_finite(state: AirState, label: str) -> None:
    """
    Reject a state with NaN/inf fields.

    The process functions propagate singularities silently; solvers call this
    before building a response, since a non-finite state can't be reported.
    """
    if not state.is_finite:
        logger.warning(
            "Non-finite %s state (t=%s, x=%s, h=%s, phi=%s)",
            label, state.t, state.x, state.h, state.phi,
        )
        raise ValueError(
            f"The {label} state is not finite (t={state.t}, x={state.x}, "
            f"h={state.h}, phi={state.phi}). Check the input values."
        )
