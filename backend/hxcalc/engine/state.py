"""
State model for humid air.

Derives a full state (t, x, h, phi) from dry-bulb temperature and moisture
content alone, using the Magnus saturation pressure and the standard
enthalpy model at fixed ambient pressure.

The functions here are total: singular or unphysical inputs (negative x,
t = -MAGNUS_B, exp overflow) propagate as NaN/inf instead of raising.
Arithmetic runs on numpy float64 scalars under ``np.errstate`` so that
division by zero and overflow follow IEEE-754 rather than Python's
ZeroDivisionError/OverflowError.
"""

import numpy as np

from hxcalc.config import (
    P_AMB,
    MAGNUS_A,
    MAGNUS_B,
    MAGNUS_P0,
    GAS_CONSTANT_RATIO,
    CP_AIR,
    L0,
    CP_VAPOR,
    GRAMS_PER_KG,
)
from hxcalc.models.air_state import AirState


def _ieee():
    return np.errstate(divide="ignore", over="ignore", invalid="ignore")


def saturation_pressure(t: float) -> float:
    """Saturation vapour pressure p_s (Pa) at dry-bulb t (°C), Magnus formula."""
    with _ieee():
        t = np.float64(t)
        return float(MAGNUS_P0 * np.exp(MAGNUS_A * t / (MAGNUS_B + t)))


def vapor_pressure(x: float) -> float:
    """Partial vapour pressure p_d (Pa) for moisture content x (g/kg)."""
    with _ieee():
        x_kg = np.float64(x) / GRAMS_PER_KG
        return float(x_kg * P_AMB / (GAS_CONSTANT_RATIO + x_kg))


def moisture_from_vapor_pressure(p_d: float) -> float:
    """Moisture content x (g/kg) for partial vapour pressure p_d (Pa)."""
    with _ieee():
        p_d = np.float64(p_d)
        x_kg = GAS_CONSTANT_RATIO * p_d / (P_AMB - p_d)
        return float(x_kg * GRAMS_PER_KG)


def enthalpy(t: float, x: float) -> float:
    """Specific enthalpy h (kJ/kg dry air) at t (°C) and x (g/kg)."""
    with _ieee():
        t = np.float64(t)
        x_kg = np.float64(x) / GRAMS_PER_KG
        return float(CP_AIR * t + x_kg * (L0 + CP_VAPOR * t))


def construct_state(t: float, x: float) -> AirState:
    """
    Build the full state of humid air from temperature and moisture content.

    Args:
        t: Dry-bulb temperature (°C)
        x: Moisture content (g/kg dry air)

    Returns:
        AirState with t and x passed through unchanged and h, phi derived.
    """
    p_s = saturation_pressure(t)
    p_d = vapor_pressure(x)

    with _ieee():
        phi = float(np.float64(p_d) / np.float64(p_s) * 100.0)

    return AirState(t=t, x=x, h=enthalpy(t, x), phi=phi)
