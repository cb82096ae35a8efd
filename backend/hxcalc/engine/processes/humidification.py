"""
Humidification processes: steam and adiabatic water spray.

Steam humidification:
    Constant dry-bulb temperature (the path follows an isotherm on the h-x
    diagram).
    The enthalpy carried in by the steam is reported as q.

Water humidification (adiabatic):
    Constant enthalpy. The water evaporates using sensible heat from the air,
    so the temperature drops as x rises. q is reported as 0 since no external
    energy is supplied.
"""

from hxcalc.engine.state import construct_state
from hxcalc.engine.processes.base import ProcessSolver
from hxcalc.engine.processes.utils import (
    temperature_from_enthalpy,
    specific_energy_change,
    specific_moisture_change,
)
from hxcalc.models.air_state import AirState
from hxcalc.models.process import ProcessInput, ProcessOutput, ProcessType


def humidify_steam(start: AirState, x_target: float) -> AirState:
    """Humidify with steam to x_target (g/kg) at constant temperature."""
    return construct_state(start.t, x_target)


def humidify_water(start: AirState, x_target: float) -> AirState:
    """Humidify with water to x_target (g/kg) at constant enthalpy."""
    t_new = temperature_from_enthalpy(start.h, x_target)
    return construct_state(t_new, x_target)


def _humidification_warnings(start: AirState, end: AirState) -> list[str]:
    warnings: list[str] = []
    if end.x < start.x:
        warnings.append(
            f"End moisture content ({end.x:.3f}) is lower than start ({start.x:.3f}). "
            f"This is dehumidification, not humidification."
        )
    if end.phi > 100.0:
        warnings.append(
            f"Relative humidity at the target ({end.phi:.1f}%) exceeds 100%. "
            f"Fog/condensation would occur."
        )
    return warnings


# ---------------------------------------------------------------------------
# Steam humidification — constant t
# ---------------------------------------------------------------------------

class SteamHumidificationSolver(ProcessSolver):
    """Solver for steam humidification (constant dry-bulb temperature)."""

    def solve(self, process_input: ProcessInput) -> ProcessOutput:
        pi = process_input
        if pi.target_x is None:
            raise ValueError("target_x is required for steam humidification")

        start = self.resolve_state(pi.start_point, "start")
        end = humidify_steam(start, pi.target_x)

        return self.build_output(
            ProcessType.STEAM_HUMIDIFICATION, start, end,
            q=specific_energy_change(start, end),
            dw=specific_moisture_change(start, end),
            metadata={"delta_h": round(end.h - start.h, 4)},
            warnings=_humidification_warnings(start, end),
        )


# ---------------------------------------------------------------------------
# Water humidification — constant h
# ---------------------------------------------------------------------------

class WaterHumidificationSolver(ProcessSolver):
    """Solver for adiabatic water humidification (constant enthalpy)."""

    def solve(self, process_input: ProcessInput) -> ProcessOutput:
        pi = process_input
        if pi.target_x is None:
            raise ValueError("target_x is required for water humidification")

        start = self.resolve_state(pi.start_point, "start")
        end = humidify_water(start, pi.target_x)

        metadata = {
            "h_const": round(start.h, 4),
            "delta_t": round(end.t - start.t, 4),
        }

        # Adiabatic: no external energy input, q is 0 by convention
        return self.build_output(
            ProcessType.WATER_HUMIDIFICATION, start, end,
            q=0.0,
            dw=specific_moisture_change(start, end),
            metadata=metadata,
            warnings=_humidification_warnings(start, end),
        )
