"""
Cooling and dehumidification process.

The coil leaves the air at a target temperature and relative humidity. Both
coordinates of the end state change, so it is solved forward from the
target pair:

    p_s = saturation pressure at t_target (Magnus)
    p_d = p_s * phi_target / 100
    x   = 0.622 * p_d / (p_amb - p_d)

The moisture formula is singular at p_d = p_amb; a target that saturates at
ambient pressure yields an infinite moisture content.
"""

from hxcalc.config import P_AMB
from hxcalc.engine.state import (
    construct_state,
    saturation_pressure,
    moisture_from_vapor_pressure,
)
from hxcalc.engine.processes.base import ProcessSolver
from hxcalc.engine.processes.utils import (
    specific_energy_change,
    specific_moisture_change,
)
from hxcalc.models.air_state import AirState
from hxcalc.models.process import ProcessInput, ProcessOutput, ProcessType


def cool_dehumidify(start: AirState, t_target: float, phi_target: float) -> AirState:
    """
    Cool and dehumidify air to (t_target °C, phi_target %).

    The start state does not enter the calculation; it is accepted so that
    every process takes the entering air as its first argument.
    """
    p_s = saturation_pressure(t_target)
    p_d = p_s * (phi_target / 100.0)
    return construct_state(t_target, moisture_from_vapor_pressure(p_d))


class CoolingDehumSolver(ProcessSolver):
    """Solver for cooling with dehumidification to a target (t, phi)."""

    def solve(self, process_input: ProcessInput) -> ProcessOutput:
        pi = process_input

        if pi.target_t is None or pi.target_phi is None:
            raise ValueError(
                "target_t and target_phi are required for cooling & dehumidification"
            )

        start = self.resolve_state(pi.start_point, "start")

        warnings: list[str] = []
        if pi.target_phi > 100.0:
            warnings.append(
                f"Target relative humidity ({pi.target_phi:.1f}%) exceeds 100%."
            )

        end = cool_dehumidify(start, pi.target_t, pi.target_phi)

        if end.x > start.x:
            warnings.append(
                f"End moisture content ({end.x:.3f}) is higher than start "
                f"({start.x:.3f}). No dehumidification takes place."
            )
        if end.t > start.t:
            warnings.append(
                f"Target temperature ({end.t:.1f}) is above the start "
                f"temperature ({start.t:.1f}). The air is heated, not cooled."
            )

        q = specific_energy_change(start, end)
        dw = specific_moisture_change(start, end)

        p_s = saturation_pressure(pi.target_t)
        p_d = p_s * (pi.target_phi / 100.0)
        metadata = {
            "p_s": round(p_s, 4),
            "p_d": round(p_d, 4),
            "p_amb": P_AMB,
        }

        return self.build_output(
            ProcessType.COOLING_DEHUMIDIFICATION, start, end,
            q=q, dw=dw, metadata=metadata, warnings=warnings,
        )
