"""
Heating process.

Heating is a vertical line on the h-x diagram: the moisture content x stays
constant while the dry-bulb temperature rises to the target.
"""

from hxcalc.engine.state import construct_state
from hxcalc.engine.processes.base import ProcessSolver
from hxcalc.engine.processes.utils import specific_energy_change
from hxcalc.models.air_state import AirState
from hxcalc.models.process import ProcessInput, ProcessOutput, ProcessType


def heat(start: AirState, t_target: float) -> AirState:
    """Heat air to t_target (°C) at constant moisture content."""
    return construct_state(t_target, start.x)


class HeatingSolver(ProcessSolver):
    """Solver for heating at constant moisture content."""

    def solve(self, process_input: ProcessInput) -> ProcessOutput:
        pi = process_input

        if pi.target_t is None:
            raise ValueError("target_t is required for heating")

        start = self.resolve_state(pi.start_point, "start")
        end = heat(start, pi.target_t)

        warnings: list[str] = []
        if end.t < start.t:
            warnings.append(
                f"Target temperature ({end.t:.1f}) is below the start "
                f"temperature ({start.t:.1f}). This is sensible cooling."
            )
        if end.phi > 100.0:
            warnings.append(
                f"Relative humidity at the target ({end.phi:.1f}%) exceeds 100%. "
                f"Fog/condensation would occur."
            )

        q = specific_energy_change(start, end)

        metadata = {
            "delta_t": round(end.t - start.t, 4),
        }

        return self.build_output(
            ProcessType.HEATING, start, end,
            q=q, dw=0.0, metadata=metadata, warnings=warnings,
        )
