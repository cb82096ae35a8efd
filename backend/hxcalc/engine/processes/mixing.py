"""
Adiabatic mixing of two air streams.

The mixed state lies on the straight line between the two entering states on
the h-x diagram, positioned by the flow shares (lever rule):

    h_mix = (s1 * h_1 + s2 * h_2) / (s1 + s2)
    x_mix = (s1 * x_1 + s2 * x_2) / (s1 + s2)

The mixed temperature follows from (h_mix, x_mix) by the same closed-form
inversion used for water humidification. Shares are weights, not fractions;
they need not sum to 1 and are not checked for sign.
"""

import logging

from hxcalc.engine.state import construct_state
from hxcalc.engine.processes.base import ProcessSolver
from hxcalc.engine.processes.utils import temperature_from_enthalpy
from hxcalc.models.air_state import AirState
from hxcalc.models.process import ProcessInput, ProcessOutput, ProcessType

logger = logging.getLogger(__name__)


def mix(state_1: AirState, share_1: float, state_2: AirState, share_2: float) -> AirState:
    """
    Mix two air streams weighted by their flow shares.

    Shares summing to zero describe no flow at all; the zero state
    construct_state(0, 0) is returned for that case.
    """
    total = share_1 + share_2
    if total == 0:
        return construct_state(0.0, 0.0)

    h_mix = (share_1 * state_1.h + share_2 * state_2.h) / total
    x_mix = (share_1 * state_1.x + share_2 * state_2.x) / total

    t_mix = temperature_from_enthalpy(h_mix, x_mix)
    return construct_state(t_mix, x_mix)


class MixingSolver(ProcessSolver):
    """Solver for adiabatic mixing of two air streams."""

    def solve(self, process_input: ProcessInput) -> ProcessOutput:
        pi = process_input

        # --- Validate required fields ---
        if pi.stream2_point is None:
            raise ValueError("stream2_point is required for adiabatic mixing")
        if pi.share_1 is None or pi.share_2 is None:
            raise ValueError("share_1 and share_2 are required for adiabatic mixing")

        stream1 = self.resolve_state(pi.start_point, "stream_1")
        stream2 = self.resolve_state(pi.stream2_point, "stream_2")

        warnings: list[str] = []
        total = pi.share_1 + pi.share_2
        if total == 0:
            logger.warning(
                "Mixing shares sum to zero (%s + %s); returning the zero state",
                pi.share_1, pi.share_2,
            )
            warnings.append(
                "Mixing shares sum to zero. No mixed state exists; "
                "the zero state (t=0, x=0) is returned."
            )
        if pi.share_1 < 0 or pi.share_2 < 0:
            warnings.append(
                f"Negative mixing share ({pi.share_1}, {pi.share_2}). "
                f"The mixed state is extrapolated beyond the two streams."
            )

        mixed = mix(stream1, pi.share_1, stream2, pi.share_2)

        metadata: dict = {
            "share_1": pi.share_1,
            "share_2": pi.share_2,
        }
        if total != 0:
            metadata["fraction_1"] = round(pi.share_1 / total, 4)

        # Internal redistribution: q and dw are 0 by convention
        return self.build_output(
            ProcessType.ADIABATIC_MIXING, stream1, mixed,
            q=0.0, dw=0.0, metadata=metadata, warnings=warnings,
            stream2=stream2,
        )
