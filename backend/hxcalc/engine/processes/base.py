"""
Base class for the air-handling process solvers.

A solver is the consumer side of the pure process functions: it resolves
the entering state from request values, calls the process function, and
turns the result into a ProcessOutput (q, dw, warnings, display strings).
Solvers hold no state and can be shared freely.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hxcalc.engine.state import construct_state
from hxcalc.engine.processes.utils import ensure_finite, format_display
from hxcalc.models.air_state import AirState, StateInput
from hxcalc.models.process import ProcessInput, ProcessOutput, ProcessType


class ProcessSolver(ABC):
    """Base class for all process solvers."""

    @abstractmethod
    def solve(self, process_input: ProcessInput) -> ProcessOutput:
        """Solve the process and return the result."""
        ...

    @staticmethod
    def resolve_state(point: StateInput, label: str) -> AirState:
        state = construct_state(point.t, point.x)
        ensure_finite(state, label)
        return state

    @staticmethod
    def build_output(
        process_type: ProcessType,
        start: AirState,
        end: AirState,
        q: float,
        dw: float,
        metadata: dict,
        warnings: list[str],
        stream2: Optional[AirState] = None,
    ) -> ProcessOutput:
        ensure_finite(end, "end")
        return ProcessOutput(
            process_type=process_type,
            start_point=start,
            end_point=end,
            stream2_point=stream2,
            q=q,
            dw=dw,
            display=format_display(end, q, dw),
            metadata=metadata,
            warnings=warnings,
        )
