"""
Tests for the cooling & dehumidification process and its solver.

Covers the forward solve from a target (t, phi), closed-loop consistency of
phi, the p_d > p_amb regime, solver q/dw and validation.
"""

import math

import pytest

from hxcalc.config import P_AMB
from hxcalc.engine.state import construct_state, saturation_pressure
from hxcalc.engine.processes.cooling_dehum import cool_dehumidify, CoolingDehumSolver
from hxcalc.models.process import ProcessInput, ProcessType


def approx(value: float, rel_tol: float = 0.001, abs_tol: float = 0.01):
    return pytest.approx(value, rel=rel_tol, abs=abs_tol)


class TestCoolDehumidify:

    def setup_method(self):
        self.start = construct_state(32.0, 14.0)
        self.end = cool_dehumidify(self.start, 14.0, 90.0)

    def test_end_t(self):
        assert self.end.t == 14.0

    def test_end_x(self):
        """p_s(14) = 1595.3 Pa, p_d = 1435.8 Pa → x = 8.940 g/kg."""
        assert self.end.x == approx(8.940, abs_tol=0.02)

    def test_end_phi_matches_target(self):
        assert self.end.phi == pytest.approx(90.0, abs=1e-9)

    def test_moisture_removed(self):
        assert self.end.x < self.start.x

    def test_enthalpy_removed(self):
        assert self.end.h < self.start.h

    @pytest.mark.parametrize("t_target, phi_target", [
        (5.0, 95.0),
        (12.0, 100.0),
        (16.0, 60.0),
        (-5.0, 80.0),
        (24.0, 45.0),
    ])
    def test_closed_loop_phi(self, t_target, phi_target):
        """Re-deriving phi from the returned (t, x) reproduces the target."""
        end = cool_dehumidify(self.start, t_target, phi_target)
        assert construct_state(end.t, end.x).phi == pytest.approx(phi_target, rel=1e-9)

    def test_independent_of_start(self):
        other = construct_state(40.0, 20.0)
        assert cool_dehumidify(other, 14.0, 90.0) == self.end

    def test_zero_target_phi(self):
        end = cool_dehumidify(self.start, 14.0, 0.0)
        assert end.x == 0.0
        assert end.phi == 0.0

    def test_vapor_pressure_above_ambient(self):
        """p_s(100 °C) > p_amb: phi = 100 % gives a negative moisture content."""
        assert saturation_pressure(100.0) > P_AMB
        end = cool_dehumidify(self.start, 100.0, 100.0)
        assert end.x < 0.0
        assert math.isfinite(end.h)


# ---------------------------------------------------------------------------
# Solver
# ---------------------------------------------------------------------------

def _make_input(**overrides):
    defaults = dict(
        process_type=ProcessType.COOLING_DEHUMIDIFICATION,
        start_point={"t": 32.0, "x": 14.0},  # summer outdoor air
        target_t=14.0,
        target_phi=90.0,
    )
    defaults.update(overrides)
    return ProcessInput(**defaults)


class TestCoolingDehumSolver:

    def setup_method(self):
        self.result = CoolingDehumSolver().solve(_make_input())

    def test_process_type(self):
        assert self.result.process_type == ProcessType.COOLING_DEHUMIDIFICATION

    def test_q_negative(self):
        assert self.result.q == pytest.approx(
            self.result.end_point.h - self.result.start_point.h
        )
        assert self.result.q < 0

    def test_dw(self):
        assert self.result.dw == approx(8.940 - 14.0, abs_tol=0.02)

    def test_metadata_pressures(self):
        assert self.result.metadata["p_s"] == approx(1595.3, abs_tol=0.5)
        assert self.result.metadata["p_d"] == approx(1435.8, abs_tol=0.5)
        assert self.result.metadata["p_amb"] == P_AMB

    def test_display_phi(self):
        assert self.result.display["phi"] == "90.00"

    def test_no_warnings(self):
        assert self.result.warnings == []


class TestCoolingDehumSolverEdgeCases:

    def test_missing_target_phi_raises(self):
        with pytest.raises(ValueError, match="target_phi"):
            CoolingDehumSolver().solve(_make_input(target_phi=None))

    def test_missing_target_t_raises(self):
        with pytest.raises(ValueError, match="target_t"):
            CoolingDehumSolver().solve(_make_input(target_t=None))

    def test_target_phi_above_100_warns(self):
        result = CoolingDehumSolver().solve(_make_input(target_phi=110.0))
        assert any("exceeds 100%" in w for w in result.warnings)

    def test_moisture_increase_warns(self):
        result = CoolingDehumSolver().solve(_make_input(
            start_point={"t": 20.0, "x": 4.0},
        ))
        assert result.dw > 0
        assert any("No dehumidification" in w for w in result.warnings)

    def test_heating_target_warns(self):
        result = CoolingDehumSolver().solve(_make_input(target_t=35.0, target_phi=30.0))
        assert any("heated, not cooled" in w for w in result.warnings)

    def test_singular_target_raises(self):
        """p_s = 0 at the Magnus singularity: x = 0 and phi = 0/0."""
        with pytest.raises(ValueError, match="not finite"):
            CoolingDehumSolver().solve(_make_input(target_t=-243.12, target_phi=50.0))
