import pytest

from imdrive.common.utils import ConfigurationError, Step
from imdrive.drive.model import StiffMechanicalSystem


def test_equilibrium():
    mechanics = StiffMechanicalSystem(
        J=.015, tau_L_w=lambda w_M: .1*w_M, tau_L_t=Step(.5, 10))
    for t, w_M in [(0, 0), (.2, 100), (1, -50)]:
        tau_M = mechanics.tau_L_w(w_M) + mechanics.tau_L_t(t)
        d_w_M, d_theta_M = mechanics.f(t, w_M, tau_M)
        assert d_w_M == 0
        assert d_theta_M == w_M


def test_acceleration():
    mechanics = StiffMechanicalSystem(J=.5, tau_L_t=Step(1, 2))
    assert mechanics.f(0, 10, 4)[0] == pytest.approx(8)
    assert mechanics.f(1, 10, 4)[0] == pytest.approx(4)


def test_default_load_is_zero():
    mechanics = StiffMechanicalSystem(J=.015)
    d_w_M, _ = mechanics.f(3, 200, 1.5)
    assert d_w_M == pytest.approx(1.5/.015)


def test_measurements_are_sampled():
    mechanics = StiffMechanicalSystem(J=.015)
    mechanics.state.w_M, mechanics.state.theta_M = 100 + 0j, 20 + 0j
    assert mechanics.meas_speed() == 0
    assert mechanics.meas_position() == 0
    mechanics.sample()
    assert mechanics.meas_speed() == 100
    # The angle is not wrapped
    assert mechanics.meas_position() == 20


@pytest.mark.parametrize("J", [0, -1, None])
def test_invalid_inertia(J):
    with pytest.raises(ConfigurationError):
        StiffMechanicalSystem(J=J)
