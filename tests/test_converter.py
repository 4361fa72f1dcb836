import numpy as np
import pytest

from imdrive.common.model import Inverter
from imdrive.common.utils import ConfigurationError, abc2complex


def test_ac_voltage():
    converter = Inverter(u_dc=540)
    q_cs = abc2complex([1, 0, 0])
    u_cs = converter.ac_voltage(q_cs, converter.meas_dc_voltage())
    assert u_cs == pytest.approx(2/3*540)


def test_ac_voltage_is_not_limited():
    converter = Inverter(u_dc=100)
    assert converter.ac_voltage(3 + 4j, 100) == pytest.approx(300 + 400j)


def test_dc_current_power_balance():
    converter = Inverter(u_dc=540)
    q_cs, i_cs = .5 + .2j, 10 - 3j
    u_cs = converter.ac_voltage(q_cs, 540)
    p_ac = 1.5*np.real(u_cs*np.conj(i_cs))
    i_dc = converter.dc_current(q_cs, i_cs)
    assert 540*i_dc == pytest.approx(p_ac)
    assert converter.dc_current(1j, 1) == pytest.approx(0)


def test_meas_dc_voltage_is_constant():
    converter = Inverter(u_dc=400)
    assert converter.meas_dc_voltage() == 400
    converter.ac_voltage(1, 400)
    assert converter.meas_dc_voltage() == 400


@pytest.mark.parametrize("u_dc", [0, -540, np.nan, None])
def test_invalid_dc_voltage(u_dc):
    with pytest.raises(ConfigurationError):
        Inverter(u_dc=u_dc)
