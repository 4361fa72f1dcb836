import numpy as np
import pytest

from imdrive.common.utils import (
    abc2complex, complex2abc, ConfigurationError, check_pole_pairs,
    check_positive, Sequence, Step, wrap)


@pytest.mark.parametrize("u_abc", [
    (1.0, -.5, -.5),
    (0.0, 2.0, -2.0),
    (.3, 1.2, -1.5),
])
def test_balanced_round_trip(u_abc):
    assert np.allclose(complex2abc(abc2complex(u_abc)), u_abc, atol=1e-6)


def test_abc2complex_peak_value_scaling():
    u_s = abc2complex([1, -.5, -.5])
    assert u_s.real == pytest.approx(1)
    assert u_s.imag == pytest.approx(0)
    assert abc2complex([0, 1, -1]).imag == pytest.approx(2/np.sqrt(3))


def test_zero_sequence_is_lost():
    u_s = abc2complex([2, 1, 1])
    assert np.allclose(complex2abc(u_s), [2/3, -1/3, -1/3])


def test_complex2abc_arrays():
    u_abc = complex2abc(np.array([1 + 0j, 1j]))
    assert u_abc.shape == (3, 2)
    assert np.allclose(np.sum(u_abc, axis=0), 0)


def test_step_and_sequence():
    step = Step(.5, 10, initial_value=1)
    assert step(.4) == 1
    assert step(.5) == 11
    seq = Sequence(np.array([0, 1, 2]), np.array([0, 10, 0]))
    assert seq(.5) == pytest.approx(5)
    assert seq(1.5) == pytest.approx(5)


def test_wrap():
    assert wrap(3*np.pi/2) == pytest.approx(-np.pi/2)
    assert wrap(-np.pi) == pytest.approx(-np.pi)


def test_check_positive():
    check_positive("test", a=1, b=.1)
    with pytest.raises(ConfigurationError, match="b"):
        check_positive("test", a=1, b=0)
    with pytest.raises(ConfigurationError, match="missing"):
        check_positive("test", a=None)
    with pytest.raises(ConfigurationError):
        check_positive("test", a=np.inf)


def test_check_pole_pairs():
    check_pole_pairs("test", 2)
    for n_p in [0, -1, 1.5, True, None]:
        with pytest.raises(ConfigurationError):
            check_pole_pairs("test", n_p)
