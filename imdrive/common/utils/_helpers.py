"""Space-vector transformations and signal helpers."""

# %%
import numpy as np


# %%
def abc2complex(u):
    """
    Transform three-phase quantities to a complex space vector.

    Only two of the three phase quantities are independent in the space
    vector, i.e., a possible zero-sequence component is lost.

    Parameters
    ----------
    u : array_like, shape (3,)
        Phase quantities. Each phase may also be an ndarray.

    Returns
    -------
    complex
        Complex space vector (peak-value scaling).

    Examples
    --------
    >>> from imdrive.common.utils import abc2complex
    >>> y = abc2complex([1, -.5, -.5])
    >>> complex(y)
    (1+0j)

    """
    return (2/3)*u[0] - (u[1] + u[2])/3 + 1j*(u[1] - u[2])/np.sqrt(3)


# %%
def complex2abc(u):
    """
    Transform a complex space vector to three-phase quantities.

    Parameters
    ----------
    u : complex | complex ndarray
        Complex space vector (peak-value scaling).

    Returns
    -------
    ndarray, shape (3,)
        Phase quantities.

    Examples
    --------
    >>> from imdrive.common.utils import complex2abc
    >>> y = complex2abc(1-.5j)
    >>> y
    array([ 1.       , -0.9330127, -0.0669873])

    """
    return np.array([
        np.real(u), .5*(-np.real(u) + np.sqrt(3)*np.imag(u)),
        .5*(-np.real(u) - np.sqrt(3)*np.imag(u))
    ])


# %%
class Sequence:
    """
    Sequence generator.

    The time array must be increasing. The output values are interpolated
    between the data points. Can be used, e.g., as a load torque profile
    `tau_L_t`.

    Parameters
    ----------
    times : ndarray
        Time values.
    values : ndarray
        Output values.
    periodic : bool, optional
        Enables periodicity. The default is False.

    """

    def __init__(self, times, values, periodic=False):
        self.times = times
        self.values = values
        if periodic is True:
            self._period = times[-1] - times[0]
        else:
            self._period = None

    def __call__(self, t):
        """
        Interpolate the output.

        Parameters
        ----------
        t : float
            Time (s).

        Returns
        -------
        float
            Interpolated output.

        """
        return np.interp(t, self.times, self.values, period=self._period)


# %%
class Step:
    """Step function, e.g., for a load torque step."""

    def __init__(self, step_time, step_value, initial_value=0):
        self.step_time = step_time
        self.step_value = step_value
        self.initial_value = initial_value

    def __call__(self, t):
        return self.initial_value + (t >= self.step_time)*self.step_value


# %%
def wrap(theta):
    """
    Limit the angle into the range [-pi, pi).

    The mechanical rotor angle is not wrapped by the models, so this is left
    for the consumers of the angle.

    Parameters
    ----------
    theta : float
        Angle (rad).

    Returns
    -------
    float
        Limited angle.

    """
    return np.mod(theta + np.pi, 2*np.pi) - np.pi
