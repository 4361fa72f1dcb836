"""Continuous-time models for mechanical subsystems."""
from types import SimpleNamespace

import numpy as np

from imdrive.common.model import Subsystem
from imdrive.common.utils import check_positive


# %%
class StiffMechanicalSystem(Subsystem):
    """
    Stiff mechanical system.

    Parameters
    ----------
    J : float
        Total moment of inertia (kgm²).
    tau_L_w : callable, optional
        Load torque (Nm) as a function of speed, `tau_L_w(w_M)`. For example,
        ``tau_L_w = lambda w_M: B*w_M``, where `B` is the viscous friction
        coefficient. The default is zero, ``lambda w_M: 0``.
    tau_L_t : callable, optional
        Load torque (Nm) as a function of time, `tau_L_t(t)`. The default is
        zero, ``lambda t: 0``.

    Notes
    -----
    The rotor angle `theta_M` is not wrapped.

    """

    def __init__(self, J, tau_L_w=lambda w_M: 0, tau_L_t=lambda t: 0):
        super().__init__()
        check_positive("StiffMechanicalSystem", J=J)
        self.par = SimpleNamespace(J=J)
        self.tau_L_w, self.tau_L_t = tau_L_w, tau_L_t
        self.state = SimpleNamespace(w_M=0, theta_M=0)
        self.sol_states = SimpleNamespace(w_M=[], theta_M=[])
        # Sampled states
        self.w_M0, self.theta_M0 = 0, 0

    def f(self, t, w_M, tau_M):
        """
        Compute the state derivatives.

        Parameters
        ----------
        t : float
            Time (s).
        w_M : float
            Rotor angular speed (mechanical rad/s).
        tau_M : float
            Electromagnetic torque (Nm).

        Returns
        -------
        d_w_M : float
            Time derivative of `w_M` (rad/s²).
        d_theta_M : float
            Time derivative of `theta_M` (rad/s).

        """
        tau_L = self.tau_L_w(w_M) + self.tau_L_t(t)
        d_w_M = (tau_M - tau_L)/self.par.J
        d_theta_M = w_M
        return d_w_M, d_theta_M

    def sample(self):
        """Sample the rotor speed and angle for the measurements."""
        self.w_M0 = np.real(self.state.w_M)
        self.theta_M0 = np.real(self.state.theta_M)

    def meas_speed(self):
        """
        Measure the rotor speed.

        This returns the rotor speed at the latest sampling instant.

        Returns
        -------
        w_M0 : float
            Rotor angular speed (mechanical rad/s).

        """
        return self.w_M0

    def meas_position(self):
        """
        Measure the rotor angle.

        This returns the rotor angle at the latest sampling instant.

        Returns
        -------
        theta_M0 : float
            Rotor angle (mechanical rad).

        """
        return self.theta_M0

    def post_process_states(self):
        """Post-process data."""
        data = self.data
        data.w_M, data.theta_M = data.w_M.real, data.theta_M.real
        data.tau_L = np.array([
            self.tau_L_w(w_M) + self.tau_L_t(t)
            for t, w_M in zip(data.t, data.w_M)
        ])
