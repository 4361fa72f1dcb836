"""
Continuous-time model for a converter.

A lossless three-phase voltage-source inverter supplied from a stiff DC bus is
modelled. Complex space vectors are used also for the switching states.

"""
import numpy as np

from imdrive.common.model._model import Subsystem
from imdrive.common.utils import check_positive


# %%
class Inverter(Subsystem):
    """
    Lossless three-phase voltage-source inverter.

    The DC bus is ideal, i.e., the DC-bus voltage is constant and has no
    dynamics. The switching state space vector `q_cs` is normalized so that
    the AC-side voltage is `q_cs*u_dc`. Its magnitude is not limited.

    Parameters
    ----------
    u_dc : float
        DC-bus voltage (V).

    """

    def __init__(self, u_dc):
        super().__init__()
        check_positive("Inverter", u_dc=u_dc)
        self.par.u_dc = u_dc
        self.sol_q_cs = []

    def ac_voltage(self, q_cs, u_dc):
        """
        Compute the AC-side voltage.

        Parameters
        ----------
        q_cs : complex
            Switching state space vector.
        u_dc : float
            DC-bus voltage (V).

        Returns
        -------
        u_cs : complex
            AC-side voltage (V).

        """
        return q_cs*u_dc

    def dc_current(self, q_cs, i_cs):
        """
        Compute the DC-side current.

        Parameters
        ----------
        q_cs : complex
            Switching state space vector.
        i_cs : complex
            AC-side current (A).

        Returns
        -------
        i_dc : float
            DC-side current (A).

        """
        return 1.5*np.real(q_cs*np.conj(i_cs))

    def meas_dc_voltage(self):
        """Measure the DC-bus voltage (V)."""
        return self.par.u_dc

    def post_process_states(self):
        """Post-process data."""
        data = self.data
        data.u_dc = np.full(np.size(data.t), self.par.u_dc)
        data.u_cs = self.ac_voltage(data.q_cs, data.u_dc)

    def post_process_with_inputs(self):
        """Post-process data with inputs."""
        data = self.data
        data.i_dc = self.dc_current(data.q_cs, data.i_cs)
