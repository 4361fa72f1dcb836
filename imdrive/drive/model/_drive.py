"""
Continuous-time model for a machine drive.

This interconnects the subsystems of a machine drive and provides an
interface to the solver. Peak-valued complex space vectors are used.

"""
from imdrive.common.model import Model


# %%
class Drive(Model):
    """
    Continuous-time model for a machine drive.

    The state of the drive is ``[psi_ss, psi_rs, w_M, theta_M]``. The states
    are owned by the machine and mechanics models.

    Parameters
    ----------
    converter : Inverter
        Converter model.
    machine : InductionMachine | InductionMachineInvGamma
        Machine model.
    mechanics : StiffMechanicalSystem
        Mechanical subsystem model.

    """

    def __init__(self, converter=None, machine=None, mechanics=None):
        super().__init__()
        self.converter = converter
        self.machine = machine
        self.mechanics = mechanics
        self.subsystems = [self.converter, self.machine, self.mechanics]

    def rhs(self, t, state_list, q_cs):
        """
        Compute the complete state derivative list for the solver.

        Parameters
        ----------
        t : float
            Time (s).
        state_list : array_like, shape (4,)
            State, ``[psi_ss, psi_rs, w_M, theta_M]``.
        q_cs : complex
            Switching state space vector.

        Returns
        -------
        list, length 4
            Time derivative of the state,
            ``[d_psi_ss, d_psi_rs, d_w_M, d_theta_M]``.

        """
        self.check_finite(t, state_list)
        psi_ss, psi_rs, w_M, _ = state_list
        w_M = w_M.real
        u_ss = self.converter.ac_voltage(
            q_cs, self.converter.meas_dc_voltage())
        d_psi_ss, d_psi_rs, _, tau_M = self.machine.f(
            psi_ss, psi_rs, u_ss, w_M)
        d_w_M, d_theta_M = self.mechanics.f(t, w_M, tau_M)
        return [d_psi_ss, d_psi_rs, d_w_M, d_theta_M]

    def post_process(self):
        """Post-process the solution."""
        # Post-processing based on the states
        super().post_process_states()
        # Add the input data to the subsystems for post-processing
        self.converter.data.i_cs = self.machine.data.i_ss
        self.machine.data.u_ss = self.converter.data.u_cs
        self.machine.data.w_M = self.mechanics.data.w_M
        self.mechanics.data.tau_M = self.machine.data.tau_M
        # Post-processing based on the inputs and the states
        super().post_process_with_inputs()
