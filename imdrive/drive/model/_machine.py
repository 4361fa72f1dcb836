"""
Continuous-time models for induction machines.

Peak-valued complex space vectors are used. The space vector models are
implemented in stator coordinates.

"""
from types import SimpleNamespace

import numpy as np

from imdrive.common.model import Subsystem
from imdrive.common.utils import check_pole_pairs, check_positive, complex2abc
from imdrive.drive.utils import InductionMachinePars


# %%
class InductionMachine(Subsystem):
    """
    Γ-equivalent model of an induction machine.

    An induction machine is modeled using the Γ-equivalent model [#Sle1989]_.
    The model is implemented in stator coordinates. The flux linkages are used
    as state variables.

    Parameters
    ----------
    par : InductionMachinePars
        Γ-model parameters.

    Notes
    -----
    The stator and rotor flux linkages `psi_ss`, `psi_rs` in `state` are
    advanced by the solver only. The values `psi_ss0`, `psi_rs0` are their
    zero-order-hold samples at the latest sampling instant, used by the
    measurement methods.

    References
    ----------
    .. [#Sle1989] Slemon, "Modelling of induction machines for electric
       drives," IEEE Trans. Ind. Appl., 1989,
       https://doi.org/10.1109/28.44238

    """

    def __init__(self, par: InductionMachinePars):
        super().__init__()
        owner = type(par).__name__
        check_pole_pairs(owner, par.n_p)
        check_positive(
            owner, R_s=par.R_s, R_r=par.R_r, L_ell=par.L_ell, L_s=par.L_s)
        self.par = SimpleNamespace(
            n_p=par.n_p, R_s=par.R_s, R_r=par.R_r, L_ell=par.L_ell,
            L_s=par.L_s)
        self.state = SimpleNamespace(psi_ss=0j, psi_rs=0j)
        self.sol_states = SimpleNamespace(psi_ss=[], psi_rs=[])
        # Sampled states
        self.psi_ss0, self.psi_rs0 = 0j, 0j

    def currents(self, psi_ss, psi_rs):
        """
        Compute the stator and rotor currents.

        Parameters
        ----------
        psi_ss : complex
            Stator flux linkage (Vs).
        psi_rs : complex
            Rotor flux linkage (Vs).

        Returns
        -------
        i_ss : complex
            Stator current (A).
        i_rs : complex
            Rotor current (A).

        """
        par = self.par
        i_rs = (psi_rs - psi_ss)/par.L_ell
        i_ss = psi_ss/par.L_s - i_rs
        return i_ss, i_rs

    def magnetic(self, psi_ss, psi_rs):
        """
        Magnetic model.

        Parameters
        ----------
        psi_ss : complex
            Stator flux linkage (Vs).
        psi_rs : complex
            Rotor flux linkage (Vs).

        Returns
        -------
        i_ss : complex
            Stator current (A).
        i_rs : complex
            Rotor current (A).
        tau_M : float
            Electromagnetic torque (Nm).

        """
        i_ss, i_rs = self.currents(psi_ss, psi_rs)
        tau_M = 1.5*self.par.n_p*np.imag(i_ss*np.conj(psi_ss))
        return i_ss, i_rs, tau_M

    def f(self, psi_ss, psi_rs, u_ss, w_M):
        """
        Compute the state derivatives.

        Parameters
        ----------
        psi_ss : complex
            Stator flux linkage (Vs).
        psi_rs : complex
            Rotor flux linkage (Vs).
        u_ss : complex
            Stator voltage (V).
        w_M : float
            Rotor angular speed (mechanical rad/s).

        Returns
        -------
        d_psi_ss : complex
            Time derivative of the stator flux linkage (V).
        d_psi_rs : complex
            Time derivative of the rotor flux linkage (V).
        i_ss : complex
            Stator current (A).
        tau_M : float
            Electromagnetic torque (Nm).

        Notes
        -----
        In addition to the state derivatives, this method also returns the
        output signals (stator current `i_ss` and torque `tau_M`) needed for
        interconnection with other subsystems. This avoids overlapping
        computation in simulation.

        """
        par = self.par
        i_ss, i_rs, tau_M = self.magnetic(psi_ss, psi_rs)
        d_psi_ss = u_ss - par.R_s*i_ss
        d_psi_rs = -par.R_r*i_rs + 1j*par.n_p*w_M*psi_rs
        return d_psi_ss, d_psi_rs, i_ss, tau_M

    def sample(self):
        """Sample the flux linkages for the measurements."""
        self.psi_ss0, self.psi_rs0 = self.state.psi_ss, self.state.psi_rs

    def meas_currents(self):
        """
        Measure the phase currents.

        This returns the phase currents at the latest sampling instant.

        Returns
        -------
        i_s_abc : 3-tuple of floats
            Phase currents (A).

        """
        i_ss0, _ = self.currents(self.psi_ss0, self.psi_rs0)
        return complex2abc(i_ss0)

    def post_process_states(self):
        """Post-process data."""
        data = self.data
        data.i_ss, data.i_rs, data.tau_M = self.magnetic(
            data.psi_ss, data.psi_rs)

    def post_process_with_inputs(self):
        """Post-process data with inputs."""
        data = self.data
        data.w_m = self.par.n_p*data.w_M


# %%
class InductionMachineInvGamma:
    """
    Inverse-Γ model of an induction machine.

    The inverse-Γ parameters are transformed to the Γ parameters, which are
    then used in the owned :class:`InductionMachine` model. The state and the
    methods of the Γ model are exposed as such. Especially, the rotor flux
    state `psi_rs` is the Γ-model rotor flux linkage, i.e., the inverse-Γ
    rotor flux linkage divided by the magnetic coupling factor `gamma`.

    Parameters
    ----------
    par : InductionMachineInvGammaPars
        Inverse-Γ model parameters.

    """

    def __init__(self, par):
        owner = type(par).__name__
        check_pole_pairs(owner, par.n_p)
        check_positive(
            owner, R_s=par.R_s, R_R=par.R_R, L_sgm=par.L_sgm, L_M=par.L_M)
        self.inv_gamma_par = par
        self.machine = InductionMachine(
            InductionMachinePars.from_inv_gamma_model_pars(par))

    @property
    def par(self):
        """Γ-model parameters."""
        return self.machine.par

    @property
    def state(self):
        """State namespace of the Γ model."""
        return self.machine.state

    @property
    def sol_states(self):
        """Solution lists of the Γ model."""
        return self.machine.sol_states

    @property
    def data(self):
        """Post-processed data of the Γ model."""
        return self.machine.data

    @property
    def psi_ss0(self):
        """Sampled stator flux linkage (Vs)."""
        return self.machine.psi_ss0

    @psi_ss0.setter
    def psi_ss0(self, value):
        self.machine.psi_ss0 = value

    @property
    def psi_rs0(self):
        """Sampled Γ-model rotor flux linkage (Vs)."""
        return self.machine.psi_rs0

    @psi_rs0.setter
    def psi_rs0(self, value):
        self.machine.psi_rs0 = value

    def currents(self, psi_ss, psi_rs):
        """Compute the stator and rotor currents of the Γ model."""
        return self.machine.currents(psi_ss, psi_rs)

    def magnetic(self, psi_ss, psi_rs):
        """Magnetic model, see :meth:`InductionMachine.magnetic`."""
        return self.machine.magnetic(psi_ss, psi_rs)

    def f(self, psi_ss, psi_rs, u_ss, w_M):
        """Compute the state derivatives, see :meth:`InductionMachine.f`."""
        return self.machine.f(psi_ss, psi_rs, u_ss, w_M)

    def sample(self):
        self.machine.sample()

    def meas_currents(self):
        """Measure the phase currents (A) at the latest sampling instant."""
        return self.machine.meas_currents()

    def post_process_states(self):
        self.machine.post_process_states()

    def post_process_with_inputs(self):
        self.machine.post_process_with_inputs()
