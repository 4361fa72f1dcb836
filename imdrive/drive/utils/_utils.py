"""Parameter dataclasses of induction machines."""

# %%
from abc import ABC
from dataclasses import dataclass

from imdrive.common.utils import check_positive


# %%
@dataclass
class MachinePars(ABC):
    """
    Base class for electrical parameters of an electric machine.

    Parameters
    ----------
    n_p : int
        Number of pole pairs.
    R_s : float
        Stator resistance (Ω).

    """
    n_p: int = None
    R_s: float = None


# %%
@dataclass
class InductionMachinePars(MachinePars):
    """
    Γ-model parameters of an induction machine.

    Parameters
    ----------
    n_p : int
        Number of pole pairs.
    R_s : float
        Stator resistance (Ω).
    R_r : float
        Rotor resistance (Ω).
    L_ell : float
        Leakage inductance (H).
    L_s : float
        Stator inductance (H).

    """
    R_r: float = None
    L_ell: float = None
    L_s: float = None

    @classmethod
    def from_inv_gamma_model_pars(cls, par):
        """
        Compute Γ-model parameters from inverse-Γ model parameters.

        This transformation assumes that the parameters are constant.

        Parameters
        ----------
        par : InductionMachineInvGammaPars
            Inverse-Γ model parameters.

        Returns
        -------
        InductionMachinePars
            Γ model parameters.

        Raises
        ------
        ConfigurationError
            If the magnetizing or leakage inductance is not positive, in which
            case the magnetic coupling factor is not defined.

        """
        check_positive(
            "InductionMachineInvGammaPars", L_sgm=par.L_sgm, L_M=par.L_M)
        g = par.L_M/(par.L_M + par.L_sgm)
        R_r, L_ell, L_s = par.R_R/g**2, par.L_sgm/g, par.L_M + par.L_sgm

        return cls(R_s=par.R_s, R_r=R_r, L_ell=L_ell, L_s=L_s, n_p=par.n_p)


# %%
@dataclass
class InductionMachineInvGammaPars(MachinePars):
    """
    Inverse-Γ model parameters of an induction machine.

    Parameters
    ----------
    n_p : int
        Number of pole pairs.
    R_s : float
        Stator resistance (Ω).
    R_R : float
        Rotor resistance (Ω).
    L_sgm : float
        Leakage inductance (H).
    L_M : float
        Magnetizing inductance (H).

    """
    R_R: float = None
    L_sgm: float = None
    L_M: float = None

    @property
    def gamma(self):
        """Magnetic coupling factor."""
        return self.L_M/(self.L_M + self.L_sgm)

    @classmethod
    def from_gamma_model_pars(cls, par):
        """
        Compute inverse-Γ model parameters from Γ model parameters.

        This transformation assumes that the parameters are constant.

        Parameters
        ----------
        par : InductionMachinePars
            Γ-model parameters.

        Returns
        -------
        InductionMachineInvGammaPars
            Inverse-Γ model parameters.

        """
        check_positive("InductionMachinePars", L_ell=par.L_ell, L_s=par.L_s)
        g = par.L_s/(par.L_s + par.L_ell)
        R_R, L_sgm, L_M = g**2*par.R_r, g*par.L_ell, g*par.L_s

        return cls(R_s=par.R_s, R_R=R_R, L_sgm=L_sgm, L_M=L_M, n_p=par.n_p)
