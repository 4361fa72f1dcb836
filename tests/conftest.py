import pytest

from imdrive.common.model import Inverter
from imdrive.drive.model import (
    Drive, InductionMachineInvGamma, StiffMechanicalSystem)
from imdrive.drive.utils import InductionMachineInvGammaPars


@pytest.fixture
def inv_gamma_par():
    return InductionMachineInvGammaPars(
        n_p=2, R_s=3.7, R_R=2.1, L_sgm=.021, L_M=.224)


@pytest.fixture
def drive(inv_gamma_par):
    return Drive(
        converter=Inverter(u_dc=540),
        machine=InductionMachineInvGamma(inv_gamma_par),
        mechanics=StiffMechanicalSystem(J=.015),
    )
