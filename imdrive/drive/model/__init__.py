"""Continuous-time machine drive models."""
from imdrive.drive.model._drive import Drive
from imdrive.drive.model._machine import (
    InductionMachine,
    InductionMachineInvGamma,
)
from imdrive.drive.model._mechanics import StiffMechanicalSystem

__all__ = [
    "Drive",
    "InductionMachine",
    "InductionMachineInvGamma",
    "StiffMechanicalSystem",
]
