"""Utilities for machine drives."""
from imdrive.drive.utils._utils import (
    InductionMachineInvGammaPars,
    InductionMachinePars,
    MachinePars,
)

__all__ = [
    "InductionMachineInvGammaPars",
    "InductionMachinePars",
    "MachinePars",
]
