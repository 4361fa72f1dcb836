"""Common functions and classes for continuous-time system models."""
from imdrive.common.model._model import Model, Subsystem
from imdrive.common.model._converter import Inverter
from imdrive.common.model._simulation import Simulation

__all__ = [
    "Simulation",
    "Model",
    "Subsystem",
    "Inverter",
]
