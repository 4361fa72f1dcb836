"""Base classes for continuous-time system models."""

from abc import ABC, abstractmethod
from types import SimpleNamespace

import numpy as np


# %%
class Model(ABC):
    """
    Base class for continuous-time system models.

    This base class is a template for a system model that interconnects the
    subsystems and provides an interface to the solver. The state of the
    model is the concatenation of the subsystem states, in the order of
    `subsystems`. The subsystems own their states, the model only collects
    and distributes them.

    """

    def __init__(self):
        self.t0 = 0
        self.converter = None
        self.subsystems = []  # Contains the list of subsystems
        self.sol_t = []

    def get_initial_values(self):
        """Get initial values of all subsystems before the solver."""
        state0 = []
        for subsystem in self.subsystems:
            if hasattr(subsystem, "state"):
                state0 += list(vars(subsystem.state).values())

        return state0

    def set_states(self, state_list):
        """Set the states in all subsystems."""
        index = 0
        for subsystem in self.subsystems:
            if hasattr(subsystem, "state"):
                for attr in vars(subsystem.state):
                    setattr(subsystem.state, attr, state_list[index])
                    index += 1

    def sample(self):
        """Update the zero-order-hold measurements of all subsystems."""
        for subsystem in self.subsystems:
            if hasattr(subsystem, "sample"):
                subsystem.sample()

    @staticmethod
    def check_finite(t, state_list):
        """
        Check that the state is finite.

        Raises
        ------
        FloatingPointError
            If the state contains NaN or Inf.

        """
        if not np.all(np.isfinite(state_list)):
            raise FloatingPointError(
                f"Non-finite state {list(state_list)} at t = {t} s.")

    @abstractmethod
    def rhs(self, t, state_list, q_cs):
        """
        Compute the complete state derivative list for the solver.

        This must not modify the subsystems, since the solver evaluates the
        derivative at trial states.

        """

    def save(self, sol):
        """Save the solution."""
        self.sol_t.extend(sol.t)
        self.converter.sol_q_cs.extend(sol.q_cs)

        index = 0
        for subsystem in self.subsystems:
            if hasattr(subsystem, "sol_states"):
                for attr in vars(subsystem.sol_states):
                    getattr(subsystem.sol_states, attr).extend(sol.y[index])
                    index += 1

    def post_process_states(self):
        """Transform the lists to the ndarray format and post-process them."""
        self.converter.data.q_cs = np.asarray(self.converter.sol_q_cs)

        for subsystem in self.subsystems:
            subsystem.data.t = np.asarray(self.sol_t)
            if hasattr(subsystem, "sol_states"):
                for key, value in vars(subsystem.sol_states).items():
                    setattr(subsystem.data, key, np.asarray(value))

            if hasattr(subsystem, "post_process_states"):
                subsystem.post_process_states()

    def post_process_with_inputs(self):
        """Post-process after the inputs have been added."""
        for subsystem in self.subsystems:
            if hasattr(subsystem, "post_process_with_inputs"):
                subsystem.post_process_with_inputs()


# %%
class Subsystem(ABC):
    """Base class for subsystems."""

    def __init__(self):
        # Parameters and states
        self.par = SimpleNamespace()
        self.state = SimpleNamespace()
        # Save the solution in these lists
        self.sol_states = SimpleNamespace()
        # For post-processed data
        self.data = SimpleNamespace()
