"""Simulation environment."""

import numpy as np
from scipy.integrate import solve_ivp


# %%
class Simulation:
    """
    Simulation environment.

    The switching state is held constant over each interval of length `T_s`,
    after which the measurements of the subsystems are sampled. No controller
    is included, i.e., the switching state is given as an open-loop command.

    Parameters
    ----------
    mdl : Model
        Continuous-time system model.

    """

    def __init__(self, mdl=None):
        self.mdl = mdl

    def simulate(self, t_stop=1, q_cs=0j, T_s=250e-6, max_step=np.inf):
        """
        Solve the continuous-time model.

        Parameters
        ----------
        t_stop : float, optional
            Simulation stop time. The default is 1.
        q_cs : complex | callable, optional
            Switching state space vector, either constant or a function of
            time, ``q_cs(t)``. The default is 0j.
        T_s : float, optional
            Sampling period. The default is 250e-6.
        max_step : float, optional
            Max step size of the solver. The default is inf.

        Notes
        -----
        Other options of `solve_ivp` could be easily used if needed, but, for
        simplicity, only `max_step` is included as an option of this method.

        """
        try:
            self._simulation_loop(t_stop, q_cs, T_s, max_step)
        except FloatingPointError:
            print(f"Invalid value encountered at {self.mdl.t0:.4f} seconds.")
            raise
        # Post-process the solution data
        self.mdl.post_process()

    @np.errstate(invalid="raise")
    def _simulation_loop(self, t_stop, q_cs, T_s, max_step):
        """Run the main simulation loop."""
        while self.mdl.t0 <= t_stop:

            # Switching state held over the sampling period
            q = q_cs(self.mdl.t0) if callable(q_cs) else q_cs

            # Get initial values
            state0 = self.mdl.get_initial_values()

            # Integrate over t_span
            t_span = (self.mdl.t0, self.mdl.t0 + T_s)
            sol = solve_ivp(
                self.mdl.rhs, t_span, state0, max_step=max_step, args=(q,))

            # Accept the final state and sample the measurements
            self.mdl.set_states(sol.y[:, -1])
            self.mdl.sample()

            # Set the new initial time
            self.mdl.t0 = t_span[-1]

            # Save the solution
            sol.q_cs = len(sol.t)*[q]
            self.mdl.save(sol)
