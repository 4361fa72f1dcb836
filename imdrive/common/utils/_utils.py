"""Configuration checks for the model parameters."""

# %%
import numpy as np


# %%
class ConfigurationError(ValueError):
    """Invalid or missing model parameter."""


# %%
def check_positive(owner, **values):
    """
    Check that the given parameters are positive and finite.

    Parameters
    ----------
    owner : str
        Name of the object that is configured, used in the error message.
    **values : float
        Parameter values keyed by their names.

    Raises
    ------
    ConfigurationError
        If any of the values is missing, non-finite, or non-positive.

    """
    for name, value in values.items():
        if value is None:
            raise ConfigurationError(f"{owner}: parameter {name} is missing.")
        if not np.isfinite(value) or value <= 0:
            raise ConfigurationError(
                f"{owner}: parameter {name} must be positive and finite, "
                f"got {value}.")


def check_pole_pairs(owner, n_p):
    """Check that the number of pole pairs is a positive integer."""
    if isinstance(n_p, bool) or not isinstance(n_p, (int, np.integer)):
        raise ConfigurationError(
            f"{owner}: number of pole pairs n_p must be an integer, "
            f"got {n_p!r}.")
    if n_p < 1:
        raise ConfigurationError(
            f"{owner}: number of pole pairs n_p must be positive, got {n_p}.")
