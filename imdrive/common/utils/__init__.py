"""Common utilities."""
from imdrive.common.utils._helpers import (
    abc2complex,
    complex2abc,
    Sequence,
    Step,
    wrap,
)
from imdrive.common.utils._utils import (
    ConfigurationError,
    check_pole_pairs,
    check_positive,
)

__all__ = [
    "abc2complex",
    "complex2abc",
    "check_pole_pairs",
    "check_positive",
    "ConfigurationError",
    "Sequence",
    "Step",
    "wrap",
]
