"""bemcheck: lint style-sheet trees against the BEM file naming convention."""

__version__ = "0.1.0"

from bemcheck.config import NamingConvention, NamingScheme  # noqa: E402
from bemcheck.model.violation import NamingError, ViolationKind  # noqa: E402
from bemcheck.validation import (  # noqa: E402
    NamingViolation,
    check_naming,
    check_naming_or_raise,
)

__all__ = [
    "__version__",
    "NamingConvention",
    "NamingScheme",
    "NamingError",
    "ViolationKind",
    "NamingViolation",
    "check_naming",
    "check_naming_or_raise",
]
