from bemcheck.validation.rules import (
    check_selector_accordance,
    expected_location,
    extract_candidate_rules,
)
from bemcheck.validation.validator import (
    NamingViolation,
    check_file,
    check_naming,
    check_naming_or_raise,
)

__all__ = [
    "check_selector_accordance",
    "expected_location",
    "extract_candidate_rules",
    "NamingViolation",
    "check_file",
    "check_naming",
    "check_naming_or_raise",
]
