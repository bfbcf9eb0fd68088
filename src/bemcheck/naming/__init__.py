"""BEM naming: decompose class names and build them back."""

from bemcheck.naming.parser import parse_name, stringify

__all__ = ["parse_name", "stringify"]
