from bemcheck.parser.errors import ParseError
from bemcheck.parser.transformer import parse_stylesheet

__all__ = ["ParseError", "parse_stylesheet"]
