from sassvars.errors import ParseError
from sassvars.parser.transformer import parse_stylesheet

__all__ = ["ParseError", "parse_stylesheet"]
