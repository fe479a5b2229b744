from fontgate.stylesheet.errors import ParseError
from fontgate.stylesheet.model import AtRule, Declaration, Root, Rule
from fontgate.stylesheet.parser import parse_css
from fontgate.stylesheet.stringify import stringify

__all__ = [
    "parse_css",
    "stringify",
    "ParseError",
    "Root",
    "Rule",
    "AtRule",
    "Declaration",
]
