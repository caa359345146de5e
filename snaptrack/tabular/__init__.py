from .reader import MalformedInputError, ParsedTable, ParseError, parse_tabular

__all__ = [
    "MalformedInputError",
    "ParseError",
    "ParsedTable",
    "parse_tabular",
]
