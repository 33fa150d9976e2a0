from .options_parser import OptionsParser, create_options_parser, parse_options

__all__ = [
    "OptionsParser",
    "create_options_parser",
    "parse_options",
]
