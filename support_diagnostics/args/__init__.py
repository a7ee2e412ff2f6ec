"""Command line schema and validation for the diagnostics collector."""

from .errors import (
    AmbiguousShortOption,
    HelpRequested,
    MissingRequiredOption,
    ParseFailure,
    PatternMismatch,
    UnknownOption,
    ValidationFailure,
)
from .parser import build_parser, format_args, format_usage, parse_args
from .schema import DIAGNOSTIC_OPTIONS, OptionSpec

__all__ = [
    "AmbiguousShortOption",
    "DIAGNOSTIC_OPTIONS",
    "HelpRequested",
    "MissingRequiredOption",
    "OptionSpec",
    "ParseFailure",
    "PatternMismatch",
    "UnknownOption",
    "ValidationFailure",
    "build_parser",
    "format_args",
    "format_usage",
    "parse_args",
]
