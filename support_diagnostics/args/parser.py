"""Parse and validate the collector's command line.

Parsing happens in three steps:

1. Any help flag short-circuits everything else, even malformed options.
2. argparse places tokens into options; unplaceable tokens are unknown options.
3. Every supplied value is checked against its option's pattern, then the
   non-nullable defaults are applied.

Nothing here reads files or the environment.
"""

import argparse
import logging
from collections.abc import Iterable, Sequence

from support_diagnostics import constants
from support_diagnostics.args.errors import (
    AmbiguousShortOption,
    HelpRequested,
    MissingRequiredOption,
    PatternMismatch,
    UnknownOption,
    ValidationFailure,
)
from support_diagnostics.args.schema import DIAGNOSTIC_OPTIONS, OptionSpec
from support_diagnostics.settings import DiagnosticConfig


logger = logging.getLogger(__name__)


class DiagnosticArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing and exiting."""

    def error(self, message: str):
        raise ValidationFailure(message, self.format_help())


def check_schema(options: Iterable[OptionSpec]) -> None:
    """Make sure no flag is claimed by two options.

    Raises:
        AmbiguousShortOption: If a flag appears in more than one entry
    """
    owners: dict[str, list[str]] = {}
    for spec in options:
        for flag in spec.flags:
            owners.setdefault(flag, []).append(spec.dest)

    for flag, dests in owners.items():
        if len(dests) > 1:
            raise AmbiguousShortOption(flag, tuple(dests))


def build_parser(
    options: Sequence[OptionSpec] = DIAGNOSTIC_OPTIONS,
) -> DiagnosticArgumentParser:
    """Build an argument parser from the option table.

    Args:
        options: Option table to build the parser from

    Returns:
        DiagnosticArgumentParser: Parser that never exits the process

    Raises:
        AmbiguousShortOption: If the option table reuses a flag
    """
    check_schema(options)

    parser = DiagnosticArgumentParser(
        prog=constants.PROG_NAME,
        description="Collect diagnostics from a running Elasticsearch node.",
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )

    for spec in options:
        if spec.is_flag:
            parser.add_argument(
                *spec.flags, dest=spec.dest, action="store_true", help=spec.help
            )
        else:
            # append so that every occurrence gets validated
            parser.add_argument(
                *spec.flags,
                dest=spec.dest,
                action="append",
                metavar=spec.metavar,
                help=spec.help,
            )

    return parser


def format_usage() -> str:
    """Render the help text for the collector's options."""
    return build_parser().format_help()


def _help_flags(options: Iterable[OptionSpec]) -> set[str]:
    return {flag for spec in options if spec.is_flag for flag in spec.flags}


def _validate_values(
    spec: OptionSpec, values: list[str], usage: str
) -> str | int:
    """Check every occurrence of an option and return the last one."""
    for value in values:
        if not value and not spec.nullable:
            raise MissingRequiredOption(spec.long, usage)
        if not spec.matches(value):
            raise PatternMismatch(spec.long, value, spec.pattern, usage)

    try:
        return spec.convert(values[-1])
    except ValueError as e:
        # int() refuses digit strings past the interpreter limit
        raise PatternMismatch(spec.long, values[-1], spec.pattern, usage) from e


def parse_args(tokens: Sequence[str]) -> DiagnosticConfig:
    """Parse command line tokens into a validated configuration.

    Args:
        tokens: Command line arguments, without the program name

    Returns:
        DiagnosticConfig: Validated configuration

    Raises:
        HelpRequested: If a help flag appears anywhere in the tokens
        MissingRequiredOption: If an option is missing its value
        PatternMismatch: If a value does not match its option's pattern
        UnknownOption: If a token is not a recognized option
    """
    parser = build_parser()
    usage = parser.format_help()
    tokens = list(tokens)

    if _help_flags(DIAGNOSTIC_OPTIONS).intersection(tokens):
        raise HelpRequested(usage)

    specs_by_name = {"/".join(spec.flags): spec for spec in DIAGNOSTIC_OPTIONS}
    try:
        namespace, extras = parser.parse_known_args(tokens)
    except argparse.ArgumentError as e:
        spec = specs_by_name.get(e.argument_name)
        if spec is not None and not spec.is_flag:
            raise MissingRequiredOption(spec.long, usage) from e
        raise ValidationFailure(str(e), usage) from e

    if extras:
        raise UnknownOption(extras[0], usage)

    values: dict[str, str | int] = {}
    for spec in DIAGNOSTIC_OPTIONS:
        if spec.is_flag:
            continue
        supplied = getattr(namespace, spec.dest)
        if supplied:
            values[spec.dest] = _validate_values(spec, supplied, usage)
        elif spec.default is not None:
            values[spec.dest] = spec.default

    logger.debug("Validated options: %s", ", ".join(sorted(values)))
    return DiagnosticConfig(**values)


def format_args(config: DiagnosticConfig) -> list[str]:
    """Render a configuration back into canonical long-form tokens.

    Absent values are left out, so ``parse_args(format_args(config))``
    yields an equal configuration. Values starting with a dash are attached
    with ``=`` so they are not mistaken for options.
    """
    tokens: list[str] = []
    for spec in DIAGNOSTIC_OPTIONS:
        if spec.is_flag:
            continue
        value = getattr(config, spec.dest)
        if value is None:
            continue
        value = str(value)
        if value.startswith("-"):
            tokens.append(f"{spec.long}={value}")
        else:
            tokens.extend([spec.long, value])
    return tokens
