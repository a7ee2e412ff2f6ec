"""Declarative table of every command line option the collector accepts."""

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict

from support_diagnostics import constants


class OptionSpec(BaseModel):
    """A single command line option.

    Attributes:
        dest: Name of the DiagnosticConfig field the option populates
        long: Long flag, e.g. ``--host-port``
        short: Short aliases, e.g. ``("-H",)``
        help: Help text rendered in the usage message
        arity: Number of values the option consumes (0 for a flag)
        default: Value used when the option is not supplied
        pattern: Regular expression the whole value must match
        nullable: Whether absence is a valid outcome distinct from any value
        value_type: Type the validated value is converted to
        metavar: Placeholder for the value in the usage message
    """

    model_config = ConfigDict(frozen=True)

    dest: str
    long: str
    short: tuple[str, ...] = ()
    help: str
    arity: Literal[0, 1] = 1
    default: str | None = None
    pattern: str | None = None
    nullable: bool = True
    value_type: Literal["str", "int"] = "str"
    metavar: str | None = None

    @property
    def flags(self) -> tuple[str, ...]:
        return (*self.short, self.long)

    @property
    def is_flag(self) -> bool:
        return self.arity == 0

    def matches(self, value: str) -> bool:
        """Check the value against the option pattern.

        The pattern has to match the whole value, not just a prefix of it.
        Digit and whitespace classes only cover ASCII characters.
        """
        if self.pattern is None:
            return True
        return re.fullmatch(self.pattern, value, re.ASCII) is not None

    def convert(self, value: str) -> str | int:
        if self.value_type == "int":
            return int(value)
        return value


HELP_OPTION = OptionSpec(
    dest="help",
    long="--help",
    short=("-h", "-?"),
    help="This help message",
    arity=0,
)

DIAGNOSTIC_OPTIONS: tuple[OptionSpec, ...] = (
    HELP_OPTION,
    OptionSpec(
        dest="host_port",
        long="--host-port",
        short=("-H",),
        help=f"Elasticsearch hostname:port. Default: {constants.DEFAULT_HOST_PORT} (optional)",
        default=constants.DEFAULT_HOST_PORT,
        pattern=constants.HOST_PORT_PATTERN,
        nullable=False,
        metavar="HOST:PORT",
    ),
    OptionSpec(
        dest="node_name",
        long="--node-name",
        short=("-n",),
        help=(
            "On a host with multiple nodes, specify the node name to gather data for. "
            "Value should match node.name as defined in elasticsearch.yml. "
            f"Default: {constants.DEFAULT_NODE_NAME} (optional)"
        ),
        default=constants.DEFAULT_NODE_NAME,
        pattern=constants.NODE_NAME_PATTERN,
        nullable=False,
        metavar="NAME",
    ),
    OptionSpec(
        dest="output_directory",
        long="--output-directory",
        short=("-o",),
        help=(
            "The output directory to use instead of "
            "'./support-diagnostics.[hostname].[node].[timestamp]' (optional)"
        ),
        metavar="PATH",
    ),
    OptionSpec(
        dest="stat_runs",
        long="--stat-runs",
        short=("-r",),
        help=f"Number of times to collect stats. Default: {constants.DEFAULT_STAT_RUNS} (optional)",
        pattern=constants.POSITIVE_INT_PATTERN,
        value_type="int",
        metavar="RUNS",
    ),
    OptionSpec(
        dest="stat_interval",
        long="--stat-interval",
        short=("-i",),
        help=(
            "Interval in seconds between stats collections. "
            f"Default: {constants.DEFAULT_STAT_INTERVAL} (optional)"
        ),
        pattern=constants.POSITIVE_INT_PATTERN,
        value_type="int",
        metavar="SECONDS",
    ),
    OptionSpec(
        dest="auth_type",
        long="--auth-type",
        short=("-a",),
        help="Authentication type. Either 'basic' or 'cookie'. Default: none (optional)",
        metavar="TYPE",
    ),
    OptionSpec(
        dest="auth_creds",
        long="--auth-creds",
        short=("-c",),
        help=(
            "Authentication credentials. Either a path to the auth cookie file or the "
            "basic auth username. You will be prompted for the password unless you "
            "specify -p. Default: none (optional)"
        ),
        metavar="CREDS",
    ),
    # -a belongs to --auth-type; the password uses -p as the -c help text promises
    OptionSpec(
        dest="auth_password",
        long="--auth-password",
        short=("-p",),
        help=(
            "Password for authentication. To be used with -c if being prompted for a "
            "password is undesirable. Default: none (optional)"
        ),
        metavar="PASSWORD",
    ),
)
