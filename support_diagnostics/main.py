#!/usr/bin/env python3
"""Main entrypoint for the support diagnostics collector."""

import json
import logging
import sys
from collections.abc import Sequence
from os import environ

from pydantic import ValidationError

from support_diagnostics import constants
from support_diagnostics.args import HelpRequested, ValidationFailure, parse_args
from support_diagnostics.settings import CollectionSettings


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s:%(filename)s:%(lineno)d] %(levelname)s: %(message)s"


def configure_logging(log_level: str, use_rich: bool = False) -> None:
    """Configure logging with optional rich formatting.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        use_rich: Whether to use rich colored logging
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    if use_rich:
        try:
            from rich.logging import RichHandler
            from rich.console import Console

            # Keep stdout for the resolved settings
            console = Console(stderr=True)

            logging.basicConfig(
                level=level,
                format="%(message)s",
                datefmt="[%X]",
                handlers=[
                    RichHandler(
                        console=console,
                        show_path=True,
                        show_time=True,
                        show_level=True,
                        markup=True,
                        rich_tracebacks=True,
                    )
                ],
            )
        except ImportError:
            # Fall back to standard logging if rich is not available
            logging.basicConfig(
                level=level,
                format=LOG_FORMAT,
            )
    else:
        logging.basicConfig(
            level=level,
            format=LOG_FORMAT,
        )


def is_truthy(value: str | None) -> bool:
    return value is not None and value.strip().lower() in ("1", "true", "yes", "on")


def main(argv: Sequence[str] | None = None) -> int:
    """Main function.

    Args:
        argv: Command line arguments without the program name, defaults
            to ``sys.argv[1:]``

    Returns:
        int: Process exit code
    """
    configure_logging(
        environ.get(constants.LOG_LEVEL_ENV, constants.DEFAULT_LOG_LEVEL),
        is_truthy(environ.get(constants.RICH_LOGS_ENV)),
    )

    if argv is None:
        argv = sys.argv[1:]

    try:
        config = parse_args(argv)
    except HelpRequested as e:
        print(e.usage, end="")
        return e.exit_code
    except ValidationFailure as e:
        logger.debug("Argument validation failed: %s", e.message)
        print(f"{constants.PROG_NAME}: error: {e.message}", file=sys.stderr)
        print(
            f"Run '{constants.PROG_NAME} --help' to see the available options.",
            file=sys.stderr,
        )
        return e.exit_code

    try:
        settings = CollectionSettings.from_config(config)

        logger.info(
            "Collecting diagnostics from %s (node: %s)",
            settings.host_port,
            settings.node_name,
        )
        logger.info(
            "Stat runs: %d, interval: %d seconds",
            settings.stat_runs,
            settings.stat_interval,
        )
        logger.info("Output directory: %s", settings.output_directory)
        if settings.auth_type == "basic" and settings.auth_password is None:
            logger.info("No password supplied, it will be prompted for")

        print(json.dumps(settings.model_dump_public(), indent=2, sort_keys=True))

    except ValidationError as e:
        logger.error(
            "Invalid config\n"
            + "\n".join(
                [
                    f"{'.'.join([str(loc) for loc in err['loc']]) or 'config'}: {err['msg']}"
                    for err in e.errors()
                ]
            )
        )
        return 1
    except KeyboardInterrupt:
        logger.info("Collector stopped by user")
        return 130
    except Exception as e:
        logger.error("Error running collector: %s", e, exc_info=True)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
