"""Main module entrypoint for local and container runtime execution.

This module validates startup configuration and launches the FastAPI service,
or runs the client-side distribution check against a load-balancing front door.
"""

import argparse
import logging

import uvicorn

from app.bootstrap import (
    ServiceStartupError,
    bootstrap_bind_listening_socket,
    bootstrap_create_application,
    bootstrap_create_distribution_probe,
)
from app.config import config_configure_logging, config_load_settings

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to `sys.argv[1:]`.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with status 1 on bind failure or a failed check.
    """

    argument_parser = argparse.ArgumentParser(description="Replica identity service runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "distribution-check"),
        help="Runtime command: `api` starts server, `distribution-check` probes a load-balancing front door",
        type=str,
    )
    argument_parser.add_argument(
        "--url",
        dest="url",
        type=str,
        help="Front-door URL for `distribution-check`",
    )
    argument_parser.add_argument(
        "--requests",
        dest="request_count",
        type=main_parse_positive_int,
        default=50,
        help="Number of requests issued by `distribution-check`",
    )
    argument_parser.add_argument(
        "--expected-replicas",
        dest="expected_replicas",
        type=main_parse_positive_int,
        help="Optional replica count every request set must reach for `distribution-check` to pass",
    )
    argument_parser.add_argument(
        "--timeout",
        dest="timeout_seconds",
        type=main_parse_positive_float,
        default=5.0,
        help="Per-request timeout in seconds for `distribution-check`",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = config_load_settings()
    config_configure_logging(settings.log_level)

    if parsed_arguments.command == "distribution-check":
        if not parsed_arguments.url:
            argument_parser.error("--url is required for distribution-check")
        try:
            check_passed = main_run_distribution_check(
                url=parsed_arguments.url,
                request_count=parsed_arguments.request_count,
                expected_replicas=parsed_arguments.expected_replicas,
                timeout_seconds=parsed_arguments.timeout_seconds,
            )
        except ValueError as error:
            argument_parser.error(str(error))
        if not check_passed:
            raise SystemExit(1)
        return

    application = bootstrap_create_application(settings=settings)
    try:
        listening_socket = bootstrap_bind_listening_socket(
            host=settings.application_host,
            port=settings.application_port,
        )
    except ServiceStartupError as error:
        logger.error("Startup failed: %s", error)
        raise SystemExit(1) from error

    logger.info("Server running on port %d", settings.application_port)
    server = uvicorn.Server(
        uvicorn.Config(
            application,
            host=settings.application_host,
            port=settings.application_port,
            log_level=settings.log_level.lower(),
        )
    )
    server.run(sockets=[listening_socket])


def main_parse_positive_int(raw_value: str) -> int:
    """Parse a command-line integer that must be at least one.

    Args:
        raw_value: Raw argument text.

    Returns:
        int: Parsed positive integer.

    Raises:
        argparse.ArgumentTypeError: Raised when the value is not an integer >= 1.
    """

    try:
        parsed_value = int(raw_value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"invalid integer value: {raw_value!r}") from error
    if parsed_value < 1:
        raise argparse.ArgumentTypeError(f"value must be >= 1, got {parsed_value}")
    return parsed_value


def main_parse_positive_float(raw_value: str) -> float:
    """Parse a command-line number that must be greater than zero.

    Args:
        raw_value: Raw argument text.

    Returns:
        float: Parsed positive number.

    Raises:
        argparse.ArgumentTypeError: Raised when the value is not a number > 0.
    """

    try:
        parsed_value = float(raw_value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"invalid number value: {raw_value!r}") from error
    if not parsed_value > 0:
        raise argparse.ArgumentTypeError(f"value must be > 0, got {raw_value}")
    return parsed_value


def main_run_distribution_check(
    url: str,
    request_count: int,
    expected_replicas: int | None,
    timeout_seconds: float,
) -> bool:
    """Run the distribution check and print per-replica hit counts.

    Args:
        url: Front-door URL.
        request_count: Number of requests to issue.
        expected_replicas: Optional replica count the check must observe.
        timeout_seconds: Per-request timeout in seconds.

    Returns:
        bool: True when all requests succeeded and the expected replicas were reached.

    Raises:
        ValueError: Raised when arguments are invalid.
    """

    probe = bootstrap_create_distribution_probe(base_url=url, request_timeout_seconds=timeout_seconds)
    report = probe.probe_run(request_count=request_count)

    for identity in report.distinct_identities:
        print(f"{identity}\t{report.identity_counts[identity]}")
    print(
        f"requests={report.requested_count} succeeded={report.succeeded_count} "
        f"failed={report.failed_count} replicas={len(report.identity_counts)}"
    )

    if expected_replicas is None:
        return report.failed_count == 0
    return report.report_reaches_all_replicas(expected_replicas)


if __name__ == "__main__":
    main()
