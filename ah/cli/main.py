"""CLI entry point for ah."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

import fire

from ah.constants import NOISY_LOGGERS
from ah.logging import StreamFormatter, StreamRoutingFilter
from ah.providers import (
    ProviderAPIError,
    ProviderConfigurationError,
    ProviderConnectionError,
    ProviderContractViolation,
    ProviderCredentialsError,
)
from ah.providers.aws.utils import get_aws_credentials_error_message
from ah.utils import is_debug_mode


def get_ah_class() -> type:
    """Get the Ah command class on-demand to avoid circular imports.

    Returns
    -------
    type
        Ah command class
    """
    from ah.__main__ import Ah

    return Ah


def configure_logging(debug_mode: bool) -> None:
    """Route log records to stdout/stderr and quiet the AWS SDK loggers.

    Parameters
    ----------
    debug_mode : bool
        Log at DEBUG instead of INFO
    """
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(StreamFormatter("%(message)s"))
    stdout_handler.addFilter(StreamRoutingFilter("stdout"))

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(StreamFormatter("%(message)s"))
    stderr_handler.addFilter(StreamRoutingFilter("stderr"))

    logging.basicConfig(
        level=logging.DEBUG if debug_mode else logging.INFO,
        handlers=[stdout_handler, stderr_handler],
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def handle_credentials_error(debug_mode: bool) -> None:
    """Handle provider credentials error.

    Parameters
    ----------
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    ProviderCredentialsError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    print(get_aws_credentials_error_message(), file=sys.stderr)
    sys.exit(1)


def handle_configuration_error(
    error: ProviderConfigurationError, debug_mode: bool
) -> None:
    """Handle missing region or unknown profile.

    Parameters
    ----------
    error : ProviderConfigurationError
        The configuration error that was raised
    debug_mode : bool
        Whether debug mode is enabled
    """
    if debug_mode:
        raise

    print(f"AWS client configuration error: {error}\n", file=sys.stderr)
    print("Fix it:", file=sys.stderr)
    print("  ah ls --region us-east-1", file=sys.stderr)
    print("Or set a default region:", file=sys.stderr)
    print("  export AWS_DEFAULT_REGION=us-east-1", file=sys.stderr)
    sys.exit(1)


def handle_api_error(error: ProviderAPIError, debug_mode: bool) -> None:
    """Handle provider API error with context-specific messages.

    Parameters
    ----------
    error : ProviderAPIError
        The API error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    ProviderAPIError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    error_code = error.error_code

    if error_code == "UnauthorizedOperation":
        print("Insufficient IAM permissions\n", file=sys.stderr)
        print("Your AWS credentials need:", file=sys.stderr)
        print(
            "  - ec2:DescribeInstances, ec2:StartInstances, ec2:StopInstances",
            file=sys.stderr,
        )
    elif error_code == "IncorrectInstanceState":
        print(f"Instance cannot make this transition: {error}", file=sys.stderr)
    elif error_code in ["RequestLimitExceeded", "Throttling"]:
        print("AWS API rate limit exceeded, try again later", file=sys.stderr)
    elif error_code in ["ExpiredToken", "RequestExpired", "ExpiredTokenException"]:
        print("AWS credentials have expired\n", file=sys.stderr)
        print("Fix it:", file=sys.stderr)
        print("  aws sso login           # If using AWS SSO", file=sys.stderr)
        print("  aws configure           # Re-configure credentials", file=sys.stderr)
    else:
        print(f"AWS API error: {error}", file=sys.stderr)

    sys.exit(1)


def handle_connection_error(error: ProviderConnectionError, debug_mode: bool) -> None:
    """Handle an unreachable endpoint or a timed out request.

    Parameters
    ----------
    error : ProviderConnectionError
        The connection error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    ProviderConnectionError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    print(f"Could not reach AWS: {error}", file=sys.stderr)
    sys.exit(1)


def handle_contract_violation(
    error: ProviderContractViolation, debug_mode: bool
) -> None:
    """Handle a provider response missing a field it must carry.

    Parameters
    ----------
    error : ProviderContractViolation
        The contract violation that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    ProviderContractViolation
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    print(f"Unexpected response from AWS: {error}", file=sys.stderr)
    sys.exit(1)


def handle_value_error(error: ValueError, debug_mode: bool) -> None:
    """Handle configuration value errors.

    Parameters
    ----------
    error : ValueError
        The value error that was raised
    debug_mode : bool
        Whether debug mode is enabled
    """
    if debug_mode:
        raise

    print(f"Configuration error: {error}", file=sys.stderr)
    sys.exit(2)


def handle_runtime_error(error: RuntimeError, debug_mode: bool) -> None:
    """Handle unexpected runtime errors.

    Parameters
    ----------
    error : RuntimeError
        The runtime error that was raised
    debug_mode : bool
        Whether debug mode is enabled

    Raises
    ------
    RuntimeError
        Re-raised if debug mode is enabled
    """
    if debug_mode:
        raise

    print(f"Unexpected error: {error}", file=sys.stderr)
    sys.exit(1)


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the Fire CLI with fail-fast error reporting.

    Fire maps the public methods of the Ah class (``ls``, ``start``,
    ``stop``) to subcommands. Every provider failure is fatal: a message
    is printed to stderr and the process exits non-zero.

    Parameters
    ----------
    argv : Sequence[str] | None
        Command line arguments; ``sys.argv[1:]`` when None
    """
    debug_mode = is_debug_mode()
    configure_logging(debug_mode)

    Ah = get_ah_class()

    try:
        fire.Fire(Ah(), command=list(argv) if argv is not None else None, name="ah")
    except ProviderCredentialsError:
        handle_credentials_error(debug_mode)
    except ProviderConfigurationError as e:
        handle_configuration_error(e, debug_mode)
    except ProviderConnectionError as e:
        handle_connection_error(e, debug_mode)
    except ProviderContractViolation as e:
        handle_contract_violation(e, debug_mode)
    except ProviderAPIError as e:
        handle_api_error(e, debug_mode)
    except ValueError as e:
        handle_value_error(e, debug_mode)
    except RuntimeError as e:
        handle_runtime_error(e, debug_mode)
