"""Translation of botocore exceptions into provider errors."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
    NoRegionError,
    PartialCredentialsError,
    ProfileNotFound,
    ReadTimeoutError,
)

from ah.providers.exceptions import (
    ProviderAPIError,
    ProviderConfigurationError,
    ProviderConnectionError,
    ProviderCredentialsError,
)

logger = logging.getLogger(__name__)

CREDENTIAL_ERROR_CODES = frozenset(
    (
        "AuthFailure",
        "InvalidClientTokenId",
        "SignatureDoesNotMatch",
        "UnrecognizedClientException",
    )
)


@contextmanager
def handle_aws_errors() -> Iterator[None]:
    """Re-raise botocore failures as provider exceptions.

    Raises
    ------
    ProviderCredentialsError
        Credentials are missing, incomplete or refused
    ProviderConfigurationError
        No region could be resolved or the profile does not exist
    ProviderConnectionError
        The endpoint could not be reached or timed out
    ProviderAPIError
        Any other API or botocore failure, carrying the EC2 error code
    """
    try:
        yield
    except (NoCredentialsError, PartialCredentialsError) as e:
        raise ProviderCredentialsError(str(e)) from e
    except (NoRegionError, ProfileNotFound) as e:
        raise ProviderConfigurationError(str(e)) from e
    except (EndpointConnectionError, ConnectTimeoutError, ReadTimeoutError) as e:
        raise ProviderConnectionError(str(e)) from e
    except ClientError as e:
        error = e.response.get("Error", {})
        error_code = error.get("Code", "Unknown")
        message = error.get("Message") or str(e)
        logger.debug("EC2 call failed with %s: %s", error_code, message)

        if error_code in CREDENTIAL_ERROR_CODES:
            raise ProviderCredentialsError(message) from e

        raise ProviderAPIError(message, error_code=error_code) from e
    except BotoCoreError as e:
        raise ProviderAPIError(str(e)) from e
