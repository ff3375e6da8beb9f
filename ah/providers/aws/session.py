"""EC2 client construction from an explicit provider config."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import boto3

from ah.core.config import ProviderConfig
from ah.providers.aws.errors import handle_aws_errors

logger = logging.getLogger(__name__)


def create_ec2_client(
    config: ProviderConfig,
    boto3_client_factory: Callable[..., Any] | None = None,
) -> Any:
    """Create an EC2 client for ``config``.

    Parameters
    ----------
    config : ProviderConfig
        Region, profile and endpoint settings
    boto3_client_factory : Callable[..., Any] | None
        Optional factory for creating boto3 clients. If None, a boto3
        session is opened for ``config.profile`` and its ``client`` is used

    Returns
    -------
    Any
        boto3 EC2 client

    Raises
    ------
    ProviderConfigurationError
        If the profile is unknown or no region can be resolved
    """
    with handle_aws_errors():
        if boto3_client_factory is None:
            session = boto3.session.Session(
                profile_name=config.profile, region_name=config.region
            )
            boto3_client_factory = session.client

        client = boto3_client_factory(
            "ec2", region_name=config.region, endpoint_url=config.endpoint_url
        )

    logger.debug("Created EC2 client for region %s", client.meta.region_name)
    return client
