"""EC2 instance listing for ah."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from ah.core.config import ProviderConfig
from ah.core.models import Instance
from ah.providers.aws.errors import handle_aws_errors
from ah.providers.aws.session import create_ec2_client
from ah.providers.aws.utils import extract_name_tag, require_field

logger = logging.getLogger(__name__)


def instance_from_description(raw: Mapping[str, Any]) -> Instance:
    """Build an Instance from one ``describe_instances`` instance record.

    Parameters
    ----------
    raw : Mapping[str, Any]
        Single entry of ``Reservations[].Instances[]``

    Returns
    -------
    Instance
        Snapshot of the instance

    Raises
    ------
    ProviderContractViolation
        If InstanceId, InstanceType or State.Name is missing
    """
    return Instance(
        name=extract_name_tag(raw.get("Tags")),
        id=require_field(raw, "InstanceId"),
        instance_type=require_field(raw, "InstanceType"),
        private_address=raw.get("PrivateIpAddress") or "",
        public_address=raw.get("PublicIpAddress"),
        state=require_field(raw, "State", "Name"),
    )


class InstanceDirectory:
    """List every instance visible to the configured credentials and region."""

    def __init__(
        self,
        config: ProviderConfig,
        boto3_client_factory: Callable[..., Any] | None = None,
    ) -> None:
        """Initialize the directory.

        Parameters
        ----------
        config : ProviderConfig
            Provider settings resolved by the CLI
        boto3_client_factory : Callable[..., Any] | None
            Optional factory for creating boto3 clients. If None, uses a
            boto3 session for the configured profile
        """
        self.ec2_client = create_ec2_client(config, boto3_client_factory)

    @property
    def region(self) -> str:
        """Region the EC2 client resolved to."""
        return self.ec2_client.meta.region_name

    def list(self) -> list[Instance]:
        """Describe all instances and flatten them in response order.

        Returns
        -------
        list[Instance]
            Instances across all reservations, unsorted

        Raises
        ------
        ProviderError
            If the remote call fails or the response is malformed
        """
        logger.debug("Describing instances in %s", self.region)

        with handle_aws_errors():
            response = self.ec2_client.describe_instances()

        instances = [
            instance_from_description(raw)
            for reservation in response.get("Reservations", [])
            for raw in reservation.get("Instances", [])
        ]

        logger.debug("Found %d instances in %s", len(instances), self.region)
        return instances
