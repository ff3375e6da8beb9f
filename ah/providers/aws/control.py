"""EC2 start/stop requests for ah."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from ah.core.config import ProviderConfig
from ah.core.models import Instance, StateChange
from ah.providers.aws.errors import handle_aws_errors
from ah.providers.aws.session import create_ec2_client
from ah.providers.aws.utils import require_field
from ah.providers.exceptions import ProviderContractViolation

logger = logging.getLogger(__name__)


def extract_state_change(
    response: Mapping[str, Any], key: str, instance_id: str
) -> StateChange:
    """Unwrap the first state-change record of a start/stop response.

    Parameters
    ----------
    response : Mapping[str, Any]
        Response from ``start_instances`` or ``stop_instances``
    key : str
        ``StartingInstances`` or ``StoppingInstances``
    instance_id : str
        Instance the request targeted

    Returns
    -------
    StateChange
        Previous and current lifecycle state names

    Raises
    ------
    ProviderContractViolation
        If the response carries no state-change record or lacks state names
    """
    changes = response.get(key)
    if not changes:
        raise ProviderContractViolation(
            f"EC2 returned no {key} record for instance {instance_id}"
        )

    change = changes[0]
    return StateChange(
        instance_id=change.get("InstanceId") or instance_id,
        previous_state=require_field(change, "PreviousState", "Name"),
        current_state=require_field(change, "CurrentState", "Name"),
    )


class InstanceControl:
    """Issue start and stop requests for a single instance.

    Both operations return as soon as EC2 acknowledges the request; they
    do not wait for the instance to reach its target state.
    """

    def __init__(
        self,
        config: ProviderConfig,
        boto3_client_factory: Callable[..., Any] | None = None,
    ) -> None:
        self.ec2_client = create_ec2_client(config, boto3_client_factory)

    def start(self, instance: Instance) -> StateChange:
        """Request that ``instance`` be started.

        Parameters
        ----------
        instance : Instance
            Instance to start

        Returns
        -------
        StateChange
            Transition acknowledged by EC2

        Raises
        ------
        ProviderError
            If EC2 rejects the request or the response is malformed
        """
        logger.debug("Starting instance %s (%s)", instance.id, instance.name)

        with handle_aws_errors():
            response = self.ec2_client.start_instances(InstanceIds=[instance.id])

        return extract_state_change(response, "StartingInstances", instance.id)

    def stop(self, instance: Instance) -> StateChange:
        """Request that ``instance`` be stopped.

        Parameters
        ----------
        instance : Instance
            Instance to stop

        Returns
        -------
        StateChange
            Transition acknowledged by EC2

        Raises
        ------
        ProviderError
            If EC2 rejects the request or the response is malformed
        """
        logger.debug("Stopping instance %s (%s)", instance.id, instance.name)

        with handle_aws_errors():
            response = self.ec2_client.stop_instances(InstanceIds=[instance.id])

        return extract_state_change(response, "StoppingInstances", instance.id)
