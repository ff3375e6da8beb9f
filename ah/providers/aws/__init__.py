"""AWS EC2 implementation of the instance directory and control."""

from ah.providers.aws.control import InstanceControl
from ah.providers.aws.directory import InstanceDirectory

__all__ = ["InstanceDirectory", "InstanceControl"]
