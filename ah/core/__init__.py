"""Provider-independent models, configuration and name resolution."""

from ah.core.config import ConfigLoader, ProviderConfig
from ah.core.lookup import find_all_by_name, find_by_name
from ah.core.models import Instance, StateChange

__all__ = [
    "ConfigLoader",
    "ProviderConfig",
    "Instance",
    "StateChange",
    "find_by_name",
    "find_all_by_name",
]
