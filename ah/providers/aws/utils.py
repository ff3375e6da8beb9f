"""AWS-specific utility functions for ah."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ah.constants import NAME_TAG_KEY
from ah.providers.exceptions import ProviderContractViolation


def extract_name_tag(tags: Iterable[Mapping[str, Any]] | None) -> str | None:
    """Return the value of the first ``Name`` tag.

    Tags carry no ordering guarantee, so this is a plain linear scan.

    Parameters
    ----------
    tags : Iterable[Mapping[str, Any]] | None
        EC2 tag list (``[{"Key": ..., "Value": ...}]``), or None

    Returns
    -------
    str | None
        Tag value, or None when no tag is keyed ``Name``
    """
    if not tags:
        return None

    for tag in tags:
        if tag.get("Key") == NAME_TAG_KEY:
            return tag.get("Value")

    return None


def require_field(record: Mapping[str, Any], *path: str) -> Any:
    """Walk ``path`` into a response record, failing on any missing step.

    Parameters
    ----------
    record : Mapping[str, Any]
        EC2 response fragment
    *path : str
        Keys to follow, e.g. ``("State", "Name")``

    Returns
    -------
    Any
        Value found at the end of the path

    Raises
    ------
    ProviderContractViolation
        If any key along the path is absent, None or empty
    """
    value: Any = record

    for key in path:
        if not isinstance(value, Mapping) or value.get(key) in (None, ""):
            raise ProviderContractViolation(
                f"EC2 response is missing required field '{'.'.join(path)}'"
            )
        value = value[key]

    return value


def get_aws_credentials_error_message() -> str:
    """Get standard AWS credentials error message.

    Returns
    -------
    str
        Formatted AWS credentials error message
    """
    return (
        "AWS credentials not found\n\n"
        "Configure your credentials:\n"
        "  aws configure\n\n"
        "Or set environment variables:\n"
        "  export AWS_ACCESS_KEY_ID=...\n"
        "  export AWS_SECRET_ACCESS_KEY=..."
    )
