"""Name resolution over an instance listing."""

from __future__ import annotations

from collections.abc import Sequence

from ah.core.models import Instance


def find_by_name(instances: Sequence[Instance], name: str) -> Instance | None:
    """Return the first instance whose name tag equals ``name``.

    Matching is exact and case-sensitive. When several instances share the
    name, the one appearing first in ``instances`` wins.

    Parameters
    ----------
    instances : Sequence[Instance]
        Instances in provider response order
    name : str
        Name to look up

    Returns
    -------
    Instance | None
        Matching instance, or None if no instance carries the name
    """
    for instance in instances:
        if instance.name == name:
            return instance

    return None


def find_all_by_name(instances: Sequence[Instance], name: str) -> list[Instance]:
    """Return every instance named ``name``, preserving input order."""
    return [instance for instance in instances if instance.name == name]
