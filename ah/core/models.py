"""Snapshot records returned by the instance directory and control."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Instance:
    """Read-only snapshot of a single compute instance.

    Attributes
    ----------
    name : str | None
        Value of the ``Name`` tag, or None when the instance has no such tag
    id : str
        Provider-assigned instance identifier
    instance_type : str
        Provider instance class label (e.g. ``t3.micro``)
    private_address : str
        Private IP address, empty string when the provider reports none
    public_address : str | None
        Public IP address, None when not allocated
    state : str
        Provider lifecycle state name (running, stopped, ...)
    """

    name: str | None
    id: str
    instance_type: str
    private_address: str
    public_address: str | None
    state: str


@dataclass(frozen=True)
class StateChange:
    """Transition acknowledged by the provider for one control request."""

    instance_id: str
    previous_state: str
    current_state: str
