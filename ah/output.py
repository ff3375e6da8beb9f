"""Plain-text rendering of instance listings and state transitions."""

from __future__ import annotations

from collections.abc import Sequence

from ah.constants import TABLE_COLUMN_GAP, TABLE_HEADERS
from ah.core.models import Instance, StateChange


def instance_row(instance: Instance) -> tuple[str, ...]:
    """Return the table cells for ``instance``, absent fields as empty strings."""
    return (
        instance.name or "",
        instance.id,
        instance.instance_type,
        instance.private_address or "",
        instance.public_address or "",
        instance.state,
    )


def format_table(instances: Sequence[Instance], region: str) -> str:
    """Format the instance listing.

    Parameters
    ----------
    instances : Sequence[Instance]
        Instances in the order they should be displayed
    region : str
        Region name printed above the table

    Returns
    -------
    str
        Region line, header, rule and one line per instance
    """
    rows = [instance_row(instance) for instance in instances]
    widths = [
        max(len(cell) for cell in column)
        for column in zip(TABLE_HEADERS, *rows)
    ]
    gap = " " * TABLE_COLUMN_GAP

    def format_row(cells: Sequence[str]) -> str:
        return gap.join(
            f"{cell:<{width}}" for cell, width in zip(cells, widths)
        ).rstrip()

    lines = [f"Region: {region}", format_row(TABLE_HEADERS)]
    lines.append("-" * (sum(widths) + TABLE_COLUMN_GAP * (len(widths) - 1)))
    lines.extend(format_row(row) for row in rows)

    return "\n".join(lines)


def format_transition(state_change: StateChange) -> str:
    return f"{state_change.previous_state} -> {state_change.current_state}"


def render_table(instances: Sequence[Instance], region: str) -> None:
    """Print the instance listing to stdout."""
    print(format_table(instances, region))


def render_transition(state_change: StateChange) -> None:
    """Print ``previous -> current`` to stdout."""
    print(format_transition(state_change))
