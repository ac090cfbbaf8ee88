"""Occupant allocation model.

An allocation pairs an opaque occupant identifier with the size (square
feet) the user requested for it. The subdivider only reads these; the
caller's current list is the complete set for one invocation.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OccupantAllocation:
    """A requested share of a polygon's floor area.

    Attributes:
        occupant_id: Opaque identifier (tenant id, name, ...).
        size: Requested size in square feet. Non-positive sizes render
            as empty bands.
    """

    occupant_id: object
    size: float = 0.0
