"""Domain service: choose which capture source to open.

Devices usually list the front camera first and label the outward-facing
one. The policy is total: any non-empty list resolves to exactly one
source, and the same list always resolves to the same one.
"""

from __future__ import annotations

from collections.abc import Sequence

from scanreg.domain.exceptions import AcquisitionError, AcquisitionFailure
from scanreg.domain.model.capture import SourceInfo

REAR_FACING_KEYWORDS = ("back", "rear", "environment", "trasera")


def is_rear_facing(source: SourceInfo) -> bool:
    label = (source.label or "").lower()
    return any(keyword in label for keyword in REAR_FACING_KEYWORDS)


def choose_source(sources: Sequence[SourceInfo]) -> SourceInfo:
    """Pick the first rear-facing source, else the last one enumerated.

    Raises AcquisitionError(NO_SOURCE) for an empty list.
    """
    if not sources:
        raise AcquisitionError(AcquisitionFailure.NO_SOURCE)

    for source in sources:
        if is_rear_facing(source):
            return source
    return sources[-1]
