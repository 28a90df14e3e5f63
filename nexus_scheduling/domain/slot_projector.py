"""
Projection of weekly availability rules onto concrete bookable slots.

Pure domain logic: no API calls, no I/O, no clock reads. The reference
instant is always supplied by the caller.
"""

import logging
from datetime import datetime
from typing import Callable, List, Sequence

from pendulum import DateTime

from .models import AvailabilityRule, OwnerDirectory, Slot
from .recurrence import occurrence, parse_wall_clock, to_instant

logger = logging.getLogger(__name__)

HORIZON_WEEKS = 2
SLOT_MINUTES = 30

LABEL_FORMAT = "ddd, MMM D, YYYY h:mm A"


class SlotProjector:
    """
    Turns weekly recurring availability into dated slots.

    Algorithm:
    1. For every rule, find its next occurrence on/after "now" and the one
       a week later (HORIZON_WEEKS occurrences in total)
    2. Overwrite the wall clock with the rule's start time
    3. Drop occurrences that do not start strictly after "now"
    4. Sort everything by start time
    """

    def project(
        self,
        rules: Sequence[AvailabilityRule],
        now: datetime,
        owner_name: Callable[[int], str] | None = None
    ) -> List[Slot]:
        """
        Project availability rules onto slots over the horizon.

        Args:
            rules: Weekly availability rules, possibly for several owners
            now: Reference instant; calendar arithmetic uses its timezone
            owner_name: Lookup from owner id to display name

        Returns:
            Slots sorted ascending by start

        Raises:
            MalformedInputError: If a rule's start_time cannot be parsed
        """
        reference = to_instant(now)
        resolve_name = owner_name or OwnerDirectory()

        slots: List[Slot] = []

        for rule in rules:
            wall_clock = parse_wall_clock(rule.start_time)

            for week in range(HORIZON_WEEKS):
                start = occurrence(reference, rule.day_of_week, wall_clock, week_offset=week)

                # today's occurrence may already be over
                if start <= reference:
                    continue

                slots.append(self._build_slot(rule.owner_id, start, resolve_name(rule.owner_id)))

        logger.debug("Projected %d slots from %d rules", len(slots), len(rules))

        return sorted(slots, key=lambda slot: slot.start)

    @staticmethod
    def _build_slot(owner_id: int, start: DateTime, owner_name: str) -> Slot:
        return Slot(
            owner_id=owner_id,
            start=start,
            end=start.add(minutes=SLOT_MINUTES),
            label=f"{start.format(LABEL_FORMAT)} ({owner_name})",
            owner_name=owner_name
        )


def project_slots(
    rules: Sequence[AvailabilityRule],
    now: datetime,
    owner_name: Callable[[int], str] | None = None
) -> List[Slot]:
    """Module-level shortcut for ``SlotProjector().project``."""
    return SlotProjector().project(rules, now, owner_name)
