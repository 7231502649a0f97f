"""SimulationClock and the clock derivation rules for an ingested scene.

A scene either declares its own clock in the ``document`` packet, or one is
derived from the union of every entity's availability. A scene whose data
is unbounded on the left has no clock at all; that is represented as
``None``, never as a zero-valued clock.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from loguru import logger

from timescene.config import settings
from timescene.iso8601 import MINIMUM_VALUE, format_date, seconds_between

if TYPE_CHECKING:
    from timescene.entities import DynamicObjectCollection


class ClockRange(str, Enum):
    """What happens when current time leaves [start_time, stop_time]."""

    UNBOUNDED = "UNBOUNDED"
    CLAMPED = "CLAMPED"
    LOOP_STOP = "LOOP_STOP"


class ClockStep(str, Enum):
    """How current time advances on each host tick."""

    TICK_DEPENDENT = "TICK_DEPENDENT"
    SYSTEM_CLOCK_MULTIPLIER = "SYSTEM_CLOCK_MULTIPLIER"
    SYSTEM_CLOCK = "SYSTEM_CLOCK"


@dataclass(frozen=True)
class SimulationClock:
    """Authoritative start/stop/current time and playback rate of a scene.

    Attributes:
        start_time: First instant of the scene.
        stop_time: Last instant of the scene.
        clock_range: Behaviour at the ends of [start_time, stop_time].
        clock_step: How time advances.
        multiplier: Simulation seconds per wall-clock second; negative plays
            in reverse.
        current_time: Initial current time.
    """

    start_time: datetime
    stop_time: datetime
    clock_range: ClockRange
    clock_step: ClockStep
    multiplier: float
    current_time: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "startTime": format_date(self.start_time),
            "stopTime": format_date(self.stop_time),
            "range": self.clock_range.value,
            "step": self.clock_step.value,
            "multiplier": self.multiplier,
            "currentTime": format_date(self.current_time),
        }


def playback_multiplier(start: datetime, stop: datetime) -> float:
    """Multiplier that plays [start, stop] in about playback_target_seconds.

    Rounds half up. A zero-length interval gets 1.0 so playback still moves.
    """
    if start == stop:
        return 1.0
    total_seconds = seconds_between(start, stop)
    return float(math.floor(total_seconds / settings.playback_target_seconds + 0.5))


def derive_clock(
    collection: DynamicObjectCollection,
    document_clock: SimulationClock | None = None,
) -> SimulationClock | None:
    """Derive the scene clock after an ingest.

    Args:
        collection: The store, already updated by the ingest.
        document_clock: Clock declared by the document packet, if any. It
            was validated when the packet was parsed and is copied as is.

    Returns:
        The new clock, or None when the scene is unbounded on the left.
    """
    if document_clock is not None:
        logger.debug("Using document-declared clock")
        # Trusted: ClockPacket validated the fields, no cross-check here.
        return SimulationClock(
            start_time=document_clock.start_time,
            stop_time=document_clock.stop_time,
            clock_range=document_clock.clock_range,
            clock_step=document_clock.clock_step,
            multiplier=document_clock.multiplier,
            current_time=document_clock.current_time,
        )

    availability = collection.compute_availability()
    if availability.start == MINIMUM_VALUE:
        logger.debug("Scene availability is unbounded, no clock derived")
        return None

    clock = SimulationClock(
        start_time=availability.start,
        stop_time=availability.stop,
        clock_range=ClockRange.LOOP_STOP,
        clock_step=ClockStep.SYSTEM_CLOCK_MULTIPLIER,
        multiplier=playback_multiplier(availability.start, availability.stop),
        current_time=availability.start,
    )
    logger.debug(f"Derived clock {availability.to_iso8601()} x{clock.multiplier}")
    return clock
