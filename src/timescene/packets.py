"""Pydantic models for the packets of a scene document.

This is where a document's clock block gets validated. Downstream code
(clock derivation) trusts the values produced here and does not re-check
them.
"""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from timescene.clock import ClockRange, ClockStep, SimulationClock
from timescene.iso8601 import TimeInterval, parse_date

DOCUMENT_PACKET_ID = "document"


class ClockPacket(BaseModel):
    """The ``clock`` block of the document packet."""

    model_config = ConfigDict(
        populate_by_name=True, arbitrary_types_allowed=True, extra="ignore",
    )

    interval: TimeInterval
    current_time: Optional[datetime] = Field(default=None, alias="currentTime")
    multiplier: float = 1.0
    clock_range: ClockRange = Field(default=ClockRange.LOOP_STOP, alias="range")
    clock_step: ClockStep = Field(
        default=ClockStep.SYSTEM_CLOCK_MULTIPLIER, alias="step",
    )

    @field_validator("interval", mode="before")
    @classmethod
    def _parse_interval(cls, v: Any) -> Any:
        if isinstance(v, str):
            return TimeInterval.from_iso8601(v)
        return v

    @field_validator("current_time", mode="before")
    @classmethod
    def _parse_current_time(cls, v: Any) -> Any:
        if isinstance(v, str):
            return parse_date(v)
        return v

    def to_clock(self) -> SimulationClock:
        return SimulationClock(
            start_time=self.interval.start,
            stop_time=self.interval.stop,
            clock_range=self.clock_range,
            clock_step=self.clock_step,
            multiplier=self.multiplier,
            current_time=self.current_time or self.interval.start,
        )


class ScenePacket(BaseModel):
    """One packet of a scene document.

    Unknown keys are kept as raw property payloads (``model_extra``).
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="allow")

    id: str = ""
    name: Optional[str] = None
    availability: Optional[TimeInterval] = None
    delete: bool = False
    clock: Optional[ClockPacket] = None

    @field_validator("availability", mode="before")
    @classmethod
    def _parse_availability(cls, v: Any) -> Any:
        if isinstance(v, str):
            return TimeInterval.from_iso8601(v)
        return v

    @model_validator(mode="after")
    def _ensure_id(self) -> ScenePacket:
        if not self.id:
            self.id = uuid.uuid4().hex
        return self

    @property
    def properties(self) -> dict[str, Any]:
        return dict(self.model_extra or {})
