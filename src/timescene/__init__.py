"""timescene: time-dynamic scene documents as an observable data source.

Ingests CZML-style packet documents into a DynamicObjectCollection and
derives the simulation clock that drives their playback.
"""

from timescene.clock import ClockRange, ClockStep, SimulationClock, derive_clock
from timescene.data_source import DataSource, SceneDataSource
from timescene.entities import DynamicObject, DynamicObjectCollection
from timescene.errors import DeveloperError, FetchError
from timescene.events import Event
from timescene.iso8601 import MAXIMUM_VALUE, MINIMUM_VALUE, TimeInterval

__all__ = [
    "ClockRange",
    "ClockStep",
    "DataSource",
    "DeveloperError",
    "DynamicObject",
    "DynamicObjectCollection",
    "Event",
    "FetchError",
    "MAXIMUM_VALUE",
    "MINIMUM_VALUE",
    "SceneDataSource",
    "SimulationClock",
    "TimeInterval",
    "derive_clock",
]
