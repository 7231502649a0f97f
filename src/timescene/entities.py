"""DynamicObject and DynamicObjectCollection, the scene's entity store.

Property payloads are kept as the raw dicts found in the document; the
per-property grammar is interpreted elsewhere.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Iterator

from timescene.events import Event
from timescene.iso8601 import INFINITE, MAXIMUM_VALUE, MINIMUM_VALUE, TimeInterval

if TYPE_CHECKING:
    from timescene.clock import SimulationClock


@dataclass
class DynamicObject:
    """A single time-dynamic entity.

    Attributes:
        id: Unique identifier within its collection.
        availability: Interval over which the entity has data, or None when
            it is available at all times.
        name: Optional display name.
        properties: Raw property payloads keyed by property name.
        clock: Clock declared by the ``document`` packet; None elsewhere.
    """

    id: str
    availability: TimeInterval | None = None
    name: str | None = None
    properties: dict[str, Any] = field(default_factory=dict)
    clock: SimulationClock | None = None

    def is_available(self, date) -> bool:
        return self.availability is None or self.availability.contains(date)


class DynamicObjectCollection:
    """Ordered, mutable collection of DynamicObjects keyed by id."""

    def __init__(self) -> None:
        self._objects: dict[str, DynamicObject] = {}
        self.collection_changed = Event()

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, object_id: object) -> bool:
        return object_id in self._objects

    def __iter__(self) -> Iterator[DynamicObject]:
        return iter(list(self._objects.values()))

    def get_object(self, object_id: str) -> DynamicObject | None:
        return self._objects.get(object_id)

    def get_or_create_object(self, object_id: str) -> DynamicObject:
        """Return the object with ``object_id``, creating it if needed."""
        obj = self._objects.get(object_id)
        if obj is None:
            obj = DynamicObject(id=object_id)
            self._objects[object_id] = obj
        return obj

    def remove_object(self, object_id: str) -> bool:
        """Remove an object. Returns False if it was not present."""
        return self._objects.pop(object_id, None) is not None

    def get_objects(self) -> list[DynamicObject]:
        """All objects, in insertion order."""
        return list(self._objects.values())

    def clear(self) -> None:
        """Remove every object and raise collection_changed."""
        removed = list(self._objects.values())
        self._objects.clear()
        if removed:
            self.collection_changed.raise_event(self, [], removed)

    def compute_availability(self) -> TimeInterval:
        """Tightest interval covering every object's availability.

        Objects without an availability are ignored, as are infinite
        endpoints. When no finite start exists the result starts at
        MINIMUM_VALUE; when no finite stop exists it stops at MAXIMUM_VALUE.
        An empty collection gives the infinite interval.
        """
        start = MAXIMUM_VALUE
        stop = MINIMUM_VALUE
        for obj in self._objects.values():
            availability = obj.availability
            if availability is None:
                continue
            if availability.start < start and availability.start != MINIMUM_VALUE:
                start = availability.start
            if availability.stop > stop and availability.stop != MAXIMUM_VALUE:
                stop = availability.stop

        if start == MAXIMUM_VALUE:
            start = MINIMUM_VALUE
        if stop == MINIMUM_VALUE:
            stop = MAXIMUM_VALUE
        if start == MINIMUM_VALUE and stop == MAXIMUM_VALUE:
            return INFINITE
        return TimeInterval(start, stop)
