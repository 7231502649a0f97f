"""SceneDataSource: a data source backed by time-dynamic scene documents.

Ingests documents either by merging into the existing entities (process)
or by replacing them (load), and re-derives the scene clock from scratch
after every ingest. The *_url variants fetch the document first and report
fetch failures on the error event as well as to the awaiting caller.

Concurrency: everything except the fetch runs synchronously. Two URL
ingests in flight on the same instance are not ordered against each other;
whichever finishes its fetch last sets the final entities and clock.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

from loguru import logger

from timescene.clock import SimulationClock, derive_clock
from timescene.entities import DynamicObjectCollection
from timescene.errors import DeveloperError
from timescene.events import Event
from timescene.fetch import load_json
from timescene.packets import DOCUMENT_PACKET_ID
from timescene.processing import process_document


class DataSource(ABC):
    """Read surface a visualization host consumes from any data source."""

    @property
    @abstractmethod
    def name(self) -> str | None:
        """Display name, or None if not yet known."""

    @property
    @abstractmethod
    def changed_event(self) -> Event:
        """Raised when non-time-varying data or is_time_varying changes."""

    @property
    @abstractmethod
    def error_event(self) -> Event:
        """Raised with (data_source, error) when processing fails."""

    @property
    @abstractmethod
    def clock(self) -> SimulationClock | None:
        """Clock for the current data, or None if none can be derived."""

    @property
    @abstractmethod
    def dynamic_object_collection(self) -> DynamicObjectCollection:
        """The entities produced by this data source."""

    @property
    @abstractmethod
    def is_time_varying(self) -> bool:
        """Whether the data changes with simulation time."""


class SceneDataSource(DataSource):
    """DataSource that processes scene documents.

    Args:
        name: Display name. When omitted it is taken from the trailing path
            segment of the first ingested source.
    """

    def __init__(self, name: str | None = None) -> None:
        self._name = name
        self._changed = Event()
        self._error = Event()
        self._clock: SimulationClock | None = None
        self._dynamic_object_collection = DynamicObjectCollection()
        # Not recomputed from the data yet; always reported as time-varying.
        self._time_varying = True

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def changed_event(self) -> Event:
        return self._changed

    @property
    def error_event(self) -> Event:
        return self._error

    @property
    def clock(self) -> SimulationClock | None:
        return self._clock

    @property
    def dynamic_object_collection(self) -> DynamicObjectCollection:
        return self._dynamic_object_collection

    @property
    def is_time_varying(self) -> bool:
        return self._time_varying

    def process(self, document: Any, source: str | None = None) -> None:
        """Process a document without clearing existing data.

        Raises:
            DeveloperError: If ``document`` is None.
        """
        if document is None:
            raise DeveloperError("document is required.")
        self._ingest(document, source)

    def load(self, document: Any, source: str | None = None) -> None:
        """Replace all existing data with the given document.

        Raises:
            DeveloperError: If ``document`` is None.
        """
        if document is None:
            raise DeveloperError("document is required.")
        self._dynamic_object_collection.clear()
        self._ingest(document, source)

    def process_url(self, url: str) -> Awaitable[None]:
        """Fetch the document at ``url`` and process it without clearing.

        The url check happens at call time; the returned awaitable does the
        fetch.

        Raises:
            DeveloperError: If ``url`` is None.
        """
        if url is None:
            raise DeveloperError("url is required.")
        return self._ingest_url(url, self.process)

    def load_url(self, url: str) -> Awaitable[None]:
        """Fetch the document at ``url`` and replace existing data with it.

        Raises:
            DeveloperError: If ``url`` is None.
        """
        if url is None:
            raise DeveloperError("url is required.")
        return self._ingest_url(url, self.load)

    async def _ingest_url(
        self, url: str, ingest: Callable[[Any, str | None], None],
    ) -> None:
        try:
            document = await load_json(url)
        except Exception as e:
            logger.debug(f"Broadcasting load failure for {url}")
            try:
                self._error.raise_event(self, e)
            except Exception:
                logger.exception(f"Error listener failed while reporting {url}")
            raise
        ingest(document, url)

    def _ingest(self, document: Any, source: str | None) -> None:
        collection = self._dynamic_object_collection
        process_document(document, collection, source)

        document_object = collection.get_object(DOCUMENT_PACKET_ID)
        document_clock = document_object.clock if document_object is not None else None
        self._clock = derive_clock(collection, document_clock)

        if self._name is None and source is not None:
            # The document packet's own name is deliberately not consulted.
            self._name = source[source.rfind("/") + 1:]
            logger.debug(f"Data source named {self._name!r}")
