"""Apply a parsed scene document to a DynamicObjectCollection.

A document is a list of packets, or a single packet dict. Packets are
applied in order: later packets for the same id update earlier ones.
Nothing is removed unless a packet says ``"delete": true``.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from timescene.entities import DynamicObject, DynamicObjectCollection
from timescene.packets import DOCUMENT_PACKET_ID, ScenePacket


def process_document(
    document: Any,
    collection: DynamicObjectCollection,
    source_uri: str | None = None,
) -> None:
    """Parse ``document`` into ``collection``, mutating it in place.

    Args:
        document: A list of packet dicts, or one packet dict.
        collection: The store to update.
        source_uri: Where the document came from (used for logging).

    Raises:
        TypeError: If the document is neither a list nor a dict.
        pydantic.ValidationError: If a packet is malformed. Packets before
            the bad one have already been applied.
    """
    if isinstance(document, dict):
        packets = [document]
    elif isinstance(document, list):
        packets = document
    else:
        raise TypeError(
            f"Scene document must be a list or dict, got {type(document).__name__}"
        )

    added: list[DynamicObject] = []
    removed: list[DynamicObject] = []
    try:
        for raw in packets:
            if not isinstance(raw, dict):
                raise TypeError(f"Packet must be a dict, got {type(raw).__name__}")
            _process_packet(ScenePacket.model_validate(raw), collection, added, removed)
    finally:
        if added or removed:
            collection.collection_changed.raise_event(collection, added, removed)

    logger.info(
        f"Processed {len(packets)} packets from {source_uri or '<memory>'} "
        f"({len(collection)} objects)"
    )


def _process_packet(
    packet: ScenePacket,
    collection: DynamicObjectCollection,
    added: list[DynamicObject],
    removed: list[DynamicObject],
) -> None:
    if packet.delete:
        obj = collection.get_object(packet.id)
        if obj is not None:
            collection.remove_object(packet.id)
            if any(o is obj for o in added):
                added[:] = [o for o in added if o is not obj]
            else:
                removed.append(obj)
        return

    is_new = packet.id not in collection
    obj = collection.get_or_create_object(packet.id)
    if is_new:
        added.append(obj)

    if packet.name is not None:
        obj.name = packet.name
    if packet.availability is not None:
        obj.availability = packet.availability
    if packet.clock is not None and packet.id == DOCUMENT_PACKET_ID:
        obj.clock = packet.clock.to_clock()
    obj.properties.update(packet.properties)
