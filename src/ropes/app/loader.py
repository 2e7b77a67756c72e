"""
Load Coordinator

Collects "I need this data object" registrations and turns them into the
minimal set of requests: one fetch per unique endpoint per dispatch, with the
payload handed to every data object registered under that endpoint.

    loader = Loader(transport)
    loader.using(models.contact, models.outlet)
    loader.using(models.outlet)
    batch = loader.dispatch()   # two fetches, outlet extracted once
    await batch.wait()
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Set, Tuple

from ..core.data_object import DataObject
from ..adapters.transport import Transport

logger = logging.getLogger(__name__)


@dataclass
class LoadBatch:
    """
    The requests issued by one dispatch.

    `buckets` maps each endpoint to the data objects extracted from its
    response, captured by value at dispatch time.
    """
    buckets: Dict[str, Tuple[DataObject, ...]] = field(default_factory=dict)
    tasks: Dict[str, "asyncio.Task[Any]"] = field(default_factory=dict)

    @property
    def urls(self) -> List[str]:
        return list(self.buckets)

    def __len__(self) -> int:
        return len(self.buckets)

    async def wait(self) -> None:
        """Wait for every fetch; the first failure is re-raised."""
        if self.tasks:
            await asyncio.gather(*self.tasks.values())


class Loader:
    """Batches pending data objects by endpoint and issues deduplicated fetches."""

    def __init__(self, transport: Transport):
        self.transport = transport
        self._queue: List[DataObject] = []
        self._in_flight: Set["asyncio.Task[Any]"] = set()

    @property
    def in_flight(self) -> Tuple["asyncio.Task[Any]", ...]:
        """Fetch tasks that have not finished yet, across all dispatches."""
        return tuple(self._in_flight)

    @property
    def pending(self) -> Tuple[DataObject, ...]:
        return tuple(self._queue)

    def register_for_load(self, data_objects: Iterable[DataObject]) -> None:
        """Queue data objects for the next dispatch. Duplicates are fine."""
        data_objects = list(data_objects)
        self._queue.extend(data_objects)
        logger.debug(f"Queued {len(data_objects)} data object(s), {len(self._queue)} pending")

    def using(self, *data_objects: DataObject) -> None:
        self.register_for_load(data_objects)

    def partition(self) -> Dict[str, Tuple[DataObject, ...]]:
        """
        Group the pending queue by endpoint, deduplicated by identity.

        Maps each endpoint to the data objects that use it, one to many:

            {"json/contact.js": (contact,), "json/combined.js": (outlet, publisher)}

        Data objects without an endpoint are left out.
        """
        url_index: Dict[str, Dict[int, DataObject]] = {}
        for data_object in self._queue:
            url = data_object.endpoint_url
            if not url:
                logger.debug(f"{data_object!r} has no endpoint, skipping")
                continue
            url_index.setdefault(url, {})[id(data_object)] = data_object
        return {url: tuple(bucket.values()) for url, bucket in url_index.items()}

    def dispatch(self) -> LoadBatch:
        """
        Start one fetch per unique pending endpoint and return immediately.

        The queue is drained before anything is scheduled, so registration for
        the next dispatch can begin right away. Must be called with a running
        event loop. Fetch failures stay on the returned tasks.
        """
        buckets = self.partition()
        # Raises before the queue is touched when there is no running loop
        loop = asyncio.get_running_loop() if buckets else None
        self._queue = []

        batch = LoadBatch(buckets=buckets)
        if not buckets:
            return batch

        for url, data_objects in buckets.items():
            task = loop.create_task(self._fetch_and_extract(url, data_objects))
            self._in_flight.add(task)
            task.add_done_callback(self._in_flight.discard)
            batch.tasks[url] = task
        logger.debug(f"Dispatched {len(buckets)} request(s): {', '.join(buckets)}")
        return batch

    async def load(self) -> LoadBatch:
        """Dispatch and wait for every response."""
        batch = self.dispatch()
        await batch.wait()
        return batch

    async def _fetch_and_extract(self, url: str, data_objects: Tuple[DataObject, ...]) -> Any:
        payload = await self.transport.fetch_json(url)
        logger.debug(f"Received {url}, extracting into {len(data_objects)} data object(s)")
        for data_object in data_objects:
            data_object.extract(payload)
        return payload
