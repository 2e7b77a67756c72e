"""
Shared test doubles for the Ropes test suite.
"""

import asyncio
from typing import Any, Dict, List, Optional

import pytest

from ropes.adapters.datastar import Binder
from ropes.adapters.transport import Transport
from ropes.core.view_model import view_model_signals


class FakeTransport(Transport):
    """
    In-memory transport that records every fetch.

    When `gate` is set, fetches wait for it before answering, which keeps
    requests in flight for as long as a test needs.
    """

    def __init__(self, payloads: Optional[Dict[str, Any]] = None, gated: bool = False):
        self.payloads: Dict[str, Any] = dict(payloads or {})
        self.failures: Dict[str, Exception] = {}
        self.calls: List[str] = []
        self.gate: Optional[asyncio.Event] = asyncio.Event() if gated else None

    async def fetch_json(self, url: str) -> Any:
        self.calls.append(url)
        if self.gate is not None:
            await self.gate.wait()
        if url in self.failures:
            raise self.failures[url]
        return self.payloads[url]


class RecordingBinder(Binder):
    """Binder that records binds and every signal change on bound view-models."""

    def __init__(self):
        self.events: List[tuple] = []

    def bind(self, view_model: Any, anchor: str) -> None:
        self.events.append(("bind", anchor, view_model))
        for key, signal in view_model_signals(view_model).items():
            signal.subscribe(self._listener(anchor, key))

    def _listener(self, anchor: str, key: str):
        def listener(new_value, old_value):
            self.events.append(("update", anchor, key, new_value))
        return listener

    @property
    def binds(self) -> List[tuple]:
        return [e for e in self.events if e[0] == "bind"]

    @property
    def updates(self) -> List[tuple]:
        return [e for e in self.events if e[0] == "update"]


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def gated_transport():
    return FakeTransport(gated=True)


@pytest.fixture
def recording_binder():
    return RecordingBinder()
