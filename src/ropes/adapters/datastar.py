"""
Datastar Binding Engine

Projects view-models onto UI anchors. Binding renders the anchor element with
the view-model's current values as Datastar signals, then follows every
signal on the view-model and turns each change into a `patch_signals` SSE
event for connected clients.

Markup reads the values through signal references:

    Span(data_text=binder.signal_ref("#contact-quick-stats", "name"))
    # -> data-text="$contact_quick_stats.name"
"""

import asyncio
import json
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, AsyncGenerator, Callable, Dict, List, Set

from datastar_py import ServerSentEventGenerator as SSE
from fastcore.xml import FT, Div

from ..core.signals import Computed
from ..core.view_model import view_model_signals

logger = logging.getLogger(__name__)


class Binder(ABC):
    """Abstract base class for binding engines."""

    @abstractmethod
    def bind(self, view_model: Any, anchor: str) -> Any:
        """Project `view_model` onto `anchor` and keep it live."""
        pass


def anchor_namespace(anchor: str) -> str:
    """Signal namespace for an anchor selector: '#contact-quick-stats' -> 'contact_quick_stats'."""
    name = re.sub(r"[^0-9a-zA-Z_]", "_", anchor.lstrip("#."))
    if not name or name[0].isdigit():
        name = f"_{name}"
    return name


@dataclass
class Binding:
    """One view-model bound to one anchor."""
    anchor: str
    namespace: str
    view_model: Any
    unsubscribers: List[Callable[[], None]] = field(default_factory=list)

    def values(self) -> Dict[str, Any]:
        return {key: signal.peek() for key, signal in view_model_signals(self.view_model).items()}

    def release(self) -> None:
        """Drop the binder listeners and dispose the view-model's computeds."""
        for unsubscribe in self.unsubscribers:
            unsubscribe()
        self.unsubscribers.clear()
        for signal in view_model_signals(self.view_model).values():
            if isinstance(signal, Computed):
                signal.dispose()


class DatastarBinder(Binder):
    """
    Binding engine that speaks Datastar.

    Each connected client owns an asyncio.Queue of SSE events; `stream()`
    wraps one for a DatastarResponse.
    """

    def __init__(self):
        self._bindings: Dict[str, Binding] = {}
        self._subscribers: Set[asyncio.Queue] = set()

    @property
    def bindings(self) -> Dict[str, Binding]:
        return dict(self._bindings)

    def bind(self, view_model: Any, anchor: str) -> FT:
        """Bind and return the rendered anchor element."""
        if anchor in self._bindings:
            logger.debug(f"Rebinding {anchor}")
            self.unbind(anchor)

        binding = Binding(anchor=anchor, namespace=anchor_namespace(anchor), view_model=view_model)
        for key, signal in view_model_signals(view_model).items():
            binding.unsubscribers.append(signal.subscribe(self._make_listener(binding, key)))
        self._bindings[anchor] = binding
        logger.debug(f"Bound {type(view_model).__name__} to {anchor}")
        return self.render(anchor)

    def unbind(self, anchor: str) -> None:
        binding = self._bindings.pop(anchor, None)
        if binding:
            binding.release()

    def render(self, anchor: str, *children, **attrs) -> FT:
        """The anchor element with its current signal values."""
        binding = self._bindings[anchor]
        signals = json.dumps({binding.namespace: binding.values()}, default=str)
        return Div(*children, id=anchor.lstrip("#"), data_signals=signals, **attrs)

    def signal_ref(self, anchor: str, key: str) -> str:
        return f"${anchor_namespace(anchor)}.{key}"

    def current_signals(self) -> Dict[str, Dict[str, Any]]:
        return {binding.namespace: binding.values() for binding in self._bindings.values()}

    def _make_listener(self, binding: Binding, key: str) -> Callable[[Any, Any], None]:
        def listener(new_value: Any, old_value: Any) -> None:
            self.publish({binding.namespace: {key: new_value}})
        return listener

    def publish(self, signals: Dict[str, Any]) -> None:
        """Queue a patch_signals event for every connected client."""
        if not self._subscribers:
            return
        event = SSE.patch_signals(json.dumps(signals, default=str))
        for queue in self._subscribers:
            queue.put_nowait(event)

    def subscribe(self) -> asyncio.Queue:
        queue: asyncio.Queue = asyncio.Queue()
        self._subscribers.add(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue) -> None:
        self._subscribers.discard(queue)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    async def stream(self) -> AsyncGenerator[str, None]:
        """SSE events for one client: a full snapshot, then every change."""
        queue = self.subscribe()
        try:
            yield SSE.patch_signals(json.dumps(self.current_signals(), default=str))
            while True:
                yield await queue.get()
        finally:
            self.unsubscribe(queue)
