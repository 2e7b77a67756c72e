"""
Binding Orchestrator

Takes a mapping of UI anchors to view-model factories, works out which data
objects each factory reads, queues them for load, binds the view-models and
finally issues a single coordinated dispatch:

    orchestrator.bind({
        "#contact-quick-stats": ContactQuickStats,
        "#outlet-quick-stats": OutletQuickStats,
    })

Dependencies come from what each factory declares (`uses`), not from
inspecting its code.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from ..core.view_model import declared_dependencies
from ..adapters.datastar import Binder
from .loader import LoadBatch, Loader
from .registry import Registry

logger = logging.getLogger(__name__)


class Orchestrator:
    """Wires view-models to anchors and coalesces their loads."""

    def __init__(self, registry: Registry, loader: Loader, binder: Binder):
        self.registry = registry
        self.loader = loader
        self.binder = binder
        self.last_batch: Optional[LoadBatch] = None

    def discover_dependencies(self, factory: Callable) -> Tuple[str, ...]:
        """Data object names the factory declares, deduplicated, in order."""
        return declared_dependencies(factory)

    def bind(self, mapping: Mapping[str, Callable[..., Any]]) -> Dict[str, Any]:
        """
        Bind every anchor in `mapping` and dispatch one load for all of them.

        Each factory is called with the registry. Returns the view-models by
        anchor. Requires a running event loop for the dispatch.
        """
        view_models: Dict[str, Any] = {}
        for anchor, factory in mapping.items():
            names = self.discover_dependencies(factory)
            data_objects = self.registry.resolve(names)
            self.loader.register_for_load(data_objects)

            view_model = factory(self.registry)
            self.binder.bind(view_model, anchor)
            view_models[anchor] = view_model
            logger.debug(f"{anchor}: {getattr(factory, '__name__', factory)!s} uses {', '.join(names) or 'nothing'}")

        self.last_batch = self.loader.dispatch()
        return view_models

    async def bind_and_load(self, mapping: Mapping[str, Callable[..., Any]]) -> Dict[str, Any]:
        """`bind`, then wait for every response of the dispatch."""
        view_models = self.bind(mapping)
        await self.last_batch.wait()
        return view_models
