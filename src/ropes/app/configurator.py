"""
Application Configurator

Builds a wired Orchestrator (registry, loader, transport, binder) from a
RopesConfig.
"""

import logging
from typing import Optional

from ..adapters.datastar import Binder, DatastarBinder
from ..adapters.transport import Transport, transport_from_config
from .config import RopesConfig, configure_logging
from .loader import Loader
from .orchestrator import Orchestrator
from .registry import Registry

logger = logging.getLogger(__name__)


def configure_ropes(
    config: Optional[RopesConfig] = None,
    *,
    transport: Optional[Transport] = None,
    binder: Optional[Binder] = None,
    registry: Optional[Registry] = None,
) -> Orchestrator:
    """
    Create an Orchestrator with its collaborators.

    Anything passed explicitly wins over what the config would build.

    Example:
        ```python
        registry = Registry()
        registry.define("contact", CONTACT_FIELDS, endpoint_url="json/contact.js")

        orchestrator = configure_ropes(RopesConfig.from_environment(), registry=registry)
        orchestrator.bind({"#contact": ContactQuickStats})
        ```
    """
    config = config or RopesConfig()
    configure_logging(config.logging)

    transport = transport or transport_from_config(config.transport)
    orchestrator = Orchestrator(
        registry=registry if registry is not None else Registry(),
        loader=Loader(transport),
        binder=binder or DatastarBinder(),
    )
    logger.info(
        f"Ropes configured for {config.environment.value} "
        f"({type(transport).__name__}, {len(orchestrator.registry)} data object(s))"
    )
    return orchestrator
