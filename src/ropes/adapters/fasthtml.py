"""
FastHTML Web Adapter

Mounts the Datastar update stream on a FastHTML app:

    from fasthtml.common import fast_app
    from ropes.adapters.fasthtml import configure_app

    app, rt = fast_app()
    orchestrator = configure_ropes(config)
    configure_app(app, rt, orchestrator)

Pages then add `data-on-load="@get('/ropes/updates')"` to subscribe.
"""

import logging
from typing import TYPE_CHECKING

from datastar_py.starlette import DatastarResponse

if TYPE_CHECKING:
    from fasthtml.common import FastHTML
    from ..app.orchestrator import Orchestrator

logger = logging.getLogger(__name__)

UPDATES_PATH = "/ropes/updates"


def configure_app(app: "FastHTML", rt, orchestrator: "Orchestrator", path: str = UPDATES_PATH):
    """
    Register the SSE route that streams the orchestrator's binding updates.

    Returns the app so calls can be chained.
    """
    binder = orchestrator.binder

    async def updates():
        return DatastarResponse(binder.stream())

    rt(path, methods=["GET"])(updates)
    app.state.ropes = orchestrator
    logger.info(f"Ropes updates stream mounted at {path}")
    return app


def updates_trigger(path: str = UPDATES_PATH) -> str:
    """Datastar expression that opens the update stream."""
    return f"@get('{path}')"
