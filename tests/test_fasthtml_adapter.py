"""
Tests for the FastHTML adapter.
"""

from fasthtml.common import fast_app

from ropes.adapters.fasthtml import UPDATES_PATH, configure_app, updates_trigger
from ropes.app.configurator import configure_ropes


def test_configure_app_mounts_update_stream(fake_transport):
    app, rt = fast_app()
    orchestrator = configure_ropes(transport=fake_transport)

    assert configure_app(app, rt, orchestrator) is app

    assert UPDATES_PATH in [route.path for route in app.routes]
    assert app.state.ropes is orchestrator


def test_custom_path(fake_transport):
    app, rt = fast_app()
    configure_app(app, rt, configure_ropes(transport=fake_transport), path="/live")

    assert "/live" in [route.path for route in app.routes]
    assert updates_trigger("/live") == "@get('/live')"
