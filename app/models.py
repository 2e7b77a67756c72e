"""
Demo Data Objects

The stored data the demo pages read. Each data object only keeps the API
fields the client cares about, flattened to client-side names.
"""

from pathlib import Path
from typing import Union

from ropes import FileTransport, Registry, Transport
from ropes.adapters import transport_from_config
from ropes.app import TransportConfig

CONTACT_FIELDS = [
    {"clientKey": "name", "apiKey": "Name", "default": ""},
    {"clientKey": "phone", "apiKey": "ContactMethods.Phone", "default": ""},
    {"clientKey": "email", "apiKey": "ContactMethods.Email", "default": ""},
    {"clientKey": "date_of_birth", "apiKey": "DateOfBirth", "default": ""},
    {"clientKey": "favorite_color", "apiKey": "Interests.FavColor", "default": ""},
]

OUTLET_FIELDS = [
    {"clientKey": "name", "apiKey": "Name", "default": ""},
    {"clientKey": "circulation", "apiKey": "Circulation", "default": ""},
    {"clientKey": "phone", "apiKey": "ContactMethods.Phone", "default": ""},
    {"clientKey": "email", "apiKey": "ContactMethods.Email", "default": ""},
]


def build_registry() -> Registry:
    registry = Registry()
    registry.define("contact", CONTACT_FIELDS, endpoint_url="json/contact.js")
    # combined.js carries several objects; the outlet lives under "Outlet"
    registry.define("outlet", OUTLET_FIELDS, endpoint_url="json/combined.js", response_node="Outlet")
    return registry


def build_transport(config: TransportConfig, fixtures_root: Union[str, Path]) -> Transport:
    """
    The configured transport, or the bundled JSON fixtures when neither a
    base url nor a json root is set.
    """
    if config.base_url or config.json_root:
        return transport_from_config(config)
    return FileTransport(fixtures_root)
