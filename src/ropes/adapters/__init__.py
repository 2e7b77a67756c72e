"""
Adapters

Concrete collaborators: JSON transports, the Datastar binding engine and the
FastHTML integration.
"""

from .transport import Transport, HttpxTransport, FileTransport, transport_from_config
from .datastar import Binder, Binding, DatastarBinder, anchor_namespace

__all__ = [
    "Transport",
    "HttpxTransport",
    "FileTransport",
    "transport_from_config",
    "Binder",
    "Binding",
    "DatastarBinder",
    "anchor_namespace",
]
