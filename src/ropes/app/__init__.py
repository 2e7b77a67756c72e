"""
Application Service Layer

Bridges view-models and the network:
- registry: named data objects
- loader: request batching and deduplication by endpoint
- orchestrator: dependency discovery, binding and the coordinated dispatch
- config / configurator: configuration and wiring
"""

from .registry import Registry
from .loader import Loader, LoadBatch
from .orchestrator import Orchestrator
from .config import RopesConfig, Environment, TransportConfig, LoggingConfig, configure_logging, get_config, set_config
from .configurator import configure_ropes

__all__ = [
    'Registry',
    'Loader',
    'LoadBatch',
    'Orchestrator',
    'RopesConfig',
    'Environment',
    'TransportConfig',
    'LoggingConfig',
    'configure_logging',
    'get_config',
    'set_config',
    'configure_ropes',
]
