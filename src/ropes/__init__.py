"""
Ropes - Coalesced data loading for reactive view-models

View-models declare which named data objects they read; Ropes binds them to
their UI anchors right away (fields show defaults) and loads every unique
endpoint exactly once.
"""

from .core import (
    RopesError, SchemaError, UnknownDataObjectError, DuplicateDataObjectError,
    Signal, Computed, ReactiveBackend, SignalBackend, computed,
    FieldSpec, DataObject, ViewModel, uses,
)
from .adapters import Transport, HttpxTransport, FileTransport, Binder, DatastarBinder
from .app import Registry, Loader, LoadBatch, Orchestrator, RopesConfig, Environment, configure_ropes

__all__ = [
    # Core
    'RopesError',
    'SchemaError',
    'UnknownDataObjectError',
    'DuplicateDataObjectError',
    'Signal',
    'Computed',
    'ReactiveBackend',
    'SignalBackend',
    'computed',
    'FieldSpec',
    'DataObject',
    'ViewModel',
    'uses',

    # Adapters
    'Transport',
    'HttpxTransport',
    'FileTransport',
    'Binder',
    'DatastarBinder',

    # Application service layer
    'Registry',
    'Loader',
    'LoadBatch',
    'Orchestrator',
    'RopesConfig',
    'Environment',
    'configure_ropes',
]
