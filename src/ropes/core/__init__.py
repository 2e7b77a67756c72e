"""
Ropes Core Module

Domain layer: reactive signals, field specifications, data objects and
view-model declarations. No transport or web framework dependencies.
"""

from .errors import RopesError, SchemaError, UnknownDataObjectError, DuplicateDataObjectError
from .signals import Signal, Computed, ReactiveBackend, SignalBackend, default_backend, computed
from .schema import FieldSpec, coerce_specs
from .data_object import DataObject
from .view_model import ViewModel, DependencyInfo, uses, declared_dependencies, view_model_signals

__all__ = [
    "RopesError",
    "SchemaError",
    "UnknownDataObjectError",
    "DuplicateDataObjectError",
    "Signal",
    "Computed",
    "ReactiveBackend",
    "SignalBackend",
    "default_backend",
    "computed",
    "FieldSpec",
    "coerce_specs",
    "DataObject",
    "ViewModel",
    "DependencyInfo",
    "uses",
    "declared_dependencies",
    "view_model_signals",
]
