"""
Data Object Registry

Explicit container of named data objects. View-models receive the registry
and reach their data through attribute access (`models.contact.name`).
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional

from ..core.data_object import DataObject
from ..core.errors import DuplicateDataObjectError, UnknownDataObjectError
from ..core.schema import SpecLike

logger = logging.getLogger(__name__)


class Registry:
    """Named data objects, registered once and kept for the process lifetime."""

    def __init__(self, data_objects: Optional[Dict[str, DataObject]] = None):
        self._data_objects: Dict[str, DataObject] = {}
        for name, data_object in (data_objects or {}).items():
            self.register(name, data_object)

    def register(self, name: str, data_object: DataObject) -> DataObject:
        """Add a data object under `name`."""
        if name in self._data_objects:
            raise DuplicateDataObjectError(f"A data object is already registered as '{name}'")
        if data_object._name is None:
            data_object._name = name
        self._data_objects[name] = data_object
        logger.debug(f"Registered data object '{name}' ({data_object.endpoint_url})")
        return data_object

    def define(
        self,
        name: str,
        field_specs: Iterable[SpecLike],
        *,
        endpoint_url: Optional[str] = None,
        response_node: Optional[str] = None,
        **kwargs,
    ) -> DataObject:
        """Build a DataObject and register it in one step."""
        data_object = DataObject(
            field_specs,
            endpoint_url=endpoint_url,
            response_node=response_node,
            name=name,
            **kwargs,
        )
        return self.register(name, data_object)

    def get(self, name: str) -> DataObject:
        try:
            return self._data_objects[name]
        except KeyError:
            raise UnknownDataObjectError(name) from None

    def resolve(self, names: Iterable[str]) -> List[DataObject]:
        """Look up several names; the first unknown one raises."""
        return [self.get(name) for name in names]

    def names(self) -> List[str]:
        return list(self._data_objects)

    def __getattr__(self, name: str) -> Any:
        data_objects = self.__dict__.get("_data_objects")
        if data_objects is not None and name in data_objects:
            return data_objects[name]
        raise AttributeError(f"Registry has no data object '{name}'")

    def __getitem__(self, name: str) -> DataObject:
        return self.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._data_objects

    def __iter__(self) -> Iterator[str]:
        return iter(self._data_objects)

    def __len__(self) -> int:
        return len(self._data_objects)

    def __repr__(self):
        return f"Registry({', '.join(self._data_objects)})"
