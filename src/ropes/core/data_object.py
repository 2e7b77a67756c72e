"""
Data Objects

A DataObject is a named bundle of reactive fields populated from one JSON
endpoint. Every field starts at its declared default, so view-models can bind
to it before any request has been made:

    contact = DataObject([
        {"clientKey": "name", "apiKey": "Name", "default": ""},
        {"clientKey": "phone", "apiKey": "ContactMethods.Phone", "default": ""},
    ], endpoint_url="json/contact.js")

    contact.name.get()        # ""
    contact.extract(payload)  # maps payload["ContactMethods"]["Phone"] -> contact.phone
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from .errors import SchemaError
from .schema import FieldSpec, SpecLike, coerce_specs
from .signals import ReactiveBackend, default_backend

logger = logging.getLogger(__name__)

_MISSING = object()


class DataObject:
    """Schema-driven bundle of reactive fields."""

    def __init__(
        self,
        field_specs: Iterable[SpecLike],
        *,
        endpoint_url: Optional[str] = None,
        response_node: Optional[str] = None,
        name: Optional[str] = None,
        reactive: Optional[ReactiveBackend] = None,
    ):
        self._specs: Tuple[FieldSpec, ...] = tuple(coerce_specs(field_specs))
        self.endpoint_url = endpoint_url
        self.response_node = response_node
        self._name = name
        self._reactive = reactive or default_backend

        # Fields exist right away so a view-model can bind before any load
        self._fields: Dict[str, Any] = {}
        for spec in self._specs:
            if spec.client_key in _RESERVED:
                raise SchemaError(f"Client key '{spec.client_key}' clashes with a DataObject attribute")
            self._fields[spec.client_key] = self._reactive.create(spec.default, name=spec.client_key)

    def __getattr__(self, key: str) -> Any:
        # Only reached when normal lookup fails, i.e. for field names
        fields = self.__dict__.get("_fields")
        if fields is not None and key in fields:
            return fields[key]
        raise AttributeError(f"{self!r} has no field '{key}'")

    def __dir__(self):
        return list(super().__dir__()) + list(self._fields)

    def __repr__(self):
        label = self._name or "anonymous"
        return f"DataObject({label}, endpoint_url={self.endpoint_url!r})"

    @property
    def specs(self) -> Tuple[FieldSpec, ...]:
        return self._specs

    @property
    def fields(self) -> Mapping[str, Any]:
        """Mapping of client key to reactive field, in declaration order."""
        return dict(self._fields)

    def field(self, client_key: str) -> Any:
        try:
            return self._fields[client_key]
        except KeyError:
            raise AttributeError(f"{self!r} has no field '{client_key}'") from None

    def snapshot(self) -> Dict[str, Any]:
        """Current values as a plain dict."""
        return {key: self._reactive.read(cell) for key, cell in self._fields.items()}

    def reset(self) -> None:
        """Write every field back to its default."""
        for spec in self.specs:
            self._reactive.write(self._fields[spec.client_key], spec.default)

    def extract(self, payload: Any) -> None:
        """
        Map an API payload onto the fields.

        If a response node is configured the payload is scoped to that key
        first; a missing node skips the whole extraction. Each api key is
        then resolved one segment at a time. A missing segment at any depth
        logs a warning and leaves that field untouched; the remaining fields
        are still processed.
        """
        if self.response_node:
            if not isinstance(payload, Mapping) or self.response_node not in payload:
                logger.warning(
                    f"{self!r}: response node '{self.response_node}' not found in the API response"
                )
                return
            payload = payload[self.response_node]

        for spec in self._specs:
            value, missing = _resolve(payload, spec.path)
            if value is _MISSING:
                logger.warning(
                    f"'{spec.client_key}' -> '{spec.api_key}' not found in the API "
                    f"(missing '{missing}')"
                )
                continue
            self._reactive.write(self._fields[spec.client_key], value)


def _resolve(payload: Any, path: Tuple[str, ...]) -> Tuple[Any, Optional[str]]:
    """Walk `path` through nested mappings; return (value, None) or (_MISSING, segment)."""
    current = payload
    for segment in path:
        if not isinstance(current, Mapping) or segment not in current:
            return _MISSING, segment
        current = current[segment]
    return current, None


_RESERVED = frozenset(name for name in dir(DataObject) if not name.startswith("_")) | {
    "endpoint_url",
    "response_node",
}
