"""
Field specifications.

A FieldSpec maps one flat client-side key to a dot-separated path inside an
API payload, with the default the field holds until data arrives.

    FieldSpec(client_key="phone", api_key="ContactMethods.Phone", default="")
    FieldSpec.model_validate({"clientKey": "phone", "apiKey": "ContactMethods.Phone", "default": ""})
"""

from typing import Any, Iterable, List, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import SchemaError


class FieldSpec(BaseModel):
    """Declarative rule for one data object field."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, arbitrary_types_allowed=True)

    client_key: str = Field(alias="clientKey")
    api_key: str = Field(alias="apiKey")
    default: Any = None

    @field_validator("client_key")
    @classmethod
    def _check_client_key(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"client key '{value}' is not a valid identifier")
        if value.startswith("_"):
            raise ValueError(f"client key '{value}' must not start with an underscore")
        return value

    @field_validator("api_key")
    @classmethod
    def _check_api_key(cls, value: str) -> str:
        if not value or any(piece == "" for piece in value.split(".")):
            raise ValueError(f"api key '{value}' has an empty path segment")
        return value

    @property
    def path(self) -> Tuple[str, ...]:
        """The api key split into its segments."""
        return tuple(self.api_key.split("."))


SpecLike = Union[FieldSpec, Mapping[str, Any]]


def coerce_specs(specs: Iterable[SpecLike]) -> List[FieldSpec]:
    """Validate a field specification list, accepting FieldSpecs or dicts."""
    result: List[FieldSpec] = []
    seen = set()
    for spec in specs:
        if not isinstance(spec, FieldSpec):
            try:
                spec = FieldSpec.model_validate(spec)
            except ValidationError as e:
                raise SchemaError(f"Invalid field specification {spec!r}: {e}") from e
        if spec.client_key in seen:
            raise SchemaError(f"Duplicate client key '{spec.client_key}'")
        seen.add(spec.client_key)
        result.append(spec)
    return result
