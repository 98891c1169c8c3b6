"""
Schema base classes and the explicit validation helper.
"""
from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .errors import ValidationFailed

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class CamelModel(BaseModel):
    """Model exchanged as camelCase JSON, also populated by field name."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def validate(schema: Type[SchemaT], payload: Mapping[str, Any]) -> SchemaT:
    """
    Validate a raw payload against a schema.

    Returns:
        The validated model instance

    Raises:
        ValidationFailed: with one entry per rejected field
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        errors = [
            {"field": ".".join(str(part) for part in err["loc"]), "message": err["msg"]}
            for err in exc.errors(include_url=False)
        ]
        fields = ", ".join(err["field"] for err in errors)
        raise ValidationFailed(f"Invalid fields: {fields}", errors=errors) from exc
