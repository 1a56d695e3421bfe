"""Shared base model for API schemas."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class APIModel(BaseModel):
    """Base schema serialising fields as camelCase.

    Requests may use either camelCase or snake_case keys; responses are
    always camelCase.  Models can be built from store records via
    ``model_validate(record)``.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
