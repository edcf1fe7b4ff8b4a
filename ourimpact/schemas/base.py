"""
Base Pydantic schemas.

JSON bodies use camelCase keys (`firstName`, `commentText`); Python code
keeps snake_case field names. Both spellings are accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    All other schemas should inherit from this class.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class IDSchema(BaseSchema):
    """
    Schema with ID field.
    """

    id: int
