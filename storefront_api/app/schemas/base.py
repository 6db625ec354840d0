"""
Shared base class for API schemas.

The JSON representation of every entity uses camelCase keys
(``discountedPrice``, ``scheduledFor``) while Python code works with
snake_case attributes.  ``CamelModel`` wires the alias generator once
so that each schema only declares its fields.  Both spellings are
accepted on input.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
