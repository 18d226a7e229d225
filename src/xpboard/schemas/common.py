# src/xpboard/schemas/common.py

"""Common Pydantic schemas used across multiple resources."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Immutable base model speaking camelCase on the wire.

    The friends API and the rendering layer both use camelCase keys
    (``totalTasksCompleted``, ``isCurrentUser``); Python code uses the
    snake_case field names. Either spelling is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
