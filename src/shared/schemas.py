"""Base model for API request and response bodies.

Bodies travel in camelCase (``userId``, ``likeCount``); Python code keeps
snake_case attribute names. Requests are accepted in either form.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
