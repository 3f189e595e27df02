"""
Pydantic response models shared by every router.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base model serializing field names in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(ApiModel):
    """Body of every failed request."""

    success: bool = False
    type: str
    message: str
    stack: Optional[str] = None


class HealthResponse(ApiModel):
    """Response schema for the health check endpoint."""

    message: str
    status: str
    version: str
    time_stamp: str


class HelloResponse(ApiModel):
    message: str
    success: bool = True
