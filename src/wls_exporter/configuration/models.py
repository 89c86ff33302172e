"""
Configuration data models with validation.
"""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .coercion import coerce_int, coerce_string

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 7001


class ConnectionSettings(BaseModel):
    """Where and as whom the exporter connects to the managed server."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    user_name: str = Field(default="", alias="username")
    password: str = ""
    start_delay_seconds: int = Field(default=0, ge=0, alias="startDelaySeconds")

    @classmethod
    def document_key(cls, field_name: str) -> str:
        """Document key under which a field is read and written."""
        return cls.model_fields[field_name].alias or field_name

    @field_validator('port', 'start_delay_seconds', mode='before')
    @classmethod
    def coerce_integer_fields(cls, v: Any, info: ValidationInfo) -> int:
        """Accept integers and numeric strings."""
        return coerce_int(v, cls.document_key(info.field_name))

    @field_validator('host', 'user_name', 'password', mode='before')
    @classmethod
    def coerce_text_fields(cls, v: Any, info: ValidationInfo) -> str:
        """Render scalar values such as numeric passwords as text."""
        return coerce_string(v, cls.document_key(info.field_name))
