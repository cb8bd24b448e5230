from pydantic import Field

from .base_schema import BaseSchema
from .error_schema import ErrorPayload


class Model(BaseSchema):
    id: str | None = None
    name: str = ""
    devices: list[str] = Field(default_factory=list)


class ModelEnvelope(BaseSchema):
    success: bool = False
    model: Model | None = None
    error: ErrorPayload | None = None


class ModelListEnvelope(BaseSchema):
    success: bool = False
    models: list[Model] = Field(default_factory=list)
    error: ErrorPayload | None = None
