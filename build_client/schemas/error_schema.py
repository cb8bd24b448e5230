from pydantic import Field, field_validator

from .base_schema import BaseSchema


class ErrorPayload(BaseSchema):
    code: str = ""
    message_short: str = ""
    message_full: str = ""


class ErrorDetail(BaseSchema):
    row: int = 0
    column: int = 0
    error: str = ""


class BuildErrorDetails(BaseSchema):
    device_errors: list[ErrorDetail] = Field(default_factory=list)
    agent_errors: list[ErrorDetail] = Field(default_factory=list)

    # The server sends either one diagnostic object or a list of them
    @field_validator("device_errors", "agent_errors", mode="before")
    def wrap_single_error(cls, v):
        if v is None:
            return []
        if isinstance(v, dict):
            return [v]
        return v


class BuildErrorPayload(ErrorPayload):
    details: BuildErrorDetails = Field(default_factory=BuildErrorDetails)


class StatusEnvelope(BaseSchema):
    """Envelope for calls whose only payload is the success flag."""
    success: bool = False
    error: ErrorPayload | None = None
