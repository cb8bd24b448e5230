from pydantic import Field

from .base_schema import BaseSchema
from .error_schema import BuildErrorPayload


class CodeRevisionShort(BaseSchema):
    version: int = 0
    created_at: str | None = None
    release_notes: str | None = None


class CodeRevisionLong(CodeRevisionShort):
    """Full revision view; also the body uploaded to create a new revision."""
    device_code: str | None = None
    agent_code: str | None = None


class RevisionEnvelope(BaseSchema):
    success: bool = False
    revision: CodeRevisionLong | None = None
    error: BuildErrorPayload | None = None


class RevisionListEnvelope(BaseSchema):
    success: bool = False
    revisions: list[CodeRevisionShort] = Field(default_factory=list)
    error: BuildErrorPayload | None = None
