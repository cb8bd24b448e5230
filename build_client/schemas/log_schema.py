from pydantic import Field

from .base_schema import BaseSchema
from .error_schema import ErrorPayload


class DeviceLogEntry(BaseSchema):
    timestamp: str = ""
    type: str = ""
    message: str = ""


class LogBatch(BaseSchema):
    """One batch of log entries plus the cursor for the next fetch."""
    logs: list[DeviceLogEntry] = Field(default_factory=list)
    poll_url: str = ""


class LogEnvelope(LogBatch):
    success: bool = False
    error: ErrorPayload | None = None

    def to_batch(self) -> LogBatch:
        return LogBatch(logs=self.logs, poll_url=self.poll_url)
