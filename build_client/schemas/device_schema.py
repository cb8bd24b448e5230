from pydantic import ConfigDict, Field

from .base_schema import BaseSchema
from .error_schema import ErrorPayload


class Device(BaseSchema):
    id: str | None = None
    name: str | None = None
    model_id: str | None = None
    power_state: str | None = Field(default=None, alias="powerstate")
    rssi: int | None = None
    agent_id: str | None = None
    agent_status: str | None = None

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    @property
    def is_assigned(self) -> bool:
        return bool(self.model_id)


class DeviceEnvelope(BaseSchema):
    success: bool = False
    device: Device | None = None
    error: ErrorPayload | None = None


class DeviceListEnvelope(BaseSchema):
    success: bool = False
    devices: list[Device] = Field(default_factory=list)
    error: ErrorPayload | None = None
