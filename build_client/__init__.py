from .client import BuildClient
from .core import (
    settings,
    Settings,
    Endpoints,
    Transport,
    BuildClientError,
    TransportError,
    HTTPStatusError,
    Timeout,
    DecodeError,
    APIError,
    GENERIC_FAILURE_MESSAGE
)
from .schemas import (
    Model,
    Device,
    CodeRevisionShort,
    CodeRevisionLong,
    DeviceLogEntry,
    LogBatch
)
from .services import LogPoller
