from .settings import settings, Settings
from .logger import logger
from .endpoints import Endpoints
from .errors import (
    BuildClientError,
    TransportError,
    HTTPStatusError,
    Timeout,
    DecodeError,
    APIError,
    GENERIC_FAILURE_MESSAGE
)
from .transport import Transport
