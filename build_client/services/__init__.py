# build_client/services/__init__.py

from .base_service import BaseService
from .model_service import ModelService
from .revision_service import RevisionService
from .device_service import DeviceService
from .log_service import DeviceLogService, LogPoller
