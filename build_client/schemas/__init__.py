# Error Schemas
from .error_schema import ErrorPayload, ErrorDetail, BuildErrorDetails, BuildErrorPayload, StatusEnvelope

# Model Schemas
from .model_schema import Model, ModelEnvelope, ModelListEnvelope

# Device Schemas
from .device_schema import Device, DeviceEnvelope, DeviceListEnvelope

# Code Revision Schemas
from .revision_schema import CodeRevisionShort, CodeRevisionLong, RevisionEnvelope, RevisionListEnvelope

# Log Schemas
from .log_schema import DeviceLogEntry, LogBatch, LogEnvelope
