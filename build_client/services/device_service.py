# build_client/services/device_service.py

from build_client.core import GENERIC_FAILURE_MESSAGE, logger
from build_client.schemas import Device, DeviceEnvelope, DeviceListEnvelope, StatusEnvelope
from .base_service import BaseService


class DeviceService(BaseService):

    def list_devices(self, timeout: float | None = None) -> list[Device]:
        envelope = self._send_request(
            "GET", self.endpoints.device_url(), DeviceListEnvelope,
            "Error when listing devices", timeout=timeout
        )
        return envelope.devices

    def get_device(self, device_id: str, timeout: float | None = None) -> Device:
        device = self._send_request(
            "GET", self.endpoints.device_url(device_id), DeviceEnvelope,
            "Error when attempting to get device", timeout=timeout, result_field="device"
        )
        return device

    def update_device(self, device_id: str, new_device: Device, timeout: float | None = None) -> Device:
        device = self._send_request(
            "PUT", self.endpoints.device_url(device_id), DeviceEnvelope,
            "Error when updating device", payload=new_device, timeout=timeout, result_field="device"
        )
        return device

    # Delete and restart carry no distinguishing message upstream
    def delete_device(self, device_id: str, timeout: float | None = None) -> None:
        self._send_request(
            "DELETE", self.endpoints.device_url(device_id), StatusEnvelope,
            GENERIC_FAILURE_MESSAGE, timeout=timeout
        )
        logger.info(f"Device {device_id} deleted")

    def restart_device(self, device_id: str, timeout: float | None = None) -> None:
        self._send_request(
            "POST", self.endpoints.device_url(device_id, self.endpoints.restart), StatusEnvelope,
            GENERIC_FAILURE_MESSAGE, timeout=timeout
        )
        logger.info(f"Restart requested for device {device_id}")
