# build_client/client.py

import requests

from build_client.core import Endpoints, Settings, Transport, logger, settings as default_settings
from build_client.services import DeviceLogService, ModelService, RevisionService


class BuildClient:
    """
    Entry point for the Build API.

    Holds one authenticated Transport (and its pooled connections) shared by
    the model, revision, device and log services. After construction nothing
    is mutated, so one instance may serve several threads.
    """

    def __init__(
        self,
        api_key: str,
        endpoints: Endpoints | None = None,
        session: requests.Session | None = None,
        timeout: float | None = 30.0,
        strict_status: bool = False,
    ):
        self.transport = Transport(
            api_key,
            endpoints=endpoints,
            session=session,
            timeout=timeout,
            strict_status=strict_status,
        )

        self.models = ModelService(self.transport)
        self.revisions = RevisionService(self.transport)
        self.devices = DeviceLogService(self.transport)
        self.logs = self.devices

        # Flat shortcuts
        self.list_models = self.models.list_models
        self.create_model = self.models.create_model
        self.update_model = self.models.update_model
        self.get_model = self.models.get_model
        self.delete_model = self.models.delete_model
        self.restart_model_devices = self.models.restart_model_devices

        self.list_revisions = self.revisions.list_revisions
        self.get_revision = self.revisions.get_revision
        self.update_revision = self.revisions.update_revision

        self.list_devices = self.devices.list_devices
        self.get_device = self.devices.get_device
        self.update_device = self.devices.update_device
        self.delete_device = self.devices.delete_device
        self.restart_device = self.devices.restart_device

        self.get_logs = self.devices.get_logs
        self.continue_logs = self.devices.continue_logs
        self.poll_logs = self.devices.poll_logs

    @classmethod
    def from_settings(cls, config: Settings | None = None, **kwargs) -> "BuildClient":
        config = config or default_settings
        if not config.BUILD_API_KEY:
            logger.warning("BUILD_API_KEY is empty, requests will be rejected")
        return cls(
            config.BUILD_API_KEY,
            endpoints=Endpoints.from_settings(config),
            timeout=config.BUILD_REQUEST_TIMEOUT,
            **kwargs,
        )

    def close(self):
        self.transport.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
