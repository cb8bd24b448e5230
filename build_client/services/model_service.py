# build_client/services/model_service.py

from build_client.core import GENERIC_FAILURE_MESSAGE, logger
from build_client.schemas import Model, ModelEnvelope, ModelListEnvelope, StatusEnvelope
from .base_service import BaseService


class ModelService(BaseService):

    def list_models(self, timeout: float | None = None) -> list[Model]:
        envelope = self._send_request(
            "GET", self.endpoints.model_url(), ModelListEnvelope,
            "Error when listing models", timeout=timeout
        )
        return envelope.models

    def create_model(self, new_model: Model, timeout: float | None = None) -> Model:
        model = self._send_request(
            "POST", self.endpoints.model_url(), ModelEnvelope,
            "Error when creating model", payload=new_model, timeout=timeout, result_field="model"
        )
        logger.info(f"Model {model.name} created with id {model.id}")
        return model

    def update_model(self, model_id: str, new_model: Model, timeout: float | None = None) -> Model:
        model = self._send_request(
            "PUT", self.endpoints.model_url(model_id), ModelEnvelope,
            "Error when updating model", payload=new_model, timeout=timeout, result_field="model"
        )
        return model

    def get_model(self, model_id: str, timeout: float | None = None) -> Model:
        model = self._send_request(
            "GET", self.endpoints.model_url(model_id), ModelEnvelope,
            "Error when attempting to get model", timeout=timeout, result_field="model"
        )
        return model

    def delete_model(self, model_id: str, timeout: float | None = None) -> None:
        self._send_request(
            "DELETE", self.endpoints.model_url(model_id), StatusEnvelope,
            GENERIC_FAILURE_MESSAGE, timeout=timeout
        )
        logger.info(f"Model {model_id} deleted")

    def restart_model_devices(self, model_id: str, timeout: float | None = None) -> None:
        self._send_request(
            "POST", self.endpoints.model_url(model_id, self.endpoints.restart), StatusEnvelope,
            GENERIC_FAILURE_MESSAGE, timeout=timeout
        )
        logger.info(f"Restart requested for devices of model {model_id}")
