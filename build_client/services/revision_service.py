# build_client/services/revision_service.py

from build_client.core import logger
from build_client.schemas import CodeRevisionLong, CodeRevisionShort, RevisionEnvelope, RevisionListEnvelope
from .base_service import BaseService


class RevisionService(BaseService):
    """Code revisions live under a model: /models/{id}/revisions[/{version}]."""

    def list_revisions(self, model_id: str, timeout: float | None = None) -> list[CodeRevisionShort]:
        url = self.endpoints.model_url(model_id, self.endpoints.revisions)
        envelope = self._send_request(
            "GET", url, RevisionListEnvelope,
            "Error when retrieving code revisions", timeout=timeout
        )
        return envelope.revisions

    def get_revision(self, model_id: str, version: int | str, timeout: float | None = None) -> CodeRevisionLong:
        url = self.endpoints.model_url(model_id, self.endpoints.revisions, version)
        revision = self._send_request(
            "GET", url, RevisionEnvelope,
            f"Error when retrieving code revision {version}", timeout=timeout, result_field="revision"
        )
        return revision

    def update_revision(self, model_id: str, revision: CodeRevisionLong, timeout: float | None = None) -> CodeRevisionLong:
        """
        Uploads device/agent code as a new revision of the model.
        A rejected upload raises APIError with the compiler diagnostics in
        `details` (row, column and message per error).
        """
        url = self.endpoints.model_url(model_id, self.endpoints.revisions)
        created = self._send_request(
            "POST", url, RevisionEnvelope,
            "Error when uploading code revision", payload=revision, timeout=timeout, result_field="revision"
        )
        logger.info(f"Model {model_id} now at revision {created.version}")
        return created
