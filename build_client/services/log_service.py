# build_client/services/log_service.py

from typing import Iterator

from build_client.schemas import LogBatch, LogEnvelope
from .device_service import DeviceService


class DeviceLogService(DeviceService):
    """
    Device client plus the log polling protocol.

    get_logs() opens a polling session and continue_logs() follows the
    cursor (poll_url) returned with every batch. Batches are handed back
    exactly as received: entries are ordered within a batch, but duplicates
    or gaps across batches are for the caller to handle. Nothing here sleeps.
    """

    def get_logs(self, device_id: str, timeout: float | None = None) -> LogBatch:
        url = self.endpoints.device_url(device_id, self.endpoints.logs)
        envelope = self._send_request(
            "GET", url, LogEnvelope,
            "Error when retrieving device logs", timeout=timeout
        )
        return envelope.to_batch()

    def continue_logs(self, poll_url: str, timeout: float | None = None) -> LogBatch:
        url = self.endpoints.resolve_poll_url(poll_url)
        envelope = self._send_request(
            "GET", url, LogEnvelope,
            "Error when retrieving device logs", timeout=timeout
        )
        return envelope.to_batch()

    def poll_logs(self, device_id: str, max_batches: int | None = None,
                  timeout: float | None = None) -> "LogPoller":
        return LogPoller(self, device_id, max_batches=max_batches, timeout=timeout)


class LogPoller:
    """
    Iterates log batches for one device: first get_logs(), then each
    returned cursor in turn. Stops after max_batches, or when the server
    hands back no cursor. Errors propagate to the caller.

    Every iteration opens a new polling session with get_logs(); poll_url
    keeps the last cursor seen, for callers that want to resume by hand
    through continue_logs().
    """

    def __init__(self, service: DeviceLogService, device_id: str,
                 max_batches: int | None = None, timeout: float | None = None):
        self.service = service
        self.device_id = device_id
        self.max_batches = max_batches
        self.timeout = timeout
        self.poll_url: str | None = None

    def __iter__(self) -> Iterator[LogBatch]:
        fetched = 0
        cursor = None
        while self.max_batches is None or fetched < self.max_batches:
            if cursor is None:
                batch = self.service.get_logs(self.device_id, timeout=self.timeout)
            else:
                batch = self.service.continue_logs(cursor, timeout=self.timeout)
            fetched += 1
            cursor = batch.poll_url or None
            self.poll_url = cursor
            yield batch
            if not batch.poll_url:
                return
