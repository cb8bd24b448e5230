# build_client/core/errors.py

GENERIC_FAILURE_MESSAGE = "Request was not successful"


class BuildClientError(Exception):
    """Base class for every error raised by the client."""


class TransportError(BuildClientError):
    """The request could not be sent or its body could not be read."""


class HTTPStatusError(TransportError):
    """Non-2xx status, raised only when the transport runs with strict_status."""

    def __init__(self, status_code: int, url: str):
        super().__init__(f"HTTP {status_code} for {url}")
        self.status_code = status_code
        self.url = url


class Timeout(BuildClientError):
    """Gateway Timeout reported by the server, or the request deadline expired."""

    def __init__(self, message: str = "Timed out"):
        super().__init__(message)


class DecodeError(BuildClientError):
    """Response body is not valid JSON for the expected envelope."""

    def __init__(self, message: str, raw: bytes | None = None):
        super().__init__(message)
        self.raw = raw


class APIError(BuildClientError):
    """
    Well-formed envelope with success=false.
    Code revision calls may also carry per-line compiler diagnostics in `details`.

    str() is the caller's context, followed by the server's message_short
    only when the server sent one. Delete and restart calls use the generic
    GENERIC_FAILURE_MESSAGE context, so their text never names the resource;
    any server message is appended as received, never made up here.
    """

    def __init__(
        self,
        context: str,
        code: str = "",
        message_short: str = "",
        message_full: str = "",
        details=None,
    ):
        self.context = context
        self.code = code
        self.message_short = message_short
        self.message_full = message_full
        self.details = details
        super().__init__(str(self))

    @classmethod
    def from_payload(cls, context: str, payload) -> "APIError":
        if payload is None:
            return cls(context)
        return cls(
            context,
            code=payload.code,
            message_short=payload.message_short,
            message_full=payload.message_full,
            details=getattr(payload, "details", None),
        )

    @property
    def diagnostics(self) -> list[tuple[str, int, int, str]]:
        """Flattened (source, row, column, error) tuples, device code first."""
        if self.details is None:
            return []
        found = [("device", d.row, d.column, d.error) for d in self.details.device_errors]
        found += [("agent", d.row, d.column, d.error) for d in self.details.agent_errors]
        return found

    def __str__(self) -> str:
        if self.message_short:
            return f"{self.context}: {self.message_short}"
        return self.context
