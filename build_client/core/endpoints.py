# build_client/core/endpoints.py

from pydantic import BaseModel, ConfigDict

from .settings import Settings, settings as default_settings


class Endpoints(BaseModel):
    """
    Immutable table of Build API hosts and path segments.
    The versioned API host serves every resource; the base host only
    resolves the relative poll cursors returned by the log endpoints.
    """
    api_url: str = "https://build.electricimp.com/v4/"
    base_url: str = "https://build.electricimp.com/"
    models: str = "models"
    devices: str = "devices"
    revisions: str = "revisions"
    logs: str = "logs"
    restart: str = "restart"

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "Endpoints":
        config = config or default_settings
        return cls(api_url=config.BUILD_API_URL, base_url=config.BUILD_BASE_URL)

    def api(self, *segments) -> str:
        """Join the API host with path segments, one slash between each."""
        parts = [str(segment).strip("/") for segment in segments]
        if not all(parts):
            raise ValueError(f"Empty path segment in {segments!r}")
        return "/".join([self.api_url.rstrip("/"), *parts])

    def model_url(self, *segments) -> str:
        return self.api(self.models, *segments)

    def device_url(self, *segments) -> str:
        return self.api(self.devices, *segments)

    def resolve_poll_url(self, poll_url: str) -> str:
        """Resolve a server-issued relative cursor against the base host."""
        return f"{self.base_url.rstrip('/')}/{poll_url.lstrip('/')}"
