# coolify_client/core/config.py

from dataclasses import dataclass
from typing import Callable, Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from coolify_client.core.errors import ConfigurationError


class ClientSettings(BaseSettings):
    """Client configuration from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="COOLIFY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Coolify instance (required before any request)
    server_url: str = ""
    api_token: str = ""

    # Traefik dashboard (optional, gates the proxy view)
    traefik_url: Optional[str] = None
    traefik_user: Optional[str] = None
    traefik_password: Optional[str] = None

    # Transport
    timeout: Optional[float] = None
    validate_method: Literal["GET", "POST"] = "GET"

    # Dashboard fan-out
    max_workers: int = 8

    def credentials(self) -> "Credentials":
        return Credentials(
            server_url=self.server_url,
            api_token=self.api_token,
            traefik_url=self.traefik_url,
            traefik_user=self.traefik_user,
            traefik_password=self.traefik_password,
        )


@dataclass(frozen=True)
class Credentials:
    """Connection details consulted before every request."""
    server_url: str
    api_token: str
    traefik_url: Optional[str] = None
    traefik_user: Optional[str] = None
    traefik_password: Optional[str] = None

    @property
    def base_url(self) -> str:
        if not self.server_url:
            raise ConfigurationError("server_url is required")
        return self.server_url.rstrip("/")

    @property
    def api_base_url(self) -> str:
        return f"{self.base_url}/api/v1"

    @property
    def traefik_base_url(self) -> Optional[str]:
        if not self.traefik_url:
            return None
        return self.traefik_url.rstrip("/")

    @property
    def has_traefik_auth(self) -> bool:
        return bool(self.traefik_user) and bool(self.traefik_password)


CredentialsProvider = Callable[[], Credentials]


def settings_credentials() -> Credentials:
    """Re-read settings so preference changes apply on the next request."""
    return ClientSettings().credentials()


def static_credentials(credentials: Credentials) -> CredentialsProvider:
    """Provider that always returns the same credentials."""
    return lambda: credentials
