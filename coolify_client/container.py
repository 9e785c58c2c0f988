# coolify_client/container.py

"""Dependency injection container - wires clients and services together."""

from dataclasses import dataclass
from typing import Optional

from coolify_client.client.api_client import CoolifyClient
from coolify_client.client.traefik_client import TraefikClient
from coolify_client.core.config import (
    ClientSettings,
    CredentialsProvider,
    settings_credentials,
)
from coolify_client.dashboard.service import DashboardService


@dataclass
class Container:
    client: CoolifyClient
    traefik: TraefikClient
    dashboard: DashboardService


def build_container(
    settings: Optional[ClientSettings] = None,
    credentials: Optional[CredentialsProvider] = None,
) -> Container:
    """
    Build clients and services.

    Transport options (timeout, validate method, pool size) are taken from
    ``settings`` once. Credentials are re-read on every request: from
    ``credentials`` when given, else from the environment.
    """
    settings = settings or ClientSettings()
    credentials = credentials or settings_credentials

    # ============================================
    # CLIENTS
    # ============================================

    client = CoolifyClient(
        credentials=credentials,
        timeout=settings.timeout,
        validate_method=settings.validate_method,
    )
    traefik = TraefikClient(
        credentials=credentials,
        timeout=settings.timeout,
    )

    # ============================================
    # SERVICES
    # ============================================

    dashboard = DashboardService(
        client=client,
        traefik=traefik,
        max_workers=settings.max_workers,
    )

    return Container(client=client, traefik=traefik, dashboard=dashboard)
