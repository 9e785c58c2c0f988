"""Client for the Coolify API and the Traefik dashboard."""

from coolify_client.client.api_client import CoolifyClient
from coolify_client.client.traefik_client import TraefikClient
from coolify_client.container import Container, build_container
from coolify_client.core.config import (
    ClientSettings,
    Credentials,
    settings_credentials,
    static_credentials,
)
from coolify_client.core.errors import (
    ApiError,
    ConfigurationError,
    CoolifyError,
    TraefikApiError,
)
from coolify_client.dashboard.service import DashboardService, ProxyOverview
from coolify_client.normalizers import parse_deployment_logs
from coolify_client.status.classifiers import (
    StatusClass,
    deployment_status_class,
    extract_host_from_rule,
    proxy_status_class,
    proxy_status_text,
    resource_status_class,
    traefik_status_class,
)


__all__ = [
    "ApiError",
    "ClientSettings",
    "ConfigurationError",
    "Container",
    "CoolifyClient",
    "CoolifyError",
    "Credentials",
    "DashboardService",
    "ProxyOverview",
    "StatusClass",
    "TraefikApiError",
    "TraefikClient",
    "build_container",
    "deployment_status_class",
    "extract_host_from_rule",
    "parse_deployment_logs",
    "proxy_status_class",
    "proxy_status_text",
    "resource_status_class",
    "settings_credentials",
    "static_credentials",
    "traefik_status_class",
]
