# coolify_client/dashboard/service.py
"""Dashboard service - composite reads behind the browse screens."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional

import requests
from pydantic import ValidationError

from coolify_client.client.api_client import CoolifyClient
from coolify_client.client.traefik_client import TraefikClient
from coolify_client.core.errors import CoolifyError
from coolify_client.core.schemas import (
    Application,
    Deployment,
    Project,
    Server,
    TraefikRouter,
    TraefikService,
)
from coolify_client.dashboard.records import newest_first
from coolify_client.normalizers import NO_LOGS

logger = logging.getLogger(__name__)


@dataclass
class ProxyOverview:
    """Servers plus the Traefik routing table."""
    servers: List[Server] = field(default_factory=list)
    routers: List[TraefikRouter] = field(default_factory=list)
    services: List[TraefikService] = field(default_factory=list)
    traefik_configured: bool = False


class DashboardService:
    """Fetches what a screen needs in one call.

    Fan-out requests run on a thread pool; the client itself has no shared
    state so concurrent calls are safe.
    """

    def __init__(
        self,
        client: CoolifyClient,
        traefik: TraefikClient,
        max_workers: int = 8,
    ):
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")

        self._client = client
        self._traefik = traefik
        self.max_workers = max_workers

    # ============================================
    # PROJECTS
    # ============================================

    def projects_with_environments(self) -> List[Project]:
        """The list endpoint omits environments; fetch each project in full."""
        summaries = self._client.list_projects()
        if not summaries:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            return list(pool.map(lambda p: self._client.get_project(p.uuid), summaries))

    # ============================================
    # DEPLOYMENTS
    # ============================================

    def recent_deployments(self, per_app: int = 10) -> List[Deployment]:
        """
        Latest deployments across every application, newest first.

        An application whose deployments cannot be fetched contributes
        nothing rather than failing the whole listing.
        """
        applications = self._client.list_applications()
        if not applications:
            return []

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            per_app_results = list(
                pool.map(lambda a: self._deployments_or_empty(a, per_app), applications)
            )

        deployments = [d for result in per_app_results for d in result]
        logger.debug(
            f"Collected {len(deployments)} deployment(s) from {len(applications)} application(s)"
        )
        return newest_first(deployments)

    def _deployments_or_empty(self, application: Application, take: int) -> List[Deployment]:
        try:
            return self._client.list_deployments_by_app(application.uuid, skip=0, take=take)
        except (CoolifyError, requests.RequestException, ValidationError) as e:
            logger.warning(f"Skipping deployments of {application.uuid}: {e}")
            return []

    def application_deployments(self, app_uuid: str) -> List[Deployment]:
        return newest_first(self._client.list_deployments_by_app(app_uuid))

    def application_logs_text(self, app_uuid: str, lines: int = 100) -> str:
        logs = self._client.get_application_logs(app_uuid, lines=lines)
        return "\n".join(logs) if logs else NO_LOGS

    # ============================================
    # PROXY
    # ============================================

    def proxy_overview(self) -> ProxyOverview:
        """Servers and Traefik snapshot, fetched in parallel."""
        with ThreadPoolExecutor(max_workers=2) as pool:
            servers_future = pool.submit(self._client.list_servers)
            snapshot_future = pool.submit(self._traefik.fetch_raw_data)
            servers = servers_future.result()
            snapshot = snapshot_future.result()

        return ProxyOverview(
            servers=servers,
            routers=snapshot.routers,
            services=snapshot.services,
            traefik_configured=self._traefik.is_configured(),
        )

    # ============================================
    # DEEP LINKS
    # ============================================

    def project_url(self, project_uuid: str) -> str:
        return self._client.coolify_url(f"/project/{project_uuid}")

    def environment_url(self, project_uuid: str, env_uuid: str) -> str:
        return self._client.coolify_url(f"/project/{project_uuid}/environment/{env_uuid}")

    def application_url(self, project_uuid: str, env_uuid: str, app_uuid: str) -> str:
        return self._client.coolify_url(
            f"/project/{project_uuid}/environment/{env_uuid}/application/{app_uuid}"
        )

    def service_url(self, project_uuid: str, env_uuid: str, service_uuid: str) -> str:
        return self._client.coolify_url(
            f"/project/{project_uuid}/environment/{env_uuid}/service/{service_uuid}"
        )

    def database_url(self, project_uuid: str, env_uuid: str, database_uuid: str) -> str:
        return self._client.coolify_url(
            f"/project/{project_uuid}/environment/{env_uuid}/database/{database_uuid}"
        )

    def server_url(self, server_uuid: str) -> str:
        return self._client.coolify_url(f"/server/{server_uuid}")

    def server_proxy_url(self, server_uuid: str) -> str:
        return self._client.coolify_url(f"/server/{server_uuid}/proxy")

    def deployment_link(self, deployment: Deployment) -> Optional[str]:
        if not deployment.deployment_url:
            return None
        return self._client.coolify_url(deployment.deployment_url)
