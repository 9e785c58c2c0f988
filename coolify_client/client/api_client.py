# coolify_client/client/api_client.py
"""Coolify API client."""

import json
import logging
from typing import Any, Dict, List, Optional

import requests

from coolify_client.core.config import Credentials, CredentialsProvider
from coolify_client.core.errors import ApiError, ConfigurationError
from coolify_client.core.schemas import (
    Application,
    DatabaseDetail,
    Deployment,
    Environment,
    Project,
    Server,
    Service,
    ServiceDetail,
)
from coolify_client.normalizers import (
    as_list,
    merge_environment_databases,
    normalize_application_logs,
    unwrap_deployments,
)

logger = logging.getLogger(__name__)


class CoolifyClient:
    """Client for the Coolify REST API (``/api/v1``)."""

    def __init__(
        self,
        credentials: CredentialsProvider,
        timeout: Optional[float] = None,
        validate_method: str = "GET",
    ):
        """
        Initialize client.

        Args:
            credentials: Called before every request; changes apply immediately
            timeout: Request timeout in seconds (None = no timeout)
            validate_method: HTTP method for server validation
        """
        self._credentials = credentials
        self.timeout = timeout
        self.validate_method = validate_method

    # ============================================
    # URLS
    # ============================================

    def _current(self) -> Credentials:
        return self._credentials()

    def api_base_url(self) -> str:
        return self._current().api_base_url

    def coolify_url(self, path: str) -> str:
        """Link into the Coolify web UI (not the API)."""
        return f"{self._current().base_url}{path}"

    def _headers(self, credentials: Credentials) -> Dict[str, str]:
        if not credentials.api_token:
            raise ConfigurationError("api_token is required")
        return {
            "Authorization": f"Bearer {credentials.api_token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    # ============================================
    # REQUEST PRIMITIVE
    # ============================================

    def request(self, path: str, method: str = "GET", body: Any = None) -> Any:
        """
        Call an API endpoint and decode the response.

        Args:
            path: Path below ``/api/v1``, starting with ``/``
            method: HTTP method
            body: JSON-serializable request body

        Returns:
            Parsed JSON, ``{}`` for an empty body, or the raw text when the
            body is not JSON

        Raises:
            ApiError: On a non-2xx response
            requests.RequestException: On transport failure (unwrapped)
        """
        credentials = self._current()
        url = f"{credentials.api_base_url}{path}"

        logger.debug(f"{method} {url}")

        response = requests.request(
            method,
            url,
            headers=self._headers(credentials),
            data=json.dumps(body) if body is not None else None,
            timeout=self.timeout,
        )

        text = response.text
        if not 200 <= response.status_code < 300:
            logger.warning(f"{method} {path} failed [{response.status_code}]")
            raise ApiError(response.status_code, text)

        if not text:
            return {}

        try:
            return json.loads(text)
        except ValueError:
            return text

    # ============================================
    # PROJECTS
    # ============================================

    def list_projects(self) -> List[Project]:
        return [Project.model_validate(p) for p in as_list(self.request("/projects"))]

    def get_project(self, uuid: str) -> Project:
        return Project.model_validate(self.request(f"/projects/{uuid}"))

    def get_environment_details(self, project_uuid: str, env_name: str) -> Environment:
        """Environment with its database families merged into ``databases``."""
        raw = self.request(f"/projects/{project_uuid}/{env_name}")
        return Environment.model_validate(merge_environment_databases(raw))

    # ============================================
    # APPLICATIONS
    # ============================================

    def list_applications(self) -> List[Application]:
        return [Application.model_validate(a) for a in as_list(self.request("/applications"))]

    def get_application(self, uuid: str) -> Application:
        return Application.model_validate(self.request(f"/applications/{uuid}"))

    def get_application_logs(self, uuid: str, lines: int = 100) -> List[str]:
        raw = self.request(f"/applications/{uuid}/logs?lines={lines}")
        return normalize_application_logs(raw)

    def start_application(self, uuid: str) -> Any:
        return self.request(f"/applications/{uuid}/start", method="POST")

    def stop_application(self, uuid: str) -> Any:
        return self.request(f"/applications/{uuid}/stop", method="POST")

    def restart_application(self, uuid: str) -> Any:
        return self.request(f"/applications/{uuid}/restart", method="POST")

    # ============================================
    # DEPLOYMENTS
    # ============================================

    def list_deployments(self) -> List[Deployment]:
        """Deployments currently running or queued."""
        return [Deployment.model_validate(d) for d in as_list(self.request("/deployments"))]

    def get_deployment(self, uuid: str) -> Deployment:
        return Deployment.model_validate(self.request(f"/deployments/{uuid}"))

    def list_deployments_by_app(
        self,
        app_uuid: str,
        skip: int = 0,
        take: int = 20
    ) -> List[Deployment]:
        raw = self.request(f"/deployments/applications/{app_uuid}?skip={skip}&take={take}")
        return [Deployment.model_validate(d) for d in unwrap_deployments(raw)]

    def cancel_deployment(self, uuid: str) -> Any:
        return self.request(f"/deployments/{uuid}/cancel", method="POST")

    # ============================================
    # SERVERS
    # ============================================

    def list_servers(self) -> List[Server]:
        return [Server.model_validate(s) for s in as_list(self.request("/servers"))]

    def get_server(self, uuid: str) -> Server:
        return Server.model_validate(self.request(f"/servers/{uuid}"))

    def validate_server(self, uuid: str) -> Any:
        """Trigger server validation, which also checks the proxy."""
        return self.request(f"/servers/{uuid}/validate", method=self.validate_method)

    # ============================================
    # SERVICES
    # ============================================

    def list_services(self) -> List[Service]:
        return [Service.model_validate(s) for s in as_list(self.request("/services"))]

    def get_service(self, uuid: str) -> ServiceDetail:
        return ServiceDetail.model_validate(self.request(f"/services/{uuid}"))

    def start_service(self, uuid: str) -> Any:
        return self.request(f"/services/{uuid}/start", method="POST")

    def stop_service(self, uuid: str) -> Any:
        return self.request(f"/services/{uuid}/stop", method="POST")

    def restart_service(self, uuid: str) -> Any:
        return self.request(f"/services/{uuid}/restart", method="POST")

    # ============================================
    # DATABASES
    # ============================================

    def get_database(self, uuid: str) -> DatabaseDetail:
        return DatabaseDetail.model_validate(self.request(f"/databases/{uuid}"))

    def start_database(self, uuid: str) -> Any:
        return self.request(f"/databases/{uuid}/start", method="POST")

    def stop_database(self, uuid: str) -> Any:
        return self.request(f"/databases/{uuid}/stop", method="POST")

    def restart_database(self, uuid: str) -> Any:
        return self.request(f"/databases/{uuid}/restart", method="POST")

    # ============================================
    # SYSTEM
    # ============================================

    def get_version(self) -> Any:
        """Version of the Coolify instance, usually a bare string."""
        return self.request("/version")
