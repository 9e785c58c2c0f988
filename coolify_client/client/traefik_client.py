# coolify_client/client/traefik_client.py
"""Client for the Traefik dashboard API."""

import base64
import logging
from typing import Dict, Optional

import requests

from coolify_client.core.config import Credentials, CredentialsProvider
from coolify_client.core.errors import TraefikApiError
from coolify_client.core.schemas import TraefikSnapshot
from coolify_client.normalizers import normalize_traefik_snapshot

logger = logging.getLogger(__name__)


def basic_auth_header(user: str, password: str) -> str:
    token = base64.b64encode(f"{user}:{password}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


class TraefikClient:
    """Reads routers and services from a Traefik dashboard.

    Talks to a different host than the Coolify API, with optional HTTP basic
    auth instead of a bearer token.
    """

    def __init__(self, credentials: CredentialsProvider, timeout: Optional[float] = None):
        self._credentials = credentials
        self.timeout = timeout

    def is_configured(self) -> bool:
        return self._credentials().traefik_base_url is not None

    def _headers(self, credentials: Credentials) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        # Both or nothing
        if credentials.has_traefik_auth:
            headers["Authorization"] = basic_auth_header(
                credentials.traefik_user, credentials.traefik_password
            )
        return headers

    def fetch_raw_data(self) -> TraefikSnapshot:
        """
        Fetch ``/api/rawdata`` and flatten it.

        Returns:
            Empty snapshot without any request when no dashboard URL is set

        Raises:
            TraefikApiError: On a non-2xx response
        """
        credentials = self._credentials()
        base_url = credentials.traefik_base_url
        if base_url is None:
            return TraefikSnapshot()

        url = f"{base_url}/api/rawdata"
        logger.debug(f"GET {url}")

        response = requests.get(url, headers=self._headers(credentials), timeout=self.timeout)

        if not 200 <= response.status_code < 300:
            logger.warning(f"Traefik rawdata failed [{response.status_code}]")
            raise TraefikApiError(response.status_code, response.text)

        return normalize_traefik_snapshot(response.json())
