# coolify_client/dashboard/records.py
"""Small derived values shown next to records."""

from datetime import timezone
from typing import Dict, List, Optional

from coolify_client.core.schemas import Application, Deployment, TraefikService
from coolify_client.status.classifiers import CANCELLABLE_DEPLOYMENT_STATUSES


def short_commit(deployment: Deployment) -> Optional[str]:
    if not deployment.commit:
        return None
    return deployment.commit[:8]


def is_cancellable(deployment: Deployment) -> bool:
    return deployment.status in CANCELLABLE_DEPLOYMENT_STATUSES


def fqdn_list(application: Application) -> List[str]:
    """``fqdn`` is a comma-separated list of URLs."""
    if not application.fqdn:
        return []
    return [f.strip() for f in application.fqdn.split(",") if f.strip()]


def backend_statuses(service: TraefikService) -> Dict[str, str]:
    """Backend URL -> status reported by Traefik (``unknown`` when missing)."""
    return {
        backend.url: service.server_status.get(backend.url, "unknown")
        for backend in service.backends
    }


def created_sort_key(deployment: Deployment) -> float:
    created = deployment.created_at
    if created is None:
        return float("-inf")
    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    return created.timestamp()


def newest_first(deployments: List[Deployment]) -> List[Deployment]:
    return sorted(deployments, key=created_sort_key, reverse=True)
