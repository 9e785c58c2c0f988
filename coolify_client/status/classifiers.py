# coolify_client/status/classifiers.py
"""
Status classification for display.

Deployment and Traefik statuses come from a closed vocabulary and are matched
exactly. Resource statuses are free-form (``running:healthy``,
``exited:unhealthy``, ...) and are matched by substring.
"""

import re
from enum import Enum
from typing import Optional

from coolify_client.core.schemas import Server


class StatusClass(Enum):
    """Display class of a status string."""
    HEALTHY = "HEALTHY"
    FAILURE = "FAILURE"
    PENDING = "PENDING"
    CANCELLED = "CANCELLED"
    STOPPED = "STOPPED"
    TRANSITIONING = "TRANSITIONING"
    UNKNOWN = "UNKNOWN"


# ============================================
# DEPLOYMENTS
# ============================================

DEPLOYMENT_STATUS_CLASSES = {
    "finished": StatusClass.HEALTHY,
    "failed": StatusClass.FAILURE,
    "error": StatusClass.FAILURE,
    "in_progress": StatusClass.PENDING,
    "queued": StatusClass.PENDING,
    "cancelled": StatusClass.CANCELLED,
}

CANCELLABLE_DEPLOYMENT_STATUSES = {"in_progress", "queued"}


def deployment_status_class(status: Optional[str]) -> StatusClass:
    """Exact, case-sensitive match."""
    return DEPLOYMENT_STATUS_CLASSES.get(status or "", StatusClass.UNKNOWN)


# ============================================
# RESOURCES
# ============================================

def resource_status_class(status: Optional[str]) -> StatusClass:
    """Case-insensitive substring match; first rule wins."""
    if not status:
        return StatusClass.UNKNOWN

    s = status.lower()
    if "running" in s or "healthy" in s or s == "finished":
        return StatusClass.HEALTHY
    if "stopped" in s or "exited" in s:
        return StatusClass.STOPPED
    if "starting" in s or "restarting" in s:
        return StatusClass.TRANSITIONING
    return StatusClass.UNKNOWN


# ============================================
# PROXY
# ============================================

def proxy_status_class(server: Server) -> StatusClass:
    """Reachability overrides whatever the proxy reports."""
    if server.settings.is_reachable is False:
        return StatusClass.FAILURE

    status = server.proxy.status
    if status == "running":
        return StatusClass.HEALTHY
    if status in ("stopped", "exited"):
        return StatusClass.FAILURE
    return StatusClass.UNKNOWN


def proxy_status_text(server: Server) -> str:
    if server.settings.is_reachable is False:
        return "unreachable"
    return server.proxy.status or "unknown"


# ============================================
# TRAEFIK
# ============================================

def traefik_status_class(status: Optional[str]) -> StatusClass:
    if status == "enabled":
        return StatusClass.HEALTHY
    if status == "disabled":
        return StatusClass.FAILURE
    return StatusClass.UNKNOWN


HOST_MATCHER = re.compile(r"Host\(`([^`]+)`\)")


def extract_host_from_rule(rule: Optional[str]) -> Optional[str]:
    """Hostname of the first ``Host(`...`)`` matcher in a router rule."""
    if not rule:
        return None
    match = HOST_MATCHER.search(rule)
    return match.group(1) if match else None
