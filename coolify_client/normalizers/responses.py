# coolify_client/normalizers/responses.py
"""Reshape Coolify API payloads whose shape varies between endpoints or versions."""

from typing import Any, Dict, List


DATABASE_FAMILIES = ("postgresqls", "mysqls", "mariadbs", "mongodbs", "redis")


def merge_environment_databases(raw: Any) -> Dict[str, Any]:
    """
    Fold the per-engine database lists of an environment into ``databases``.

    Order is postgres, mysql, mariadb, mongo, redis. A missing family
    contributes nothing.
    """
    if not isinstance(raw, dict):
        return {"databases": []}

    databases: List[Any] = []
    for family in DATABASE_FAMILIES:
        databases.extend(raw.get(family) or [])

    return {**raw, "databases": databases}


def normalize_application_logs(raw: Any) -> List[str]:
    """
    Coerce an application log payload into a list of lines.

    Accepts a bare list, ``{"logs": [...]}`` or ``{"logs": "..."}``.
    """
    if isinstance(raw, list):
        return raw

    if isinstance(raw, str):
        # Non-JSON body
        return [raw]

    logs = raw.get("logs") if isinstance(raw, dict) else None
    if isinstance(logs, list):
        return logs
    if logs is None:
        return []
    return [str(logs)]


def unwrap_deployments(raw: Any) -> List[Any]:
    """Accept either a bare deployment list or a ``{"deployments": [...]}`` envelope."""
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict):
        return raw.get("deployments") or []
    return []


def as_list(raw: Any) -> List[Any]:
    """Listing endpoints answer ``{}`` on an empty body; treat anything non-list as empty."""
    return raw if isinstance(raw, list) else []
